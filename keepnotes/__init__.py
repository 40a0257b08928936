"""
keepnotes.

Note-taking backend: note lifecycle (active, archived, trashed),
timed purge of trashed notes, and reminders.

- api/: FastAPI routers
- core/: Configuration, logging, database, errors
- models/: SQLAlchemy models
- repositories/: Data access
- services/: Business logic and the note lifecycle
- tasks/: Scheduled background tasks (retention sweep)
"""
