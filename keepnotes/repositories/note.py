"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model, including the hard delete used by the
retention sweep.
"""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from keepnotes.models.note import Note
from keepnotes.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits standard CRUD operations from BaseRepository
    and adds lifecycle-specific queries.
    """

    model = Note

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_active(self) -> list[Note]:
        """
        Get notes that are neither archived nor trashed.

        Returns:
            Active notes, newest first
        """
        result = await self.session.execute(
            select(Note)
            .where(Note.is_archived == False)  # noqa: E712
            .where(Note.deleted_at.is_(None))
            .order_by(Note.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_archived(self) -> list[Note]:
        """
        Get archived notes that are not in the trash.

        Returns:
            Archived notes, newest first
        """
        result = await self.session.execute(
            select(Note)
            .where(Note.is_archived == True)  # noqa: E712
            .where(Note.deleted_at.is_(None))
            .order_by(Note.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_trashed(self) -> list[Note]:
        """
        Get soft-deleted notes.

        Returns:
            Trashed notes, most recently deleted first
        """
        result = await self.session.execute(
            select(Note)
            .where(Note.deleted_at.is_not(None))
            .order_by(Note.deleted_at.desc())
        )
        return list(result.scalars().all())

    async def get_trashed_before(self, cutoff: datetime) -> list[Note]:
        """Get trashed notes deleted at or before the cutoff."""
        result = await self.session.execute(
            select(Note)
            .where(Note.deleted_at.is_not(None))
            .where(Note.deleted_at <= cutoff)
        )
        return list(result.scalars().all())

    async def purge_deleted_before(self, cutoff: datetime) -> int:
        """
        Permanently delete trashed notes deleted at or before the cutoff.

        Issued as a single DELETE so the predicate is evaluated against
        the rows as they are at delete time. Notes with no deleted_at
        are never matched.

        Args:
            cutoff: Notes deleted at or before this time are removed

        Returns:
            Number of notes removed
        """
        result = await self.session.execute(
            delete(Note)
            .where(Note.deleted_at.is_not(None))
            .where(Note.deleted_at <= cutoff)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return result.rowcount or 0
