"""
Retention Service.

Permanent removal of notes that have sat in the trash longer than the
retention window. This is the only place notes are hard-deleted.
"""

from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from keepnotes.core.config import get_app_config
from keepnotes.core.utils import utc_now
from keepnotes.models.note import Note
from keepnotes.repositories.note import NoteRepository
from keepnotes.services.base import BaseService


def retention_cutoff(now: datetime, retention_days: int) -> datetime:
    """Notes trashed at or before the returned time are due for purge."""
    return now - timedelta(days=retention_days)


class RetentionService(BaseService):
    """Purges expired notes from the trash."""

    def __init__(self, session: AsyncSession, retention_days: int | None = None) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)
        if retention_days is None:
            retention_days = get_app_config().retention.retention_days
        self.retention_days = retention_days

    def cutoff(self, now: datetime | None = None) -> datetime:
        return retention_cutoff(now if now is not None else utc_now(), self.retention_days)

    async def find_expired(self, now: datetime | None = None) -> list[Note]:
        """List trashed notes a purge would remove right now."""
        return await self._execute_db_operation(
            "find_expired_notes",
            self.repo.get_trashed_before(self.cutoff(now)),
        )

    async def purge_expired(self, now: datetime | None = None) -> int:
        """
        Permanently delete trashed notes older than the retention window.

        Args:
            now: Reference time, defaults to the current UTC time

        Returns:
            Number of notes purged
        """
        cutoff = self.cutoff(now)
        self._log_operation(
            "Purging expired notes from trash",
            cutoff=cutoff.isoformat(),
            retention_days=self.retention_days,
        )

        purged = await self._execute_db_operation(
            "purge_expired_notes",
            self.repo.purge_deleted_before(cutoff),
        )

        self._log_operation("Purged expired notes", purged=purged)
        return purged
