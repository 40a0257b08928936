"""
Reminder Service.

Business logic for reminders: creation, listing by time, clamping
elapsed reminders forward to the present, and deletion.
"""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from keepnotes.core.utils import to_naive_utc, utc_now
from keepnotes.models.reminder import Reminder
from keepnotes.repositories.reminder import ReminderRepository
from keepnotes.schemas.reminder import ReminderCreate
from keepnotes.services.base import BaseService


def clamp_to_now(reminder_time: datetime, now: datetime) -> datetime:
    """Return ``now`` if the reminder time has already passed, else the time itself."""
    if reminder_time < now:
        return now
    return reminder_time


class ReminderService(BaseService):
    """Service for reminder business logic."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = ReminderRepository(session)

    async def create_reminder(self, data: ReminderCreate) -> Reminder:
        """
        Create a reminder.

        Args:
            data: Reminder creation data

        Returns:
            Created reminder

        Raises:
            ValidationError: If note or reminder_time is missing
        """
        self._validate_required(
            {"note": data.note, "reminder_time": data.reminder_time},
            ["note", "reminder_time"],
        )

        reminder_time = to_naive_utc(data.reminder_time)
        self._log_operation("Creating reminder", reminder_time=reminder_time.isoformat())

        reminder = await self._execute_db_operation(
            "create_reminder",
            self.repo.create(note=data.note, reminder_time=reminder_time),
        )

        self._log_debug("Reminder created", reminder_id=reminder.id)
        return reminder

    async def list_reminders(self) -> list[Reminder]:
        """List all reminders, earliest first."""
        return await self._execute_db_operation(
            "list_reminders",
            self.repo.get_all_by_time(),
        )

    async def clamp_reminder(self, reminder_id: str) -> Reminder:
        """
        Move an elapsed reminder forward to the current time.

        A reminder still in the future keeps its time. The reminder is
        written either way, so updated_at always advances.

        Raises:
            NotFoundError: If reminder not found
        """

        async def run() -> Reminder:
            reminder = await self.repo.get_for_update(reminder_id)
            now = utc_now()
            clamped = clamp_to_now(reminder.reminder_time, now)

            if clamped != reminder.reminder_time:
                self._log_operation(
                    "Clamping elapsed reminder",
                    reminder_id=reminder_id,
                    original_time=reminder.reminder_time.isoformat(),
                )

            reminder.reminder_time = clamped
            reminder.updated_at = now
            return await self.repo.save(reminder)

        return await self._execute_db_operation("clamp_reminder", run())

    async def delete_reminder(self, reminder_id: str) -> None:
        """
        Delete a reminder.

        Raises:
            NotFoundError: If reminder not found
        """
        self._log_operation("Deleting reminder", reminder_id=reminder_id)

        await self._execute_db_operation(
            "delete_reminder",
            self.repo.delete(reminder_id),
        )
