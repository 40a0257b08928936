"""
Reminder Repository.

Data access layer for reminders.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from keepnotes.models.reminder import Reminder
from keepnotes.repositories.base import BaseRepository


class ReminderRepository(BaseRepository[Reminder]):
    """Repository for Reminder model."""

    model = Reminder

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_all_by_time(self) -> list[Reminder]:
        """
        Get all reminders, earliest reminder_time first.

        Ties keep creation order.
        """
        result = await self.session.execute(
            select(Reminder).order_by(
                Reminder.reminder_time.asc(),
                Reminder.created_at.asc(),
            )
        )
        return list(result.scalars().all())
