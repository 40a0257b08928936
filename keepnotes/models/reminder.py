"""
Reminder Model.

A reminder is a free-text note with a target time. It is not linked
to a Note row.
"""

from datetime import datetime

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from keepnotes.models.base import Base, TimestampMixin, UUIDMixin


class Reminder(UUIDMixin, TimestampMixin, Base):
    """Reminder database model."""

    __tablename__ = "reminders"

    note: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    reminder_time: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Reminder(id={self.id}, reminder_time={self.reminder_time})>"
