"""
Note Model.

Database model for notes and their lifecycle flags.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from keepnotes.models.base import Base, TimestampMixin, UUIDMixin


class NoteState(str, enum.Enum):
    """Lifecycle state of a note, derived from its flags."""

    ACTIVE = "active"
    ARCHIVED = "archived"
    TRASHED = "trashed"


class Note(UUIDMixin, TimestampMixin, Base):
    """
    Note database model.

    Two independent flags carry the lifecycle: ``is_archived`` and
    ``deleted_at``. A non-null ``deleted_at`` puts the note in the trash,
    whatever ``is_archived`` says. Trashed notes are purged by the
    retention sweep once ``deleted_at`` falls outside the retention window.
    """

    __tablename__ = "notes"

    title: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    content: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    is_archived: Mapped[bool] = mapped_column(
        default=False,
        nullable=False,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime,
        default=None,
        nullable=True,
        index=True,
    )

    @property
    def state(self) -> NoteState:
        """Exactly one state holds: trash wins over the archive flag."""
        if self.deleted_at is not None:
            return NoteState.TRASHED
        if self.is_archived:
            return NoteState.ARCHIVED
        return NoteState.ACTIVE

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, state={self.state.value})>"
