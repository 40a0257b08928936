# Importing the models registers their tables on Base.metadata
from keepnotes.models.base import Base
from keepnotes.models.note import Note, NoteState
from keepnotes.models.reminder import Reminder

__all__ = [
    "Base",
    "Note",
    "NoteState",
    "Reminder",
]
