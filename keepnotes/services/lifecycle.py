"""
Note Lifecycle.

Transition rules for the note state machine. Each function checks that
the transition is legal for the note as it is now and applies it to the
instance in place. Nothing here touches the database; NoteService loads
and saves the note around these calls.

    Operation    Precondition            Effect
    archive      -                       is_archived = True
    unarchive    -                       is_archived = False
    soft_delete  -                       deleted_at = now
    restore      deleted_at is not None  deleted_at = None

Archive, unarchive and soft_delete can be repeated and land in the same
state (soft_delete moves deleted_at to the latest call). Restore refuses
a note that is not in the trash.
"""

from datetime import datetime

from keepnotes.core.exceptions import InvalidTransitionError
from keepnotes.core.utils import utc_now
from keepnotes.models.note import Note, NoteState


def archive(note: Note) -> Note:
    note.is_archived = True
    return note


def unarchive(note: Note) -> Note:
    note.is_archived = False
    return note


def soft_delete(note: Note, now: datetime | None = None) -> Note:
    """Move the note to the trash, stamping deleted_at with the current time."""
    note.deleted_at = now if now is not None else utc_now()
    return note


def restore(note: Note) -> Note:
    """
    Take the note out of the trash.

    Raises:
        InvalidTransitionError: If the note is not in the trash
    """
    if note.state is not NoteState.TRASHED:
        raise InvalidTransitionError(
            "Note is not deleted",
            details={"note_id": note.id, "state": note.state.value},
        )
    note.deleted_at = None
    return note
