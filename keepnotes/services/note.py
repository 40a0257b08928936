"""
Note Service.

Business logic layer for notes. Loads a note, applies a lifecycle
transition from keepnotes.services.lifecycle, and saves it.
"""

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from keepnotes.models.note import Note
from keepnotes.repositories.note import NoteRepository
from keepnotes.schemas.note import NoteCreate
from keepnotes.services import lifecycle
from keepnotes.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Every id-keyed operation locks the note row, so a transition
    cannot interleave with another write to the same note.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)

    async def create_note(self, data: NoteCreate) -> Note:
        """
        Create a new active note.

        Args:
            data: Note creation data

        Returns:
            Created note
        """
        self._log_operation("Creating note", title=data.title)

        note = await self._execute_db_operation(
            "create_note",
            self.repo.create(
                title=data.title,
                content=data.content,
            ),
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    async def get_note(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        return await self._execute_db_operation(
            "get_note",
            self.repo.get_by_id(note_id),
        )

    async def list_active(self) -> list[Note]:
        """List notes that are neither archived nor in the trash."""
        return await self._execute_db_operation(
            "list_active_notes",
            self.repo.get_active(),
        )

    async def list_archived(self) -> list[Note]:
        """List archived notes that are not in the trash."""
        return await self._execute_db_operation(
            "list_archived_notes",
            self.repo.get_archived(),
        )

    async def list_trash(self) -> list[Note]:
        """List notes in the trash."""
        return await self._execute_db_operation(
            "list_trash",
            self.repo.get_trashed(),
        )

    async def _transition(
        self,
        operation: str,
        note_id: str,
        apply: Callable[[Note], Note],
    ) -> Note:
        async def run() -> Note:
            note = await self.repo.get_for_update(note_id)
            apply(note)
            return await self.repo.save(note)

        return await self._execute_db_operation(operation, run())

    async def archive_note(self, note_id: str) -> Note:
        """
        Archive a note.

        Raises:
            NotFoundError: If note not found
        """
        self._log_operation("Archiving note", note_id=note_id)
        return await self._transition("archive_note", note_id, lifecycle.archive)

    async def unarchive_note(self, note_id: str) -> Note:
        """
        Unarchive a note.

        Raises:
            NotFoundError: If note not found
        """
        self._log_operation("Unarchiving note", note_id=note_id)
        return await self._transition("unarchive_note", note_id, lifecycle.unarchive)

    async def trash_note(self, note_id: str) -> Note:
        """
        Soft-delete a note by stamping deleted_at.

        The note stays recoverable until the retention sweep purges it.

        Raises:
            NotFoundError: If note not found
        """
        self._log_operation("Moving note to trash", note_id=note_id)
        return await self._transition("trash_note", note_id, lifecycle.soft_delete)

    async def restore_note(self, note_id: str) -> Note:
        """
        Restore a note from the trash.

        Raises:
            NotFoundError: If note not found
            InvalidTransitionError: If the note is not in the trash
        """
        self._log_operation("Restoring note", note_id=note_id)
        return await self._transition("restore_note", note_id, lifecycle.restore)
