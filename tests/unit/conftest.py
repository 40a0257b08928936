"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from keepnotes.models.note import Note
from keepnotes.models.reminder import Reminder


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_repository(mock_db_session: AsyncMock):
            repo = NoteRepository(mock_db_session)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def make_note():
    """
    Build unsaved Note instances with explicit flags.

    Usage:
        note = make_note(deleted_at=datetime(2024, 1, 1))
    """

    def _make(
        id: str = "note-123",
        title: str | None = "Test Note",
        content: str | None = "Test content",
        is_archived: bool = False,
        deleted_at: datetime | None = None,
    ) -> Note:
        return Note(
            id=id,
            title=title,
            content=content,
            is_archived=is_archived,
            deleted_at=deleted_at,
        )

    return _make


@pytest.fixture
def make_reminder():
    """Build unsaved Reminder instances."""

    def _make(
        reminder_time: datetime,
        id: str = "reminder-123",
        note: str = "Call the dentist",
    ) -> Reminder:
        return Reminder(id=id, note=note, reminder_time=reminder_time)

    return _make


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                ...
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
