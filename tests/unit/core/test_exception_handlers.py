"""
Unit Tests for Exception Handlers.

Tests that application exceptions become ErrorResponse envelopes
with the right status codes.
"""

import json
from unittest.mock import MagicMock

import pytest

from keepnotes.core.exception_handlers import (
    EXCEPTION_STATUS_MAP,
    application_error_handler,
    unhandled_exception_handler,
)
from keepnotes.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    DatabaseError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def mock_request():
    """Request stub carrying a request ID in state."""
    request = MagicMock()
    request.state.request_id = "req-1"
    request.url.path = "/api/v1/notes/abc"
    request.method = "PATCH"
    return request


class TestStatusMap:
    @pytest.mark.parametrize(
        ("exc_type", "status"),
        [
            (NotFoundError, 404),
            (ValidationError, 400),
            (InvalidTransitionError, 400),
            (AuthenticationError, 401),
            (DatabaseError, 500),
        ],
    )
    def test_status_codes(self, exc_type, status):
        assert EXCEPTION_STATUS_MAP[exc_type] == status


class TestApplicationErrorHandler:
    """Tests for application_error_handler."""

    @pytest.mark.asyncio
    async def test_not_found_response(self, mock_request):
        response = await application_error_handler(mock_request, NotFoundError("Note not found"))
        body = json.loads(response.body)

        assert response.status_code == 404
        assert body["success"] is False
        assert body["data"] is None
        assert body["error"]["code"] == "RES_NOT_FOUND"
        assert body["error"]["message"] == "Note not found"
        assert body["metadata"]["request_id"] == "req-1"

    @pytest.mark.asyncio
    async def test_validation_details_are_included(self, mock_request):
        exc = ValidationError("Missing fields", details={"missing_fields": ["note"]})

        response = await application_error_handler(mock_request, exc)
        body = json.loads(response.body)

        assert response.status_code == 400
        assert body["error"]["details"] == {"missing_fields": ["note"]}

    @pytest.mark.asyncio
    async def test_invalid_transition_code(self, mock_request):
        exc = InvalidTransitionError("Note is not deleted", details={"note_id": "abc"})

        response = await application_error_handler(mock_request, exc)
        body = json.loads(response.body)

        assert response.status_code == 400
        assert body["error"]["code"] == "VAL_INVALID_TRANSITION"

    @pytest.mark.asyncio
    async def test_unmapped_error_is_500(self, mock_request):
        response = await application_error_handler(mock_request, ApplicationError("boom"))
        assert response.status_code == 500


class TestUnhandledExceptionHandler:
    @pytest.mark.asyncio
    async def test_internal_details_are_hidden(self, mock_request):
        response = await unhandled_exception_handler(mock_request, RuntimeError("secret path"))
        body = json.loads(response.body)

        assert response.status_code == 500
        assert body["error"]["code"] == "SYS_INTERNAL_ERROR"
        assert "secret path" not in response.body.decode()


class TestDetails:
    """Only validation errors expose details."""

    @pytest.mark.asyncio
    async def test_refused_restore_carries_note_state(self, mock_request):
        exc = InvalidTransitionError(
            "Note is not deleted",
            details={"note_id": "abc", "state": "active"},
        )

        body = json.loads((await application_error_handler(mock_request, exc)).body)

        assert body["error"]["details"] == {"note_id": "abc", "state": "active"}

    @pytest.mark.asyncio
    async def test_empty_details_are_null(self, mock_request):
        body = json.loads(
            (await application_error_handler(mock_request, ValidationError("bad"))).body
        )
        assert body["error"]["details"] is None

    @pytest.mark.asyncio
    async def test_database_error_has_no_details(self, mock_request):
        exc = DatabaseError("Database operation failed")

        response = await application_error_handler(mock_request, exc)
        body = json.loads(response.body)

        assert response.status_code == 500
        assert body["error"]["code"] == "SYS_DATABASE_ERROR"
        assert body["error"]["details"] is None
