"""
Exception Handlers.

Turn errors raised by the note, reminder and session layers into the
``{success: false, error, metadata}`` envelope.

    NotFoundError           404  unknown note or reminder id
    ValidationError         400  missing reminder fields
    InvalidTransitionError  400  restoring a note that is not in the trash
    AuthenticationError     401  session check failed
    DatabaseError           500  storage failure
    RequestValidationError  422  malformed request body
    anything else           500  logged with traceback, details hidden
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from keepnotes.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    DatabaseError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from keepnotes.core.logging import get_logger
from keepnotes.schemas.base import ErrorDetail, ErrorResponse, ResponseMetadata

logger = get_logger(__name__)

# Looked up by exact type; subclasses need their own entry
EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    NotFoundError: 404,
    ValidationError: 400,
    InvalidTransitionError: 400,
    AuthenticationError: 401,
    DatabaseError: 500,
}


def _get_request_id(request: Request) -> str | None:
    """Request ID set by RequestContextMiddleware, else the raw header."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details or None),
        metadata=ResponseMetadata(request_id=_get_request_id(request)),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> JSONResponse:
    """
    Answer an ApplicationError with its mapped status.

    Validation errors carry their ``details`` (missing fields, or the
    note id and state of a refused transition) into the response.
    """
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)
    details = exc.details if isinstance(exc, ValidationError) else None

    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Request rejected" if status_code < 500 else "Request failed",
        extra={
            "code": exc.code,
            "error": exc.message,
            "status": status_code,
            "path": request.url.path,
            "method": request.method,
            "request_id": _get_request_id(request),
        },
    )

    return _error_response(request, status_code, exc.code, exc.message, details)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Answer a body that FastAPI could not parse, e.g. an unreadable reminder time."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in err.get("loc", [])),
            "message": err.get("msg", "Validation error"),
            "type": err.get("type", "unknown"),
        }
        for err in exc.errors()
    ]

    logger.warning(
        "Request body invalid",
        extra={
            "path": request.url.path,
            "method": request.method,
            "fields": [e["field"] for e in errors],
            "request_id": _get_request_id(request),
        },
    )

    return _error_response(
        request,
        422,
        "VAL_REQUEST_INVALID",
        "Request validation failed",
        {"validation_errors": errors},
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Log the traceback and answer a generic 500."""
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "request_id": _get_request_id(request),
        },
    )

    return _error_response(request, 500, "SYS_INTERNAL_ERROR", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
