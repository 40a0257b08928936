"""
Reminders API Endpoints.

REST API endpoints for reminder management.
"""

from fastapi import APIRouter

from keepnotes.core.dependencies import DbSession, RequestId
from keepnotes.schemas.base import ApiResponse, MessageResponse, ResponseMetadata
from keepnotes.schemas.reminder import ReminderCreate, ReminderResponse
from keepnotes.services.reminder import ReminderService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[ReminderResponse],
    status_code=201,
    summary="Create a reminder",
    description="Both note and reminder_time are required; a missing one answers 400.",
)
async def create_reminder(
    data: ReminderCreate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[ReminderResponse]:
    """Create a reminder."""
    service = ReminderService(db)
    reminder = await service.create_reminder(data)
    return ApiResponse(
        data=ReminderResponse.model_validate(reminder),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "",
    response_model=ApiResponse[list[ReminderResponse]],
    summary="List reminders",
    description="All reminders, earliest reminder_time first.",
)
async def list_reminders(
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[list[ReminderResponse]]:
    """List reminders."""
    service = ReminderService(db)
    reminders = await service.list_reminders()
    return ApiResponse(
        data=[ReminderResponse.model_validate(r) for r in reminders],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.patch(
    "/{reminder_id}",
    response_model=ApiResponse[ReminderResponse],
    summary="Clamp an elapsed reminder",
    description="Moves a reminder whose time has passed forward to now.",
)
async def clamp_reminder(
    reminder_id: str,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[ReminderResponse]:
    """Clamp a reminder to the present if it has elapsed."""
    service = ReminderService(db)
    reminder = await service.clamp_reminder(reminder_id)
    return ApiResponse(
        data=ReminderResponse.model_validate(reminder),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{reminder_id}",
    response_model=ApiResponse[MessageResponse],
    summary="Delete a reminder",
)
async def delete_reminder(
    reminder_id: str,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[MessageResponse]:
    """Delete a reminder."""
    service = ReminderService(db)
    await service.delete_reminder(reminder_id)
    return ApiResponse(
        data=MessageResponse(message="Reminder deleted successfully"),
        metadata=ResponseMetadata(request_id=request_id),
    )
