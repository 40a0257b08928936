"""
Archived Notes API Endpoint.
"""

from fastapi import APIRouter

from keepnotes.core.dependencies import DbSession, RequestId
from keepnotes.schemas.base import ApiResponse, ResponseMetadata
from keepnotes.schemas.note import NoteResponse
from keepnotes.services.note import NoteService

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[list[NoteResponse]],
    summary="List archived notes",
    description="Archived notes that are not in the trash, newest first.",
)
async def list_archived_notes(
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[list[NoteResponse]]:
    """List archived notes."""
    service = NoteService(db)
    notes = await service.list_archived()
    return ApiResponse(
        data=[NoteResponse.model_validate(note) for note in notes],
        metadata=ResponseMetadata(request_id=request_id),
    )
