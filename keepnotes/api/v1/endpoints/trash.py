"""
Trash API Endpoint.

Lists soft-deleted notes. Notes leave the trash by restore or by the
scheduled retention sweep.
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
    summary="List trashed notes",
    description="Soft-deleted notes, most recently deleted first.",
)
async def list_trash(
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[list[NoteResponse]]:
    """List notes in the trash."""
    service = NoteService(db)
    notes = await service.list_trash()
    return ApiResponse(
        data=[NoteResponse.model_validate(note) for note in notes],
        metadata=ResponseMetadata(request_id=request_id),
    )
