"""
Note Schemas.

Pydantic schemas for note API request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from keepnotes.models.note import NoteState


class NoteCreate(BaseModel):
    """Schema for creating a new note. Both fields may be omitted or empty."""

    title: str | None = Field(
        default=None,
        max_length=255,
        description="Note title",
        examples=["Groceries"],
    )
    content: str | None = Field(
        default=None,
        max_length=10000,
        description="Note content",
        examples=["Milk, eggs, bread"],
    )


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str | None = Field(description="Note title")
    content: str | None = Field(description="Note content")
    is_archived: bool = Field(description="Whether the note is archived")
    deleted_at: datetime | None = Field(
        description="When the note was moved to the trash, null if not trashed",
    )
    state: NoteState = Field(description="Lifecycle state derived from the flags")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)
