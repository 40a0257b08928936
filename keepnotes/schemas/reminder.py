"""
Reminder Schemas.

Pydantic schemas for reminder API request/response validation.
"""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ReminderCreate(BaseModel):
    """
    Schema for creating a reminder.

    Both fields are required by the service, which answers a missing
    one with a 400 rather than a request validation error.
    """

    note: str | None = Field(
        default=None,
        description="Free text the reminder is about",
        examples=["Call the dentist"],
    )
    reminder_time: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("reminder_time", "reminderTime"),
        description="When to remind, ISO 8601",
        examples=["2030-01-01T09:00:00Z"],
    )

    @field_validator("reminder_time", mode="before")
    @classmethod
    def blank_time_is_missing(cls, value: Any) -> Any:
        """Treat an empty or whitespace-only time as not given."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ReminderResponse(BaseModel):
    """Schema for reminder in API responses."""

    id: str = Field(description="Reminder unique identifier")
    note: str = Field(description="Free text the reminder is about")
    reminder_time: datetime = Field(description="When to remind (UTC)")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)
