from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime, timezone


def parse_event_date(value) -> datetime:
    """
    Accept an ISO-8601 date ("2025-01-10") or datetime
    ("2025-01-10T18:00:00Z"). Naive values are taken to be UTC and
    everything else is converted to UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Title and date are required")
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError("Invalid date")
    else:
        raise ValueError("Invalid date")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    # Stored as UTC; SQLite drops the offset when it writes the value
    return parsed.astimezone(timezone.utc)


class EventCreate(BaseModel):
    title: str = Field(..., json_schema_extra={"example": "Python Meetup"})
    description: Optional[str] = Field(
        None, json_schema_extra={"example": "Monthly talks and pizza."}
    )
    date: datetime

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Title and date are required")
        return value.strip()

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return parse_event_date(value)
