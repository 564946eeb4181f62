"""
Events feature: Schemas for request/response models.

Wire format is camelCase (startDate, eventType); storage columns are
snake_case. Models accept both, and FastAPI serializes by alias.
"""

import re
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calendar_api.core.exceptions import EventValidationError

# YYYY-MM-DDTHH:MM[:SS[.ffffff]], no offset
LOCAL_DATETIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,6}))?)?"
)


def parse_local_datetime(value: str, name: str = "date") -> datetime:
    """Parse an ISO-8601 local date-time such as 2024-06-16T00:00.

    Date-only, compact and offset forms are rejected.

    Raises:
        EventValidationError: If the value is not in the accepted shape or
            is not a real calendar date-time.
    """
    match = LOCAL_DATETIME_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise EventValidationError(
            message=f"Invalid {name}",
            detail=f"'{value}' is not a local date-time (YYYY-MM-DDTHH:MM[:SS])",
        )

    year, month, day, hour, minute, second, fraction = match.groups()
    try:
        return datetime(
            int(year), int(month), int(day), int(hour), int(minute),
            int(second or 0), int((fraction or "0").ljust(6, "0")),
        )
    except ValueError as e:
        raise EventValidationError(message=f"Invalid {name}", detail=f"'{value}': {e}")


class EventType(str, Enum):
    """Closed set of event categories, serialized by name."""
    PERSONAL = "PERSONAL"
    WORK = "WORK"
    HOLIDAY = "HOLIDAY"
    RELIGIOUS = "RELIGIOUS"
    CULTURAL = "CULTURAL"


class EventBase(BaseModel):
    """Mutable fields of a calendar event."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    description: str | None = Field(default=None, max_length=1000)
    start_date: datetime = Field(alias="startDate")  # ISO local date-time: YYYY-MM-DDTHH:MM[:SS]
    end_date: datetime = Field(alias="endDate")
    location: str | None = None
    event_type: EventType = Field(alias="eventType")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _local_datetime(cls, value):
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                raise ValueError("timezone offsets are not accepted")
            return value
        if not isinstance(value, str):
            raise ValueError("expected a local date-time string")
        try:
            return parse_local_datetime(value)
        except EventValidationError as e:
            raise ValueError(e.detail)

    def to_row(self) -> dict:
        """Column dict for the events table."""
        return self.model_dump(mode="json", include=set(EventBase.model_fields))


class EventCreate(EventBase):
    """Request to create a new calendar event."""


class EventUpdate(EventBase):
    """Request to update an event. Replaces every mutable field."""


class CalendarEvent(EventBase):
    """A stored calendar event."""
    id: int
