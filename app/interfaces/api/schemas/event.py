"""Event and registration schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import EventStatus, EventType


class EventCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=200)
    description: str = Field(..., min_length=10, max_length=5000)
    type: EventType
    start_date: datetime
    end_date: datetime | None = None
    location: str | None = Field(default=None, max_length=200)
    is_online: bool = False
    meeting_url: str | None = Field(default=None, max_length=500)
    max_attendees: int | None = Field(default=None, ge=1)


class EventUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=3, max_length=200)
    description: str | None = Field(default=None, min_length=10, max_length=5000)
    type: EventType | None = None
    status: EventStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = Field(default=None, max_length=200)
    is_online: bool | None = None
    meeting_url: str | None = Field(default=None, max_length=500)
    max_attendees: int | None = Field(default=None, ge=1)


class EventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    organizer_id: int
    title: str
    description: str
    type: EventType
    status: EventStatus
    start_date: datetime
    end_date: datetime | None = None
    location: str | None = None
    is_online: bool
    meeting_url: str | None = None
    max_attendees: int | None = None
    created_at: datetime
    updated_at: datetime | None = None


class EventRegistrationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: int
    user_id: int
    created_at: datetime


__all__ = [
    "EventCreate",
    "EventRead",
    "EventRegistrationRead",
    "EventUpdate",
]
