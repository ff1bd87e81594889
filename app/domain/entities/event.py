"""Domain entities for events and member registrations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EventType(str, Enum):
    CONFERENCE = "CONFERENCE"
    WORKSHOP = "WORKSHOP"
    NETWORKING = "NETWORKING"
    WEBINAR = "WEBINAR"
    MEETUP = "MEETUP"


class EventStatus(str, Enum):
    UPCOMING = "UPCOMING"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


@dataclass
class Event:
    """Scheduled gathering organised by a member."""

    id: int | None
    organizer_id: int
    title: str
    description: str
    type: EventType
    start_date: datetime
    end_date: datetime | None = None
    status: EventStatus = EventStatus.UPCOMING
    location: str | None = None
    is_online: bool = False
    meeting_url: str | None = None
    max_attendees: int | None = None
    reminder_sent_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class EventRegistration:
    id: int | None
    event_id: int
    user_id: int
    created_at: datetime | None = None


__all__ = ["Event", "EventRegistration", "EventStatus", "EventType"]
