"""Use case for scheduling an event."""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Event, EventType
from app.domain.exceptions import InvalidOperationError
from app.infrastructure.repositories import EventRepository
from app.utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)


def validate_schedule(start_date: datetime, end_date: datetime | None) -> None:
    if end_date is not None and ensure_utc(end_date) < ensure_utc(start_date):
        raise InvalidOperationError("An event cannot end before it starts")


def create_event(
    session: Session,
    *,
    organizer_id: int,
    title: str,
    description: str,
    type: EventType,
    start_date: datetime,
    end_date: datetime | None = None,
    location: str | None = None,
    is_online: bool = False,
    meeting_url: str | None = None,
    max_attendees: int | None = None,
) -> Event:
    validate_schedule(start_date, end_date)
    event = EventRepository(session).create(
        Event(
            id=None,
            organizer_id=organizer_id,
            title=title,
            description=description,
            type=type,
            start_date=ensure_utc(start_date),
            end_date=ensure_utc(end_date),
            location=location,
            is_online=is_online,
            meeting_url=meeting_url,
            max_attendees=max_attendees,
            created_at=utc_now(),
        )
    )
    logger.info("User %s scheduled event %s", organizer_id, event.id)
    return event
