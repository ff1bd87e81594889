"""Use case for editing an event."""

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Event
from app.infrastructure.repositories import EventRepository

from .create_event import validate_schedule
from .get_event import get_owned_event

_EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "type",
        "status",
        "start_date",
        "end_date",
        "location",
        "is_online",
        "meeting_url",
        "max_attendees",
    }
)


def update_event(
    session: Session, event_id: int, *, user_id: int, changes: dict[str, Any]
) -> Event:
    """Apply ``changes`` to an event organised by ``user_id``.

    Moving the start date re-arms the reminder for the new date.
    """

    unknown = set(changes) - _EDITABLE_FIELDS
    if unknown:
        raise TypeError(f"Unexpected event fields: {', '.join(sorted(unknown))}")

    event = get_owned_event(session, event_id, user_id=user_id)
    updated = replace(event, **changes)
    validate_schedule(updated.start_date, updated.end_date)
    if updated.start_date != event.start_date:
        updated = replace(updated, reminder_sent_at=None)
    return EventRepository(session).update(updated)
