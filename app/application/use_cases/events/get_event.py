"""Use cases for retrieving events."""

from sqlalchemy.orm import Session

from app.domain.entities import Event
from app.domain.exceptions import NotFoundError, PermissionDeniedError
from app.infrastructure.repositories import EventRepository


def get_event(session: Session, event_id: int) -> Event:
    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Event not found")
    return event


def get_owned_event(session: Session, event_id: int, *, user_id: int) -> Event:
    """Return the event, requiring ``user_id`` to be its organizer."""

    event = get_event(session, event_id)
    if event.organizer_id != user_id:
        raise PermissionDeniedError("Only the organizer can manage this event")
    return event
