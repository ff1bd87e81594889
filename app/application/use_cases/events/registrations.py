"""Use cases for registering members to events."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import EventRegistration, EventStatus, User
from app.domain.exceptions import (
    ConflictError,
    DomainError,
    InvalidOperationError,
    NotFoundError,
)
from app.domain.pagination import Page, PageRequest
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import EventRepository
from app.utils import utc_now

from ..notifications import notify_event_registration
from .get_event import get_event, get_owned_event

logger = logging.getLogger(__name__)


def register_for_event(
    session: Session,
    publisher: NotificationPublisher,
    *,
    event_id: int,
    attendee: User,
) -> EventRegistration:
    """Register ``attendee`` to an upcoming event that still has room."""

    event = get_event(session, event_id)
    if event.status is not EventStatus.UPCOMING:
        raise InvalidOperationError("Registrations are closed for this event")
    if event.start_date <= utc_now():
        raise InvalidOperationError("This event has already started")

    repository = EventRepository(session)
    if repository.find_registration(event_id=event_id, user_id=attendee.id):
        raise ConflictError("You are already registered for this event")
    if (
        event.max_attendees is not None
        and repository.count_registrations(event_id) >= event.max_attendees
    ):
        raise InvalidOperationError("This event is full")

    registration = repository.create_registration(
        EventRegistration(id=None, event_id=event_id, user_id=attendee.id, created_at=utc_now())
    )
    logger.info("User %s registered for event %s", attendee.id, event_id)

    if event.organizer_id != attendee.id:
        try:
            notify_event_registration(session, publisher, event=event, attendee=attendee)
        except (DomainError, SQLAlchemyError):
            session.rollback()
            logger.exception(
                "Could not notify organizer %s about registration %s",
                event.organizer_id,
                registration.id,
            )
    return registration


def cancel_registration(session: Session, *, event_id: int, user_id: int) -> None:
    get_event(session, event_id)
    repository = EventRepository(session)
    registration = repository.find_registration(event_id=event_id, user_id=user_id)
    if registration is None:
        raise NotFoundError("You are not registered for this event")
    repository.delete_registration(registration.id)


def list_event_registrations(
    session: Session, event_id: int, *, user_id: int, page_request: PageRequest
) -> Page[EventRegistration]:
    get_owned_event(session, event_id, user_id=user_id)
    items, total = EventRepository(session).list_registrations(
        event_id=event_id, offset=page_request.offset, limit=page_request.limit
    )
    return Page(items=list(items), total=total, request=page_request)


def list_my_registrations(
    session: Session, *, user_id: int, page_request: PageRequest
) -> Page[EventRegistration]:
    items, total = EventRepository(session).list_registrations(
        user_id=user_id, offset=page_request.offset, limit=page_request.limit
    )
    return Page(items=list(items), total=total, request=page_request)
