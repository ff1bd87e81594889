"""Use case for removing an event."""

import logging

from sqlalchemy.orm import Session

from app.infrastructure.repositories import EventRepository

from .get_event import get_owned_event

logger = logging.getLogger(__name__)


def delete_event(session: Session, event_id: int, *, user_id: int) -> None:
    get_owned_event(session, event_id, user_id=user_id)
    EventRepository(session).delete(event_id)
    logger.info("User %s deleted event %s", user_id, event_id)
