"""Reminder job for events starting soon."""

import logging
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.exceptions import DomainError
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import EventRepository
from app.utils import utc_now

from ..notifications import notify_event_reminder

logger = logging.getLogger(__name__)


def send_event_reminders(
    session: Session,
    publisher: NotificationPublisher,
    *,
    window_hours: int | None = None,
) -> int:
    """Notify registrants of upcoming events starting within the window.

    Each event is reminded once; the number of notifications created is
    returned.
    """

    hours = window_hours if window_hours is not None else get_settings().event_reminder_window_hours
    now = utc_now()
    repository = EventRepository(session)
    created = 0
    for event in repository.list_due_for_reminder(now=now, until=now + timedelta(hours=hours)):
        registrations, _total = repository.list_registrations(event_id=event.id, limit=None)
        for registration in registrations:
            try:
                notify_event_reminder(session, publisher, event=event, user_id=registration.user_id)
            except (DomainError, SQLAlchemyError):
                session.rollback()
                logger.exception(
                    "Could not remind user %s about event %s", registration.user_id, event.id
                )
                continue
            created += 1
        repository.mark_reminder_sent(event.id, now)
        logger.info("Sent reminders for event %s to %s registrant(s)", event.id, len(registrations))
    return created
