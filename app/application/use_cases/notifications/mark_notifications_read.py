"""Use cases for acknowledging notifications."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def mark_notification_as_read(
    session: Session, notification_id: int, *, user_id: int
) -> Notification:
    """Mark one notification as read. Repeating the call is harmless."""

    notification = NotificationRepository(session).mark_as_read(notification_id, user_id=user_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    return notification


def mark_all_notifications_as_read(session: Session, *, user_id: int) -> int:
    """Mark every unread notification of ``user_id`` as read and return how many changed."""

    count = NotificationRepository(session).mark_all_as_read(user_id)
    logger.debug("Marked %s notification(s) as read for user %s", count, user_id)
    return count
