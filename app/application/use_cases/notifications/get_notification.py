"""Use case for retrieving a single notification."""

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import NotificationRepository


def get_notification(session: Session, notification_id: int, *, user_id: int) -> Notification:
    """Return the notification if it belongs to ``user_id``."""

    notification = NotificationRepository(session).get_for_user(notification_id, user_id=user_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    return notification
