"""Use case for deleting a notification."""

from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import NotificationRepository


def delete_notification(session: Session, notification_id: int, *, user_id: int) -> None:
    """Delete the notification if it belongs to ``user_id``."""

    if not NotificationRepository(session).delete(notification_id, user_id=user_id):
        raise NotFoundError("Notification not found")
