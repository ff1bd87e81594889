"""Use case for the unread notifications badge."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import NotificationRepository


def count_unread_notifications(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).count_unread(user_id)
