"""Use case for storing a notification and pushing it to its recipient."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationCategory
from app.domain.exceptions import NotFoundError
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import NotificationRepository, UserRepository
from app.utils import utc_now

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    publisher: NotificationPublisher,
    *,
    user_id: int,
    category: NotificationCategory,
    title: str,
    body: str,
    data: dict[str, Any] | None = None,
    action_url: str | None = None,
) -> Notification:
    """Persist a notification for ``user_id`` and schedule its realtime push.

    The row is committed before the push is attempted; the push itself never
    raises, so callers always get the stored notification back.
    """

    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("User not found")

    notification = Notification(
        id=None,
        user_id=user_id,
        category=category,
        title=title,
        body=body,
        data=data,
        action_url=action_url,
        is_read=False,
        created_at=utc_now(),
    )
    saved = NotificationRepository(session).create(notification)
    logger.debug("Stored %s notification %s for user %s", category.value, saved.id, user_id)
    publisher.dispatch(saved)
    return saved
