"""Use case for storing an announcement for every active member."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationCategory
from app.infrastructure.repositories import NotificationRepository, UserRepository
from app.utils import utc_now

logger = logging.getLogger(__name__)


def store_system_announcement(
    session: Session,
    *,
    title: str,
    body: str,
    action_url: str | None = None,
) -> int:
    """Persist a SYSTEM notification for each active member.

    Nothing is pushed here; the caller broadcasts once over the live channel.
    """

    repository = NotificationRepository(session)
    created_at = utc_now()
    user_ids = UserRepository(session).list_active_ids()
    for user_id in user_ids:
        repository.create(
            Notification(
                id=None,
                user_id=user_id,
                category=NotificationCategory.SYSTEM,
                title=title,
                body=body,
                action_url=action_url,
                created_at=created_at,
            )
        )
    logger.info("Stored system announcement for %s member(s)", len(user_ids))
    return len(user_ids)
