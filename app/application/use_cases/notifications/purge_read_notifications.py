"""Retention sweep for old notifications."""

import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from app.config import get_settings
from app.infrastructure.repositories import NotificationRepository
from app.utils import utc_now

logger = logging.getLogger(__name__)


def purge_read_notifications(session: Session, *, max_age_days: int | None = None) -> int:
    """Delete read notifications older than ``max_age_days``.

    Unread notifications are kept whatever their age. The default age comes
    from ``NOTIFICATION_RETENTION_DAYS``.
    """

    days = max_age_days if max_age_days is not None else get_settings().notification_retention_days
    if days < 0:
        raise ValueError("max_age_days must not be negative")

    cutoff = utc_now() - timedelta(days=days)
    deleted = NotificationRepository(session).delete_read_older_than(cutoff)
    logger.info("Purged %s read notification(s) created before %s", deleted, cutoff.isoformat())
    return deleted
