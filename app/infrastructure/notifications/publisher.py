"""Best-effort push of stored notifications to connected users."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from anyio import from_thread

from app.domain.entities import Notification
from app.utils import isoformat_or_none

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Anything able to push a payload to a user, e.g. the realtime gateway."""

    async def deliver(self, user_id: int, payload: dict[str, Any]) -> bool: ...


class NotificationPublisher:
    """Serialize notifications and schedule their delivery.

    ``dispatch`` never reports failure: by the time it runs the notification
    is already stored, and a missed push only means the client has to poll.
    """

    def __init__(self, notifier: Notifier | None = None) -> None:
        self._notifier = notifier
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def enabled(self) -> bool:
        return self._notifier is not None

    def dispatch(self, notification: Notification) -> None:
        """Schedule ``notification`` to be delivered to its user."""

        if self._notifier is None:
            logger.debug(
                "Realtime delivery disabled; notification %s stored only", notification.id
            )
            return

        payload = serialize_notification(notification)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run(self._deliver, notification.user_id, payload)
            except RuntimeError:
                # Not inside an anyio worker thread (scripts, plain unit tests).
                logger.debug(
                    "No event loop available to push notification %s", notification.id
                )
        else:
            task = loop.create_task(self._deliver(notification.user_id, payload))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def _deliver(self, user_id: int, payload: dict[str, Any]) -> None:
        try:
            delivered = await self._notifier.deliver(user_id, payload)
        except Exception:
            logger.exception("Realtime delivery of notification %s failed", payload.get("id"))
            return
        logger.debug(
            "Notification %s %s user %s",
            payload.get("id"),
            "pushed to" if delivered else "not pushed, offline",
            user_id,
        )


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the JSON-safe projection sent over the realtime channel."""

    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "category": notification.category.value,
        "title": notification.title,
        "body": notification.body,
        "data": notification.data or {},
        "action_url": notification.action_url,
        "is_read": notification.is_read,
        "created_at": isoformat_or_none(notification.created_at),
        "read_at": isoformat_or_none(notification.read_at),
    }


__all__ = ["NotificationPublisher", "Notifier", "serialize_notification"]
