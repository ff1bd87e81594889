"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class NotificationCategory(str, Enum):
    """Fixed set of reasons a notification can be raised for."""

    MESSAGE = "MESSAGE"
    CONNECTION_REQUEST = "CONNECTION_REQUEST"
    OPPORTUNITY_MATCH = "OPPORTUNITY_MATCH"
    APPLICATION_UPDATE = "APPLICATION_UPDATE"
    EVENT_REMINDER = "EVENT_REMINDER"
    SYSTEM = "SYSTEM"


@dataclass
class Notification:
    """Information message delivered to a specific user.

    ``user_id`` and ``category`` never change after creation and ``is_read``
    only ever moves from ``False`` to ``True``.
    """

    id: int | None
    user_id: int
    category: NotificationCategory
    title: str
    body: str
    data: dict[str, Any] | None = None
    action_url: str | None = None
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = ["Notification", "NotificationCategory"]
