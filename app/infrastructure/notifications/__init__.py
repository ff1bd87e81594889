"""Realtime notification helpers for the infrastructure layer."""

from .gateway import CLOSE_GOING_AWAY, CLOSE_UNAUTHENTICATED, RealtimeGateway
from .publisher import NotificationPublisher, Notifier, serialize_notification
from .registry import CLOSE_REPLACED, ConnectionRegistry, is_writable

__all__ = [
    "CLOSE_GOING_AWAY",
    "CLOSE_REPLACED",
    "CLOSE_UNAUTHENTICATED",
    "ConnectionRegistry",
    "NotificationPublisher",
    "Notifier",
    "RealtimeGateway",
    "is_writable",
    "serialize_notification",
]
