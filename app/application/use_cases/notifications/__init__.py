"""Use cases for storing, reading and pushing notifications."""

from .count_unread_notifications import count_unread_notifications
from .create_notification import create_notification
from .delete_notification import delete_notification
from .events import (
    message_preview,
    notify_application_received,
    notify_application_status_changed,
    notify_event_registration,
    notify_event_reminder,
    notify_message_received,
    notify_system,
)
from .get_notification import get_notification
from .list_notifications import list_notifications
from .mark_notifications_read import (
    mark_all_notifications_as_read,
    mark_notification_as_read,
)
from .purge_read_notifications import purge_read_notifications
from .store_system_announcement import store_system_announcement

__all__ = [
    "count_unread_notifications",
    "create_notification",
    "delete_notification",
    "get_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
    "message_preview",
    "notify_application_received",
    "notify_application_status_changed",
    "notify_event_registration",
    "notify_event_reminder",
    "notify_message_received",
    "notify_system",
    "purge_read_notifications",
    "store_system_announcement",
]
