"""Use cases for events and member registrations."""

from .create_event import create_event
from .delete_event import delete_event
from .get_event import get_event, get_owned_event
from .list_events import list_events
from .registrations import (
    cancel_registration,
    list_event_registrations,
    list_my_registrations,
    register_for_event,
)
from .send_event_reminders import send_event_reminders
from .update_event import update_event

__all__ = [
    "cancel_registration",
    "create_event",
    "delete_event",
    "get_event",
    "get_owned_event",
    "list_event_registrations",
    "list_events",
    "list_my_registrations",
    "register_for_event",
    "send_event_reminders",
    "update_event",
]
