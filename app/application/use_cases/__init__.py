"""Use cases grouped by business area.

Routes import from the area subpackages directly; the names below are the
entry points shared by the API, the scripts and the tests.
"""

from .events import register_for_event, send_event_reminders
from .messages import send_message
from .notifications import create_notification, purge_read_notifications
from .opportunities import apply_to_opportunity, update_application_status
from .users import authenticate_user, create_user, record_login

__all__ = [
    "apply_to_opportunity",
    "authenticate_user",
    "create_notification",
    "create_user",
    "purge_read_notifications",
    "record_login",
    "register_for_event",
    "send_event_reminders",
    "send_message",
    "update_application_status",
]
