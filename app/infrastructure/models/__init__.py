"""ORM models used by the application infrastructure."""

from .event import EventModel, EventRegistrationModel
from .message import MessageModel
from .notification import NotificationModel
from .opportunity import ApplicationModel, OpportunityModel
from .resource import ResourceModel, ResourceTagModel
from .user import UserModel

__all__ = [
    "ApplicationModel",
    "EventModel",
    "EventRegistrationModel",
    "MessageModel",
    "NotificationModel",
    "OpportunityModel",
    "ResourceModel",
    "ResourceTagModel",
    "UserModel",
]
