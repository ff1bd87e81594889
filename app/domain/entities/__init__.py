"""Domain entities exposed by the application."""

from .event import Event, EventRegistration, EventStatus, EventType
from .message import Conversation, Message
from .notification import Notification, NotificationCategory
from .opportunity import (
    Application,
    ApplicationStatus,
    Opportunity,
    OpportunityStatus,
    OpportunityType,
)
from .resource import Resource, ResourceType
from .user import ProfileType, User

__all__ = [
    "Application",
    "ApplicationStatus",
    "Conversation",
    "Event",
    "EventRegistration",
    "EventStatus",
    "EventType",
    "Message",
    "Notification",
    "NotificationCategory",
    "Opportunity",
    "OpportunityStatus",
    "OpportunityType",
    "ProfileType",
    "Resource",
    "ResourceType",
    "User",
]
