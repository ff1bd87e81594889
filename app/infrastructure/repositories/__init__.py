"""Repository implementations for infrastructure layer."""

from .event_repository import EventRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .opportunity_repository import OpportunityRepository
from .resource_repository import ResourceRepository
from .user_repository import UserRepository

__all__ = [
    "EventRepository",
    "MessageRepository",
    "NotificationRepository",
    "OpportunityRepository",
    "ResourceRepository",
    "UserRepository",
]
