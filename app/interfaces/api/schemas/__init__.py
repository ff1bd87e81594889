from .admin import BroadcastRequest, BroadcastResult, PurgeRequest, RealtimeStatsRead
from .auth import AuthSession, LoginRequest, RefreshRequest, RegisterRequest, Token
from .common import ApiResponse, CountRead, PaginationMeta
from .event import EventCreate, EventRead, EventRegistrationRead, EventUpdate
from .message import ConversationRead, MessageCreate, MessageRead
from .notification import NotificationCreate, NotificationRead
from .opportunity import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatusUpdate,
    OpportunityCreate,
    OpportunityRead,
    OpportunityUpdate,
)
from .resource import ResourceCreate, ResourceRead, ResourceUpdate
from .user import UserProfileUpdate, UserRead, UserSummaryRead

__all__ = [
    "ApiResponse",
    "ApplicationCreate",
    "ApplicationRead",
    "ApplicationStatusUpdate",
    "AuthSession",
    "BroadcastRequest",
    "BroadcastResult",
    "ConversationRead",
    "CountRead",
    "EventCreate",
    "EventRead",
    "EventRegistrationRead",
    "EventUpdate",
    "LoginRequest",
    "MessageCreate",
    "MessageRead",
    "NotificationCreate",
    "NotificationRead",
    "OpportunityCreate",
    "OpportunityRead",
    "OpportunityUpdate",
    "PaginationMeta",
    "PurgeRequest",
    "RealtimeStatsRead",
    "RefreshRequest",
    "RegisterRequest",
    "ResourceCreate",
    "ResourceRead",
    "ResourceUpdate",
    "Token",
    "UserProfileUpdate",
    "UserRead",
    "UserSummaryRead",
]
