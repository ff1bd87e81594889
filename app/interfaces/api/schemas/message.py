"""Direct message schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import UserSummaryRead


class MessageCreate(BaseModel):
    recipient_id: int = Field(..., ge=1)
    subject: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=5000)


class MessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    sender_id: int
    recipient_id: int
    subject: str
    content: str
    is_read: bool
    created_at: datetime
    read_at: datetime | None = None


class ConversationRead(BaseModel):
    """Latest message exchanged with one counterpart plus counters."""

    other_user_id: int
    other_user: UserSummaryRead | None = None
    last_message: MessageRead
    unread_count: int
    total_messages: int


__all__ = ["ConversationRead", "MessageCreate", "MessageRead"]
