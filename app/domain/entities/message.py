"""Domain entity representing a direct message between two members."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Message:
    id: int | None
    sender_id: int
    recipient_id: int
    subject: str
    content: str
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None

    def involves(self, user_id: int) -> bool:
        return user_id in (self.sender_id, self.recipient_id)


@dataclass
class Conversation:
    """Summary of the exchange between a member and one counterpart."""

    other_user_id: int
    last_message: Message
    unread_count: int = 0
    total_messages: int = 0


__all__ = ["Conversation", "Message"]
