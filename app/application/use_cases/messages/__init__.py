"""Use cases for direct messaging between members."""

from .delete_message import delete_message
from .list_conversations import list_conversations
from .list_messages import MessageBox, list_messages
from .read_messages import count_unread_messages, get_message, mark_message_as_read
from .send_message import send_message

__all__ = [
    "MessageBox",
    "count_unread_messages",
    "delete_message",
    "get_message",
    "list_conversations",
    "list_messages",
    "mark_message_as_read",
    "send_message",
]
