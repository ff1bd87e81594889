"""Use cases for reading direct messages."""

from sqlalchemy.orm import Session

from app.domain.entities import Message
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import MessageRepository


def get_message(session: Session, message_id: int, *, user_id: int) -> Message:
    """Return the message when ``user_id`` sent or received it."""

    message = MessageRepository(session).get(message_id)
    if message is None or not message.involves(user_id):
        raise NotFoundError("Message not found")
    return message


def mark_message_as_read(session: Session, message_id: int, *, user_id: int) -> Message:
    """Mark a received message as read; only the recipient may do so."""

    repository = MessageRepository(session)
    message = repository.get(message_id)
    if message is None or message.recipient_id != user_id:
        raise NotFoundError("Message not found")
    return repository.mark_as_read(message_id)


def count_unread_messages(session: Session, *, user_id: int) -> int:
    return MessageRepository(session).count_unread(user_id)
