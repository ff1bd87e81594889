"""Use case for sending a direct message."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Message, User
from app.domain.exceptions import DomainError, InvalidOperationError, NotFoundError
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import MessageRepository, UserRepository
from app.utils import utc_now

from ..notifications import notify_message_received

logger = logging.getLogger(__name__)


def send_message(
    session: Session,
    publisher: NotificationPublisher,
    *,
    sender: User,
    recipient_id: int,
    subject: str,
    content: str,
) -> Message:
    """Store a message for ``recipient_id`` and notify them about it.

    A failure while notifying is logged and does not undo the message.
    """

    if recipient_id == sender.id:
        raise InvalidOperationError("You cannot send a message to yourself")
    recipient = UserRepository(session).get(recipient_id)
    if recipient is None or not recipient.is_active:
        raise NotFoundError("Recipient not found")

    message = MessageRepository(session).create(
        Message(
            id=None,
            sender_id=sender.id,
            recipient_id=recipient_id,
            subject=subject,
            content=content,
            created_at=utc_now(),
        )
    )

    try:
        notify_message_received(session, publisher, message=message, sender=sender)
    except (DomainError, SQLAlchemyError):
        session.rollback()
        logger.exception("Could not notify user %s about message %s", recipient_id, message.id)
    return message
