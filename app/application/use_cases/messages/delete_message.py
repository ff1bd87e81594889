"""Use case for deleting a direct message."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import MessageRepository

from .read_messages import get_message


def delete_message(session: Session, message_id: int, *, user_id: int) -> None:
    """Delete a message sent or received by ``user_id``."""

    get_message(session, message_id, user_id=user_id)
    MessageRepository(session).delete(message_id)
