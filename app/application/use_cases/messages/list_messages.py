"""Use case for listing a member's inbox or outbox."""

from enum import Enum

from sqlalchemy.orm import Session

from app.domain.entities import Message
from app.domain.pagination import Page, PageRequest
from app.infrastructure.repositories import MessageRepository


class MessageBox(str, Enum):
    RECEIVED = "received"
    SENT = "sent"


def list_messages(
    session: Session,
    *,
    user_id: int,
    page_request: PageRequest,
    box: MessageBox = MessageBox.RECEIVED,
    search: str | None = None,
) -> Page[Message]:
    items, total = MessageRepository(session).list_for_user(
        user_id,
        sent=box is MessageBox.SENT,
        search=search,
        offset=page_request.offset,
        limit=page_request.limit,
    )
    return Page(items=list(items), total=total, request=page_request)
