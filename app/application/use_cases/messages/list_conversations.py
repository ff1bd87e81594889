"""Use case for listing a member's conversations."""

from sqlalchemy.orm import Session

from app.domain.entities import Conversation, User
from app.domain.pagination import Page, PageRequest
from app.infrastructure.repositories import MessageRepository, UserRepository


def list_conversations(
    session: Session, *, user_id: int, page_request: PageRequest
) -> tuple[Page[Conversation], dict[int, User]]:
    """Return one page of conversations and the counterparts they involve.

    Counterparts are keyed by user id; deleted accounts are simply absent.
    """

    items, total = MessageRepository(session).list_conversations(
        user_id, offset=page_request.offset, limit=page_request.limit
    )
    users = UserRepository(session)
    counterparts = {}
    for conversation in items:
        other = users.get(conversation.other_user_id)
        if other is not None:
            counterparts[other.id] = other
    return Page(items=list(items), total=total, request=page_request), counterparts
