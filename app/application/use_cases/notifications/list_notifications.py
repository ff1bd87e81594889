"""Use case for listing the notifications of the current user."""

from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationCategory
from app.domain.pagination import Page, PageRequest
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    *,
    user_id: int,
    page_request: PageRequest,
    category: NotificationCategory | None = None,
    is_read: bool | None = None,
    search: str | None = None,
) -> Page[Notification]:
    """Return one page of ``user_id``'s notifications, newest first."""

    items, total = NotificationRepository(session).list_for_user(
        user_id,
        category=category,
        is_read=is_read,
        search=search,
        offset=page_request.offset,
        limit=page_request.limit,
    )
    return Page(items=list(items), total=total, request=page_request)
