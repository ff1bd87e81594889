"""Use cases for browsing the resource library."""

from sqlalchemy.orm import Session

from app.domain.entities import Resource, ResourceType
from app.domain.pagination import Page, PageRequest
from app.infrastructure.repositories import ResourceRepository


def list_resources(
    session: Session,
    *,
    page_request: PageRequest,
    type: ResourceType | None = None,
    author_id: int | None = None,
    is_premium: bool | None = None,
    tag: str | None = None,
    search: str | None = None,
) -> Page[Resource]:
    items, total = ResourceRepository(session).list(
        type=type,
        author_id=author_id,
        is_premium=is_premium,
        tag=tag,
        search=search,
        offset=page_request.offset,
        limit=page_request.limit,
    )
    return Page(items=list(items), total=total, request=page_request)


def list_popular_resources(session: Session, *, page_request: PageRequest) -> Page[Resource]:
    """Return resources ordered by view count, most viewed first."""

    items, total = ResourceRepository(session).list(
        most_viewed=True, offset=page_request.offset, limit=page_request.limit
    )
    return Page(items=list(items), total=total, request=page_request)
