"""Use case for browsing the member directory."""

from sqlalchemy.orm import Session

from app.domain.entities import ProfileType, User
from app.domain.pagination import Page, PageRequest
from app.infrastructure.repositories import UserRepository


def list_users(
    session: Session,
    *,
    page_request: PageRequest,
    profile_type: ProfileType | None = None,
    search: str | None = None,
) -> Page[User]:
    """Return one page of active members matching the filters."""

    items, total = UserRepository(session).list(
        profile_type=profile_type,
        search=search,
        offset=page_request.offset,
        limit=page_request.limit,
    )
    return Page(items=list(items), total=total, request=page_request)
