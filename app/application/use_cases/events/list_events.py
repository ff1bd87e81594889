"""Use case for browsing events."""

from sqlalchemy.orm import Session

from app.domain.entities import Event, EventStatus, EventType
from app.domain.pagination import Page, PageRequest
from app.infrastructure.repositories import EventRepository
from app.utils import utc_now


def list_events(
    session: Session,
    *,
    page_request: PageRequest,
    type: EventType | None = None,
    status: EventStatus | None = None,
    upcoming_only: bool = False,
    search: str | None = None,
) -> Page[Event]:
    """Return one page of events ordered by start date."""

    items, total = EventRepository(session).list(
        type=type,
        status=status,
        upcoming_after=utc_now() if upcoming_only else None,
        search=search,
        offset=page_request.offset,
        limit=page_request.limit,
    )
    return Page(items=list(items), total=total, request=page_request)
