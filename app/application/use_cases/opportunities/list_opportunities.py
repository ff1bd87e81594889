"""Use case for browsing opportunities."""

from sqlalchemy.orm import Session

from app.domain.entities import Opportunity, OpportunityStatus, OpportunityType
from app.domain.pagination import Page, PageRequest
from app.infrastructure.repositories import OpportunityRepository


def list_opportunities(
    session: Session,
    *,
    page_request: PageRequest,
    type: OpportunityType | None = None,
    status: OpportunityStatus | None = OpportunityStatus.ACTIVE,
    author_id: int | None = None,
    search: str | None = None,
) -> Page[Opportunity]:
    """Return one page of opportunities; only active ones unless told otherwise."""

    items, total = OpportunityRepository(session).list(
        type=type,
        status=status,
        author_id=author_id,
        search=search,
        offset=page_request.offset,
        limit=page_request.limit,
    )
    return Page(items=list(items), total=total, request=page_request)
