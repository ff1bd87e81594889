"""Use cases for retrieving opportunities."""

from sqlalchemy.orm import Session

from app.domain.entities import Opportunity
from app.domain.exceptions import NotFoundError, PermissionDeniedError
from app.infrastructure.repositories import OpportunityRepository


def get_opportunity(session: Session, opportunity_id: int) -> Opportunity:
    opportunity = OpportunityRepository(session).get(opportunity_id)
    if opportunity is None:
        raise NotFoundError("Opportunity not found")
    return opportunity


def get_owned_opportunity(session: Session, opportunity_id: int, *, user_id: int) -> Opportunity:
    """Return the opportunity, requiring ``user_id`` to be its author."""

    opportunity = get_opportunity(session, opportunity_id)
    if opportunity.author_id != user_id:
        raise PermissionDeniedError("Only the author can manage this opportunity")
    return opportunity
