"""Use case for publishing an opportunity."""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Opportunity, OpportunityType
from app.infrastructure.repositories import OpportunityRepository
from app.utils import utc_now

logger = logging.getLogger(__name__)


def create_opportunity(
    session: Session,
    *,
    author_id: int,
    title: str,
    description: str,
    type: OpportunityType,
    budget: str | None = None,
    location: str | None = None,
    remote: bool = False,
    deadline: datetime | None = None,
    tags: list[str] | None = None,
) -> Opportunity:
    opportunity = OpportunityRepository(session).create(
        Opportunity(
            id=None,
            author_id=author_id,
            title=title,
            description=description,
            type=type,
            budget=budget,
            location=location,
            remote=remote,
            deadline=deadline,
            tags=list(tags or []),
            created_at=utc_now(),
        )
    )
    logger.info("User %s published opportunity %s", author_id, opportunity.id)
    return opportunity
