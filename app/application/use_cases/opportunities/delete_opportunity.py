"""Use case for removing an opportunity."""

import logging

from sqlalchemy.orm import Session

from app.infrastructure.repositories import OpportunityRepository

from .get_opportunity import get_owned_opportunity

logger = logging.getLogger(__name__)


def delete_opportunity(session: Session, opportunity_id: int, *, user_id: int) -> None:
    get_owned_opportunity(session, opportunity_id, user_id=user_id)
    OpportunityRepository(session).delete(opportunity_id)
    logger.info("User %s deleted opportunity %s", user_id, opportunity_id)
