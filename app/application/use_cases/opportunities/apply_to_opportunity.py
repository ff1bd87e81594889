"""Use case for applying to an opportunity."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Application, OpportunityStatus, User
from app.domain.exceptions import ConflictError, DomainError, InvalidOperationError
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import OpportunityRepository
from app.utils import utc_now

from ..notifications import notify_application_received
from .get_opportunity import get_opportunity

logger = logging.getLogger(__name__)


def apply_to_opportunity(
    session: Session,
    publisher: NotificationPublisher,
    *,
    opportunity_id: int,
    applicant: User,
    cover_letter: str,
    expected_budget: str | None = None,
) -> Application:
    """Record ``applicant``'s application and tell the author about it.

    Authors cannot apply to their own opportunities, closed opportunities
    accept no applications and each member may apply once.
    """

    opportunity = get_opportunity(session, opportunity_id)
    if opportunity.author_id == applicant.id:
        raise InvalidOperationError("You cannot apply to your own opportunity")
    if opportunity.status is not OpportunityStatus.ACTIVE:
        raise InvalidOperationError("This opportunity is no longer accepting applications")

    repository = OpportunityRepository(session)
    if repository.find_application(opportunity_id=opportunity_id, applicant_id=applicant.id):
        raise ConflictError("You already applied to this opportunity")

    application = repository.create_application(
        Application(
            id=None,
            opportunity_id=opportunity_id,
            applicant_id=applicant.id,
            cover_letter=cover_letter,
            expected_budget=expected_budget,
            created_at=utc_now(),
        )
    )
    logger.info("User %s applied to opportunity %s", applicant.id, opportunity_id)

    try:
        notify_application_received(
            session,
            publisher,
            opportunity=opportunity,
            application=application,
            applicant=applicant,
        )
    except (DomainError, SQLAlchemyError):
        session.rollback()
        logger.exception(
            "Could not notify author %s about application %s",
            opportunity.author_id,
            application.id,
        )
    return application
