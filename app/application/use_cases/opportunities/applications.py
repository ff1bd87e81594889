"""Use cases for reviewing applications."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Application, ApplicationStatus
from app.domain.exceptions import DomainError, NotFoundError
from app.domain.pagination import Page, PageRequest
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import OpportunityRepository

from ..notifications import notify_application_status_changed
from .get_opportunity import get_owned_opportunity

logger = logging.getLogger(__name__)


def list_opportunity_applications(
    session: Session, opportunity_id: int, *, user_id: int, page_request: PageRequest
) -> Page[Application]:
    """Return the applications of an opportunity authored by ``user_id``."""

    get_owned_opportunity(session, opportunity_id, user_id=user_id)
    items, total = OpportunityRepository(session).list_applications(
        opportunity_id=opportunity_id,
        offset=page_request.offset,
        limit=page_request.limit,
    )
    return Page(items=list(items), total=total, request=page_request)


def list_my_applications(
    session: Session, *, user_id: int, page_request: PageRequest
) -> Page[Application]:
    items, total = OpportunityRepository(session).list_applications(
        applicant_id=user_id,
        offset=page_request.offset,
        limit=page_request.limit,
    )
    return Page(items=list(items), total=total, request=page_request)


def update_application_status(
    session: Session,
    publisher: NotificationPublisher,
    application_id: int,
    *,
    user_id: int,
    status: ApplicationStatus,
) -> Application:
    """Let the opportunity author accept or reject an application.

    The applicant is notified whenever the status actually changes.
    """

    repository = OpportunityRepository(session)
    application = repository.get_application(application_id)
    if application is None:
        raise NotFoundError("Application not found")
    opportunity = get_owned_opportunity(session, application.opportunity_id, user_id=user_id)

    if application.status is status:
        return application

    updated = repository.update_application_status(application_id, status)
    try:
        notify_application_status_changed(
            session, publisher, opportunity=opportunity, application=updated
        )
    except (DomainError, SQLAlchemyError):
        session.rollback()
        logger.exception(
            "Could not notify applicant %s about application %s",
            updated.applicant_id,
            updated.id,
        )
    return updated
