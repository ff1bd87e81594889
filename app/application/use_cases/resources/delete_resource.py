"""Use case for removing a resource."""

import logging

from sqlalchemy.orm import Session

from app.infrastructure.repositories import ResourceRepository

from .get_resource import get_owned_resource

logger = logging.getLogger(__name__)


def delete_resource(session: Session, resource_id: int, *, user_id: int) -> None:
    get_owned_resource(session, resource_id, user_id=user_id)
    ResourceRepository(session).delete(resource_id)
    logger.info("User %s deleted resource %s", user_id, resource_id)
