"""Use case for publishing a resource."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Resource, ResourceType
from app.infrastructure.repositories import ResourceRepository
from app.utils import utc_now

logger = logging.getLogger(__name__)


def create_resource(
    session: Session,
    *,
    author_id: int,
    title: str,
    description: str,
    type: ResourceType,
    content: str | None = None,
    url: str | None = None,
    thumbnail: str | None = None,
    is_premium: bool = False,
    tags: list[str] | None = None,
) -> Resource:
    resource = ResourceRepository(session).create(
        Resource(
            id=None,
            author_id=author_id,
            title=title,
            description=description,
            type=type,
            content=content,
            url=url,
            thumbnail=thumbnail,
            is_premium=is_premium,
            tags=list(tags or []),
            created_at=utc_now(),
        )
    )
    logger.info("User %s published resource %s", author_id, resource.id)
    return resource
