"""Use cases for retrieving resources."""

from sqlalchemy.orm import Session

from app.domain.entities import Resource
from app.domain.exceptions import NotFoundError, PermissionDeniedError
from app.infrastructure.repositories import ResourceRepository


def get_resource(session: Session, resource_id: int) -> Resource:
    resource = ResourceRepository(session).get(resource_id)
    if resource is None:
        raise NotFoundError("Resource not found")
    return resource


def view_resource(session: Session, resource_id: int) -> Resource:
    """Return the resource after counting one more view of it."""

    resource = ResourceRepository(session).increment_views(resource_id)
    if resource is None:
        raise NotFoundError("Resource not found")
    return resource


def get_owned_resource(session: Session, resource_id: int, *, user_id: int) -> Resource:
    """Return the resource, requiring ``user_id`` to be its author."""

    resource = get_resource(session, resource_id)
    if resource.author_id != user_id:
        raise PermissionDeniedError("Only the author can manage this resource")
    return resource
