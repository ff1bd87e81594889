"""Use case for editing a resource."""

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Resource
from app.infrastructure.repositories import ResourceRepository

from .get_resource import get_owned_resource

_EDITABLE_FIELDS = frozenset(
    {"title", "description", "content", "url", "thumbnail", "type", "is_premium", "tags"}
)


def update_resource(
    session: Session, resource_id: int, *, user_id: int, changes: dict[str, Any]
) -> Resource:
    unknown = set(changes) - _EDITABLE_FIELDS
    if unknown:
        raise TypeError(f"Unexpected resource fields: {', '.join(sorted(unknown))}")

    resource = get_owned_resource(session, resource_id, user_id=user_id)
    if changes.get("tags") is None:
        changes = {key: value for key, value in changes.items() if key != "tags"}
    return ResourceRepository(session).update(replace(resource, **changes))
