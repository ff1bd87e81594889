"""Use case for editing an opportunity."""

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Opportunity
from app.infrastructure.repositories import OpportunityRepository

from .get_opportunity import get_owned_opportunity

_EDITABLE_FIELDS = frozenset(
    {"title", "description", "type", "status", "budget", "location", "remote", "deadline", "tags"}
)


def update_opportunity(
    session: Session, opportunity_id: int, *, user_id: int, changes: dict[str, Any]
) -> Opportunity:
    """Apply ``changes`` to an opportunity owned by ``user_id``.

    ``changes`` only carries the fields the client sent.
    """

    unknown = set(changes) - _EDITABLE_FIELDS
    if unknown:
        raise TypeError(f"Unexpected opportunity fields: {', '.join(sorted(unknown))}")

    opportunity = get_owned_opportunity(session, opportunity_id, user_id=user_id)
    return OpportunityRepository(session).update(replace(opportunity, **changes))
