"""Domain entities for opportunities and the applications they receive."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class OpportunityType(str, Enum):
    FUNDING = "FUNDING"
    TALENT = "TALENT"
    SERVICE = "SERVICE"
    PARTNERSHIP = "PARTNERSHIP"


class OpportunityStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"


class ApplicationStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


@dataclass
class Opportunity:
    """Offer published by a member (funding, talent, service, partnership)."""

    id: int | None
    author_id: int
    title: str
    description: str
    type: OpportunityType
    status: OpportunityStatus = OpportunityStatus.ACTIVE
    budget: str | None = None
    location: str | None = None
    remote: bool = False
    deadline: datetime | None = None
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Application:
    """A member's answer to an opportunity."""

    id: int | None
    opportunity_id: int
    applicant_id: int
    cover_letter: str
    expected_budget: str | None = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Application",
    "ApplicationStatus",
    "Opportunity",
    "OpportunityStatus",
    "OpportunityType",
]
