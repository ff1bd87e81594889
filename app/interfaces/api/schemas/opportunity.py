"""Opportunity and application schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import ApplicationStatus, OpportunityStatus, OpportunityType


class OpportunityCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=200)
    description: str = Field(..., min_length=10, max_length=5000)
    type: OpportunityType
    budget: str | None = Field(default=None, max_length=100)
    location: str | None = Field(default=None, max_length=200)
    remote: bool = False
    deadline: datetime | None = None
    tags: list[str] = Field(default_factory=list, max_length=20)


class OpportunityUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=3, max_length=200)
    description: str | None = Field(default=None, min_length=10, max_length=5000)
    type: OpportunityType | None = None
    status: OpportunityStatus | None = None
    budget: str | None = Field(default=None, max_length=100)
    location: str | None = Field(default=None, max_length=200)
    remote: bool | None = None
    deadline: datetime | None = None
    tags: list[str] | None = Field(default=None, max_length=20)


class OpportunityRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    description: str
    type: OpportunityType
    status: OpportunityStatus
    budget: str | None = None
    location: str | None = None
    remote: bool
    deadline: datetime | None = None
    tags: list[str]
    created_at: datetime
    updated_at: datetime | None = None


class ApplicationCreate(BaseModel):
    cover_letter: str = Field(..., min_length=10, max_length=5000)
    expected_budget: str | None = Field(default=None, max_length=100)


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class ApplicationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    opportunity_id: int
    applicant_id: int
    cover_letter: str
    expected_budget: str | None = None
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime | None = None


__all__ = [
    "ApplicationCreate",
    "ApplicationRead",
    "ApplicationStatusUpdate",
    "OpportunityCreate",
    "OpportunityRead",
    "OpportunityUpdate",
]
