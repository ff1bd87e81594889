"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.domain.entities import ProfileType


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: EmailStr
    profile_type: ProfileType
    company: str | None = None
    location: str | None = None
    description: str | None = None
    website: str | None = None
    linkedin: str | None = None
    phone: str | None = None
    verified: bool
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_login: datetime | None = None


class UserSummaryRead(BaseModel):
    """Public directory entry; contact details stay private."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    profile_type: ProfileType
    company: str | None = None
    location: str | None = None
    description: str | None = None
    website: str | None = None
    linkedin: str | None = None
    verified: bool


class UserProfileUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=2, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8, max_length=128)
    company: str | None = Field(default=None, max_length=200)
    location: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    website: str | None = Field(default=None, max_length=300)
    linkedin: str | None = Field(default=None, max_length=300)
    phone: str | None = Field(default=None, max_length=30)


__all__ = ["UserProfileUpdate", "UserRead", "UserSummaryRead"]
