"""Domain entity representing a platform member."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ProfileType(str, Enum):
    """Kind of profile a member registers with."""

    STARTUP = "STARTUP"
    EXPERT = "EXPERT"
    MENTOR = "MENTOR"
    INCUBATOR = "INCUBATOR"
    INVESTOR = "INVESTOR"
    FINANCIAL_INSTITUTION = "FINANCIAL_INSTITUTION"
    PUBLIC_ORGANIZATION = "PUBLIC_ORGANIZATION"
    TECH_PARTNER = "TECH_PARTNER"
    PME = "PME"
    CONSULTANT = "CONSULTANT"
    ADMIN = "ADMIN"


@dataclass
class User:
    """Core attributes describing a platform member."""

    id: int | None
    name: str
    email: str
    password: str
    profile_type: ProfileType
    company: str | None = None
    location: str | None = None
    description: str | None = None
    website: str | None = None
    linkedin: str | None = None
    phone: str | None = None
    verified: bool = False
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_login: datetime | None = None

    def is_admin(self) -> bool:
        """Return ``True`` when the member holds the administrator profile."""

        return self.profile_type is ProfileType.ADMIN


__all__ = ["ProfileType", "User"]
