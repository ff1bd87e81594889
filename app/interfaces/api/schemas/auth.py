"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.domain.entities import ProfileType

from .user import UserRead


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    profile_type: ProfileType
    company: str | None = Field(default=None, max_length=200)
    location: str | None = Field(default=None, max_length=200)
    phone: str | None = Field(default=None, max_length=30)

    @field_validator("profile_type")
    @classmethod
    def _reject_admin(cls, value: ProfileType) -> ProfileType:
        if value is ProfileType.ADMIN:
            raise ValueError("Administrator accounts cannot be self-registered")
        return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class AuthSession(BaseModel):
    """Credentials handed out after registering or logging in."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserRead


__all__ = ["AuthSession", "LoginRequest", "RefreshRequest", "RegisterRequest", "Token"]
