"""Security helpers for hashing and token generation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.domain.entities import ProfileType, User
from app.utils import utc_now

_ALGORITHM = "HS256"
_ACCESS_TOKEN_TYPE = "access"
_REFRESH_TOKEN_TYPE = "refresh"

settings = get_settings()

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=settings.password_hash_rounds,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class TokenExpiredError(ValueError):
    """Raised when a credential was valid but is past its expiry."""


@dataclass(frozen=True)
class TokenIdentity:
    """Claims carried by a verified bearer credential."""

    user_id: int
    email: str
    profile_type: ProfileType
    verified: bool


def _encode(claims: dict, *, key: str, token_type: str, expires_delta: timedelta) -> str:
    issued_at = utc_now()
    payload = {
        **claims,
        "type": token_type,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
        "iss": settings.token_issuer,
        "aud": settings.token_audience,
    }
    return jwt.encode(payload, key, algorithm=_ALGORITHM)


def _decode(token: str, *, key: str, token_type: str) -> dict:
    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=[_ALGORITHM],
            audience=settings.token_audience,
            issuer=settings.token_issuer,
        )
    except ExpiredSignatureError as exc:
        raise TokenExpiredError("Token expired") from exc
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc

    if payload.get("type") != token_type:
        raise ValueError("Could not validate credentials")
    return payload


def create_access_token(user: User, expires_delta: timedelta | None = None) -> str:
    """Return a signed access token identifying ``user``."""

    claims = {
        "sub": str(user.id),
        "email": user.email,
        "profile_type": user.profile_type.value,
        "verified": user.verified,
    }
    return _encode(
        claims,
        key=settings.secret_key,
        token_type=_ACCESS_TOKEN_TYPE,
        expires_delta=expires_delta
        or timedelta(minutes=settings.access_token_expire_minutes),
    )


def create_refresh_token(user: User, expires_delta: timedelta | None = None) -> str:
    claims = {"sub": str(user.id), "email": user.email}
    return _encode(
        claims,
        key=settings.refresh_signing_key,
        token_type=_REFRESH_TOKEN_TYPE,
        expires_delta=expires_delta
        or timedelta(minutes=settings.refresh_token_expire_minutes),
    )


def decode_access_token(token: str) -> TokenIdentity:
    """Verify ``token`` and return the identity it carries.

    Raises ``ValueError`` (or :class:`TokenExpiredError`) when the token is
    malformed, signed with another key, expired or missing required claims.
    """

    payload = _decode(token, key=settings.secret_key, token_type=_ACCESS_TOKEN_TYPE)
    try:
        return TokenIdentity(
            user_id=int(payload["sub"]),
            email=str(payload["email"]),
            profile_type=ProfileType(payload["profile_type"]),
            verified=bool(payload.get("verified", False)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError("Could not validate credentials") from exc


def decode_refresh_token(token: str) -> int:
    """Verify a refresh ``token`` and return the user id it was issued for."""

    payload = _decode(
        token, key=settings.refresh_signing_key, token_type=_REFRESH_TOKEN_TYPE
    )
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError("Could not validate credentials") from exc


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the credential from an ``Authorization: Bearer <token>`` header."""

    if not authorization:
        return None
    scheme, _, credential = authorization.partition(" ")
    if scheme.lower() != "bearer" or not credential.strip():
        return None
    return credential.strip()


__all__ = [
    "TokenExpiredError",
    "TokenIdentity",
    "create_access_token",
    "create_refresh_token",
    "decode_access_token",
    "decode_refresh_token",
    "extract_bearer_token",
    "get_password_hash",
    "verify_password",
]
