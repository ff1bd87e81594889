"""Tests for the token helpers shared by REST and the websocket handshake."""

from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from app.domain.entities import ProfileType, User
from app.infrastructure.security import (
    TokenExpiredError,
    create_access_token,
    create_refresh_token,
    decode_access_token,
    decode_refresh_token,
    extract_bearer_token,
    get_password_hash,
    verify_password,
)

USER = User(
    id=12,
    name="Marie Curie",
    email="marie@example.com",
    password="unused",
    profile_type=ProfileType.EXPERT,
    verified=True,
)


def test_access_token_carries_identity() -> None:
    identity = decode_access_token(create_access_token(USER))

    assert identity.user_id == 12
    assert identity.email == "marie@example.com"
    assert identity.profile_type is ProfileType.EXPERT
    assert identity.verified is True


def test_expired_access_token_is_rejected() -> None:
    token = create_access_token(USER, expires_delta=timedelta(seconds=-1))

    with pytest.raises(TokenExpiredError):
        decode_access_token(token)


def test_tokens_are_not_interchangeable() -> None:
    with pytest.raises(ValueError):
        decode_access_token(create_refresh_token(USER))
    with pytest.raises(ValueError):
        decode_refresh_token(create_access_token(USER))

    assert decode_refresh_token(create_refresh_token(USER)) == 12


def test_token_signed_with_another_key_is_rejected() -> None:
    forged = jwt.encode(
        {
            "sub": "12",
            "email": "marie@example.com",
            "profile_type": "ADMIN",
            "type": "access",
            "iss": "pme360-api",
            "aud": "pme360-frontend",
        },
        "another-secret",
        algorithm="HS256",
    )

    with pytest.raises(ValueError):
        decode_access_token(forged)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def", "abc.def"),
        ("bearer   abc.def  ", "abc.def"),
        ("Basic abc", None),
        ("Bearer ", None),
        (None, None),
    ],
)
def test_extract_bearer_token(header, expected) -> None:
    assert extract_bearer_token(header) == expected


def test_password_hash_round_trip() -> None:
    hashed = get_password_hash("Secret123!")

    assert hashed != "Secret123!"
    assert verify_password("Secret123!", hashed)
    assert not verify_password("secret123!", hashed)
