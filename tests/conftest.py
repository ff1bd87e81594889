"""Shared fixtures: a throwaway SQLite database and a fresh application per test."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "pme360_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["REFRESH_SECRET_KEY"] = "test-refresh-secret"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["REALTIME_ENABLED"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from fastapi.testclient import TestClient  # noqa: E402
from starlette.websockets import WebSocketState  # noqa: E402

from app.application.use_cases.users import create_user  # noqa: E402
from app.domain.entities import ProfileType, User  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.security import create_access_token  # noqa: E402
from main import create_app  # noqa: E402

PASSWORD = "Secret123!"


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def session() -> Iterator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Return a factory inserting members straight through the use case."""

    counter = iter(range(1, 10_000))

    def _make_user(
        name: str | None = None,
        *,
        email: str | None = None,
        profile_type: ProfileType = ProfileType.STARTUP,
        password: str = PASSWORD,
    ) -> User:
        index = next(counter)
        with SessionLocal() as db:
            return create_user(
                db,
                name=name or f"Member {index}",
                email=email or f"member{index}@example.com",
                password=password,
                profile_type=profile_type,
            )

    return _make_user


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def headers_for() -> Callable[[User], dict[str, str]]:
    return auth_headers


class FakeConnection:
    """In-memory stand-in for a websocket accepted by the gateway."""

    def __init__(self, *, fail_on_send: bool = False, fail_on_close: bool = False) -> None:
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED
        self.fail_on_send = fail_on_send
        self.fail_on_close = fail_on_close
        self.sent: list[dict] = []
        self.close_code: int | None = None

    async def send_json(self, data, mode: str = "text") -> None:
        if self.fail_on_send:
            raise RuntimeError("socket went away")
        self.sent.append(data)

    async def close(self, code: int = 1000, reason: str | None = None) -> None:
        if self.fail_on_close:
            raise ConnectionResetError("peer vanished during close")
        self.close_code = code
        self.application_state = WebSocketState.DISCONNECTED

    def drop(self) -> None:
        """Simulate the peer disappearing without a close handshake."""

        self.client_state = WebSocketState.DISCONNECTED


@pytest.fixture
def connection_factory() -> type[FakeConnection]:
    return FakeConnection
