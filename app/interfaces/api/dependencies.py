"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationPublisher, RealtimeGateway
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import TokenExpiredError, decode_access_token

settings = get_settings()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.api_prefix}/auth/token")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the member identified by the bearer ``token``."""

    try:
        identity = decode_access_token(token)
    except TokenExpiredError as exc:
        raise _unauthorized("Token expired") from exc
    except ValueError as exc:
        raise _unauthorized("Invalid credentials") from exc

    user = UserRepository(db).get(identity.user_id)
    if user is None:
        raise _unauthorized("User not found")
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account disabled")
    return current_user


def require_admin(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")
    return current_user


def get_notification_publisher(request: Request) -> NotificationPublisher:
    """Return the publisher built by ``create_app`` for this application."""

    return request.app.state.notification_publisher


def get_realtime_gateway(request: Request) -> RealtimeGateway | None:
    """Return the websocket gateway, or ``None`` when realtime is disabled."""

    return request.app.state.realtime_gateway
