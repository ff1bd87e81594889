"""Endpoints for registration, login and token refresh."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_user,
    get_user,
    record_login,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.security import (
    TokenExpiredError,
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
)
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    AuthSession,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    Token,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _login(db: Session, email: str, password: str) -> User:
    user, auth_status = authenticate_user(db, email, password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account disabled")

    record_login(db, user.id)
    logger.info("User %s logged in", user.id)
    return user


def _session_for(user: User) -> AuthSession:
    return AuthSession(
        access_token=create_access_token(user),
        refresh_token=create_refresh_token(user),
        user=UserRead.model_validate(user),
    )


@router.post(
    "/register",
    response_model=ApiResponse[AuthSession],
    status_code=status.HTTP_201_CREATED,
)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """Create a member account and return its first credentials."""

    try:
        user = create_user(
            db,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            profile_type=payload.profile_type,
            company=payload.company,
            location=payload.location,
            phone=payload.phone,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=_session_for(user), message="Account created")


@router.post("/login", response_model=ApiResponse[AuthSession])
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = _login(db, payload.email, payload.password)
    return ApiResponse(data=_session_for(user), message="Logged in")


# Keeps the signature expected by OAuth2PasswordRequestForm so the docs UI can log in.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate with a form post and return a bare bearer token."""

    user = _login(db, form_data.username, form_data.password)
    return Token(access_token=create_access_token(user))


@router.post("/refresh", response_model=ApiResponse[AuthSession])
def refresh(payload: RefreshRequest, db: Session = Depends(get_db)):
    """Exchange a refresh token for a new pair of tokens."""

    try:
        user_id = decode_refresh_token(payload.refresh_token)
    except TokenExpiredError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Refresh token expired"
        ) from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token"
        ) from exc

    try:
        user = get_user(db, user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token"
        ) from exc
    return ApiResponse(data=_session_for(user))
