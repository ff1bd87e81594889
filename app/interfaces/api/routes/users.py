"""Member directory and profile endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.users import get_user, list_users, update_user
from app.domain.entities import ProfileType, User
from app.domain.pagination import PageRequest
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.routes_helpers import page_request, raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    PaginationMeta,
    UserProfileUpdate,
    UserRead,
    UserSummaryRead,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=ApiResponse[list[UserSummaryRead]])
def list_members(
    profile_type: ProfileType | None = None,
    search: str | None = Query(None, max_length=100),
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Browse active members, optionally filtered by profile type or text."""

    page = list_users(db, page_request=pagination, profile_type=profile_type, search=search)
    return ApiResponse(
        data=[UserSummaryRead.model_validate(user) for user in page.items],
        meta=PaginationMeta.from_page(page),
    )


@router.get("/me", response_model=ApiResponse[UserRead])
def read_current_user(current_user: User = Depends(get_current_active_user)):
    return ApiResponse(data=UserRead.model_validate(current_user))


@router.put("/me", response_model=ApiResponse[UserRead])
def update_current_user(
    payload: UserProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    changes = payload.model_dump(exclude_unset=True)
    try:
        user = update_user(db, user_id=current_user.id, **changes)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=UserRead.model_validate(user), message="Profile updated")


@router.get("/{user_id}", response_model=ApiResponse[UserSummaryRead])
def read_member(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        user = get_user(db, user_id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=UserSummaryRead.model_validate(user))
