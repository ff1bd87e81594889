"""Resource library endpoints."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.resources import (
    create_resource,
    delete_resource,
    list_popular_resources,
    list_resources,
    update_resource,
    view_resource,
)
from app.application.use_cases.users import get_user
from app.domain.entities import ResourceType, User
from app.domain.pagination import PageRequest
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.routes_helpers import page_request, raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    PaginationMeta,
    ResourceCreate,
    ResourceRead,
    ResourceUpdate,
)

router = APIRouter(prefix="/resources", tags=["resources"])


def _page_response(page) -> ApiResponse[list[ResourceRead]]:
    return ApiResponse(
        data=[ResourceRead.model_validate(item) for item in page.items],
        meta=PaginationMeta.from_page(page),
    )


@router.post("", response_model=ApiResponse[ResourceRead], status_code=status.HTTP_201_CREATED)
def publish(
    payload: ResourceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    resource = create_resource(db, author_id=current_user.id, **payload.model_dump())
    return ApiResponse(data=ResourceRead.model_validate(resource), message="Resource published")


@router.get("", response_model=ApiResponse[list[ResourceRead]])
def browse(
    type: ResourceType | None = None,
    author_id: int | None = None,
    is_premium: bool | None = None,
    tag: str | None = Query(None, max_length=50),
    search: str | None = Query(None, max_length=200),
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    page = list_resources(
        db,
        page_request=pagination,
        type=type,
        author_id=author_id,
        is_premium=is_premium,
        tag=tag,
        search=search,
    )
    return _page_response(page)


@router.get("/popular", response_model=ApiResponse[list[ResourceRead]])
def popular(
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return _page_response(list_popular_resources(db, page_request=pagination))


@router.get("/author/{author_id}", response_model=ApiResponse[list[ResourceRead]])
def by_author(
    author_id: int,
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        get_user(db, author_id)
    except ValueError as exc:
        raise_http_error(exc)
    return _page_response(list_resources(db, page_request=pagination, author_id=author_id))


@router.get("/{resource_id}", response_model=ApiResponse[ResourceRead])
def read_resource(
    resource_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Return a resource and count the view."""

    try:
        resource = view_resource(db, resource_id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=ResourceRead.model_validate(resource))


@router.put("/{resource_id}", response_model=ApiResponse[ResourceRead])
def edit_resource(
    resource_id: int,
    payload: ResourceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        resource = update_resource(
            db,
            resource_id,
            user_id=current_user.id,
            changes=payload.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=ResourceRead.model_validate(resource))


@router.delete("/{resource_id}", response_model=ApiResponse[None])
def remove_resource(
    resource_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        delete_resource(db, resource_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Resource deleted")
