"""Helper utilities shared across API route handlers."""

from typing import NoReturn

from fastapi import HTTPException, Query, status

from app.domain.exceptions import (
    ConflictError,
    DomainError,
    InvalidOperationError,
    NotFoundError,
    PermissionDeniedError,
)
from app.domain.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PageRequest

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InvalidOperationError, status.HTTP_400_BAD_REQUEST),
)


def status_code_for(exc: ValueError) -> int:
    """Return the HTTP status matching a use case error."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def raise_http_error(exc: ValueError) -> NoReturn:
    """Re-raise a use case error as the matching :class:`HTTPException`."""

    raise HTTPException(status_code=status_code_for(exc), detail=str(exc)) from exc


def page_request(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1),
) -> PageRequest:
    """Build a :class:`PageRequest`, clamping ``limit`` to ``MAX_PAGE_SIZE``."""

    return PageRequest(page=page, limit=min(limit, MAX_PAGE_SIZE))
