"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from app.domain.pagination import Page

T = TypeVar("T")


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_page(cls, page: Page) -> "PaginationMeta":
        return cls(
            page=page.request.page,
            limit=page.request.limit,
            total=page.total,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_prev=page.has_prev,
        )


class ApiResponse(BaseModel, Generic[T]):
    """Uniform ``{success, data, message, error, meta}`` envelope."""

    success: bool = True
    data: T | None = None
    message: str | None = None
    error: str | None = None
    meta: PaginationMeta | None = None


class CountRead(BaseModel):
    count: int


__all__ = ["ApiResponse", "CountRead", "PaginationMeta"]
