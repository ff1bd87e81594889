"""Pagination primitives shared by list use cases."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50


@dataclass(frozen=True)
class PageRequest:
    """One-based page number and page size requested by a client."""

    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            object.__setattr__(self, "page", 1)
        if self.limit < 1:
            object.__setattr__(self, "limit", DEFAULT_PAGE_SIZE)
        elif self.limit > MAX_PAGE_SIZE:
            object.__setattr__(self, "limit", MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of results together with the total number of matches."""

    items: Sequence[T]
    total: int
    request: PageRequest

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.request.limit) if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.request.page * self.request.limit < self.total

    @property
    def has_prev(self) -> bool:
        return self.request.page > 1


__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "Page", "PageRequest"]
