"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_utc,
    isoformat_or_none,
    to_naive_utc,
    utc_now,
    utc_now_naive,
)
from .search import LIKE_ESCAPE, contains_pattern

__all__ = [
    "LIKE_ESCAPE",
    "contains_pattern",
    "ensure_utc",
    "isoformat_or_none",
    "to_naive_utc",
    "utc_now",
    "utc_now_naive",
]
