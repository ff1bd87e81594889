"""Domain entity for the knowledge resources members share."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ResourceType(str, Enum):
    GUIDE = "GUIDE"
    TEMPLATE = "TEMPLATE"
    TOOL = "TOOL"
    ARTICLE = "ARTICLE"
    VIDEO = "VIDEO"
    WEBINAR = "WEBINAR"


@dataclass
class Resource:
    """Guide, template, tool or media published to the resource library."""

    id: int | None
    author_id: int
    title: str
    description: str
    type: ResourceType
    content: str | None = None
    url: str | None = None
    thumbnail: str | None = None
    is_premium: bool = False
    view_count: int = 0
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Resource", "ResourceType"]
