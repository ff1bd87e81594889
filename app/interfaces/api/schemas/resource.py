"""Resource library schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import ResourceType


class ResourceCreate(BaseModel):
    title: str = Field(..., min_length=5, max_length=200)
    description: str = Field(..., min_length=20, max_length=1000)
    type: ResourceType
    content: str | None = Field(default=None, max_length=10000)
    url: str | None = Field(default=None, max_length=500)
    thumbnail: str | None = Field(default=None, max_length=500)
    is_premium: bool = False
    tags: list[str] = Field(default_factory=list, max_length=10)


class ResourceUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=5, max_length=200)
    description: str | None = Field(default=None, min_length=20, max_length=1000)
    type: ResourceType | None = None
    content: str | None = Field(default=None, max_length=10000)
    url: str | None = Field(default=None, max_length=500)
    thumbnail: str | None = Field(default=None, max_length=500)
    is_premium: bool | None = None
    tags: list[str] | None = Field(default=None, max_length=10)


class ResourceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    description: str
    type: ResourceType
    content: str | None = None
    url: str | None = None
    thumbnail: str | None = None
    is_premium: bool
    view_count: int
    tags: list[str]
    created_at: datetime
    updated_at: datetime | None = None


__all__ = ["ResourceCreate", "ResourceRead", "ResourceUpdate"]
