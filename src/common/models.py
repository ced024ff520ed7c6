from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

SortBy = Literal["view_count", "created_at"]
SortOrder = Literal["asc", "desc"]

SORT_BY_VALUES: tuple[str, ...] = ("view_count", "created_at")
SORT_ORDER_VALUES: tuple[str, ...] = ("asc", "desc")


class Author(BaseModel):
    """Represents the profile that published a recipe."""

    username: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None


class Recipe(BaseModel):
    """Summary of a recipe as shown in search results."""

    id: str
    slug: str = ""
    title: str
    tags: list[str] = Field(default_factory=list)
    view_count: int = Field(default=0, ge=0)
    favorite_count: int = Field(default=0, ge=0)
    created_at: datetime
    description: Optional[str] = None
    image_url: Optional[str] = None
    is_public: bool = True
    author: Optional[Author] = None
