"""
Pagination I/O models.

``PaginationInfo`` serializes with camelCase keys (``currentPage``,
``totalPages``, ``totalItemCount``, ``hasNextPage``, ``hasPrevPage``,
``limit``); ``Page`` pairs it with the items of one page.
"""

from __future__ import annotations

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ItemType = TypeVar("ItemType")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class PaginationInfo(BaseModel):
    """Metadata describing one page of a listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_page: int = Field(ge=1, description="Page returned (1-based)")
    total_pages: int = Field(ge=0, description="ceil(total_item_count / limit)")
    total_item_count: int = Field(ge=0, description="Total rows in the store")
    has_next_page: bool = Field(description="Whether current_page < total_pages")
    has_prev_page: bool = Field(description="Whether current_page > 1")
    limit: int = Field(ge=1, le=MAX_LIMIT, description="Effective page size used")


class Page(BaseModel, Generic[ItemType]):
    """A page of items plus its pagination metadata."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: List[ItemType]
    pagination: PaginationInfo

    @classmethod
    def single(cls, items: List[ItemType]) -> "Page[ItemType]":
        """Wrap an unpaginated result (e.g. a search) as one page holding every item.

        An empty result has no pages; ``limit`` stays within ``[1, MAX_LIMIT]``.
        """
        return cls(
            items=items,
            pagination=PaginationInfo(
                current_page=1,
                total_pages=1 if items else 0,
                total_item_count=len(items),
                has_next_page=False,
                has_prev_page=False,
                limit=max(1, min(len(items), MAX_LIMIT)),
            ),
        )
