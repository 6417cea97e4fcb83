"""
Page bound resolution shared by every repository.

``resolve_page_bounds`` turns loosely typed ``page``/``limit`` values (query
string text, JSON numbers, ``None``) into the effective page, limit and row
offset. ``build_pagination_info`` derives the metadata returned alongside a
page of items once the total row count is known.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from vet_clinic.core.models.io.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, PaginationInfo

# Largest row offset a 64-bit SQL integer can carry
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageBounds:
    """Effective page request after coercion and clamping."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _coerce_int(value: Any, default: int) -> int:
    """Coerce to ``int`` or return ``default``; zero also falls back to ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return default
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except ValueError:
            return default
    else:
        return default
    return coerced or default


def resolve_page_bounds(page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> PageBounds:
    """Resolve the requested page and limit.

    Args:
        page: Requested page number; missing or non-numeric values mean 1. Pages
            whose offset would exceed ``MAX_OFFSET`` are capped to the last
            representable page.
        limit: Requested page size; missing, non-numeric or values below 1 mean 10,
            values above 100 are capped at 100.

    Returns:
        The effective ``PageBounds``.
    """
    page_int = _coerce_int(page, DEFAULT_PAGE)
    limit_int = _coerce_int(limit, DEFAULT_LIMIT)

    if page_int < 1:
        page_int = DEFAULT_PAGE
    if limit_int < 1:
        limit_int = DEFAULT_LIMIT
    if limit_int > MAX_LIMIT:
        limit_int = MAX_LIMIT
    page_int = min(page_int, MAX_OFFSET // limit_int + 1)

    return PageBounds(page=page_int, limit=limit_int)


def build_pagination_info(bounds: PageBounds, total: int) -> PaginationInfo:
    """Derive pagination metadata for ``bounds`` over ``total`` rows."""
    total_pages = math.ceil(total / bounds.limit)
    return PaginationInfo(
        current_page=bounds.page,
        total_pages=total_pages,
        total_item_count=total,
        has_next_page=bounds.page < total_pages,
        has_prev_page=bounds.page > 1,
        limit=bounds.limit,
    )
