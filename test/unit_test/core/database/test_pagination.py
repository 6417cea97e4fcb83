"""Unit tests for page bound resolution and pagination metadata."""

from __future__ import annotations

import pytest

from vet_clinic.core.database.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    MAX_OFFSET,
    PageBounds,
    build_pagination_info,
    resolve_page_bounds,
)


class TestResolvePageBounds:
    """Coercion and clamping of the requested page and limit."""

    def test_defaults(self):
        bounds = resolve_page_bounds()
        assert (bounds.page, bounds.limit, bounds.offset) == (DEFAULT_PAGE, DEFAULT_LIMIT, 0)

    @pytest.mark.parametrize(
        "page,limit,expected",
        [
            (2, 10, (2, 10, 10)),
            ("3", "5", (3, 5, 10)),
            (" 4 ", "20", (4, 20, 60)),
            (2.9, 10.2, (2, 10, 10)),
            (None, None, (1, 10, 0)),
            ("abc", "xyz", (1, 10, 0)),
            ("3abc", "5abc", (1, 10, 0)),
            (True, False, (1, 10, 0)),
            (0, 0, (1, 10, 0)),
            (-3, 10, (1, 10, 0)),
            (1, -5, (1, 10, 0)),
            (1, 101, (1, MAX_LIMIT, 0)),
            (2, "1000", (2, MAX_LIMIT, 100)),
            (float("nan"), float("inf"), (1, 10, 0)),
        ],
    )
    def test_coercion(self, page, limit, expected):
        bounds = resolve_page_bounds(page, limit)
        assert (bounds.page, bounds.limit, bounds.offset) == expected

    def test_limit_always_within_range(self):
        for limit in (-100, -1, 0, 1, 50, 100, 101, 10_000):
            assert 1 <= resolve_page_bounds(1, limit).limit <= MAX_LIMIT

    @pytest.mark.parametrize("limit", [1, 10, MAX_LIMIT])
    def test_huge_page_keeps_offset_within_sql_integer(self, limit):
        bounds = resolve_page_bounds(10**20, limit)

        assert bounds.page == MAX_OFFSET // limit + 1
        assert 0 <= bounds.offset <= MAX_OFFSET

    def test_huge_page_string(self):
        assert resolve_page_bounds("9" * 30, 10).offset <= MAX_OFFSET


class TestBuildPaginationInfo:
    def test_middle_page(self):
        info = build_pagination_info(PageBounds(page=2, limit=10), total=25)

        assert info.current_page == 2
        assert info.total_pages == 3
        assert info.total_item_count == 25
        assert info.has_next_page is True
        assert info.has_prev_page is True
        assert info.limit == 10

    def test_last_page(self):
        info = build_pagination_info(PageBounds(page=3, limit=10), total=25)
        assert info.has_next_page is False
        assert info.has_prev_page is True

    def test_empty_store(self):
        info = build_pagination_info(PageBounds(page=1, limit=10), total=0)
        assert info.total_pages == 0
        assert info.has_next_page is False
        assert info.has_prev_page is False

    def test_exact_multiple(self):
        assert build_pagination_info(PageBounds(page=1, limit=5), total=20).total_pages == 4

    def test_serializes_camel_case(self):
        info = build_pagination_info(PageBounds(page=1, limit=10), total=11)

        assert info.model_dump(by_alias=True) == {
            "currentPage": 1,
            "totalPages": 2,
            "totalItemCount": 11,
            "hasNextPage": True,
            "hasPrevPage": False,
            "limit": 10,
        }
