"""
Page/pageSize handling shared by the catalogue endpoints.

Query parameters are coerced and clamped, never rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Sequence

MIN_PAGE = 1
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 50

_LEADING_INT = re.compile(r"^[+-]?\d+")


@dataclass(frozen=True)
class Page:
    data: list[Any]
    total: int
    page: int
    page_size: int


def parse_int(raw: str | None, default: int) -> int:
    """
    Parse the leading integer of a query value ("3", " 12 ", "4abc").

    Empty or non-numeric input falls back to `default`.
    """
    match = _LEADING_INT.match((raw or "").strip())
    if match is None:
        return default
    return int(match.group(0))


def clamp_page(page: int) -> int:
    return max(MIN_PAGE, page)


def clamp_page_size(page_size: int) -> int:
    return min(MAX_PAGE_SIZE, max(MIN_PAGE_SIZE, page_size))


def paginate(items: Sequence[Any], *, page: int, page_size: int) -> Page:
    """
    Slice `items` for one page. `total` always counts every item.
    """
    page = clamp_page(page)
    page_size = clamp_page_size(page_size)
    start = (page - 1) * page_size
    return Page(
        data=list(items[start : start + page_size]),
        total=len(items),
        page=page,
        page_size=page_size,
    )
