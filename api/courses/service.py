"""
Programme query engine.

`query_programmes` is pure (records in, one page out); `search_courses` adds
country validation and loading for the HTTP layer.
"""

from __future__ import annotations

from typing import Any, Sequence

from core.pagination import Page, paginate

from . import repository
from .titles import resolve_title

DEFAULT_COUNTRY = "germany"


class UnsupportedCountryError(ValueError):
    pass


def normalize_country(country: str | None) -> str:
    value = (country or "").strip().lower()
    return value or DEFAULT_COUNTRY


def ensure_supported(country: str) -> str:
    if country not in repository.COUNTRY_FILES:
        raise UnsupportedCountryError(f"Unsupported country: {country!r}")
    return country


def filter_by_title(country: str, records: Sequence[Any], text_filter: str) -> list[Any]:
    needle = (text_filter or "").strip().lower()
    if not needle:
        return list(records)
    return [record for record in records if needle in resolve_title(country, record).lower()]


def query_programmes(
    country: str,
    records: Sequence[Any],
    text_filter: str,
    *,
    page: int,
    page_size: int,
) -> Page:
    ensure_supported(country)
    filtered = filter_by_title(country, records, text_filter)
    return paginate(filtered, page=page, page_size=page_size)


async def search_courses(
    country: str | None,
    text_filter: str,
    *,
    page: int,
    page_size: int,
) -> tuple[str, Page]:
    """
    Validate the country, load its snapshot and return `(country, page)`.

    Raises `UnsupportedCountryError` before touching the filesystem.
    """
    country = ensure_supported(normalize_country(country))
    records = await repository.load_programmes(country)
    return country, query_programmes(country, records, text_filter, page=page, page_size=page_size)
