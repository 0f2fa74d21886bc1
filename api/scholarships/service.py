"""
Scholarship query engine.

Pipeline for one request:
- build an id -> steps lookup from the details file
- attach `steps` to every main record (empty list when there is no match)
- filter by country, level, deadline floor and free text, in that order
- paginate

Identifiers are compared in their canonical text form (`core.records.as_text`),
so numeric and string ids from different scrapers still join.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from core.pagination import Page, paginate
from core.records import as_text, first_not_none, first_present, is_blank

from . import repository

ID_FIELDS = ("id", "scholarship_id")
STEPS_FIELDS = ("steps", "application_steps")
COUNTRY_FIELDS = ("country", "country_region", "countryRegion")
LEVEL_FIELDS = ("degree_levels", "degreeLevels", "levels")
NAME_FIELDS = ("name", "title")
PROVIDER_FIELDS = ("provider", "organizer")


@dataclass(frozen=True)
class ScholarshipFilters:
    q: str = ""
    country: str = ""
    level: str = ""
    deadline: str = ""

    @classmethod
    def from_params(
        cls,
        *,
        q: str | None = None,
        country: str | None = None,
        level: str | None = None,
        deadline: str | None = None,
    ) -> "ScholarshipFilters":
        return cls(
            q=(q or "").strip(),
            country=(country or "").strip(),
            level=(level or "").strip(),
            deadline=(deadline or "").strip(),
        )


def record_id(record: Any) -> str | None:
    value = first_not_none(record, ID_FIELDS)
    if value is None:
        return None
    return as_text(value)


def _steps_of(record: dict) -> list[Any]:
    for field in STEPS_FIELDS:
        value = record.get(field)
        if isinstance(value, list):
            return value
    return []


def build_steps_lookup(detail_records: Sequence[Any]) -> dict[str, list[Any]]:
    """
    Map scholarship id -> steps. A later duplicate id overwrites an earlier one.
    """
    lookup: dict[str, list[Any]] = {}
    for detail in detail_records:
        if not isinstance(detail, dict):
            continue
        key = record_id(detail)
        if key is None:
            continue
        lookup[key] = _steps_of(detail)
    return lookup


def merge_steps(main_records: Sequence[Any], lookup: dict[str, list[Any]]) -> list[dict[str, Any]]:
    merged: list[dict[str, Any]] = []
    for record in main_records:
        base = record if isinstance(record, dict) else {}
        key = record_id(base)
        steps = lookup.get(key, []) if key is not None else []
        merged.append({**base, "steps": steps})
    return merged


def matches_country(record: dict[str, Any], country: str) -> bool:
    value = as_text(first_present(record, COUNTRY_FIELDS)).strip().lower()
    return value == country.strip().lower()


def matches_level(record: dict[str, Any], level: str) -> bool:
    levels = first_present(record, LEVEL_FIELDS)
    if isinstance(levels, list):
        return level in [as_text(item) for item in levels]
    if levels is None or isinstance(levels, dict):
        return False
    return as_text(levels) == level


def meets_deadline(record: dict[str, Any], deadline: str) -> bool:
    # Scholarships without a deadline are always open.
    value = record.get("deadline")
    if is_blank(value):
        return True
    return as_text(value) >= deadline


def matches_text(record: dict[str, Any], text: str) -> bool:
    needle = text.lower()
    name = as_text(first_present(record, NAME_FIELDS)).lower()
    provider = as_text(first_present(record, PROVIDER_FIELDS)).lower()
    return needle in name or needle in provider


def apply_filters(records: Sequence[dict[str, Any]], filters: ScholarshipFilters) -> list[dict[str, Any]]:
    checks: list[tuple[str, Callable[[dict[str, Any], str], bool]]] = [
        (filters.country, matches_country),
        (filters.level, matches_level),
        (filters.deadline, meets_deadline),
        (filters.q, matches_text),
    ]
    result = list(records)
    for value, predicate in checks:
        if not value:
            continue
        result = [record for record in result if predicate(record, value)]
    return result


def query_scholarships(
    main_records: Sequence[Any],
    detail_records: Sequence[Any],
    filters: ScholarshipFilters,
    *,
    page: int,
    page_size: int,
) -> Page:
    lookup = build_steps_lookup(detail_records)
    merged = merge_steps(main_records, lookup)
    return paginate(apply_filters(merged, filters), page=page, page_size=page_size)


async def search_scholarships(filters: ScholarshipFilters, *, page: int, page_size: int) -> Page:
    main_records, detail_records = await repository.load_sources()
    return query_scholarships(main_records, detail_records, filters, page=page, page_size=page_size)
