"""
Generic access helpers for schemaless JSON records.

Source files come from different scrapers, so the same concept lives under
different keys depending on the file. Callers describe a concept as an ordered
tuple of candidate keys (or key paths for nested values) and take the first
present value.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, Union

FieldPath = Union[str, Sequence[str]]


def is_blank(value: Any) -> bool:
    """
    A value counts as absent when it is None, an empty string, False or zero.

    Lists and dicts are always present, even when empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def get_path(record: Any, path: FieldPath) -> Any:
    if isinstance(path, str):
        path = (path,)
    current = record
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def first_present(record: Any, paths: Iterable[FieldPath]) -> Any:
    """
    Return the first candidate value that is not blank (see `is_blank`), else None.
    """
    for path in paths:
        value = get_path(record, path)
        if not is_blank(value):
            return value
    return None


def first_not_none(record: Any, paths: Iterable[FieldPath]) -> Any:
    for path in paths:
        value = get_path(record, path)
        if value is not None:
            return value
    return None


def as_text(value: Any) -> str:
    """
    Canonical string form used for comparisons and join keys.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        # ["A", "B"] -> "A,B"; None items become empty.
        return ",".join(as_text(item) for item in value)
    return str(value)
