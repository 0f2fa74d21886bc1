"""
Display titles for programme records.

Each country's scraper stores the title under different keys, and some of them
glue a redundant restatement onto the real title, e.g.

    "Data Science: Data Science"
    "Master of Arts in Global Studies Global Studies"

`clean_title` collapses those repeats; `resolve_title` picks the right fields
for a country and applies the cleanup where that source needs it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from core.records import FieldPath, as_text, first_present

# "<A>: <B>", split at the first colon.
_COLON_PAIR = re.compile(r"^(.+?):\s*(.+)$")

MAX_SUFFIX_WORDS = 8
MIN_SUFFIX_WORDS = 2


@dataclass(frozen=True)
class TitleRule:
    fields: tuple[FieldPath, ...]
    clean: bool


TITLE_RULES: dict[str, TitleRule] = {
    "germany": TitleRule(fields=("programme_title", "title"), clean=True),
    "netherlands": TitleRule(fields=("name", "title", "programTitle"), clean=False),
    "sweden": TitleRule(fields=("title", "programme_title", "header_line"), clean=True),
    "finland": TitleRule(
        fields=("title", ("detail", "nimi", "en"), ("detail", "nimi", "fi")),
        clean=True,
    ),
}


def clean_title(raw: Any) -> str:
    title = as_text(raw).strip()
    if not title:
        return title

    match = _COLON_PAIR.match(title)
    if match:
        head = match.group(1).strip()
        tail = match.group(2).strip()
        if tail.lower() in head.lower():
            return head

    # Try the longest trailing window first so the most redundancy is removed.
    words = title.split()
    for k in range(min(MAX_SUFFIX_WORDS, len(words) // 2), MIN_SUFFIX_WORDS - 1, -1):
        suffix = " ".join(words[-k:])
        prefix = " ".join(words[:-k])
        if suffix.lower() in prefix.lower():
            return prefix.strip()

    return title


def resolve_title(country: str, record: Any) -> str:
    """
    Return the display title of `record` for `country` ("" if none).
    """
    rule = TITLE_RULES.get(country)
    if rule is None:
        return ""

    raw = first_present(record, rule.fields)
    if rule.clean:
        return clean_title(raw)
    return as_text(raw)
