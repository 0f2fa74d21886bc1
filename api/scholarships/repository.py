"""
Scholarship sources: the main listing plus a details file with application steps.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from core import config, jsonl

MAIN_FILE = "scholarships_pk.jsonl"
DETAILS_FILE = "scholar_details.jsonl"


def main_path() -> Path:
    return config.data_dir() / MAIN_FILE


def details_path() -> Path:
    return config.data_dir() / DETAILS_FILE


async def load_sources() -> tuple[list[Any], list[Any]]:
    """
    Load `(main, details)` concurrently. Either read failing fails the call.
    """
    main, details = await asyncio.gather(
        jsonl.load_records(main_path()),
        jsonl.load_records(details_path()),
    )
    return main, details
