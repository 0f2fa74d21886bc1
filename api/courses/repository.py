"""
Programme sources: one JSONL snapshot per supported country.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core import config, jsonl

COUNTRY_FILES: dict[str, str] = {
    "germany": "daad_programmes.jsonl",
    "netherlands": "nl_programs.jsonl",
    "sweden": "sweden_rendered_all.jsonl",
    "finland": "studyinfoFin_programmes.jsonl",
}


def source_path(country: str) -> Path:
    # Callers validate `country` first; an unknown one is a KeyError here.
    return config.data_dir() / COUNTRY_FILES[country]


async def load_programmes(country: str) -> list[Any]:
    return await jsonl.load_records(source_path(country))
