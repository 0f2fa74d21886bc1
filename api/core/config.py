"""
Environment-driven settings.

Every setting is read on call so tests (and operators) can change the
environment without reloading modules.
"""

from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_ALLOWED_ORIGIN = "http://localhost:5173"
DEFAULT_PAGE_SIZE = 20
DEFAULT_PORT = 8787


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return Path(raw).expanduser()


def data_dir() -> Path:
    """
    Directory holding the JSONL snapshots (programmes and scholarships).
    """
    return _env_path("CATALOGUE_DATA_DIR", PROJECT_ROOT / "private" / "data")


def static_dir() -> Path:
    return _env_path("CATALOGUE_STATIC_DIR", PROJECT_ROOT / "dist")


def allowed_origins() -> list[str]:
    raw = os.environ.get("ALLOWED_ORIGIN", "")
    origins = [part.strip() for part in raw.split(",") if part.strip()]
    return origins or [DEFAULT_ALLOWED_ORIGIN]


def default_page_size() -> int:
    return _env_int("DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE)


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)
