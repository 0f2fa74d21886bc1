"""
Line-delimited JSON (JSONL) source reading.

Sources are historical scraper snapshots and may contain broken lines. Parsing
is best-effort on purpose: a line that is not valid JSON is dropped and the
rest of the file is still served. Do not turn this into strict validation.

A file that cannot be read at all is a different matter: the `OSError`
propagates and the request fails.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Records end only at \n or \r\n. U+2028 and similar separators may appear raw
# inside JSON strings.
_LINE_BREAK = re.compile(r"\r?\n")


def parse_records(text: str, *, source: str = "<text>") -> list[Any]:
    """
    Parse JSONL text into a list of values, in file order.

    Blank lines are skipped. Lines that fail to parse are skipped.
    """
    records: list[Any] = []
    dropped = 0
    for line in _LINE_BREAK.split(text):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except ValueError:
            dropped += 1

    if dropped:
        logger.debug("jsonl_lines_dropped source=%s dropped=%s kept=%s", source, dropped, len(records))
    return records


def read_records(path: Path) -> list[Any]:
    # Undecodable bytes become U+FFFD instead of failing the whole file.
    text = path.read_text(encoding="utf-8", errors="replace")
    return parse_records(text, source=path.name)


async def load_records(path: Path) -> list[Any]:
    """
    Read and parse a JSONL file without blocking the event loop.
    """
    return await asyncio.to_thread(read_records, path)
