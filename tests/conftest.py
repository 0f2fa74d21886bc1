from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def _write_jsonl(path: Path, rows: list[Any]) -> Path:
    path.write_text("\n".join(json.dumps(row) for row in rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "data"
    directory.mkdir()
    monkeypatch.setenv("CATALOGUE_DATA_DIR", str(directory))
    monkeypatch.setenv("CATALOGUE_STATIC_DIR", str(tmp_path / "no-dist"))
    monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
    return directory


@pytest.fixture
def write_jsonl(data_dir: Path) -> Callable[[str, list[Any]], Path]:
    def _write(filename: str, rows: list[Any]) -> Path:
        return _write_jsonl(data_dir / filename, rows)

    return _write


@pytest.fixture
def client(data_dir: Path) -> TestClient:
    from main import create_app

    return TestClient(create_app())
