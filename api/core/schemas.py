"""
Response schemas shared by the catalogue endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: list[Any]
    total: int
    page: int
    page_size: int = Field(..., alias="pageSize")


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    ok: bool = True
