"""
Pydantic schemas for scholarship endpoints.
"""

from __future__ import annotations

from core.schemas import PageResponse


class ScholarshipsResponse(PageResponse):
    pass
