"""
Pydantic schemas for course endpoints.
"""

from __future__ import annotations

from core.schemas import PageResponse


class CoursesResponse(PageResponse):
    country: str
