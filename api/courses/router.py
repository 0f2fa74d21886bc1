"""
Course catalogue API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from core import config
from core.pagination import parse_int
from core.schemas import ErrorResponse

from . import schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/api/courses",
    response_model=schemas.CoursesResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def list_courses(
    country: str | None = Query(default=None),
    q: str = Query(default=""),
    page: str | None = Query(default=None),
    page_size: str | None = Query(default=None, alias="pageSize"),
):
    # page/pageSize arrive as raw strings: bad values are coerced, not rejected.
    try:
        resolved_country, result = await service.search_courses(
            country,
            q,
            page=parse_int(page, 1),
            page_size=parse_int(page_size, config.default_page_size()),
        )
    except service.UnsupportedCountryError:
        return JSONResponse(status_code=400, content={"error": "Unsupported country"})
    except Exception:
        logger.exception("courses_query_failed country=%s", country)
        return JSONResponse(status_code=500, content={"error": "Server error"})

    return schemas.CoursesResponse(
        data=result.data,
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        country=resolved_country,
    )
