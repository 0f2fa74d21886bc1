"""
Scholarship catalogue API endpoints.
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
    "/api/scholarships",
    response_model=schemas.ScholarshipsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_scholarships(
    q: str = Query(default=""),
    country: str = Query(default=""),
    level: str = Query(default=""),
    deadline: str = Query(default="", description="YYYY-MM-DD"),
    page: str | None = Query(default=None),
    page_size: str | None = Query(default=None, alias="pageSize"),
):
    filters = service.ScholarshipFilters.from_params(q=q, country=country, level=level, deadline=deadline)
    try:
        result = await service.search_scholarships(
            filters,
            page=parse_int(page, 1),
            page_size=parse_int(page_size, config.default_page_size()),
        )
    except Exception:
        logger.exception("scholarships_query_failed filters=%s", filters)
        return JSONResponse(status_code=500, content={"error": "Server error"})

    return schemas.ScholarshipsResponse(
        data=result.data,
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )
