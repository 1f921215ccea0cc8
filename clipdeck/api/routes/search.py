"""TikTok search proxy endpoint.

Forwards one keyword search to the upstream adapter and answers with a
normalized ``{videos, hasMore, nextCursor}`` envelope. Upstream failures are
mapped to ``{"error": ...}`` bodies; internal detail never reaches the caller.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from clipdeck.api.dependencies import get_search_adapter
from clipdeck.api.models import (
    INVALID_COUNT_MESSAGE,
    MISSING_KEYWORDS_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    UPSTREAM_REJECTED_FALLBACK_MESSAGE,
    UPSTREAM_UNREACHABLE_MESSAGE,
    ErrorResponse,
)
from clipdeck.collectors.base import BaseSearchAdapter
from clipdeck.config.settings import Settings, get_settings
from clipdeck.core.exceptions import (
    SearchValidationError,
    UpstreamRejectedError,
    UpstreamUnreachableError,
)
from clipdeck.models.schemas import SearchPage

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/tiktok", tags=["Search"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def parse_count(raw: Optional[str], default: int) -> int:
    """Parse the string-encoded ``count`` parameter.

    Raises:
        SearchValidationError: If the value is not a positive integer.
    """
    if raw is None or not raw.strip():
        return default
    try:
        count = int(raw.strip())
    except ValueError:
        raise SearchValidationError(INVALID_COUNT_MESSAGE, field="count")
    if count <= 0:
        raise SearchValidationError(INVALID_COUNT_MESSAGE, field="count")
    return count


@router.get(
    "/search",
    response_model=SearchPage,
    response_model_by_alias=True,
    summary="Search TikTok videos",
    description="Search TikTok by keyword through the upstream provider.",
    responses={
        400: {"model": ErrorResponse, "description": "Missing keywords or invalid count"},
        502: {"model": ErrorResponse, "description": "Upstream rejected the search"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
)
async def search_videos(
    keywords: Optional[str] = Query(None, description="Search keywords"),
    count: Optional[str] = Query(None, description="Number of videos to return"),
    cursor: Optional[str] = Query(None, description="Opaque cursor from the previous page"),
    adapter: BaseSearchAdapter = Depends(get_search_adapter),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Search TikTok videos by keyword.

    **Parameters:**
    - **keywords**: Search keywords (required)
    - **count**: Page size, defaults to the configured search count
    - **cursor**: Cursor returned by the previous page, defaults to the provider start value
    """
    if keywords is None or not keywords.strip():
        return _error(status.HTTP_400_BAD_REQUEST, MISSING_KEYWORDS_MESSAGE)

    try:
        page_size = parse_count(count, settings.search_default_count)
    except SearchValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, e.message)

    page_cursor = cursor if cursor else settings.search_start_cursor

    try:
        page = await adapter.search(keywords, page_size, page_cursor)

    except SearchValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, e.message)

    except UpstreamUnreachableError as e:
        logger.warning(
            "search_proxy_upstream_unreachable",
            keywords=keywords,
            status_code=e.status_code,
        )
        return _error(e.status_code, UPSTREAM_UNREACHABLE_MESSAGE)

    except UpstreamRejectedError as e:
        logger.warning(
            "search_proxy_upstream_rejected",
            keywords=keywords,
            upstream_message=e.upstream_message,
        )
        return _error(
            status.HTTP_502_BAD_GATEWAY,
            e.upstream_message or UPSTREAM_REJECTED_FALLBACK_MESSAGE,
        )

    except Exception as e:
        logger.error(
            "search_unexpected_error",
            keywords=keywords,
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE)

    logger.info(
        "search_proxy_success",
        keywords=keywords,
        videos=len(page.videos),
        has_more=page.has_more,
    )
    return JSONResponse(content=page.to_json_dict())
