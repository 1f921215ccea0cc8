"""tikwm search adapter for TikTok keyword search.

Issues one GET per page against the public tikwm feed search endpoint and
normalizes the payload to a SearchPage.

API shape:
    GET https://www.tikwm.com/api/feed/search?keywords=...&count=...&cursor=...
    -> {"code": 0, "msg": "success", "data": {"cursor": ..., "has_more": ..., "videos": [...]}}
"""

from typing import Any, Optional

import httpx
import structlog

from clipdeck.collectors.base import BaseSearchAdapter
from clipdeck.collectors.tiktok.normalizer import transform_tikwm_search_data
from clipdeck.config.settings import Settings, get_settings
from clipdeck.core.exceptions import (
    SearchValidationError,
    UpstreamRejectedError,
    UpstreamUnreachableError,
)
from clipdeck.models.schemas import SearchPage

logger = structlog.get_logger(__name__)

PROVIDER = "tikwm"


class TikwmSearchAdapter(BaseSearchAdapter):
    """Async adapter for the tikwm TikTok search API.

    tikwm only answers requests that look like they come from its own web
    page, so every request carries a fixed browser User-Agent and Referer.
    Callers cannot change these headers.

    There are no retries and no caching: each ``search`` call is exactly one
    upstream request.

    Example:
        async with TikwmSearchAdapter() as adapter:
            page = await adapter.search("coffee", count=12)
            more = await adapter.search("coffee", count=12, cursor=page.next_cursor)
    """

    provider = PROVIDER

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the adapter.

        Args:
            settings: Application settings. Loaded from the environment if omitted.
            transport: Optional httpx transport, used by tests to fake the upstream.
        """
        self._settings = settings or get_settings()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def request_headers(self) -> dict[str, str]:
        """Header set the upstream requires on every call."""
        return {
            "User-Agent": self._settings.upstream_user_agent,
            "Accept": "application/json, text/plain, */*",
            "Referer": self._settings.upstream_referer,
        }

    async def __aenter__(self) -> "TikwmSearchAdapter":
        await self._ensure_client()
        return self

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._settings.upstream_timeout_seconds),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def build_params(
        self, keyword: str, count: int, cursor: Optional[str] = None
    ) -> dict[str, str]:
        """Build upstream query parameters, defaulting the cursor to the start value."""
        return {
            "keywords": keyword,
            "count": str(count),
            "cursor": self._settings.search_start_cursor if cursor is None else str(cursor),
        }

    async def search(
        self,
        keyword: str,
        count: int,
        cursor: Optional[str] = None,
    ) -> SearchPage:
        """Search TikTok videos by keyword.

        Args:
            keyword: Search keyword, must not be blank.
            count: Number of videos to request, must be positive.
            cursor: Opaque cursor from a previous page.

        Returns:
            Normalized search page.

        Raises:
            SearchValidationError: On blank keyword or non-positive count.
            UpstreamUnreachableError: When tikwm answers with a non-2xx status.
            UpstreamRejectedError: When tikwm reports a non-zero code or no data.
            httpx.RequestError: On transport failure.
            ValueError, TypeError: On a payload that is not the expected JSON shape.
        """
        if not keyword or not keyword.strip():
            raise SearchValidationError("keyword must not be blank", field="keywords")
        if count <= 0:
            raise SearchValidationError("count must be a positive integer", field="count")

        client = await self._ensure_client()
        params = self.build_params(keyword, count, cursor)

        logger.debug(
            "search_upstream_request",
            provider=PROVIDER,
            keyword=keyword,
            count=count,
            cursor=params["cursor"],
        )

        response = await client.get(
            self._settings.tikwm_search_url,
            params=params,
            headers=self.request_headers,
        )

        if not response.is_success:
            logger.warning(
                "search_upstream_unreachable",
                provider=PROVIDER,
                status_code=response.status_code,
            )
            raise UpstreamUnreachableError(PROVIDER, response.status_code)

        payload: Any = response.json()
        if not isinstance(payload, dict):
            raise TypeError(f"Expected JSON object, got {type(payload).__name__}")

        code = payload.get("code")
        data = payload.get("data")
        if code != 0 or data is None:
            logger.warning(
                "search_upstream_rejected",
                provider=PROVIDER,
                code=code,
                msg=payload.get("msg"),
            )
            raise UpstreamRejectedError(PROVIDER, payload.get("msg"), code=code)

        if not isinstance(data, dict):
            raise TypeError(f"Expected data object, got {type(data).__name__}")

        page = transform_tikwm_search_data(data)

        logger.info(
            "search_upstream_success",
            provider=PROVIDER,
            keyword=keyword,
            videos=len(page.videos),
            has_more=page.has_more,
        )
        return page
