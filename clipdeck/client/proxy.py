"""HTTP client for the search proxy route.

The controller only ever talks to the proxy, never to the upstream provider.
"""

from typing import Any, Optional, Protocol

import httpx
import pydantic
import structlog

from clipdeck.config.settings import Settings, get_settings
from clipdeck.core.exceptions import ProxyRequestError
from clipdeck.models.schemas import Cursor, SearchPage, VideoRecord

logger = structlog.get_logger(__name__)

SEARCH_PATH = "/api/tiktok/search"


class SearchBackend(Protocol):
    """Anything the controller can fetch search pages from."""

    async def search(
        self, keyword: str, count: int, cursor: Cursor = None
    ) -> SearchPage: ...


def parse_search_response(data: Any) -> SearchPage:
    """Parse a proxy success body, tolerating absent fields.

    Raises:
        ProxyRequestError: If the body is not an object or holds invalid videos.
    """
    if not isinstance(data, dict):
        raise ProxyRequestError("Search response is not a JSON object")

    try:
        videos = [VideoRecord.model_validate(video) for video in data.get("videos") or []]
        return SearchPage(
            videos=videos,
            has_more=bool(data.get("hasMore")),
            next_cursor=data.get("nextCursor"),
        )
    except pydantic.ValidationError as e:
        raise ProxyRequestError(f"Malformed search response: {e.error_count()} errors")


class ProxySearchClient:
    """Async client for ``GET /api/tiktok/search``.

    Example:
        async with ProxySearchClient() as client:
            page = await client.search("coffee", count=18)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = settings or get_settings()
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.proxy_base_url,
            timeout=httpx.Timeout(settings.upstream_timeout_seconds),
            transport=transport,
        )

    async def __aenter__(self) -> "ProxySearchClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def search(
        self, keyword: str, count: int, cursor: Cursor = None
    ) -> SearchPage:
        """Fetch one page from the proxy.

        Raises:
            ProxyRequestError: On transport failure, non-2xx status, or a malformed body.
        """
        params = {"keywords": keyword, "count": str(count)}
        if cursor is not None:
            params["cursor"] = str(cursor)

        try:
            response = await self._client.get(SEARCH_PATH, params=params)
        except httpx.RequestError as e:
            raise ProxyRequestError(f"Search proxy unreachable: {e}")

        if not response.is_success:
            try:
                message = response.json().get("error")
            except (ValueError, AttributeError):
                message = None
            raise ProxyRequestError(
                message or f"Search proxy returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            raise ProxyRequestError("Search response is not valid JSON")

        return parse_search_response(data)
