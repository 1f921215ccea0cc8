"""Paginated search controller.

Tracks the active keyword, the accumulated result list, the pagination cursor
and the fetch state for the dashboard. All state changes go through
``start_search`` and ``load_more``.

Overlapping requests are allowed. Each request is tagged with a sequence
number and only the response to the most recent request is applied; older
responses, successful or failed, are dropped when they arrive.
"""

from typing import Optional

import structlog

from clipdeck.client.proxy import SearchBackend
from clipdeck.messages import Messages, get_messages
from clipdeck.models.schemas import Cursor, FetchState, VideoRecord

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_SIZE = 18


class SearchController:
    """Drive keyword search and pagination against the search proxy.

    Example:
        async with ProxySearchClient() as client:
            controller = SearchController(client)
            await controller.start_search("coffee")
            if controller.has_more:
                await controller.load_more()
            for video in controller.videos:
                print(video.title)
    """

    def __init__(
        self,
        backend: SearchBackend,
        page_size: int = DEFAULT_PAGE_SIZE,
        messages: Optional[Messages] = None,
    ):
        """Initialize the controller in the ``idle`` state.

        Args:
            backend: Search source, normally a ProxySearchClient.
            page_size: Videos requested per page.
            messages: Localized user-facing strings.
        """
        self._backend = backend
        self._page_size = page_size
        self._messages = messages or get_messages()

        self._state = FetchState.IDLE
        self._videos: list[VideoRecord] = []
        self._active_keyword: Optional[str] = None
        self._pending_keyword: Optional[str] = None
        self._cursor: Cursor = None
        self._has_more = False
        self._error_message: Optional[str] = None
        self._request_seq = 0

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def videos(self) -> list[VideoRecord]:
        """Accumulated results, oldest page first."""
        return list(self._videos)

    @property
    def active_keyword(self) -> Optional[str]:
        """Keyword whose results are currently displayed."""
        return self._active_keyword

    @property
    def pending_keyword(self) -> Optional[str]:
        """Keyword of the most recent request, in flight or settled."""
        return self._pending_keyword

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def has_more(self) -> bool:
        return self._has_more

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def is_loading(self) -> bool:
        return self._state is FetchState.LOADING

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def start_search(self, keyword: str) -> None:
        """Run a fresh search, replacing the current results on success.

        Blank keywords are ignored. A search started while another request is
        in flight supersedes it.
        """
        if not keyword or not keyword.strip():
            return

        await self._fetch(keyword, cursor=None, append=False)

    async def load_more(self) -> None:
        """Fetch the next page for the active keyword and append it.

        No-op when there is nothing more to load or a request is in flight.
        """
        if not self._has_more or self.is_loading or self._active_keyword is None:
            return

        await self._fetch(self._active_keyword, cursor=self._cursor, append=True)

    async def _fetch(self, keyword: str, cursor: Cursor, append: bool) -> None:
        self._request_seq += 1
        request_id = self._request_seq
        self._pending_keyword = keyword
        self._state = FetchState.LOADING
        self._error_message = None

        logger.debug(
            "search_request_started",
            request_id=request_id,
            keyword=keyword,
            append=append,
        )

        try:
            page = await self._backend.search(keyword, self._page_size, cursor)
        except Exception as e:
            if request_id != self._request_seq:
                logger.debug("search_stale_failure_ignored", request_id=request_id)
                return
            logger.error(
                "search_request_failed",
                request_id=request_id,
                keyword=keyword,
                error=str(e),
                error_type=type(e).__name__,
            )
            self._state = FetchState.ERROR
            self._error_message = self._messages.search_failed
            return

        if request_id != self._request_seq:
            logger.debug("search_stale_response_ignored", request_id=request_id)
            return

        self._videos = [*self._videos, *page.videos] if append else list(page.videos)
        self._cursor = page.next_cursor
        self._has_more = page.has_more
        self._active_keyword = keyword
        self._state = FetchState.IDLE

        logger.info(
            "search_request_applied",
            request_id=request_id,
            keyword=keyword,
            received=len(page.videos),
            total=len(self._videos),
            has_more=page.has_more,
        )
