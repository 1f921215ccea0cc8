"""Unit tests for the search controller."""

import asyncio

import pytest

from clipdeck.client.controller import SearchController
from clipdeck.core.exceptions import ProxyRequestError
from clipdeck.messages import ARABIC
from clipdeck.models.schemas import FetchState, SearchPage


class ScriptedBackend:
    """Backend whose responses are resolved by the test, one future per call."""

    def __init__(self):
        self.calls = []

    async def search(self, keyword, count, cursor=None):
        future = asyncio.get_running_loop().create_future()
        self.calls.append({"keyword": keyword, "count": count, "cursor": cursor, "future": future})
        return await future


class StaticBackend:
    """Backend answering from a queue of pages or exceptions."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    async def search(self, keyword, count, cursor=None):
        self.calls.append((keyword, count, cursor))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class TestSearchController:
    """Test search, pagination and failure handling."""

    def test_initial_state(self):
        controller = SearchController(StaticBackend())

        assert controller.state is FetchState.IDLE
        assert controller.videos == []
        assert controller.has_more is False
        assert controller.cursor is None
        assert controller.active_keyword is None
        assert controller.error_message is None

    @pytest.mark.asyncio
    async def test_search_then_load_more(self, make_video):
        """Fresh search replaces, load_more appends and follows the cursor."""
        v1, v2, v3 = make_video("1"), make_video("2"), make_video("3")
        backend = StaticBackend(
            SearchPage(videos=[v1, v2], has_more=True, next_cursor="20"),
            SearchPage(videos=[v3], has_more=False, next_cursor=None),
        )
        controller = SearchController(backend)

        await controller.start_search("coffee")

        assert controller.state is FetchState.IDLE
        assert [v.id for v in controller.videos] == ["1", "2"]
        assert controller.has_more is True
        assert controller.cursor == "20"
        assert controller.active_keyword == "coffee"

        await controller.load_more()

        assert [v.id for v in controller.videos] == ["1", "2", "3"]
        assert controller.has_more is False
        assert backend.calls == [("coffee", 18, None), ("coffee", 18, "20")]

    @pytest.mark.asyncio
    async def test_new_search_replaces_results_and_drops_cursor(self, make_video):
        backend = StaticBackend(
            SearchPage(videos=[make_video("1")], has_more=True, next_cursor="20"),
            SearchPage(videos=[make_video("9")], has_more=False, next_cursor=None),
        )
        controller = SearchController(backend, page_size=12)

        await controller.start_search("coffee")
        await controller.start_search("tea")

        assert [v.id for v in controller.videos] == ["9"]
        assert controller.active_keyword == "tea"
        assert backend.calls[1] == ("tea", 12, None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("keyword", ["", "   ", "\t\n"])
    async def test_blank_keyword_is_noop(self, keyword):
        backend = StaticBackend()
        controller = SearchController(backend)

        await controller.start_search(keyword)

        assert backend.calls == []
        assert controller.state is FetchState.IDLE

    @pytest.mark.asyncio
    async def test_load_more_noop_without_more(self, make_video):
        backend = StaticBackend(SearchPage(videos=[make_video("1")], has_more=False))
        controller = SearchController(backend)

        await controller.start_search("coffee")
        await controller.load_more()

        assert len(backend.calls) == 1

    @pytest.mark.asyncio
    async def test_load_more_noop_while_loading(self, make_video):
        backend = ScriptedBackend()
        controller = SearchController(backend)

        first = asyncio.create_task(controller.start_search("coffee"))
        await asyncio.sleep(0)
        backend.calls[0]["future"].set_result(
            SearchPage(videos=[make_video("1")], has_more=True, next_cursor="20")
        )
        await first

        more = asyncio.create_task(controller.load_more())
        await asyncio.sleep(0)
        assert controller.is_loading

        await controller.load_more()
        assert len(backend.calls) == 2

        backend.calls[1]["future"].set_result(SearchPage(videos=[make_video("2")]))
        await more
        assert [v.id for v in controller.videos] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_results(self, make_video):
        backend = StaticBackend(
            SearchPage(videos=[make_video("1")], has_more=True, next_cursor="20"),
            ProxyRequestError("Search proxy returned HTTP 502", status_code=502),
        )
        controller = SearchController(backend)

        await controller.start_search("coffee")
        await controller.start_search("tea")

        assert controller.state is FetchState.ERROR
        assert controller.error_message
        assert [v.id for v in controller.videos] == ["1"]
        assert controller.active_keyword == "coffee"

    @pytest.mark.asyncio
    async def test_failure_message_is_localized(self):
        controller = SearchController(StaticBackend(RuntimeError("boom")), messages=ARABIC)

        await controller.start_search("قهوة")

        assert controller.error_message == ARABIC.search_failed

    @pytest.mark.asyncio
    async def test_next_search_clears_error(self, make_video):
        backend = StaticBackend(
            ProxyRequestError("down"),
            SearchPage(videos=[make_video("1")]),
        )
        controller = SearchController(backend)

        await controller.start_search("coffee")
        assert controller.state is FetchState.ERROR

        await controller.start_search("coffee")
        assert controller.state is FetchState.IDLE
        assert controller.error_message is None


class TestStaleResponses:
    """The latest request wins regardless of resolution order."""

    @pytest.mark.asyncio
    async def test_late_response_for_older_search_is_ignored(self, make_video):
        backend = ScriptedBackend()
        controller = SearchController(backend)

        search_a = asyncio.create_task(controller.start_search("a"))
        await asyncio.sleep(0)
        search_b = asyncio.create_task(controller.start_search("b"))
        await asyncio.sleep(0)

        backend.calls[1]["future"].set_result(
            SearchPage(videos=[make_video("b1")], has_more=True, next_cursor="b-next")
        )
        await search_b
        backend.calls[0]["future"].set_result(
            SearchPage(videos=[make_video("a1")], has_more=False, next_cursor="a-next")
        )
        await search_a

        assert [v.id for v in controller.videos] == ["b1"]
        assert controller.active_keyword == "b"
        assert controller.cursor == "b-next"
        assert controller.has_more is True
        assert controller.state is FetchState.IDLE

    @pytest.mark.asyncio
    async def test_late_failure_for_older_search_is_ignored(self, make_video):
        backend = ScriptedBackend()
        controller = SearchController(backend)

        search_a = asyncio.create_task(controller.start_search("a"))
        await asyncio.sleep(0)
        search_b = asyncio.create_task(controller.start_search("b"))
        await asyncio.sleep(0)

        backend.calls[1]["future"].set_result(SearchPage(videos=[make_video("b1")]))
        await search_b
        backend.calls[0]["future"].set_exception(ProxyRequestError("timeout"))
        await search_a

        assert controller.state is FetchState.IDLE
        assert controller.error_message is None
        assert [v.id for v in controller.videos] == ["b1"]

    @pytest.mark.asyncio
    async def test_search_supersedes_in_flight_load_more(self, make_video):
        backend = ScriptedBackend()
        controller = SearchController(backend)

        first = asyncio.create_task(controller.start_search("a"))
        await asyncio.sleep(0)
        backend.calls[0]["future"].set_result(
            SearchPage(videos=[make_video("a1")], has_more=True, next_cursor="2")
        )
        await first

        more = asyncio.create_task(controller.load_more())
        await asyncio.sleep(0)
        fresh = asyncio.create_task(controller.start_search("b"))
        await asyncio.sleep(0)

        backend.calls[2]["future"].set_result(SearchPage(videos=[make_video("b1")]))
        await fresh
        backend.calls[1]["future"].set_result(SearchPage(videos=[make_video("a2")]))
        await more

        assert [v.id for v in controller.videos] == ["b1"]
        assert controller.pending_keyword == "b"

    @pytest.mark.asyncio
    async def test_failed_search_keeps_cursor_for_active_keyword(self, make_video):
        backend = StaticBackend(
            SearchPage(videos=[make_video("1")], has_more=True, next_cursor="20"),
            ProxyRequestError("down"),
            SearchPage(videos=[make_video("2")], has_more=False),
        )
        controller = SearchController(backend)

        await controller.start_search("coffee")
        await controller.start_search("tea")
        await controller.load_more()

        assert backend.calls[2] == ("coffee", 18, "20")
        assert [v.id for v in controller.videos] == ["1", "2"]
