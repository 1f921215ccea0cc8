"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- settings: Settings with queue storage in a temp directory
- raw_tikwm_video: One video entry as tikwm returns it
- tikwm_payload: Factory for full tikwm search responses
- make_video: Factory for normalized VideoRecord instances
- tikwm_transport: Factory for httpx.MockTransport fakes of the upstream
"""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from clipdeck.config.settings import Settings
from clipdeck.models.schemas import VideoAuthor, VideoMusic, VideoRecord, VideoStats


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from the developer's environment."""
    return Settings(
        _env_file=None,
        queue_storage_dir=tmp_path / "store",
        app_env="development",
    )


@pytest.fixture
def raw_tikwm_video() -> dict:
    """Return a tikwm video entry with every field populated."""
    return {
        "video_id": "7301234567890123456",
        "title": "  Perfect V60 pour over ☕️  ",
        "region": "SA",
        "cover": "https://p16.tikwm.com/cover/7301234567890123456.jpeg",
        "play": "https://v16.tikwm.com/play/7301234567890123456.mp4",
        "duration": 42,
        "play_count": 120500,
        "digg_count": 9800,
        "comment_count": 210,
        "share_count": 77,
        "create_time": 1700000000,
        "author": {
            "id": "6800000000000000001",
            "unique_id": "beanlab",
            "nickname": "Bean Lab",
            "avatar": "https://p16.tikwm.com/avatar/beanlab.jpeg",
        },
        "music_info": {
            "title": "original sound",
            "author": "Bean Lab",
        },
    }


@pytest.fixture
def tikwm_payload(raw_tikwm_video) -> Callable[..., dict]:
    """Build a tikwm search response."""

    def _payload(
        videos: Optional[list] = None,
        cursor: Any = 12,
        has_more: Any = True,
        code: int = 0,
        msg: str = "success",
    ) -> dict:
        return {
            "code": code,
            "msg": msg,
            "data": {
                "cursor": cursor,
                "has_more": has_more,
                "videos": [raw_tikwm_video] if videos is None else videos,
            },
        }

    return _payload


@pytest.fixture
def make_video() -> Callable[..., VideoRecord]:
    """Build a normalized video with a given id."""

    def _make(video_id: str, title: str = "Cold brew at home", **overrides) -> VideoRecord:
        fields = {
            "id": video_id,
            "title": title,
            "region": "US",
            "cover_url": f"https://cdn.example/{video_id}.jpg",
            "play_url": f"https://cdn.example/{video_id}.mp4",
            "duration_seconds": 30,
            "stats": VideoStats(plays=1000, likes=100, comments=10, shares=1),
            "author": VideoAuthor(
                id="42", handle="brewer", display_name="The Brewer", avatar_url=""
            ),
            "music": VideoMusic(title="lofi", artist="dj"),
            "created_at_millis": 1_700_000_000_000,
        }
        fields.update(overrides)
        return VideoRecord(**fields)

    return _make


@pytest.fixture
def tikwm_transport() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport answering every request with one response.

    The returned transport records requests on its ``requests`` attribute.
    """

    def _transport(
        json_body: Any = None,
        status_code: int = 200,
        text: Optional[str] = None,
        exc: Optional[Exception] = None,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if exc is not None:
                raise exc
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, content=json.dumps(json_body).encode())

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return _transport
