"""Integration test configuration.

Drives the FastAPI app in-process through httpx.ASGITransport, with the
tikwm upstream replaced by an httpx.MockTransport.
"""

import httpx
import pytest

from clipdeck.api.dependencies import get_search_adapter
from clipdeck.api.main import create_app
from clipdeck.collectors.tiktok import TikwmSearchAdapter
from clipdeck.config.settings import get_settings


@pytest.fixture
def build_app(settings):
    """Build an app whose adapter talks to the given upstream transport."""

    def _build(upstream: httpx.MockTransport):
        app = create_app(settings)
        adapter = TikwmSearchAdapter(settings, transport=upstream)
        app.dependency_overrides[get_search_adapter] = lambda: adapter
        app.dependency_overrides[get_settings] = lambda: settings
        return app

    return _build


@pytest.fixture
def api_client():
    """Open an httpx client against an app without a network."""

    def _client(app) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app),
            base_url="http://testserver",
        )

    return _client
