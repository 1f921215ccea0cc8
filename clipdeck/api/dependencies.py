"""FastAPI dependency injection providers.

This module provides dependency functions for injecting services into route handlers.
"""

from typing import Optional

from clipdeck.collectors.base import BaseSearchAdapter
from clipdeck.collectors.tiktok import TikwmSearchAdapter
from clipdeck.config.settings import get_settings

# Global instance for singleton pattern
_search_adapter: Optional[BaseSearchAdapter] = None


def get_search_adapter() -> BaseSearchAdapter:
    """
    Get the upstream search adapter.

    Uses a singleton pattern so the HTTP connection pool is shared
    across requests.

    Returns:
        Search adapter instance.
    """
    global _search_adapter

    if _search_adapter is None:
        _search_adapter = TikwmSearchAdapter(settings=get_settings())

    return _search_adapter


def set_search_adapter(adapter: BaseSearchAdapter) -> None:
    """
    Set the global search adapter instance.

    Args:
        adapter: Adapter to serve search requests with.
    """
    global _search_adapter
    _search_adapter = adapter


async def reset_dependencies() -> None:
    """
    Close and reset all global dependency instances.

    Called on application shutdown and between tests.
    """
    global _search_adapter
    if _search_adapter is not None:
        await _search_adapter.aclose()
    _search_adapter = None
