"""
Upstream Search Adapters.

This module contains adapters for searching external short-video providers:

- tiktok: tikwm.com TikTok keyword search

Adapters follow a common interface (BaseSearchAdapter):
- search(): Fetch one page from the provider and normalize it to a SearchPage
- aclose(): Release the HTTP client

Example:
    from clipdeck.collectors import TikwmSearchAdapter

    async with TikwmSearchAdapter() as adapter:
        page = await adapter.search("coffee", count=12)
        for video in page.videos:
            print(video.id, video.author.handle)
"""

from clipdeck.collectors.base import BaseSearchAdapter
from clipdeck.collectors.tiktok import TikwmSearchAdapter

__all__ = [
    "BaseSearchAdapter",
    "TikwmSearchAdapter",
]
