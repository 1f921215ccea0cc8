"""
Search Client.

- controller: SearchController state machine (idle, loading, error) with
  cursor pagination and stale-response protection
- proxy: ProxySearchClient for the ``/api/tiktok/search`` route

Example:
    from clipdeck.client import ProxySearchClient, SearchController

    async with ProxySearchClient() as client:
        controller = SearchController(client)
        await controller.start_search("coffee")
"""

from clipdeck.client.controller import SearchController
from clipdeck.client.proxy import ProxySearchClient, SearchBackend, parse_search_response

__all__ = [
    "ProxySearchClient",
    "SearchBackend",
    "SearchController",
    "parse_search_response",
]
