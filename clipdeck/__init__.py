"""
ClipDeck - TikTok search and repost planning dashboard backend.

This package contains the core modules for the ClipDeck system:
- collectors: Upstream search adapters (tikwm TikTok search) and normalizers
- api: FastAPI application and the search proxy route
- client: Search controller that drives paginated search against the proxy
- queue: Interaction plan queue with blob store persistence
- config: Pydantic settings and configuration
- models: VideoRecord, SearchPage and QueueItem schemas
- cli: Terminal presentation for search results and the plan queue
"""

__version__ = "0.1.0"
