"""
Data Models and Schemas.

This module defines all data structures used throughout ClipDeck:

- VideoRecord: normalized short video (stats, author, music)
- SearchPage: one page of results with an opaque pagination cursor
- QueueItem: a video plus its caption, schedule and interaction plan
- InteractionAction / InteractionPlanEntry: the four fixed engagement actions

Example:
    from clipdeck.models import VideoRecord

    video = VideoRecord(id="7300000000000000000", title="V60 pour over")
    payload = video.to_json_dict()  # camelCase keys
"""

from clipdeck.models.schemas import (
    CamelModel,
    Cursor,
    FetchState,
    InteractionAction,
    InteractionPlanEntry,
    QueueItem,
    QueueItemUpdate,
    SearchPage,
    VideoAuthor,
    VideoMusic,
    VideoRecord,
    VideoStats,
)

__all__ = [
    "CamelModel",
    "Cursor",
    "FetchState",
    "InteractionAction",
    "InteractionPlanEntry",
    "QueueItem",
    "QueueItemUpdate",
    "SearchPage",
    "VideoAuthor",
    "VideoMusic",
    "VideoRecord",
    "VideoStats",
]
