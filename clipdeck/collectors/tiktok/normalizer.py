"""tikwm data normalizer transformers.

Provides total functions that map raw tikwm search payloads to the
provider-agnostic VideoRecord and SearchPage schemas. This is the only
module that knows tikwm's raw field names.

Defaults per field:
    strings (ids, title, region, urls, author, music) -> ""
    counters (plays, likes, comments, shares, duration) -> 0, clamped at 0
    created_at_millis -> create_time * 1000, 0 when absent
    has_more -> False, next_cursor -> None
"""

from typing import Any

from clipdeck.models.schemas import (
    SearchPage,
    VideoAuthor,
    VideoMusic,
    VideoRecord,
    VideoStats,
)


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_count(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return max(0, int(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _as_mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _epoch_millis(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        if isinstance(value, int):
            return value * 1000
        # Fractional seconds keep their milliseconds
        return round(float(value) * 1000)
    except (TypeError, ValueError, OverflowError):
        return 0


def transform_tikwm_author(raw: Any) -> VideoAuthor:
    """Transform a tikwm ``author`` object. Missing or null gives all-empty fields."""
    author = _as_mapping(raw)
    return VideoAuthor(
        id=_as_str(author.get("id")),
        handle=_as_str(author.get("unique_id")),
        display_name=_as_str(author.get("nickname")),
        avatar_url=_as_str(author.get("avatar")),
    )


def transform_tikwm_music(raw: Any) -> VideoMusic:
    """Transform a tikwm ``music_info`` object."""
    music = _as_mapping(raw)
    return VideoMusic(
        title=_as_str(music.get("title")),
        artist=_as_str(music.get("author")),
    )


def transform_tikwm_video(raw: dict) -> VideoRecord:
    """Transform one tikwm video entry to the VideoRecord schema.

    Args:
        raw: Raw video dictionary from the tikwm search response

    Returns:
        Normalized VideoRecord instance

    Raises:
        TypeError: If the entry is not an object.
    """
    if not isinstance(raw, dict):
        raise TypeError(f"Expected video object, got {type(raw).__name__}")

    return VideoRecord(
        id=_as_str(raw.get("video_id")),
        title=_as_str(raw.get("title")),
        region=_as_str(raw.get("region")),
        cover_url=_as_str(raw.get("cover")),
        play_url=_as_str(raw.get("play")),
        duration_seconds=_as_count(raw.get("duration")),
        stats=VideoStats(
            plays=_as_count(raw.get("play_count")),
            likes=_as_count(raw.get("digg_count")),
            comments=_as_count(raw.get("comment_count")),
            shares=_as_count(raw.get("share_count")),
        ),
        author=transform_tikwm_author(raw.get("author")),
        music=transform_tikwm_music(raw.get("music_info")),
        created_at_millis=_epoch_millis(raw.get("create_time")),
    )


def transform_tikwm_search_data(data: dict) -> SearchPage:
    """Transform the ``data`` object of a successful tikwm search response.

    Raises:
        TypeError: If ``videos`` is present but not a list.
    """
    raw_videos = data.get("videos")
    if raw_videos is None:
        raw_videos = []
    if not isinstance(raw_videos, list):
        raise TypeError(f"Expected videos list, got {type(raw_videos).__name__}")

    has_more = data.get("has_more")

    return SearchPage(
        videos=[transform_tikwm_video(video) for video in raw_videos],
        has_more=bool(has_more) if has_more is not None else False,
        next_cursor=data.get("cursor"),
    )
