"""TikTok search via the tikwm API."""

from clipdeck.collectors.tiktok.client import TikwmSearchAdapter
from clipdeck.collectors.tiktok.normalizer import (
    transform_tikwm_author,
    transform_tikwm_music,
    transform_tikwm_search_data,
    transform_tikwm_video,
)

__all__ = [
    "TikwmSearchAdapter",
    "transform_tikwm_author",
    "transform_tikwm_music",
    "transform_tikwm_search_data",
    "transform_tikwm_video",
]
