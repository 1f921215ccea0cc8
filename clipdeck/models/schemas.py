"""Pydantic models for ClipDeck core entities.

Attribute names are snake_case in Python. The JSON form (proxy responses and
the persisted queue) uses the camelCase aliases, so dump with
``model_dump(mode="json", by_alias=True)``.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


Cursor = Union[str, int, float, None]


class InteractionAction(str, Enum):
    """Engagement actions a plan can enable."""
    LIKE = "like"
    COMMENT = "comment"
    FOLLOW = "follow"
    REPOST = "repost"


class FetchState(str, Enum):
    """Search controller states."""
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


# =============================================================================
# Base Models
# =============================================================================


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_json_dict(self) -> dict:
        """Dump to the camelCase JSON shape used on the wire and in storage."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Video Models
# =============================================================================


class VideoStats(CamelModel):
    """Engagement counters of a video."""

    plays: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)


class VideoAuthor(CamelModel):
    """Creator of a video."""

    id: str = ""
    handle: str = ""
    display_name: str = ""
    avatar_url: str = ""


class VideoMusic(CamelModel):
    """Soundtrack of a video."""

    title: str = ""
    artist: str = ""


class VideoRecord(CamelModel):
    """Provider-agnostic video record.

    Every field has a defined default; normalizers never leave a leaf unset.
    """

    id: str = Field(..., description="Video ID, stable across requests")
    title: str = ""
    region: str = ""
    cover_url: str = ""
    play_url: str = ""
    duration_seconds: int = Field(default=0, ge=0)
    stats: VideoStats = Field(default_factory=VideoStats)
    author: VideoAuthor = Field(default_factory=VideoAuthor)
    music: VideoMusic = Field(default_factory=VideoMusic)
    created_at_millis: int = Field(default=0, description="Epoch milliseconds")


class SearchPage(CamelModel):
    """One page of search results.

    ``next_cursor`` is the upstream pagination token, forwarded verbatim.
    """

    videos: list[VideoRecord] = Field(default_factory=list)
    has_more: bool = False
    next_cursor: Cursor = None


# =============================================================================
# Queue Models
# =============================================================================


class InteractionPlanEntry(CamelModel):
    """Planned engagement for one action kind."""

    action: InteractionAction
    enabled: bool
    details: Optional[str] = None


class QueueItem(VideoRecord):
    """A video plus the user's repost and interaction plan."""

    scheduled_for: Optional[str] = Field(
        default=None, description="ISO local datetime, e.g. 2024-05-01T09:30"
    )
    caption: Optional[str] = None
    notes: Optional[str] = None
    interactions: list[InteractionPlanEntry]

    @field_validator("interactions")
    @classmethod
    def one_entry_per_action(
        cls, value: list[InteractionPlanEntry]
    ) -> list[InteractionPlanEntry]:
        actions = [entry.action for entry in value]
        if len(actions) != len(InteractionAction) or set(actions) != set(InteractionAction):
            raise ValueError("interactions must hold exactly one entry per action")
        return value

    def interaction(self, action: InteractionAction) -> Optional[InteractionPlanEntry]:
        """Return the entry for ``action`` if present."""
        for entry in self.interactions:
            if entry.action == action:
                return entry
        return None


class QueueItemUpdate(BaseModel):
    """Editable plan fields. Unset fields are left untouched on merge."""

    model_config = ConfigDict(extra="forbid")

    scheduled_for: Optional[str] = None
    caption: Optional[str] = None
    notes: Optional[str] = None
