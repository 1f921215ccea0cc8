"""Default interaction plans and caption suggestions."""

from clipdeck.messages import Messages
from clipdeck.models.schemas import (
    InteractionAction,
    InteractionPlanEntry,
    QueueItem,
    VideoRecord,
)


def default_interactions(messages: Messages) -> list[InteractionPlanEntry]:
    """Build the four default entries: like, comment, repost on; follow off."""
    return [
        InteractionPlanEntry(action=InteractionAction.LIKE, enabled=True),
        InteractionPlanEntry(
            action=InteractionAction.COMMENT,
            enabled=True,
            details=messages.comment_details,
        ),
        InteractionPlanEntry(
            action=InteractionAction.REPOST,
            enabled=True,
            details=messages.repost_details,
        ),
        InteractionPlanEntry(
            action=InteractionAction.FOLLOW,
            enabled=False,
            details=messages.follow_details,
        ),
    ]


def create_default_plan(video: VideoRecord, messages: Messages) -> QueueItem:
    """Turn a video into a queue item with the default plan."""
    return QueueItem(
        **video.model_dump(include=set(VideoRecord.model_fields)),
        interactions=default_interactions(messages),
        caption=messages.caption_template.format(title=video.title.strip()),
        notes="",
        scheduled_for="",
    )


def suggest_caption(item: QueueItem, messages: Messages) -> str:
    """Suggest a caption crediting the video's author.

    Uses the author's handle, or the display name when the handle is empty.
    """
    handle = item.author.handle or item.author.display_name
    return " ".join(line.format(handle=handle) for line in messages.suggestion_lines)
