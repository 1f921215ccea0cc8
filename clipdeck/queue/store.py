"""Plan queue store.

Holds the ordered list of QueueItem records the user is planning and mirrors
it to a blob store slot after every mutation.

Persistence is best effort: when the blob store fails, the failure is logged
and the in-memory change stands. Loading never raises; a missing, unreadable,
malformed or non-array slot yields an empty queue.
"""

import json
from typing import Iterator, Optional, Sequence, Union

import pydantic
import structlog

from clipdeck.messages import Messages, get_messages
from clipdeck.models.schemas import (
    InteractionAction,
    QueueItem,
    QueueItemUpdate,
    VideoRecord,
)
from clipdeck.queue.blob_store import BlobStore
from clipdeck.queue.plans import create_default_plan, suggest_caption

logger = structlog.get_logger(__name__)

DEFAULT_SLOT = "tiktok-queue"


# =============================================================================
# Serialization
# =============================================================================


def serialize_queue(items: Sequence[QueueItem]) -> str:
    """Serialize queue items to the JSON array stored in the blob slot."""
    return json.dumps([item.to_json_dict() for item in items], ensure_ascii=False)


def deserialize_queue(blob: Optional[str]) -> list[QueueItem]:
    """Parse a stored blob back into queue items.

    Returns an empty list for a missing, malformed or non-array blob. Entries
    that fail validation are skipped, and only the first entry per id is kept.
    """
    if not blob:
        return []

    try:
        raw = json.loads(blob)
    except ValueError as e:
        logger.warning("queue_blob_malformed", error=str(e))
        return []

    if not isinstance(raw, list):
        logger.warning("queue_blob_not_array", blob_type=type(raw).__name__)
        return []

    items: list[QueueItem] = []
    seen: set[str] = set()
    for index, entry in enumerate(raw):
        try:
            item = QueueItem.model_validate(entry)
        except pydantic.ValidationError as e:
            logger.warning("queue_entry_invalid", index=index, errors=e.error_count())
            continue
        if item.id in seen:
            continue
        seen.add(item.id)
        items.append(item)
    return items


def sort_by_schedule(items: Sequence[QueueItem]) -> list[QueueItem]:
    """Order items by ``scheduled_for``, unscheduled first.

    Stable, and returns a new list.
    """
    return sorted(items, key=lambda item: item.scheduled_for or "")


# =============================================================================
# Queue Store
# =============================================================================


class QueueStore:
    """Ordered, id-unique collection of interaction plans.

    New items are prepended, so store order is most recently added first.

    Example:
        store = QueueStore(JsonFileBlobStore(".clipdeck"))
        item = store.add(video)
        store.update_fields(item.id, caption="New caption", scheduled_for="2024-05-01T09:30")
        store.toggle_interaction(item.id, InteractionAction.FOLLOW)
        for planned in store.sorted_by_schedule():
            print(planned.scheduled_for, planned.title)
    """

    def __init__(
        self,
        blob_store: BlobStore,
        slot: str = DEFAULT_SLOT,
        messages: Optional[Messages] = None,
    ):
        self._blob_store = blob_store
        self._slot = slot
        self._messages = messages or get_messages()
        self._items: list[QueueItem] = self._load()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _load(self) -> list[QueueItem]:
        try:
            blob = self._blob_store.get(self._slot)
        except Exception as e:
            logger.warning(
                "queue_load_failed",
                slot=self._slot,
                error=str(e),
                error_type=type(e).__name__,
            )
            return []

        items = deserialize_queue(blob)
        logger.debug("queue_loaded", slot=self._slot, items=len(items))
        return items

    def _persist(self) -> None:
        try:
            self._blob_store.set(self._slot, serialize_queue(self._items))
        except Exception as e:
            logger.warning(
                "queue_persist_failed",
                slot=self._slot,
                error=str(e),
                error_type=type(e).__name__,
            )

    # -------------------------------------------------------------------------
    # Read API
    # -------------------------------------------------------------------------

    @property
    def items(self) -> list[QueueItem]:
        """Copies of the queue items in store order."""
        return [item.model_copy(deep=True) for item in self._items]

    def sorted_by_schedule(self) -> list[QueueItem]:
        """Copies of the queue items ordered for display."""
        return sort_by_schedule(self.items)

    def get(self, video_id: str) -> Optional[QueueItem]:
        index = self._index_of(video_id)
        if index is None:
            return None
        return self._items[index].model_copy(deep=True)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, video_id: object) -> bool:
        return any(item.id == video_id for item in self._items)

    def __iter__(self) -> Iterator[QueueItem]:
        return iter(self.items)

    def _index_of(self, video_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == video_id:
                return index
        return None

    def _replace(self, index: int, item: QueueItem) -> QueueItem:
        self._items = [*self._items[:index], item, *self._items[index + 1:]]
        self._persist()
        return item.model_copy(deep=True)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, video: VideoRecord) -> QueueItem:
        """Queue ``video`` with the default plan.

        If the video is already queued, the existing item is returned unchanged.
        """
        index = self._index_of(video.id)
        if index is not None:
            logger.debug("queue_item_already_present", video_id=video.id)
            return self._items[index].model_copy(deep=True)

        item = create_default_plan(video, self._messages)
        self._items = [item, *self._items]
        self._persist()

        logger.info("queue_item_added", video_id=video.id, queue_size=len(self._items))
        return item.model_copy(deep=True)

    def remove(self, video_id: str) -> bool:
        """Remove the item with ``video_id``. Returns False if it was not queued."""
        index = self._index_of(video_id)
        if index is None:
            return False

        self._items = [*self._items[:index], *self._items[index + 1:]]
        self._persist()

        logger.info("queue_item_removed", video_id=video_id, queue_size=len(self._items))
        return True

    def update_fields(self, video_id: str, **fields: Optional[str]) -> Optional[QueueItem]:
        """Shallow-merge ``scheduled_for``, ``caption`` and ``notes`` into an item.

        Raises:
            ValueError: If a field other than the three editable ones is given.
        """
        updates = QueueItemUpdate(**fields).model_dump(exclude_unset=True)

        index = self._index_of(video_id)
        if index is None:
            return None

        updated = self._items[index].model_copy(update=updates)
        logger.debug("queue_item_updated", video_id=video_id, fields=sorted(updates))
        return self._replace(index, updated)

    def toggle_interaction(
        self, video_id: str, action: Union[InteractionAction, str]
    ) -> Optional[QueueItem]:
        """Flip ``enabled`` on one action entry of an item."""
        return self._update_interaction(
            video_id,
            action,
            lambda entry: entry.model_copy(update={"enabled": not entry.enabled}),
        )

    def set_interaction_details(
        self, video_id: str, action: Union[InteractionAction, str], details: str
    ) -> Optional[QueueItem]:
        """Set the free-text details of one action entry of an item."""
        return self._update_interaction(
            video_id,
            action,
            lambda entry: entry.model_copy(update={"details": details}),
        )

    def apply_suggested_caption(self, video_id: str) -> Optional[QueueItem]:
        """Replace an item's caption with the suggested caption."""
        index = self._index_of(video_id)
        if index is None:
            return None

        caption = suggest_caption(self._items[index], self._messages)
        return self._replace(index, self._items[index].model_copy(update={"caption": caption}))

    def _update_interaction(self, video_id, action, change) -> Optional[QueueItem]:
        try:
            action = InteractionAction(action)
        except ValueError:
            logger.warning("queue_unknown_action", video_id=video_id, action=str(action))
            return None

        index = self._index_of(video_id)
        if index is None:
            return None

        item = self._items[index]
        if item.interaction(action) is None:
            return None

        interactions = [
            change(entry) if entry.action == action else entry
            for entry in item.interactions
        ]
        return self._replace(index, item.model_copy(update={"interactions": interactions}))
