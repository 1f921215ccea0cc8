"""
Plan Queue.

- store: QueueStore with add/remove/update operations and persistence
- blob_store: InMemoryBlobStore and JsonFileBlobStore slot backends
- plans: default interaction plan and caption suggestions

Example:
    from clipdeck.queue import JsonFileBlobStore, QueueStore

    store = QueueStore(JsonFileBlobStore(".clipdeck"))
    store.add(video)
"""

from clipdeck.queue.blob_store import BlobStore, InMemoryBlobStore, JsonFileBlobStore
from clipdeck.queue.plans import create_default_plan, default_interactions, suggest_caption
from clipdeck.queue.store import (
    DEFAULT_SLOT,
    QueueStore,
    deserialize_queue,
    serialize_queue,
    sort_by_schedule,
)

__all__ = [
    "BlobStore",
    "DEFAULT_SLOT",
    "InMemoryBlobStore",
    "JsonFileBlobStore",
    "QueueStore",
    "create_default_plan",
    "default_interactions",
    "deserialize_queue",
    "serialize_queue",
    "sort_by_schedule",
    "suggest_caption",
]
