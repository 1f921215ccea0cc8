"""Key-value blob stores backing the plan queue.

A blob store holds serialized strings in named slots. Reads of a missing slot
return None; any other failure raises StorageError.
"""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Protocol

import structlog

from clipdeck.core.exceptions import ConfigurationError, StorageError

logger = structlog.get_logger(__name__)


class BlobStore(Protocol):
    """Protocol for blob store implementations.

    Implementations raise StorageError on read or write failures. QueueStore
    treats any exception from either method as a failed, best-effort storage
    call and keeps its in-memory state.
    """

    def get(self, slot: str) -> Optional[str]: ...

    def set(self, slot: str, value: str) -> None: ...


@dataclass
class InMemoryBlobStore:
    """
    In-memory blob store for tests and throwaway sessions.

    WARNING: Does not persist across restarts.
    """

    _slots: Dict[str, str] = field(default_factory=dict)

    def get(self, slot: str) -> Optional[str]:
        return self._slots.get(slot)

    def set(self, slot: str, value: str) -> None:
        self._slots[slot] = value


class JsonFileBlobStore:
    """File-backed blob store, one ``<slot>.json`` file per slot.

    Writes go to a temporary file in the same directory which then replaces
    the slot file, so a crash mid-write leaves the previous contents intact.
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)
        if self.directory.exists() and not self.directory.is_dir():
            raise ConfigurationError(
                f"Queue storage path is not a directory: {self.directory}",
                config_key="queue_storage_dir",
            )

    def path_for(self, slot: str) -> Path:
        return self.directory / f"{slot}.json"

    def get(self, slot: str) -> Optional[str]:
        path = self.path_for(slot)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(slot, f"Failed to read {path}: {e}")

    def set(self, slot: str, value: str) -> None:
        path = self.path_for(slot)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{slot}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(slot, f"Failed to write {path}: {e}")

        logger.debug("blob_slot_written", slot=slot, path=str(path), size=len(value))
