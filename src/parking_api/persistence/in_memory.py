"""In-memory key-value store mirrored to a JSON snapshot on disk."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Generic, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models.errors import StorageError

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class InMemoryRepository(Generic[K, V]):
    """Generic mapping held in memory and persisted in full on every write.

    The whole map is serialized as one unit; there is no incremental format.
    A single lock guards both the map and the snapshot file, so a write never
    interleaves with another write or with a read.
    """

    def __init__(self, location: Path, adapter: TypeAdapter[dict[K, V]]) -> None:
        self.location = Path(location)
        self._adapter = adapter
        self._lock = threading.RLock()
        self._data: dict[K, V] = self._load()

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            return self._data.get(key)

    def put(self, key: K, value: V) -> None:
        """Store ``value`` under ``key`` and rewrite the snapshot.

        Raises ``StorageError`` if the snapshot cannot be written; the in-memory
        map is left as it was before the call.
        """
        with self._lock:
            missing = object()
            previous = self._data.get(key, missing)
            self._data[key] = value
            try:
                self._persist()
            except StorageError:
                if previous is missing:
                    del self._data[key]
                else:
                    self._data[key] = previous
                raise

    def keys(self) -> set[K]:
        with self._lock:
            return set(self._data)

    def values(self) -> list[V]:
        with self._lock:
            return list(self._data.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def _load(self) -> dict[K, V]:
        if not self.location.exists():
            logger.info("No snapshot at %s, starting with an empty store", self.location)
            return {}
        try:
            payload = self.location.read_bytes()
            data = self._adapter.validate_json(payload)
        except (OSError, ValidationError, ValueError) as exc:
            logger.warning("Unable to read snapshot %s, starting with an empty store: %s", self.location, exc)
            return {}
        logger.info("Loaded %d entries from %s", len(data), self.location)
        return data

    def _persist(self) -> None:
        tmp_path = self.location.with_name(f"{self.location.name}.tmp")
        try:
            payload = self._adapter.dump_json(self._data, indent=2)
            self.location.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("wb") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.location)
        except (OSError, ValueError) as exc:
            logger.error("Failed to persist snapshot to %s: %s", self.location, exc)
            raise StorageError(f"Unable to write snapshot to {self.location}: {exc}") from exc
