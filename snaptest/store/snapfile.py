"""Snapshot store backed by a single snapfile."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from snaptest.config.settings import get_settings
from snaptest.errors import SerializationError, StoreError
from snaptest.logger import get_logger
from snaptest.store.locks import ReadWriteLock


T = TypeVar("T")

SnapshotData = dict[str, str]

_codec: TypeAdapter[SnapshotData] = TypeAdapter(SnapshotData)

logger = get_logger("store")


class Store:
    """
    Mapping from test key to golden value, persisted to one file.

    Reads (``contains``, ``get``, ``compare``, ``keys``) share the lock;
    ``insert``, ``record`` and ``remove`` take it exclusively. Saves are
    serialized against each other and encode the mapping only once they
    hold the I/O lock, so the file on disk always contains every entry
    inserted before the latest save began.
    """

    def __init__(
        self,
        path: str | Path,
        data: SnapshotData | None = None,
        root: str | Path | None = None,
    ) -> None:
        self.path = Path(path)
        self.root = Path(root) if root is not None else None
        self._data: SnapshotData = dict(data or {})
        self._lock = ReadWriteLock()
        self._io_lock = threading.Lock()

    @classmethod
    def load(cls, path: str | Path | None = None, root: str | Path | None = None) -> Store:
        """
        Open the snapfile, creating it (and its parent directories) if absent.

        An empty file is initialized with an empty mapping and saved
        immediately. ``root`` is the project root test keys are relative to.

        Raises:
            StoreError: the file cannot be created, opened or read
            SerializationError: the file does not decode to a mapping
        """
        store = cls(path if path is not None else get_settings().snapfile, root=root)
        raw = _find_or_create_snapfile(store.path)

        if not raw:
            logger.debug("Initializing empty snapfile %s", store.path)
            store.save()
        else:
            store._data = _decode(raw, store.path)

        logger.debug("Loaded %d snapshots from %s", len(store._data), store.path)
        return store

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)

    def contains(self, key: str) -> bool:
        with self._lock.read():
            return key in self._data

    def get(self, key: str) -> str | None:
        with self._lock.read():
            return self._data.get(key)

    def keys(self) -> list[str]:
        """Stored keys, sorted."""
        with self._lock.read():
            return sorted(self._data)

    def compare(self, key: str, f: Callable[[str], T]) -> T | None:
        """Call ``f`` with the golden value for ``key``; no-op when absent."""
        golden = self.get(key)
        if golden is None:
            return None
        return f(golden)

    def insert(self, key: str, value: str) -> str | None:
        """Upsert in memory only, returning the previous value."""
        with self._lock.write():
            previous = self._data.get(key)
            self._data[key] = value
            return previous

    def save(self) -> None:
        """Rewrite the whole snapfile from the in-memory mapping."""
        with self._io_lock:
            with self._lock.read():
                payload = self._encode()
            _write_snapfile(self.path, payload)
        logger.debug("Saved snapfile %s", self.path)

    def record(self, key: str, value: str) -> str | None:
        """Insert and persist as one step, returning the previous value."""
        with self._io_lock:
            with self._lock.write():
                previous = self._data.get(key)
                self._data[key] = value
                payload = self._encode()
            _write_snapfile(self.path, payload)
        logger.info("Recorded snapshot %s", key)
        return previous

    def remove(self, key: str) -> str | None:
        """Delete and persist as one step, returning the removed value."""
        with self._io_lock:
            with self._lock.write():
                previous = self._data.pop(key, None)
                payload = self._encode()
            if previous is not None:
                _write_snapfile(self.path, payload)
        if previous is not None:
            logger.info("Removed snapshot %s", key)
        return previous

    def _encode(self) -> bytes:
        try:
            return _codec.dump_json(self._data)
        except PydanticSerializationError as e:
            raise SerializationError(
                f"Failed to encode snapshots: {e}", str(self.path)
            ) from e


def _find_or_create_snapfile(path: Path) -> bytes:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
        return path.read_bytes()
    except OSError as e:
        raise StoreError(f"Failed to open snapfile {path}: {e}", str(path)) from e


def _decode(raw: bytes, path: Path) -> SnapshotData:
    try:
        return _codec.validate_json(raw)
    except ValidationError as e:
        raise SerializationError(
            f"Snapfile {path} is corrupt or not a snapshot file "
            f"(delete it to re-record): {e.error_count()} error(s)",
            str(path),
        ) from e


def _write_snapfile(path: Path, payload: bytes) -> None:
    tmp = path.with_name(f"{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_bytes(payload)
        os.replace(tmp, path)
    except OSError as e:
        if tmp.exists():
            tmp.unlink()
        raise StoreError(f"Failed to write snapfile {path}: {e}", str(path)) from e
