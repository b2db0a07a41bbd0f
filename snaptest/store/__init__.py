"""Persistent snapshot store."""

from snaptest.store.locks import ReadWriteLock
from snaptest.store.snapfile import SnapshotData, Store

__all__ = ["ReadWriteLock", "SnapshotData", "Store"]
