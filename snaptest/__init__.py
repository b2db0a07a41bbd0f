"""Dead simple snapshot testing."""

from snaptest.errors import (
    BuilderError,
    LockError,
    ProducerError,
    SerializationError,
    SnapshotMismatch,
    SnaptestError,
    StoreError,
)
from snaptest.harness import snaptest
from snaptest.models.schemas import Changed, Equal, Failure, Lines, Same, Success, TestDescriptor
from snaptest.report.renderer import Report, render
from snaptest.runner.test import Builder, Runner
from snaptest.store.snapfile import Store

__all__ = [
    "Builder",
    "BuilderError",
    "Changed",
    "Equal",
    "Failure",
    "Lines",
    "LockError",
    "ProducerError",
    "Report",
    "Runner",
    "Same",
    "SerializationError",
    "SnapshotMismatch",
    "SnaptestError",
    "Store",
    "StoreError",
    "Success",
    "TestDescriptor",
    "render",
    "snaptest",
]
