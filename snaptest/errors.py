"""Exceptions raised by the snapshot store, runner and harness."""

from __future__ import annotations


class SnaptestError(Exception):
    """Base exception for snapshot testing errors."""


class StoreError(SnaptestError):
    """The snapshot file could not be created, opened, read or written."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class SerializationError(SnaptestError):
    """The snapshot file does not decode to a mapping, or cannot be encoded."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class LockError(SnaptestError):
    """The store lock was poisoned by a holder that raised."""


class BuilderError(SnaptestError):
    """A required test descriptor field was never set."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is a required field")
        self.field = field


class ProducerError(SnaptestError):
    """The test's producer function raised."""

    def __init__(self, message: str, test_name: str) -> None:
        super().__init__(message)
        self.test_name = test_name


class SnapshotMismatch(AssertionError):
    """Golden and received values differ; carries the rendered report."""

    def __init__(self, report: str, golden: str, received: str) -> None:
        super().__init__(report)
        self.report = report
        self.golden = golden
        self.received = received
