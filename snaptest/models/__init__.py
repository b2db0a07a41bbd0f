"""Models module containing Pydantic schemas for outcomes, diffs and tests."""

from snaptest.models.schemas import (
    Changed,
    DiffLine,
    DiffResult,
    Equal,
    Failure,
    Lines,
    Outcome,
    Same,
    Success,
    TestDescriptor,
)

__all__ = [
    "Changed",
    "DiffLine",
    "DiffResult",
    "Equal",
    "Failure",
    "Lines",
    "Outcome",
    "Same",
    "Success",
    "TestDescriptor",
]
