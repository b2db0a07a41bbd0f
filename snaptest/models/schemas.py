"""Pydantic schemas for diff lines, run outcomes and test descriptors."""

from __future__ import annotations

from typing import Annotated, Any, Callable, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Diff Schemas
# =============================================================================


class Equal(BaseModel):
    """A line position where snapshot and received text match."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["equal"] = Field(default="equal")
    text: str = Field(description="Line text shared by both sides")


class Changed(BaseModel):
    """A line position where snapshot and received text differ."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["changed"] = Field(default="changed")
    left: str = Field(description="Line from the snapshot")
    right: str = Field(description="Line from the received value")


DiffLine = Annotated[Union[Equal, Changed], Field(discriminator="kind")]


class Same(BaseModel):
    """Both strings are identical; there is nothing to explain."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["same"] = Field(default="same")


class Lines(BaseModel):
    """Positionally paired lines of two differing strings."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["lines"] = Field(default="lines")
    lines: list[DiffLine] = Field(default_factory=list, description="One entry per compared line")


DiffResult = Annotated[Union[Same, Lines], Field(discriminator="kind")]


# =============================================================================
# Outcome Schemas
# =============================================================================


class Success(BaseModel):
    """The received value matched the snapshot, or was recorded as the snapshot."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = Field(default="success")

    def was_successful(self) -> bool:
        return True

    def diff(self) -> list[Equal | Changed]:
        return []


class Failure(BaseModel):
    """The received value differs from the snapshot."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = Field(default="failure")
    golden: str = Field(description="Stored snapshot text")
    received: str = Field(description="Text produced by this run")

    def was_successful(self) -> bool:
        return False

    def diff(self) -> list[Equal | Changed]:
        """Positional diff between the snapshot and the received text."""
        from snaptest.diff.lines import diff

        result = diff(self.golden, self.received)
        if isinstance(result, Lines):
            return list(result.lines)
        return []


Outcome = Annotated[Union[Success, Failure], Field(discriminator="kind")]


# =============================================================================
# Test Descriptor
# =============================================================================


class TestDescriptor(BaseModel):
    """Identity and producer of a single snapshot test."""

    __test__: ClassVar[bool] = False

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    file: str = Field(description="Declaring file path")
    name: str = Field(description="Test identifier")
    path: str = Field(description="Declaring module path")
    uuid: str = Field(description="Snapshot store key")
    ret: str = Field(description="Human-readable return type label")
    producer: Callable[[], Any] = Field(description="Zero-argument function producing the value")

    @staticmethod
    def builder() -> "Builder":
        from snaptest.runner.test import Builder

        return Builder()

    @property
    def qualified_name(self) -> str:
        return f"{self.path}::{self.name}"
