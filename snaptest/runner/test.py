"""Building test descriptors and running them against a snapshot store."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from rich.pretty import pretty_repr

from snaptest.config.settings import get_settings
from snaptest.diff.lines import diff
from snaptest.errors import BuilderError, ProducerError
from snaptest.logger import get_logger
from snaptest.models.schemas import Failure, Same, Success, TestDescriptor
from snaptest.report.decorate import Decorator
from snaptest.report.renderer import Report
from snaptest.store.snapfile import Store


logger = get_logger("runner")

_FIELDS = ("file", "name", "path", "uuid", "ret", "producer")


class RunState(str, Enum):
    """Lifecycle of a single run."""

    NOT_STARTED = "not_started"
    EXECUTING = "executing"
    RECORDED = "recorded"
    COMPARED = "compared"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def debug_format(value: Any, width: int | None = None) -> str:
    """Deterministic multi-line text of a produced value."""
    return pretty_repr(value, max_width=width or get_settings().width)


class Builder:
    """Collects descriptor fields; every field is required."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def file(self, value: str) -> Builder:
        self._values["file"] = value
        return self

    def name(self, value: str) -> Builder:
        self._values["name"] = value
        return self

    def path(self, value: str) -> Builder:
        self._values["path"] = value
        return self

    def uuid(self, value: str) -> Builder:
        self._values["uuid"] = value
        return self

    def ret(self, value: str) -> Builder:
        self._values["ret"] = value
        return self

    def producer(self, value: Callable[[], Any]) -> Builder:
        self._values["producer"] = value
        return self

    def build(self) -> TestDescriptor:
        for field in _FIELDS:
            if field not in self._values:
                raise BuilderError(field)
        return TestDescriptor(**self._values)

    def run(
        self,
        store: Store,
        producer: Callable[[], Any] | None = None,
        decorator: Decorator | None = None,
    ) -> Report:
        """Build the descriptor and run it in one step."""
        if producer is not None:
            self.producer(producer)
        return Runner(store, decorator=decorator).run(self.build())


class Runner:
    """Runs snapshot tests against one store."""

    def __init__(
        self,
        store: Store,
        width: int | None = None,
        decorator: Decorator | None = None,
    ) -> None:
        self.store = store
        self.width = width
        self.decorator = decorator

    def run(self, test: TestDescriptor) -> Report:
        """
        Execute the producer once, then record or compare.

        A missing snapshot is recorded and counts as a pass. An existing
        snapshot is compared line by line against the received text.

        Raises:
            ProducerError: the producer raised; the store is not touched
        """
        key = test.uuid
        state = self._transition(test, RunState.NOT_STARTED, RunState.EXECUTING)

        try:
            value = test.producer()
        except Exception as e:
            self._transition(test, state, RunState.FAILED)
            raise ProducerError(
                f"{test.qualified_name} raised {type(e).__name__}: {e}", test.name
            ) from e

        received = debug_format(value, self.width)

        outcome: Success | Failure | None = None
        if self.store.contains(key):
            outcome = self.store.compare(key, lambda golden: self._compare(golden, received))
            if outcome is not None:
                state = self._transition(test, state, RunState.COMPARED)

        if outcome is None:
            self.store.record(key, received)
            outcome = Success()
            state = self._transition(test, state, RunState.RECORDED)

        if outcome.was_successful():
            self._transition(test, state, RunState.SUCCEEDED)
        else:
            self._transition(test, state, RunState.FAILED)
            logger.warning("Snapshot mismatch for %s", test.qualified_name)

        return Report(test, outcome, decorator=self.decorator)

    @staticmethod
    def _compare(golden: str, received: str) -> Success | Failure:
        if isinstance(diff(golden, received), Same):
            return Success()
        return Failure(golden=golden, received=received)

    @staticmethod
    def _transition(test: TestDescriptor, current: RunState, new: RunState) -> RunState:
        logger.debug("%s: %s -> %s", test.uuid, current.value, new.value)
        return new
