"""Read/write lock that poisons itself when a writer fails unexpectedly."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from snaptest.errors import LockError, SnaptestError


class ReadWriteLock:
    """
    Many concurrent readers or one exclusive writer.

    If a writer's critical section raises anything other than a
    ``SnaptestError``, the guarded data may be half-mutated: the lock is
    poisoned and every later acquisition raises ``LockError``.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._poison: BaseException | None = None

    @property
    def poisoned(self) -> bool:
        return self._poison is not None

    def _check(self) -> None:
        if self._poison is not None:
            raise LockError(
                f"snapshot store lock poisoned by {type(self._poison).__name__}: {self._poison}"
            )

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock shared."""
        with self._cond:
            self._check()
            while self._writer:
                self._cond.wait()
            self._check()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock exclusively."""
        with self._cond:
            self._check()
            while self._writer or self._readers:
                self._cond.wait()
            self._check()
            self._writer = True
        try:
            yield
        except SnaptestError:
            raise
        except BaseException as e:
            self._poison = e
            raise
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()
