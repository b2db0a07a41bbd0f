"""The ``@snaptest`` decorator: wrap a plain function as a snapshot test."""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import Any, Callable, get_origin

from snaptest.errors import SnapshotMismatch
from snaptest.models.schemas import TestDescriptor
from snaptest.runner.test import Runner
from snaptest.store.snapfile import Store


def relative_file(filename: str, root: str | Path | None = None) -> str:
    """Path of ``filename`` relative to ``root`` (the working directory by default)."""
    root = Path(root) if root is not None else Path.cwd()
    path = Path(filename)
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def return_label(func: Callable[..., Any]) -> str:
    """Human-readable return annotation of ``func``."""
    annotation = inspect.signature(func).return_annotation
    if annotation is inspect.Signature.empty:
        return "Any"
    if isinstance(annotation, str):
        return annotation
    if get_origin(annotation) is not None:
        return repr(annotation).replace("typing.", "")
    if isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


def describe(
    producer: Callable[[], Any],
    name: str | None = None,
    ret: str | None = None,
    root: str | Path | None = None,
) -> TestDescriptor:
    """
    Build the descriptor of a producer from its own metadata.

    The key uses the source file relative to ``root`` (the project root), so
    it does not depend on the directory the tests are started from.
    """
    source = inspect.getsourcefile(producer) or producer.__code__.co_filename
    filename = relative_file(source, root=root)
    test_name = name or producer.__name__

    return (
        TestDescriptor.builder()
        .file(filename)
        .name(test_name)
        .path(producer.__module__)
        .uuid(f"{filename}:{test_name}")
        .ret(ret or return_label(producer))
        .producer(producer)
        .build()
    )


def snaptest(
    func: Callable[[], Any] | None = None,
    *,
    name: str | None = None,
    ret: str | None = None,
) -> Any:
    """
    Turn a zero-argument function into a snapshot test.

    The wrapped test takes the ``snapshot_store`` fixture. Its first run
    records the pretty-printed return value; later runs compare against
    it and raise ``SnapshotMismatch`` with the rendered report on any
    difference. Exceptions raised by the function surface as
    ``ProducerError``.

    Usage::

        @snaptest
        def test_parse_heroes() -> list[Hero]:
            return [Hero.parse(h) for h in ("Batman", "The Flash")]
    """

    def wrap(producer: Callable[[], Any]) -> Callable[[Store], None]:
        def test(snapshot_store: Store) -> None:
            report = Runner(snapshot_store).run(
                describe(producer, name=name, ret=ret, root=snapshot_store.root)
            )
            outcome = report.outcome
            if not outcome.was_successful():
                raise SnapshotMismatch(str(report), outcome.golden, outcome.received)

        test.__name__ = producer.__name__
        test.__qualname__ = producer.__qualname__
        test.__module__ = producer.__module__
        test.__doc__ = producer.__doc__
        test.producer = producer  # type: ignore[attr-defined]
        return test

    if func is not None:
        return wrap(func)
    return wrap
