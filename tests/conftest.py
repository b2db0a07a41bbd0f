"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SNAPTEST_COLOR", "never")

from snaptest.config.settings import get_settings  # noqa: E402
from snaptest.models.schemas import TestDescriptor  # noqa: E402
from snaptest.store.snapfile import Store  # noqa: E402

# The pytest11 plugin may have cached settings before the defaults above
get_settings.cache_clear()


def make_descriptor(
    producer: Callable[[], Any] | None = None,
    name: str = "parse_heroes",
    file: str = "tests/sample.py",
    path: str = "tests.sample",
    ret: str = "list[str]",
) -> TestDescriptor:
    """Factory for creating TestDescriptor test fixtures."""
    return (
        TestDescriptor.builder()
        .file(file)
        .name(name)
        .path(path)
        .uuid(f"{file}:{name}")
        .ret(ret)
        .producer(producer or (lambda: ["Batman", "The Flash"]))
        .build()
    )


@pytest.fixture
def snapfile(tmp_path: Path) -> Path:
    """Snapshot file location inside a not-yet-existing directory."""
    return tmp_path / "tests" / ".snapfile"


@pytest.fixture
def store(snapfile: Path) -> Store:
    """Freshly loaded, empty store."""
    return Store.load(snapfile)


@pytest.fixture
def snapshot_store(store: Store) -> Store:
    """Keep ``@snaptest`` tests in this suite away from the real snapfile."""
    return store
