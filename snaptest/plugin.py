"""Pytest plugin: owns the snapshot store for the whole session."""

from __future__ import annotations

from pathlib import Path

import pytest

from snaptest.config.settings import get_settings
from snaptest.errors import SnaptestError
from snaptest.store.snapfile import Store


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("snaptest")
    group.addoption(
        "--snapfile",
        action="store",
        default=None,
        help="Snapshot file (default: SNAPTEST_SNAPFILE or tests/.snapfile)",
    )


@pytest.fixture(scope="session")
def snapshot_store(pytestconfig: pytest.Config) -> Store:
    """The session's snapshot store, loaded once before the first snapshot test."""
    snapfile = Path(pytestconfig.getoption("snapfile") or get_settings().snapfile)
    if not snapfile.is_absolute():
        snapfile = pytestconfig.rootpath / snapfile

    try:
        return Store.load(snapfile, root=pytestconfig.rootpath)
    except SnaptestError as e:
        pytest.exit(f"failed to load snaptest store: {e}", returncode=3)
