"""Snapshot test runner: record on first run, compare afterwards."""

from snaptest.runner.test import Builder, Runner, RunState, debug_format

__all__ = ["Builder", "RunState", "Runner", "debug_format"]
