"""Positional line diff between a snapshot and a received value."""

from snaptest.diff.lines import diff, pair, split_lines

__all__ = ["diff", "pair", "split_lines"]
