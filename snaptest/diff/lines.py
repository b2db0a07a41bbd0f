"""Line-by-line positional diff.

Lines are compared strictly by index: line ``i`` of the snapshot against line
``i`` of the received text. This is not an edit-distance diff. When the two
sides have different line counts, the lines past the end of the shorter side
are not compared and do not appear in the result.
"""

from __future__ import annotations

from snaptest.models.schemas import Changed, Equal, Lines, Same


def split_lines(text: str) -> list[str]:
    """
    Split on ``\\n`` only, dropping one trailing ``\\r`` per line.

    A final newline does not start an extra empty line. Other characters
    ``str.splitlines`` treats as breaks (``\\r`` alone, ``\\x0c``,
    ``\\u2028``...) stay part of the line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def pair(left: str, right: str) -> Equal | Changed:
    """Classify a single line position."""
    if left == right:
        return Equal(text=left)
    return Changed(left=left, right=right)


def diff(golden: str, received: str) -> Same | Lines:
    """Compare two strings line by line."""
    if golden == received:
        return Same()

    return Lines(
        lines=[
            pair(left, right)
            for left, right in zip(split_lines(golden), split_lines(received))
        ]
    )
