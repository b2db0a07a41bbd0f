"""Tests for the positional line diff."""

from __future__ import annotations

import pytest

from snaptest.diff.lines import diff, pair, split_lines
from snaptest.models.schemas import Changed, Equal, Lines, Same


class TestSame:
    """Identical input short-circuits."""

    @pytest.mark.parametrize("text", ["", "A", "A\nB\nC", "trailing\n", "\n\n"])
    def test_identical_strings_are_same(self, text: str) -> None:
        """Test: diff(a, a) is Same."""
        assert diff(text, text) == Same()


class TestLines:
    """Differing input is paired line by line."""

    def test_single_changed_line(self) -> None:
        """Test: Middle line rewrite is reported in place."""
        result = diff("A\nB\nC", "A\nX\nC")

        assert isinstance(result, Lines)
        assert result.lines == [
            Equal(text="A"),
            Changed(left="B", right="X"),
            Equal(text="C"),
        ]

    def test_equal_line_counts_yield_one_entry_per_line(self) -> None:
        """Test: n lines on both sides give n entries."""
        golden = "one\ntwo\nthree\nfour"
        received = "one\nTWO\nthree\nFOUR"

        result = diff(golden, received)

        assert isinstance(result, Lines)
        assert len(result.lines) == 4
        assert [type(line) for line in result.lines] == [Equal, Changed, Equal, Changed]

    def test_shorter_received_is_truncated(self) -> None:
        """Test: Only positions present on both sides are compared."""
        result = diff("A\nB\nC", "A")

        assert isinstance(result, Lines)
        assert result.lines == [Equal(text="A")]

    def test_shorter_golden_is_truncated(self) -> None:
        """Test: Extra received lines are not reported either."""
        result = diff("A", "Z\nB\nC")

        assert isinstance(result, Lines)
        assert result.lines == [Changed(left="A", right="Z")]

    def test_empty_side_compares_nothing(self) -> None:
        """Test: An empty string has no lines to pair."""
        result = diff("", "something")

        assert result == Lines(lines=[])

    def test_trailing_newline_only_difference(self) -> None:
        """Test: Strings differing only by a trailing newline pair as equal lines."""
        result = diff("A\nB", "A\nB\n")

        assert result == Lines(lines=[Equal(text="A"), Equal(text="B")])


class TestPair:
    """Single position classification."""

    def test_equal(self) -> None:
        assert pair("x", "x") == Equal(text="x")

    def test_changed(self) -> None:
        assert pair("x", "y") == Changed(left="x", right="y")


class TestSplitLines:
    """Only ``\\n`` separates lines."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", []),
            ("\n", [""]),
            ("A", ["A"]),
            ("A\n", ["A"]),
            ("A\n\nB", ["A", "", "B"]),
            ("A\r\nB\r\n", ["A", "B"]),
            ("A\rB", ["A\rB"]),
            ("x\u2028y\x0cz", ["x\u2028y\x0cz"]),
        ],
    )
    def test_split(self, text: str, expected: list[str]) -> None:
        assert split_lines(text) == expected

    def test_carriage_return_does_not_split(self) -> None:
        """Test: A bare \\r inside a line keeps the line whole."""
        assert diff("A\rB", "A\rC") == Lines(lines=[Changed(left="A\rB", right="A\rC")])

    def test_unicode_line_separator_does_not_split(self) -> None:
        """Test: U+2028 is not a line break for the diff."""
        result = diff("x\u2028y", "x\u2028z")

        assert result == Lines(lines=[Changed(left="x\u2028y", right="x\u2028z")])

    def test_crlf_lines_compare_equal_to_lf(self) -> None:
        """Test: A trailing \\r is dropped from each line."""
        assert diff("A\r\nB", "A\nC") == Lines(
            lines=[Equal(text="A"), Changed(left="B", right="C")]
        )
