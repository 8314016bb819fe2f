"""Tests for sonar sweep depth trend counting."""

from __future__ import annotations

import pytest

from puzzles.records import MalformedInputError
from puzzles.sonar_sweep import (
    count_increases,
    count_increasing_depths,
    count_windowed_increasing_depths,
    parse_depths,
    sum_windows,
)

pytestmark = pytest.mark.unit

EXAMPLE_DEPTHS = "\n".join(
    ["199", "200", "208", "210", "200", "207", "240", "269", "260", "263"]
)


@pytest.mark.golden
def test_count_increasing_depths_matches_example() -> None:
    """Seven measurements are deeper than the one before."""

    assert count_increasing_depths(EXAMPLE_DEPTHS) == 7


@pytest.mark.golden
def test_count_windowed_increasing_depths_matches_example() -> None:
    """Five three-measurement windows grow over the previous window."""

    assert count_windowed_increasing_depths(EXAMPLE_DEPTHS) == 5


def test_counts_are_idempotent() -> None:
    """Repeated calls on the same text return the same answer."""

    first = (count_increasing_depths(EXAMPLE_DEPTHS), count_windowed_increasing_depths(EXAMPLE_DEPTHS))
    second = (count_increasing_depths(EXAMPLE_DEPTHS), count_windowed_increasing_depths(EXAMPLE_DEPTHS))
    assert first == second


@pytest.mark.parametrize("raw_text", ["5", "0", "-12"])
def test_single_depth_has_no_increases(raw_text: str) -> None:
    """A lone measurement is never an increase, whatever its value."""

    assert count_increasing_depths(raw_text) == 0
    assert count_windowed_increasing_depths(raw_text) == 0


def test_windowed_count_needs_two_full_windows() -> None:
    """Fewer than four depths cannot produce a window-to-window increase."""

    assert count_windowed_increasing_depths("1\n2") == 0
    assert count_windowed_increasing_depths("1\n2\n3") == 0
    assert count_windowed_increasing_depths("1\n2\n3\n4") == 1


def test_window_of_one_matches_plain_count() -> None:
    """Single-measurement windows reduce to the adjacent comparison."""

    assert count_windowed_increasing_depths(EXAMPLE_DEPTHS, window=1) == 7


def test_negative_depths_are_compared_numerically() -> None:
    """Negative values count as increases when they grow."""

    assert count_increasing_depths("-3\n-1\n-2") == 1


def test_equal_depths_are_not_increases() -> None:
    """Only strictly larger values count."""

    assert count_increasing_depths("4\n4\n4") == 0


def test_sum_windows_shortens_sequence() -> None:
    """Each window sum covers `window` consecutive depths."""

    assert sum_windows((1, 2, 3, 4), window=3) == (6, 9)
    assert sum_windows((1, 2), window=3) == ()


def test_sum_windows_rejects_non_positive_window() -> None:
    """Windows must hold at least one measurement."""

    with pytest.raises(ValueError):
        sum_windows((1, 2, 3), window=0)


def test_count_increases_handles_empty_sequence() -> None:
    """No values means no increases."""

    assert count_increases(()) == 0


def test_parse_depths_rejects_non_integer_line() -> None:
    """The first malformed measurement aborts parsing."""

    with pytest.raises(MalformedInputError) as excinfo:
        parse_depths("199\nabc\n200")

    assert excinfo.value.record == "abc"
    assert excinfo.value.line_number == 2


def test_trailing_newline_is_rejected() -> None:
    """A trailing newline yields an empty record, which is not a depth."""

    with pytest.raises(MalformedInputError) as excinfo:
        count_increasing_depths("199\n200\n")

    assert excinfo.value.line_number == 3
