"""Depth trend counting for sonar sweep reports (2021, day 1).

A sonar sweep report lists one depth measurement per line. The answers count
how often the depth increases, either between adjacent measurements or between
adjacent three-measurement sliding windows.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce
from typing import Final

from .records import parse_int_record, split_records

logger = logging.getLogger(__name__)

DEFAULT_WINDOW: Final[int] = 3


@dataclass(frozen=True, slots=True)
class DepthTrend:
    """Running state of the increase-counting fold.

    Attributes:
        prior_depth: The most recently folded value.
        increase_count: How many values so far exceeded their predecessor.
    """

    prior_depth: int
    increase_count: int = 0


def count_increasing_depths(raw_text: str) -> int:
    """Count measurements that are deeper than the one before.

    Args:
        raw_text: Newline-separated depth measurements.

    Returns:
        Number of adjacent pairs where the second depth is larger.

    Raises:
        MalformedInputError: When any line is not an integer.
    """

    return count_increases(parse_depths(raw_text))


def count_windowed_increasing_depths(raw_text: str, *, window: int = DEFAULT_WINDOW) -> int:
    """Count sliding-window sums that are larger than the previous window sum.

    Args:
        raw_text: Newline-separated depth measurements.
        window: Width of the overlapping windows. Defaults to 3.

    Returns:
        Number of adjacent window pairs where the second sum is larger. Inputs
        shorter than `window` contain no windows and yield 0.

    Raises:
        MalformedInputError: When any line is not an integer.
        ValueError: When `window` is smaller than 1.
    """

    return count_increases(sum_windows(parse_depths(raw_text), window=window))


def parse_depths(raw_text: str) -> tuple[int, ...]:
    """Parse every line of a sonar sweep report into an integer depth."""

    depths = tuple(
        parse_int_record(record, line_number=index)
        for index, record in enumerate(split_records(raw_text), start=1)
    )
    logger.debug("Parsed %d depth measurements.", len(depths))
    return depths


def sum_windows(depths: Sequence[int], *, window: int) -> tuple[int, ...]:
    """Replace a depth sequence with the sums of its overlapping windows.

    Args:
        depths: Parsed depth measurements.
        window: Window width (>= 1).

    Returns:
        A tuple that is `window - 1` entries shorter than `depths`, or empty
        when there are fewer than `window` depths.
    """

    if window < 1:
        raise ValueError("window must be >= 1")

    return tuple(sum(depths[idx : idx + window]) for idx in range(len(depths) - window + 1))


def count_increases(values: Sequence[int]) -> int:
    """Count values that exceed the value immediately before them.

    The fold is seeded with the first value, so the first value never counts
    as an increase and empty or single-value sequences yield 0.
    """

    if not values:
        return 0

    trend = reduce(_accumulate_depths, values[1:], DepthTrend(prior_depth=values[0]))
    return trend.increase_count


def _accumulate_depths(trend: DepthTrend, depth: int) -> DepthTrend:
    """Fold a single depth into the running trend."""

    if depth > trend.prior_depth:
        return DepthTrend(prior_depth=depth, increase_count=trend.increase_count + 1)
    return DepthTrend(prior_depth=depth, increase_count=trend.increase_count)
