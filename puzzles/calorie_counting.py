"""Per-elf calorie totals and top-K selection (2022, day 1).

The input lists the calories of each food item an elf carries, one item per
line. Elves are separated by a single blank line.

Preconditions:
- no two consecutive blank lines,
- no leading or trailing blank lines.

Input violating these yields empty groups summing to 0 rather than an error.
"""

from __future__ import annotations

import logging

from .records import is_blank, parse_int_record, split_records

logger = logging.getLogger(__name__)


def top_group_sum(raw_text: str) -> int:
    """Return the calorie total of the elf carrying the most calories."""

    return sum_top_groups(raw_text, count=1)


def top_three_group_sum(raw_text: str) -> int:
    """Return the combined calorie total of the three best-stocked elves."""

    return sum_top_groups(raw_text, count=3)


def sum_top_groups(raw_text: str, *, count: int) -> int:
    """Sum the `count` largest group totals.

    Args:
        raw_text: Blank-line separated groups of integers.
        count: How many of the largest group totals to add up (>= 1). When
            larger than the number of groups, every group is included.

    Returns:
        The sum of the selected group totals.

    Raises:
        MalformedInputError: When a non-blank line is not an integer.
        ValueError: When `count` is smaller than 1.
    """

    if count < 1:
        raise ValueError("count must be >= 1")

    group_sums = sorted(compute_group_sums(raw_text), reverse=True)
    return sum(group_sums[:count])


def compute_group_sums(raw_text: str) -> list[int]:
    """Compute the total of every blank-line separated group, in input order.

    Args:
        raw_text: Blank-line separated groups of integers.

    Returns:
        One sum per group; the number of groups is the number of blank lines
        plus one.
    """

    records = split_records(raw_text)
    group_count = sum(1 for record in records if is_blank(record)) + 1

    group_sums = [0] * group_count
    group_index = 0
    for line_number, record in enumerate(records, start=1):
        if is_blank(record):
            group_index += 1
            continue
        group_sums[group_index] += parse_int_record(record, line_number=line_number)

    logger.debug("Summed %d groups from %d records.", group_count, len(records))
    return group_sums
