"""Record splitting and strict integer parsing shared by the puzzle solvers.

Puzzle inputs are newline-separated records. Unlike best-effort report parsing,
puzzle parsing is all-or-nothing: the first malformed record aborts the whole
computation with `MalformedInputError`.
"""

from __future__ import annotations

import re
from typing import Final

RECORD_SEPARATOR: Final[str] = "\n"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class MalformedInputError(ValueError):
    """Raised when a puzzle input contains a record outside its grammar."""

    def __init__(self, *, record: str, line_number: int | None, expected: str) -> None:
        """Initialize the error.

        Args:
            record: The offending record or token.
            line_number: 1-based line number of the record, or None when unknown.
            expected: Short description of what the record should have been.
        """

        location = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Malformed input{location}: {record!r} is not {expected}.")
        self.record = record
        self.line_number = line_number
        self.expected = expected


def split_records(raw_text: str) -> tuple[str, ...]:
    """Split puzzle text into ordered line records.

    Args:
        raw_text: Puzzle input text using `\\n` as the only separator.

    Returns:
        A tuple of records in input order. Blank lines are kept as empty
        strings; no trailing-newline normalization is applied.
    """

    return tuple(raw_text.split(RECORD_SEPARATOR))


def is_blank(record: str) -> bool:
    """Return True when a record is an empty line."""

    return record == ""


def parse_int_record(record: str, *, line_number: int | None = None) -> int:
    """Parse a record as a base-10 integer.

    Args:
        record: A single record, e.g. `"199"` or `"-4"`.
        line_number: Optional 1-based line number used in error messages.

    Returns:
        The parsed integer.

    Raises:
        MalformedInputError: When the record is not exactly an optionally signed
            run of ASCII digits.
    """

    if _INTEGER_RE.fullmatch(record) is None:
        raise MalformedInputError(record=record, line_number=line_number, expected="an integer")
    return int(record)
