"""Puzzle input file resolution and loading.

Solvers never touch the filesystem; this module reads input files and applies
the only text normalization in the project (newline style and trailing
newlines), so files saved by editors feed cleanly into the pure solvers.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def default_input_path(year: int, day: int, *, input_dir: Path) -> Path:
    """Return the conventional input file location for a puzzle day.

    Args:
        year: Event year.
        day: Day of the event.
        input_dir: Root directory holding per-year input folders.

    Returns:
        A path like `<input_dir>/2022/day01.txt`.
    """

    return Path(input_dir) / str(year) / f"day{day:02d}.txt"


def normalize_puzzle_text(raw_text: str) -> str:
    """Normalize newlines and strip trailing newlines from puzzle text.

    Notes:
        Inner blank lines are preserved because they separate record groups.
    """

    normalized = raw_text.replace("\r\n", "\n").replace("\r", "\n")
    return normalized.rstrip("\n")


def load_puzzle_text(path: Path) -> str:
    """Read and normalize a puzzle input file.

    Raises:
        FileNotFoundError: When `path` does not exist.
    """

    raw_text = Path(path).read_text(encoding="utf-8")
    logger.debug("Read %d characters from %s.", len(raw_text), path)
    return normalize_puzzle_text(raw_text)
