"""Pure puzzle solvers for advent-solvers.

This package contains deterministic, testable text-in/integer-out solvers. It
must not import Django or perform any file I/O.
"""

from .calorie_counting import top_group_sum, top_three_group_sum
from .records import MalformedInputError
from .registry import DEFAULT_REGISTRY, PuzzleRegistry, PuzzleSolverSpec
from .rock_paper_scissors import total_score_with_outcomes, total_score_with_shapes
from .sonar_sweep import count_increasing_depths, count_windowed_increasing_depths

__all__ = [
    "DEFAULT_REGISTRY",
    "MalformedInputError",
    "PuzzleRegistry",
    "PuzzleSolverSpec",
    "count_increasing_depths",
    "count_windowed_increasing_depths",
    "top_group_sum",
    "top_three_group_sum",
    "total_score_with_outcomes",
    "total_score_with_shapes",
]
