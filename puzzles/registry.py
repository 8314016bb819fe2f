"""Registry of available puzzle solvers.

The registry describes which solvers exist and how they are addressed by
(year, day, part). It stays Django-free; loading inputs and printing answers is
the job of the `solve_puzzle` management command.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from . import calorie_counting, rock_paper_scissors, sonar_sweep

PuzzleSolver = Callable[[str], int]


@dataclass(frozen=True, slots=True)
class PuzzleSolverSpec:
    """Describe a single solvable puzzle part.

    Args:
        year: Event year, e.g. 2022.
        day: Day of the event (1-25).
        part: Puzzle part (1 or 2).
        title: Human-friendly description of the computed answer.
        solve: Pure function mapping puzzle text to the answer.
    """

    year: int
    day: int
    part: int
    title: str
    solve: PuzzleSolver

    @property
    def key(self) -> str:
        """Return a stable display key such as `2022-01-2`."""

        return f"{self.year}-{self.day:02d}-{self.part}"


class PuzzleRegistry:
    """Lookup helpers for puzzle solver definitions."""

    def __init__(self, specs: Iterable[PuzzleSolverSpec]) -> None:
        """Initialize a registry from a collection of specs."""

        self._specs: dict[tuple[int, int, int], PuzzleSolverSpec] = {}
        for spec in specs:
            address = (spec.year, spec.day, spec.part)
            if address in self._specs:
                raise ValueError(f"Duplicate PuzzleSolverSpec for {spec.key!r}")
            self._specs[address] = spec

    def get(self, year: int, day: int, part: int) -> PuzzleSolverSpec | None:
        """Return a spec for a puzzle part, or None when missing."""

        return self._specs.get((year, day, part))

    def list(self) -> tuple[PuzzleSolverSpec, ...]:
        """Return all specs in (year, day, part) order."""

        return tuple(self._specs[address] for address in sorted(self._specs.keys()))

    def parts_for_day(self, year: int, day: int) -> tuple[PuzzleSolverSpec, ...]:
        """Return every registered part for a single day, in part order."""

        return tuple(spec for spec in self.list() if spec.year == year and spec.day == day)

    def solve(self, year: int, day: int, part: int, raw_text: str) -> int:
        """Solve a registered puzzle part.

        Raises:
            KeyError: When no solver is registered for the puzzle part.
            MalformedInputError: When the solver rejects the input text.
        """

        spec = self.get(year, day, part)
        if spec is None:
            raise KeyError(f"No solver registered for {year}-{day:02d}-{part}")
        return spec.solve(raw_text)


DEFAULT_REGISTRY = PuzzleRegistry(
    specs=(
        PuzzleSolverSpec(
            year=2021,
            day=1,
            part=1,
            title="Sonar Sweep: increasing depth measurements",
            solve=sonar_sweep.count_increasing_depths,
        ),
        PuzzleSolverSpec(
            year=2021,
            day=1,
            part=2,
            title="Sonar Sweep: increasing three-measurement windows",
            solve=sonar_sweep.count_windowed_increasing_depths,
        ),
        PuzzleSolverSpec(
            year=2022,
            day=1,
            part=1,
            title="Calorie Counting: calories carried by the top elf",
            solve=calorie_counting.top_group_sum,
        ),
        PuzzleSolverSpec(
            year=2022,
            day=1,
            part=2,
            title="Calorie Counting: calories carried by the top three elves",
            solve=calorie_counting.top_three_group_sum,
        ),
        PuzzleSolverSpec(
            year=2022,
            day=2,
            part=1,
            title="Rock Paper Scissors: score with XYZ as shapes",
            solve=rock_paper_scissors.total_score_with_shapes,
        ),
        PuzzleSolverSpec(
            year=2022,
            day=2,
            part=2,
            title="Rock Paper Scissors: score with XYZ as outcomes",
            solve=rock_paper_scissors.total_score_with_outcomes,
        ),
    )
)
