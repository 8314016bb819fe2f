"""Solve a registered puzzle from its input file."""

from __future__ import annotations

import logging
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.inputs import default_input_path, load_puzzle_text
from puzzles.records import MalformedInputError
from puzzles.registry import DEFAULT_REGISTRY, PuzzleSolverSpec

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Load a puzzle input and print the answer for one or both parts."""

    help = "Solve a registered puzzle day and print its answers."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("--year", type=int, default=None, help="Event year, e.g. 2022.")
        parser.add_argument("--day", type=int, default=None, help="Day of the event (1-25).")
        parser.add_argument(
            "--part",
            type=int,
            choices=(1, 2),
            default=None,
            help="Puzzle part to solve. When omitted, every registered part is solved.",
        )
        parser.add_argument(
            "--input",
            default=None,
            help="Input file path (defaults to <PUZZLE_INPUT_DIR>/<year>/dayNN.txt).",
        )
        parser.add_argument(
            "--list",
            action="store_true",
            help="List registered solvers and exit.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        if options["list"]:
            for spec in DEFAULT_REGISTRY.list():
                self.stdout.write(f"[{spec.key}] {spec.title}")
            return None

        year: int | None = options["year"]
        day: int | None = options["day"]
        part: int | None = options["part"]
        input_option: str | None = options["input"]

        if year is None or day is None:
            raise CommandError("Pass both --year and --day (or --list).")

        specs = _select_specs(year=year, day=day, part=part)

        if input_option is not None:
            input_path = Path(input_option)
        else:
            input_path = default_input_path(year, day, input_dir=Path(settings.PUZZLE_INPUT_DIR))

        logger.info("Solving %d-%02d from %s.", year, day, input_path)
        try:
            raw_text = load_puzzle_text(input_path)
        except FileNotFoundError as exc:
            logger.warning("Puzzle input %s is missing.", input_path)
            raise CommandError(f"Puzzle input not found: {input_path}") from exc

        for spec in specs:
            try:
                answer = spec.solve(raw_text)
            except MalformedInputError as exc:
                logger.warning("Rejected input for %s: %s", spec.key, exc)
                raise CommandError(f"[{spec.key}] {exc}") from exc
            self.stdout.write(f"[{spec.key}] {spec.title}: {answer}")
        return None


def _select_specs(*, year: int, day: int, part: int | None) -> tuple[PuzzleSolverSpec, ...]:
    """Return the specs to run, raising CommandError for unknown puzzles."""

    if part is not None:
        spec = DEFAULT_REGISTRY.get(year, day, part)
        if spec is None:
            raise CommandError(f"No solver registered for {year}-{day:02d}-{part}.")
        return (spec,)

    specs = DEFAULT_REGISTRY.parts_for_day(year, day)
    if not specs:
        raise CommandError(f"No solvers registered for {year}-{day:02d}.")
    return specs
