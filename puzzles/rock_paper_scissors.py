"""Rock Paper Scissors strategy guide scoring (2022, day 2).

Each line of a strategy guide holds the opponent's move (`A`, `B`, `C`) and a
second column (`X`, `Y`, `Z`). The second column is read either as our own
shape (shape mode) or as the outcome we must produce (outcome mode).

A round scores the value of our shape (rock=1, paper=2, scissors=3) plus the
value of the outcome (loss=0, draw=3, win=6).
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Callable, Final, TypeVar

from .records import MalformedInputError, is_blank, split_records

logger = logging.getLogger(__name__)


class Shape(StrEnum):
    """A hand shape; each shape defeats exactly one other shape."""

    rock = "rock"
    paper = "paper"
    scissors = "scissors"

    @property
    def defeats(self) -> Shape:
        """Return the shape this shape beats."""

        return _DEFEATS[self]

    @property
    def defeated_by(self) -> Shape:
        """Return the shape that beats this shape."""

        return _DEFEATED_BY[self]


class Outcome(StrEnum):
    """Result of a round from our point of view."""

    win = "win"
    draw = "draw"
    loss = "loss"


RoundScorer = Callable[[str], int]
_T = TypeVar("_T")

_DEFEATS: Final[dict[Shape, Shape]] = {
    Shape.rock: Shape.scissors,
    Shape.scissors: Shape.paper,
    Shape.paper: Shape.rock,
}
_DEFEATED_BY: Final[dict[Shape, Shape]] = {loser: winner for winner, loser in _DEFEATS.items()}

_SHAPE_SCORES: Final[dict[Shape, int]] = {
    Shape.rock: 1,
    Shape.paper: 2,
    Shape.scissors: 3,
}
_OUTCOME_SCORES: Final[dict[Outcome, int]] = {
    Outcome.win: 6,
    Outcome.draw: 3,
    Outcome.loss: 0,
}

_OPPONENT_SHAPES: Final[dict[str, Shape]] = {
    "A": Shape.rock,
    "B": Shape.paper,
    "C": Shape.scissors,
}
_OWN_SHAPES: Final[dict[str, Shape]] = {
    "X": Shape.rock,
    "Y": Shape.paper,
    "Z": Shape.scissors,
}
_DESIRED_OUTCOMES: Final[dict[str, Outcome]] = {
    "X": Outcome.loss,
    "Y": Outcome.draw,
    "Z": Outcome.win,
}

_TOKEN_SEPARATOR: Final[str] = " "


def total_score_with_shapes(raw_text: str) -> int:
    """Score a strategy guide reading `X`/`Y`/`Z` as our shapes."""

    return compute_total_score(raw_text, score_round_with_shapes)


def total_score_with_outcomes(raw_text: str) -> int:
    """Score a strategy guide reading `X`/`Y`/`Z` as desired outcomes."""

    return compute_total_score(raw_text, score_round_with_outcomes)


def compute_total_score(raw_text: str, scorer: RoundScorer) -> int:
    """Sum the score of every non-blank round in a strategy guide.

    Args:
        raw_text: Newline-separated rounds such as `"A Y"`.
        scorer: Callable scoring a single round line.

    Returns:
        The total score across all rounds.

    Raises:
        MalformedInputError: On the first round outside the guide's grammar.
    """

    total = 0
    rounds = 0
    for line_number, record in enumerate(split_records(raw_text), start=1):
        if is_blank(record):
            continue
        try:
            total += scorer(record)
        except MalformedInputError as exc:
            raise MalformedInputError(
                record=exc.record, line_number=line_number, expected=exc.expected
            ) from exc
        rounds += 1

    logger.debug("Scored %d rounds.", rounds)
    return total


def score_round_with_shapes(round_line: str) -> int:
    """Score a single round where the second column is our shape."""

    opponent_token, own_token = _split_round(round_line)
    theirs = _lookup(_OPPONENT_SHAPES, opponent_token)
    ours = _lookup(_OWN_SHAPES, own_token)
    return score_round(ours, play_round(ours, theirs))


def score_round_with_outcomes(round_line: str) -> int:
    """Score a single round where the second column is the desired outcome."""

    opponent_token, outcome_token = _split_round(round_line)
    theirs = _lookup(_OPPONENT_SHAPES, opponent_token)
    desired = _lookup(_DESIRED_OUTCOMES, outcome_token)
    return score_round(shape_for_outcome(theirs, desired), desired)


def play_round(ours: Shape, theirs: Shape) -> Outcome:
    """Return the outcome of playing `ours` against `theirs`."""

    if ours == theirs:
        return Outcome.draw
    if ours.defeats == theirs:
        return Outcome.win
    return Outcome.loss


def shape_for_outcome(theirs: Shape, desired: Outcome) -> Shape:
    """Return the shape that produces `desired` against `theirs`."""

    if desired == Outcome.draw:
        return theirs
    if desired == Outcome.win:
        return theirs.defeated_by
    return theirs.defeats


def score_round(ours: Shape, outcome: Outcome) -> int:
    """Return the score of a round given our shape and its outcome."""

    return _SHAPE_SCORES[ours] + _OUTCOME_SCORES[outcome]


def _split_round(round_line: str) -> tuple[str, str]:
    """Split a round line into its two tokens."""

    tokens = round_line.split(_TOKEN_SEPARATOR)
    if len(tokens) != 2:
        raise MalformedInputError(
            record=round_line, line_number=None, expected="two space-separated tokens"
        )
    return tokens[0], tokens[1]


def _lookup(table: dict[str, _T], token: str) -> _T:
    """Map a token through a vocabulary table, rejecting unknown tokens."""

    value = table.get(token)
    if value is None:
        expected = "one of " + ", ".join(sorted(table))
        raise MalformedInputError(record=token, line_number=None, expected=expected)
    return value
