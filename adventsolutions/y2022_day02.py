"""Rock Paper Scissors strategy guide scoring."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Shape(enum.Enum):
    ROCK = enum.auto()
    PAPER = enum.auto()
    SCISSOR = enum.auto()


class Result(enum.Enum):
    WIN = enum.auto()
    LOSE = enum.auto()
    DRAW = enum.auto()


_FIRST_SHAPES = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSOR}
_SECOND_SHAPES = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSOR}
_RESULTS = {"X": Result.LOSE, "Y": Result.DRAW, "Z": Result.WIN}

_SHAPE_SCORES = {Shape.ROCK: 1, Shape.PAPER: 2, Shape.SCISSOR: 3}
_RESULT_SCORES = {Result.LOSE: 0, Result.DRAW: 3, Result.WIN: 6}

# Maps a shape to the shape it defeats.
_BEATS = {Shape.ROCK: Shape.SCISSOR, Shape.PAPER: Shape.ROCK, Shape.SCISSOR: Shape.PAPER}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}


def parse_first_shape(text: str) -> Shape:
    """Parse the opponent's shape: A, B or C."""
    try:
        return _FIRST_SHAPES[text]
    except KeyError:
        raise ValueError(f"invalid shape '{text}'") from None


def parse_second_shape(text: str) -> Shape:
    """Parse your shape: X, Y or Z."""
    try:
        return _SECOND_SHAPES[text]
    except KeyError:
        raise ValueError(f"invalid shape '{text}'") from None


def parse_result(text: str) -> Result:
    """Parse the desired result: X (lose), Y (draw) or Z (win)."""
    try:
        return _RESULTS[text]
    except KeyError:
        raise ValueError(f"invalid result '{text}'") from None


def shape_score(shape: Shape) -> int:
    return _SHAPE_SCORES[shape]


def result_score(result: Result) -> int:
    return _RESULT_SCORES[result]


def shape_to_win(shape: Shape) -> Shape:
    """The shape that defeats ``shape``."""
    return _BEATEN_BY[shape]


def shape_to_lose(shape: Shape) -> Shape:
    """The shape that ``shape`` defeats."""
    return _BEATS[shape]


def shape_for_result(result: Result, shape: Shape) -> Shape:
    """The shape to play against ``shape`` to get ``result``."""
    if result is Result.DRAW:
        return shape
    if result is Result.WIN:
        return shape_to_win(shape)
    return shape_to_lose(shape)


@dataclass(frozen=True)
class Round:
    """One round: ``opponent`` is the other player's shape, ``mine`` is yours."""

    opponent: Shape
    mine: Shape

    def result(self) -> Result:
        if self.opponent is self.mine:
            return Result.DRAW
        return Result.WIN if _BEATS[self.mine] is self.opponent else Result.LOSE

    def score(self) -> int:
        return shape_score(self.mine) + result_score(self.result())


def parse_rounds(text: str, part_one: bool) -> list[Round]:
    """Parse the strategy guide.

    With ``part_one`` the second column is your shape; otherwise it is the
    result you must reach. Blank lines are skipped.
    """
    rounds: list[Round] = []

    for line in text.split("\n"):
        if line == "":
            continue

        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"unexpected line in input '{line}'")

        opponent = parse_first_shape(fields[0])
        if part_one:
            mine = parse_second_shape(fields[1])
        else:
            mine = shape_for_result(parse_result(fields[1]), opponent)

        rounds.append(Round(opponent, mine))

    return rounds


def solve(text: str) -> tuple[int, int]:
    """Print and return the total score under both readings of the guide."""
    first = sum(r.score() for r in parse_rounds(text, True))
    print(f"Total score: {first}")

    second = sum(r.score() for r in parse_rounds(text, False))
    print(f"Total score: {second}")

    return first, second