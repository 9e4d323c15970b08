"""Rope Bridge: follow a rope of knots as its head moves."""

from __future__ import annotations

import enum
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

_OP = re.compile(r"(.)\s*([+-]?\d+)", re.DOTALL)


class Direction(enum.Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


_MOVES = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class KnotPosition:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class KnotMovementOp:
    """Move the head ``count`` steps in ``direction``."""

    direction: Direction
    count: int


def movement_amount(direction: Direction) -> tuple[int, int]:
    """The (dx, dy) of one step in ``direction``; up is positive y."""
    return _MOVES[direction]


def distance(head: KnotPosition, tail: KnotPosition) -> float:
    """Euclidean distance between two knots."""
    return math.hypot(head.x - tail.x, head.y - tail.y)


def must_move_knot(head: KnotPosition, knot: KnotPosition) -> bool:
    """True if ``knot`` no longer touches ``head``."""
    if head == knot:
        return False
    dx = head.x - knot.x
    dy = head.y - knot.y
    # Same as distance(head, knot) > sqrt(2), without rounding.
    return dx * dx + dy * dy > 2


def _step_towards(target: int, current: int) -> int:
    return current + 1 if target > current else current - 1


def new_knot_position(head: KnotPosition, knot: KnotPosition) -> KnotPosition:
    """Where ``knot`` moves to keep up with ``head``."""
    if head.x == knot.x:
        return KnotPosition(knot.x, _step_towards(head.y, knot.y))
    if head.y == knot.y:
        return KnotPosition(_step_towards(head.x, knot.x), knot.y)
    return KnotPosition(_step_towards(head.x, knot.x), _step_towards(head.y, knot.y))


class World:
    """A rope of ``total_knots`` knots, recording every tail position."""

    def __init__(self, total_knots: int) -> None:
        if total_knots < 2:
            raise ValueError(f"a rope needs at least two knots, not {total_knots}")
        self.head = KnotPosition()
        self.knots = [KnotPosition() for _ in range(total_knots - 1)]
        self.min_x = self.min_y = self.max_x = self.max_y = 0
        self.tail_positions: set[KnotPosition] = {self.tail}

    @property
    def tail(self) -> KnotPosition:
        return self.knots[-1]

    def _track(self, position: KnotPosition) -> None:
        self.max_x = max(self.max_x, position.x)
        self.max_y = max(self.max_y, position.y)
        self.min_x = min(self.min_x, position.x)
        self.min_y = min(self.min_y, position.y)

    def apply(self, op: KnotMovementOp) -> None:
        """Move the head step by step, dragging the other knots after it."""
        dx, dy = movement_amount(op.direction)
        last = len(self.knots) - 1

        for _ in range(op.count):
            self.head = KnotPosition(self.head.x + dx, self.head.y + dy)
            self._track(self.head)

            previous = self.head
            for index, knot in enumerate(self.knots):
                if must_move_knot(previous, knot):
                    knot = new_knot_position(previous, knot)
                    self.knots[index] = knot
                    self._track(knot)
                    if index == last:
                        self.tail_positions.add(knot)
                previous = knot


def parse_knot_movement_op(line: str) -> KnotMovementOp:
    """Parse a line such as ``R 4``."""
    match = _OP.match(line)
    if match is None:
        raise ValueError(f"invalid line '{line}'")
    count = int(match.group(2))
    if count <= 0:
        raise ValueError("invalid movement count")
    try:
        direction = Direction(match.group(1))
    except ValueError:
        raise ValueError("invalid direction") from None
    return KnotMovementOp(direction, count)


def parse_knot_movement_ops(lines: Iterable[str]) -> list[KnotMovementOp]:
    return [parse_knot_movement_op(line) for line in lines]


def _run(ops: list[KnotMovementOp], total_knots: int) -> int:
    world = World(total_knots)
    for op in ops:
        world.apply(op)
    print(
        f"Dynamic board size ({world.min_x},{world.min_y},"
        f"{world.max_x},{world.max_y})"
    )
    visited = len(world.tail_positions)
    print(f"Tail knot visited {visited} positions")
    return visited


def solve(text: str) -> tuple[int, int]:
    """Print and return the tail positions visited with 2 and with 10 knots."""
    ops = parse_knot_movement_ops(text.split("\n"))
    return _run(ops, 2), _run(ops, 10)