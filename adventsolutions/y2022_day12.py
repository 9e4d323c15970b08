"""Hill Climbing Algorithm: shortest climb through a height map."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, field

LOWEST = 0
HIGHEST = ord("z") - ord("a")


class Direction(enum.Enum):
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        dx, dy = _DELTAS[direction]
        return Position(self.x + dx, self.y + dy)


@dataclass
class World:
    """A height map with a start and an end position."""

    start: Position = Position(0, 0)
    end: Position = Position(0, 0)
    width: int = 0
    height: int = 0
    rows: list[list[int]] = field(default_factory=list)

    def height_at(self, position: Position) -> int:
        if not (0 <= position.y < len(self.rows) and 0 <= position.x < len(self.rows[position.y])):
            raise IndexError(f"position ({position.x},{position.y}) is outside the world")
        return self.rows[position.y][position.x]

    def positions_at_height(self, height: int) -> list[Position]:
        return [
            Position(x, y)
            for y, row in enumerate(self.rows)
            for x, h in enumerate(row)
            if h == height
        ]


@dataclass(eq=False)
class SolutionState:
    """A position reached by a sequence of moves.

    States made by ``move`` share one set of visited positions.
    """

    world: World
    position: Position = Position(0, 0)
    visited: set[Position] = field(default_factory=set)
    moves: list[Direction] = field(default_factory=list)

    def set_position(self, position: Position) -> None:
        self.position = position
        self.visited.add(position)

    def at_end(self) -> bool:
        return self.position == self.world.end

    def move_description(self) -> str:
        return "".join(f"{move.value} " for move in self.moves)

    def was_position_visited(self, direction: Direction) -> bool:
        proposed = self.position.step(direction)
        if not (0 <= proposed.x < self.world.width and 0 <= proposed.y < self.world.height):
            return False
        return proposed in self.visited

    def is_move_legal(self, direction: Direction) -> bool:
        return not (
            self.was_position_visited(direction)
            or self.move_exceeds_bounds(direction)
            or self.move_backtracks(direction)
            or self.destination_height_invalid(direction)
        )

    def legal_moves(self) -> list[Direction]:
        return [direction for direction in Direction if self.is_move_legal(direction)]

    def move_exceeds_bounds(self, direction: Direction) -> bool:
        if direction is Direction.UP:
            return self.position.y == 0
        if direction is Direction.DOWN:
            return self.position.y == self.world.height - 1
        if direction is Direction.LEFT:
            return self.position.x == 0
        return self.position.x == self.world.width - 1

    def move_backtracks(self, direction: Direction) -> bool:
        if not self.moves:
            return False
        return _OPPOSITES[self.moves[-1]] is direction

    def destination_height_invalid(self, direction: Direction) -> bool:
        """True if the destination is more than one step higher."""
        current = self.world.height_at(self.position)
        proposed = self.world.height_at(self.position.step(direction))
        return proposed > current + 1

    def move(self, direction: Direction) -> SolutionState:
        state = SolutionState(
            self.world,
            visited=self.visited,
            moves=[*self.moves, direction],
        )
        state.set_position(self.position.step(direction))
        return state


def parse_world(text: str) -> World:
    """Parse a height map of a-z, with S (lowest) as start and E (highest) as end."""
    world = World()

    for y, line in enumerate(text.split("\n")):
        if line == "":
            continue

        row = []
        for x, char in enumerate(line):
            if char == "S":
                world.start = Position(x, y)
                row.append(LOWEST)
            elif char == "E":
                world.end = Position(x, y)
                row.append(HIGHEST)
            elif "a" <= char <= "z":
                row.append(ord(char) - ord("a"))
            else:
                raise ValueError(f"unknown character '{char}' at {x},{y}")
        world.width = len(row)

        world.rows.append(row)
        world.height += 1

    return world


def find_minimum_movement(world: World) -> int | None:
    return find_minimum_movement_from(world, world.start)


def find_minimum_movement_from(world: World, position: Position) -> int | None:
    """Fewest moves from ``position`` to the end, or None if it cannot be reached."""
    state = SolutionState(world)
    state.set_position(position)

    queue = deque([state])
    while queue:
        current = queue.popleft()
        if current.at_end():
            return len(current.moves)
        queue.extend(current.move(direction) for direction in current.legal_moves())

    return None


def solve(text: str) -> tuple[int | None, int | None]:
    """Print and return the fewest moves from the start and from any lowest square."""
    world = parse_world(text)

    first = find_minimum_movement(world)
    print(f"Minimum moves {first}")

    distances = [
        moves
        for position in world.positions_at_height(LOWEST)
        if (moves := find_minimum_movement_from(world, position)) is not None
    ]
    second = min(distances, default=None)
    print(f"Minimum moves from scenic positions {second}")

    return first, second