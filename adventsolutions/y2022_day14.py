"""Regolith Reservoir: simulate sand falling into a cave of rock."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_POINT = re.compile(r"\s*([+-]?\d+),([+-]?\d+)")


class Cell(enum.Enum):
    EDGE = "#"
    AIR = "."
    SAND = "o"
    SOURCE = "+"
    INFINITY = "^"


class DropResult(enum.Enum):
    AT_REST = enum.auto()
    FALLING = enum.auto()
    BLOCKED = enum.auto()


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Bounds:
    origin: Point
    width: int
    height: int


class Cave:
    """A grid of cells with a sand source."""

    def __init__(self, bounds: Bounds, sand_source: Point) -> None:
        self.bounds = bounds
        self.sand_source = sand_source
        self.columns = [
            [Cell.AIR] * (bounds.height + 1) for _ in range(bounds.width + 1)
        ]
        self.set_cell(sand_source, Cell.SOURCE)

    def _offset(self, point: Point) -> tuple[int, int]:
        column = point.x - self.bounds.origin.x
        row = point.y - self.bounds.origin.y
        if not (0 <= column <= self.bounds.width and 0 <= row <= self.bounds.height):
            raise IndexError(f"point ({point.x},{point.y}) is outside the cave")
        return column, row

    def set_cell(self, point: Point, cell: Cell) -> None:
        column, row = self._offset(point)
        self.columns[column][row] = cell

    def get_cell(self, point: Point) -> Cell:
        """The cell at ``point``, or INFINITY outside the cave's bounds."""
        origin = self.bounds.origin
        if not (
            origin.x <= point.x < origin.x + self.bounds.width
            and origin.y <= point.y < origin.y + self.bounds.height
        ):
            return Cell.INFINITY
        return self.columns[point.x - origin.x][point.y - origin.y]

    def add_edge(self, p1: Point, p2: Point) -> None:
        """Draw a vertical or horizontal line of rock between two points."""
        if p1.x == p2.x:
            for y in range(min(p1.y, p2.y), max(p1.y, p2.y) + 1):
                self.set_cell(Point(p1.x, y), Cell.EDGE)
        elif p1.y == p2.y:
            for x in range(min(p1.x, p2.x), max(p1.x, p2.x) + 1):
                self.set_cell(Point(x, p1.y), Cell.EDGE)
        else:
            raise ValueError("Non vertical or horizontal line")

    def describe(self) -> str:
        origin = self.bounds.origin
        return "\n".join(
            "".join(
                self.get_cell(Point(origin.x + x, origin.y + y)).value
                for x in range(self.bounds.width)
            )
            for y in range(self.bounds.height)
        )

    def drop_sand(self) -> DropResult:
        """Drop one unit of sand from the source and report where it ended."""
        position = self.sand_source
        while True:
            for dx in (0, -1, 1):
                candidate = Point(position.x + dx, position.y + 1)
                cell = self.get_cell(candidate)
                if cell is Cell.INFINITY:
                    return DropResult.FALLING
                if cell is Cell.AIR:
                    position = candidate
                    break
            else:
                self.set_cell(position, Cell.SAND)
                if position == self.sand_source:
                    return DropResult.BLOCKED
                return DropResult.AT_REST


def parse_path(line: str) -> list[Point]:
    """Parse ``x,y -> x,y -> ...`` into points."""
    points = []
    for part in line.split(" -> "):
        match = _POINT.match(part)
        if match is None:
            raise ValueError(f"invalid point '{part}'")
        points.append(Point(int(match.group(1)), int(match.group(2))))
    return points


def parse_cave(text: str, infinite_abyss: bool) -> Cave:
    """Build a cave from rock paths.

    With ``infinite_abyss`` the cave is just wide enough for the rock and
    sand falls out of the bottom; otherwise there is a floor two rows below
    the lowest rock.
    """
    paths = [parse_path(line) for line in text.split("\n")]
    points = [p for path in paths for p in path]

    max_depth = max((p.y for p in points), default=0)
    max_depth = max(max_depth, 0)
    min_width = min(p.x for p in points)
    max_width = max(-1, max(p.x for p in points))

    if infinite_abyss:
        bounds = Bounds(Point(min_width, 0), max_width - min_width + 1, max_depth + 1)
    else:
        bounds = Bounds(Point(0, 0), 1001, max_depth + 3)

    cave = Cave(bounds, Point(500, 0))

    for path in paths:
        for p1, p2 in zip(path, path[1:]):
            cave.add_edge(p1, p2)

    if not infinite_abyss:
        cave.add_edge(Point(0, max_depth + 2), Point(1000, max_depth + 2))

    return cave


def solve(text: str) -> tuple[int, int]:
    """Print and return the sand counts for the abyss and the floor."""
    cave = parse_cave(text, True)
    print(cave.describe())

    resting = 0
    while cave.drop_sand() is not DropResult.FALLING:
        resting += 1

    print(
        f"{resting} sand units come to rest before the others start flowing "
        "into the abyss."
    )
    print(cave.describe())

    floored = parse_cave(text, False)
    until_blocked = 1
    while floored.drop_sand() is not DropResult.BLOCKED:
        until_blocked += 1

    print(f"{until_blocked} sand units come to rest before the source is blocked.")
    return resting, until_blocked