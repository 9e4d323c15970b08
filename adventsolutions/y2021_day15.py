"""Chiton: least-risk paths through a grid, plus beacon sensor coverage."""

from __future__ import annotations

import enum
import re
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

MAX_RISK = 99

_INT = r"([+-]?\d+)"
_SENSOR_LINE = re.compile(
    rf"Sensor at x={_INT}, y={_INT}: closest beacon is at x={_INT}, y={_INT}"
)


@dataclass(frozen=True, order=True)
class Point:
    """A grid position; y grows downwards."""

    x: int
    y: int

    def up(self) -> Point:
        return Point(self.x, self.y - 1)

    def down(self) -> Point:
        return Point(self.x, self.y + 1)

    def left(self) -> Point:
        return Point(self.x - 1, self.y)

    def right(self) -> Point:
        return Point(self.x + 1, self.y)


class Direction(enum.Enum):
    UP = enum.auto()
    RIGHT = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    INVALID = enum.auto()


def absolute_difference(a: int, b: int) -> int:
    return abs(a - b)


def manhattan_distance(p1: Point, p2: Point) -> int:
    return absolute_difference(p1.x, p2.x) + absolute_difference(p1.y, p2.y)


@dataclass(frozen=True)
class Sensor:
    """A sensor and the closest beacon it detected."""

    position: Point
    beacon: Point
    beacon_distance: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "beacon_distance", manhattan_distance(self.position, self.beacon)
        )

    def covers(self, point: Point) -> bool:
        """True if ``point`` is no farther away than the sensor's beacon."""
        return manhattan_distance(self.position, point) <= self.beacon_distance


@dataclass
class Network:
    """Sensors and the rectangle of interest around them."""

    min: Point
    max: Point
    sensors: list[Sensor] = field(default_factory=list)

    def closest_sensor(self, point: Point) -> Sensor | None:
        """The first sensor at the smallest distance from ``point``."""
        best: Sensor | None = None
        best_distance = None
        for sensor in self.sensors:
            d = manhattan_distance(sensor.position, point)
            if best_distance is None or d < best_distance:
                best, best_distance = sensor, d
        return best

    def sensor_intersection(self, point: Point) -> list[Sensor]:
        """Sensors whose coverage includes ``point``, in input order."""
        return [sensor for sensor in self.sensors if sensor.covers(point)]

    def invalid_beacon_locations(self, row: int) -> list[Point]:
        """Points on ``row`` where no undetected beacon can be, sorted by x."""
        locations = []
        for x in range(self.min.x, self.max.x + 1):
            point = Point(x, row)
            if any(s.beacon != point for s in self.sensor_intersection(point)):
                locations.append(point)
        return locations

    def possible_beacon_locations(self) -> list[Point]:
        """Points inside the bounds that no sensor covers, row by row."""
        locations = []
        for y in range(self.min.y, self.max.y + 1):
            x = self.min.x
            while x <= self.max.x:
                point = Point(x, y)
                for sensor in self.sensors:
                    if sensor.covers(point):
                        # Skip past the rest of this sensor's coverage on the row.
                        x = (
                            sensor.position.x
                            + sensor.beacon_distance
                            - absolute_difference(y, sensor.position.y)
                            + 1
                        )
                        break
                else:
                    locations.append(point)
                    x += 1
        return locations


def parse_sensor_line(line: str) -> Sensor:
    """Parse ``Sensor at x=A, y=B: closest beacon is at x=C, y=D``."""
    match = _SENSOR_LINE.match(line)
    if match is None:
        raise ValueError(f"invalid sensor line '{line}'")
    sx, sy, bx, by = (int(g) for g in match.groups())
    return Sensor(Point(sx, sy), Point(bx, by))


def parse_sensors(text: str) -> list[Sensor]:
    return [parse_sensor_line(line) for line in text.split("\n")]


def parse_network(text: str, tight_bounds: bool) -> Network:
    """Build a network.

    With ``tight_bounds`` the bounds enclose the sensors only; otherwise
    they enclose every sensor's whole coverage.
    """
    sensors = parse_sensors(text)

    def reach(sensor: Sensor) -> int:
        return 0 if tight_bounds else sensor.beacon_distance

    low = Point(
        min(s.position.x - reach(s) for s in sensors),
        min(s.position.y - reach(s) for s in sensors),
    )
    high = Point(
        max(s.position.x + reach(s) for s in sensors),
        max(s.position.y + reach(s) for s in sensors),
    )
    return Network(low, high, sensors)


@dataclass
class RiskMap:
    """Risk levels of a grid and the cumulative risk worked out from them."""

    width: int
    height: int
    map: list[list[int]]
    cumulative: list[list[int]]

    def _check(self, position: Point) -> None:
        if not (0 <= position.x < self.width and 0 <= position.y < self.height):
            raise IndexError(f"position ({position.x},{position.y}) is outside the map")

    def risk(self, position: Point) -> int:
        self._check(position)
        return self.map[position.y][position.x]

    def cumulative_risk(self, position: Point) -> int:
        self._check(position)
        return self.cumulative[position.y][position.x]

    def set_cumulative_risk(self, position: Point, value: int) -> None:
        self._check(position)
        self.cumulative[position.y][position.x] = value

    def recurse_best_direction(self, position: Point) -> tuple[int, Direction]:
        """Pick the cheaper of the right and down neighbours, looking ahead on ties."""
        if position.x >= self.width - 1 or position.y >= self.height - 1:
            return MAX_RISK, Direction.INVALID

        down = self.risk(position.down())
        right = self.risk(position.right())

        if down < right:
            return down, Direction.DOWN
        if right < down:
            return right, Direction.RIGHT

        right_ahead, _ = self.recurse_best_direction(position.right())
        down_ahead, _ = self.recurse_best_direction(position.down())
        if right_ahead < down_ahead:
            return right_ahead, Direction.RIGHT
        return down_ahead, Direction.DOWN

    def walk_least_risk_reversed(self, position: Point) -> int:
        """Fill in cumulative risk backwards from ``position``, moving only
        right or down, and return the total risk from the top-left corner.

        The risk of the top-left corner itself is not counted.
        """
        origin = Point(0, 0)
        visited = {position}
        queue = deque([position])

        while queue:
            candidate = queue.popleft()

            neighbours = []
            if candidate.x < self.width - 1:
                neighbours.append(self.cumulative_risk(candidate.right()))
            if candidate.y < self.height - 1:
                neighbours.append(self.cumulative_risk(candidate.down()))

            if neighbours:
                least = min(neighbours)
                if candidate == origin:
                    self.set_cumulative_risk(candidate, least)
                else:
                    self.set_cumulative_risk(candidate, least + self.risk(candidate))

            for nxt in (candidate.left(), candidate.up()):
                if (
                    0 <= nxt.x < self.width
                    and 0 <= nxt.y < self.height
                    and nxt not in visited
                ):
                    visited.add(nxt)
                    queue.append(nxt)

        return self.cumulative_risk(origin)


def parse_risk_map(text: str) -> RiskMap:
    """Parse rows of risk digits."""
    rows = [[ord(char) - ord("0") for char in line] for line in text.split("\n")]
    width = len(rows[-1]) if rows else 0
    return RiskMap(width, len(rows), rows, [list(row) for row in rows])


def _corner(risk_map: RiskMap) -> Point:
    return Point(risk_map.width - 1, risk_map.height - 1)


def solve(text: str) -> int:
    """Print and return the lowest total risk from top-left to bottom-right."""
    risk_map = parse_risk_map(text)
    total = risk_map.walk_least_risk_reversed(_corner(risk_map))
    print(f"Least amount of risk: {total}.")
    return total


__all__: Iterable[str] = (
    "MAX_RISK",
    "Point",
    "Direction",
    "Sensor",
    "Network",
    "RiskMap",
    "absolute_difference",
    "manhattan_distance",
    "parse_sensor_line",
    "parse_sensors",
    "parse_network",
    "parse_risk_map",
    "solve",
)