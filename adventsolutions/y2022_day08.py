"""Treetop Tree House: visibility and scenic scores in a grid of trees."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class Forest:
    """Rows of tree heights."""

    trees: list[list[int]] = field(default_factory=list)

    def _sight_lines(self, x: int, y: int) -> list[list[int]]:
        """Heights seen from (x, y) looking up, down, left and right."""
        row = self.trees[y]
        column = [r[x] for r in self.trees]
        return [
            column[:y][::-1],
            column[y + 1:],
            row[:x][::-1],
            row[x + 1:],
        ]

    def scenic_score(self, x: int, y: int) -> int:
        """Product of the viewing distances in the four directions."""
        height = self.trees[y][x]
        score = 1
        for line in self._sight_lines(x, y):
            distance = 0
            for tree in line:
                distance += 1
                if tree >= height:
                    break
            score *= distance
        return score

    def best_scenic_score(self) -> int:
        return max(
            (
                self.scenic_score(x, y)
                for y, row in enumerate(self.trees)
                for x in range(len(row))
            ),
            default=0,
        )

    def visible_tree_count(self) -> int:
        """Number of trees visible from outside the forest."""
        if not self.trees:
            raise ValueError("empty forest")

        # Every tree on the edge is visible.
        count = 2 * len(self.trees) + 2 * (len(self.trees[0]) - 2)

        for y in range(1, len(self.trees) - 1):
            row = self.trees[y]
            for x in range(1, len(row) - 1):
                height = row[x]
                if any(
                    all(tree < height for tree in line)
                    for line in self._sight_lines(x, y)
                ):
                    count += 1
        return count


def parse_tree_row(line: str) -> list[int]:
    """Parse a line of digits into tree heights."""
    if line == "":
        raise ValueError("empty line")
    if not all("0" <= char <= "9" for char in line):
        raise ValueError(f"invalid line '{line}'")
    return [int(char) for char in line]


def parse_forest(lines: Iterable[str]) -> Forest:
    return Forest([parse_tree_row(line) for line in lines])


def solve(text: str) -> tuple[int, int]:
    """Print and return the visible tree count and the best scenic score."""
    forest = parse_forest(text.split("\n"))

    visible = forest.visible_tree_count()
    print(f"Number of visible trees: {visible}")

    best = forest.best_scenic_score()
    print(f"Best possible scenic score: {best}")

    return visible, best


__all__: Sequence[str] = (
    "Forest",
    "parse_tree_row",
    "parse_forest",
    "solve",
)