"""Camp Cleanup: compare pairs of section assignments."""

from __future__ import annotations

import re
from dataclasses import dataclass

_RANGE = re.compile(r"([+-]?\d+)-([+-]?\d+)")


@dataclass(frozen=True)
class SectionRange:
    """An inclusive range of section IDs."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"start range greater than end range ({self.start} > {self.end})"
            )


@dataclass(frozen=True)
class CleaningPair:
    """The section ranges assigned to two elves."""

    first: SectionRange
    second: SectionRange

    def fully_contained(self) -> bool:
        """True if either range contains the other."""
        a, b = self.first, self.second
        return (a.start <= b.start and a.end >= b.end) or (
            b.start <= a.start and b.end >= a.end
        )

    def intersect(self) -> bool:
        """True if the ranges overlap at all."""
        return not (
            self.first.end < self.second.start or self.first.start > self.second.end
        )


def parse_section_range(text: str) -> SectionRange:
    """Parse ``start-end``."""
    if text == "":
        raise ValueError("empty string")
    match = _RANGE.match(text)
    if match is None:
        raise ValueError(f"invalid section range '{text}'")
    return SectionRange(int(match.group(1)), int(match.group(2)))


def parse_cleaning_pair(text: str) -> CleaningPair:
    """Parse ``a-b,c-d``."""
    if text == "":
        raise ValueError("empty string")
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"invalid cleaning pair '{text}'")
    return CleaningPair(parse_section_range(parts[0]), parse_section_range(parts[1]))


def parse_cleaning_assignments(text: str) -> list[CleaningPair]:
    """Parse one cleaning pair per line."""
    if text == "":
        return []
    return [parse_cleaning_pair(line) for line in text.split("\n")]


def solve(text: str) -> tuple[int, int]:
    """Print and return the counts of contained and overlapping pairs."""
    assignments = parse_cleaning_assignments(text)

    contained = sum(1 for a in assignments if a.fully_contained())
    print(f"{contained} assignments fully contained")

    overlapping = sum(1 for a in assignments if a.intersect())
    print(f"{overlapping} assignments intersect")

    return contained, overlapping