"""Rucksack Reorganization: find shared items and group badges."""

from __future__ import annotations

from dataclasses import dataclass


def item_priority(item: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52, anything else 0."""
    if "a" <= item <= "z" and len(item) == 1:
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z" and len(item) == 1:
        return ord(item) - ord("A") + 27
    return 0


@dataclass(frozen=True)
class Rucksack:
    """A rucksack with its two compartments."""

    first: str
    second: str

    @classmethod
    def from_items(cls, items: str) -> Rucksack:
        """Split ``items`` into two halves, one per compartment."""
        half = len(items) // 2
        return cls(items[:half], items[half:])

    @property
    def items(self) -> str:
        return self.first + self.second

    def common_item(self) -> str:
        """The first item of the first compartment also in the second."""
        if len(self.first) != len(self.second):
            raise ValueError("mismatched compartment sizes")
        for item in self.first:
            if item in self.second:
                return item
        raise ValueError("no common element")


@dataclass(frozen=True)
class Group:
    """Three rucksacks carried by one group of elves."""

    rucksacks: tuple[Rucksack, Rucksack, Rucksack]

    def badge(self) -> str | None:
        """The item present in all three rucksacks, or None if there is none."""
        first, *others = (r.items for r in self.rucksacks)
        shared = set(first).intersection(*others)
        return next((item for item in first if item in shared), None)


def parse_rucksack(line: str) -> Rucksack:
    if line == "":
        raise ValueError("empty line")
    if len(line) % 2 != 0:
        raise ValueError(f"non-even number of items '{line}'")
    return Rucksack.from_items(line)


def parse_rucksacks(text: str) -> list[Rucksack]:
    """Parse one rucksack per line, skipping blank lines."""
    return [parse_rucksack(line) for line in text.split("\n") if line != ""]


def parse_groups(text: str) -> list[Group]:
    """Parse consecutive lines in threes into groups."""
    if text == "":
        return []

    lines = text.split("\n")
    groups: list[Group] = []
    for start in range(0, len(lines), 3):
        chunk = lines[start:start + 3]
        if len(chunk) != 3:
            raise ValueError("incomplete group of rucksacks")
        r1, r2, r3 = (parse_rucksack(line) for line in chunk)
        groups.append(Group((r1, r2, r3)))
    return groups


def solve(text: str) -> tuple[int, int]:
    """Print and return the shared-item and badge priority totals."""
    total = sum(item_priority(r.common_item()) for r in parse_rucksacks(text))
    print(f"Total priority: {total}")

    badges = (g.badge() for g in parse_groups(text))
    badge_total = sum(item_priority(b) for b in badges if b is not None)
    print(f"Total badge priority: {badge_total}")

    return total, badge_total