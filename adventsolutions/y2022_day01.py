"""Calorie Counting: total the calories carried by each elf."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"[+-]?\d+")


def parse_elf_calorie_list(text: str) -> list[int]:
    """Return the total calories of each elf, in input order.

    Elves are separated by blank lines; an elf whose total is not positive
    is left out. Raises ValueError on a line that is not a single integer.
    """
    calories: list[int] = []
    current = 0

    if text == "":
        return calories

    for line in text.split("\n"):
        if line == "":
            if current > 0:
                calories.append(current)
                current = 0
            continue

        fields = line.split()
        if len(fields) != 1 or not _NUMBER.fullmatch(fields[0]):
            raise ValueError(f"unexpected line in input '{line}'")
        current += int(fields[0])

    if current > 0:
        calories.append(current)

    return calories


def solve(text: str) -> tuple[int | None, int | None]:
    """Print and return the largest total and the sum of the top three."""
    ranked = sorted(parse_elf_calorie_list(text), reverse=True)

    if not ranked:
        print("No elf calories in input file.")
        return None, None

    maximum = ranked[0]
    print(f"Maximum elf calories: {maximum}")

    if len(ranked) < 3:
        print("Not enough elves in input file.")
        return maximum, None

    top_three = sum(ranked[:3])
    print(f"Maximum calories from top 3 elves: {top_three}")
    return maximum, top_three