"""Command line: run a day's solution on an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from adventsolutions import (
    y2021_day15,
    y2022_day01,
    y2022_day02,
    y2022_day03,
    y2022_day04,
    y2022_day05,
    y2022_day06,
    y2022_day07,
    y2022_day08,
    y2022_day09,
    y2022_day10,
    y2022_day11,
    y2022_day12,
    y2022_day13,
    y2022_day14,
)

Solver = Callable[[str], object]

SOLUTIONS: dict[str, dict[str, tuple[str, Solver]]] = {
    "2021": {
        "day15": ("Chiton", y2021_day15.solve),
    },
    "2022": {
        "day01": ("Calorie Counting", y2022_day01.solve),
        "day02": ("Rock Paper Scissors", y2022_day02.solve),
        "day03": ("Rucksack Reorganization", y2022_day03.solve),
        "day04": ("Camp Cleanup", y2022_day04.solve),
        "day05": ("Supply Stacks", y2022_day05.solve),
        "day06": ("Tuning Trouble", y2022_day06.solve),
        "day07": ("No Space Left On Device", y2022_day07.solve),
        "day08": ("Treetop Tree House", y2022_day08.solve),
        "day09": ("Rope Bridge", y2022_day09.solve),
        "day10": ("Cathode-Ray Tube", y2022_day10.solve),
        "day11": ("Monkey in the Middle", y2022_day11.solve),
        "day12": ("Hill Climbing Algorithm", y2022_day12.solve),
        "day13": ("Distress Signal", y2022_day13.solve),
        "day14": ("Regolith Reservoir", y2022_day14.solve),
    },
}


def build_parser() -> argparse.ArgumentParser:
    """The parser: a year command holding one command per day."""
    parser = argparse.ArgumentParser(
        prog="adventsolutions", description="Advent Of Code solutions"
    )
    parser.set_defaults(solver=None, help_parser=parser)
    years = parser.add_subparsers(dest="year", metavar="YEAR")

    for year, days in SOLUTIONS.items():
        year_parser = years.add_parser(
            year, help=f"{year} solutions for Advent Of Code"
        )
        year_parser.set_defaults(solver=None, help_parser=year_parser)
        day_commands = year_parser.add_subparsers(dest="day", metavar="DAY")

        for day, (title, solver) in days.items():
            day_parser = day_commands.add_parser(day, help=title, description=title)
            day_parser.add_argument(
                "-i", "--input", required=True, help="path of the puzzle input"
            )
            day_parser.set_defaults(solver=solver)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen day's solution; return the exit status."""
    args = build_parser().parse_args(argv)

    if args.solver is None:
        args.help_parser.print_help()
        return 0

    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except OSError as error:
        print(error, file=sys.stderr)
        return 1

    try:
        args.solver(text)
    except (ValueError, IndexError, RuntimeError) as error:
        print(error, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())