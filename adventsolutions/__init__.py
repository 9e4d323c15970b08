"""Advent of Code solutions: 2021 day 15 and 2022 days 1 to 14, with a command-line runner."""

__version__ = "0.1.0"