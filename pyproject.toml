[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolutions"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles (2021 day 15, 2022 days 1 to 14) with a command-line runner."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventsolutions = "adventsolutions.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolutions"]

[tool.pytest.ini_options]
addopts = "-ra"
