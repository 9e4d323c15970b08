# adventsolutions

Solutions to Advent of Code puzzles: 2021 day 15 and 2022 days 1 to 14.
The package has no dependencies beyond the standard library.

Each day is a module named after its year and day:

| Module | Puzzle |
| --- | --- |
| `adventsolutions.y2021_day15` | Chiton |
| `adventsolutions.y2022_day01` | Calorie Counting |
| `adventsolutions.y2022_day02` | Rock Paper Scissors |
| `adventsolutions.y2022_day03` | Rucksack Reorganization |
| `adventsolutions.y2022_day04` | Camp Cleanup |
| `adventsolutions.y2022_day05` | Supply Stacks |
| `adventsolutions.y2022_day06` | Tuning Trouble |
| `adventsolutions.y2022_day07` | No Space Left On Device |
| `adventsolutions.y2022_day08` | Treetop Tree House |
| `adventsolutions.y2022_day09` | Rope Bridge |
| `adventsolutions.y2022_day10` | Cathode-Ray Tube |
| `adventsolutions.y2022_day11` | Monkey in the Middle |
| `adventsolutions.y2022_day12` | Hill Climbing Algorithm |
| `adventsolutions.y2022_day13` | Distress Signal |
| `adventsolutions.y2022_day14` | Regolith Reservoir |

Every module has parsers for its puzzle input, the classes that model the
puzzle, and a `solve(text)` function. `solve` prints the answers to both
parts and also returns them (a tuple for most days; a single value for
2022 day 10 and 2021 day 15). Where a day may have no answer, such as an
unreachable end in day 12 or a missing marker in day 6, `None` is returned.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `adventsolutions` command takes a year, a day and the path of an input
file:

```
adventsolutions 2022 day01 --input input.txt
```

`-i` is the short form of `--input`. Run `adventsolutions --help` to list
the years, and `adventsolutions 2022 --help` to list the days of a year.
The command exits with status 1 and prints the message to standard error
when the file cannot be read or the input is malformed.

## Library use

```python
from adventsolutions import y2022_day06

print(y2022_day06.packet_marker_start("mjqjpqmgbljsphdztnvjfqwrcgsmlb"))  # 7
print(y2022_day06.message_marker_start("mjqjpqmgbljsphdztnvjfqwrcgsmlb"))  # 19
```

```python
from adventsolutions import y2022_day04

pair = y2022_day04.parse_cleaning_pair("4-10,5-8")
print(pair.fully_contained(), pair.intersect())  # True True
```

```python
from adventsolutions import y2022_day10

cpu = y2022_day10.CPU()
screen = y2022_day10.BufferedOutput()
cpu.set_output(screen)
for instruction in y2022_day10.parse_instructions(["noop", "addx 3", "addx -5"]):
    cpu.run(instruction)
print(cpu.x, cpu.cycle)  # -1 6
```

Parsers raise `ValueError` on malformed input.

## What it does not do

- It does not download puzzle inputs; you pass it a file you already have.
- Only the days listed above are there.
- In `y2021_day15`, `solve` works out the risk-map answer only. The module
  also holds a sensor and beacon model (`Network`, `parse_network`) that is
  usable from code but not reached by `solve` or the command line.
  `RiskMap.walk_least_risk_reversed` considers paths that move only right
  or down.
- `y2022_day11.solve` plays part two's 10,000 rounds with exact integers and
  prints the inspection counts after every round, so it is slow and its
  output is long.