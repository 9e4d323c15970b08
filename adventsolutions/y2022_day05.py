"""Supply Stacks: rearrange crates between stacks with a crane."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_MOVE = re.compile(r"move\s+([+-]?\d+)\s+from\s+([+-]?\d+)\s+to\s+([+-]?\d+)")


@dataclass(frozen=True)
class CrateLocation:
    """A crate label and the 1-based stack it sits on."""

    crate: str
    stack_index: int


@dataclass(frozen=True)
class MovementOp:
    """Move ``count`` crates from stack ``start`` to stack ``end`` (1-based)."""

    start: int
    end: int
    count: int


@dataclass
class Warehouse:
    """Stacks of crates; the top of each stack is its first element."""

    stacks: list[list[str]] = field(default_factory=list)

    def add_crate(self, crate: str, stack_index: int) -> None:
        """Put ``crate`` below the crates already on stack ``stack_index``."""
        if stack_index < 1:
            raise ValueError(f"invalid stack index {stack_index}")
        while len(self.stacks) < stack_index:
            self.stacks.append([])
        self.stacks[stack_index - 1].append(crate)

    def _take(self, op: MovementOp) -> list[str]:
        for index, name in ((op.start, "start"), (op.end, "end")):
            if index < 1 or index > len(self.stacks):
                raise ValueError(
                    f"invalid {name} stack index {index} vs {len(self.stacks)}"
                )
        if op.count <= 0:
            raise ValueError(f"invalid crate count {op.count}")
        source = self.stacks[op.start - 1]
        if op.count > len(source):
            raise ValueError(
                f"stack {op.start} holds {len(source)} crates, cannot move {op.count}"
            )
        moved = source[:op.count]
        del source[:op.count]
        return moved

    def apply(self, op: MovementOp) -> None:
        """Move crates one at a time, reversing their order."""
        moved = self._take(op)
        self.stacks[op.end - 1][:0] = reversed(moved)

    def apply_9001(self, op: MovementOp) -> None:
        """Move crates all at once, keeping their order."""
        moved = self._take(op)
        self.stacks[op.end - 1][:0] = moved

    def describe(self) -> str:
        """Draw the stacks as text, with a legend of stack numbers."""
        highest = max((len(stack) for stack in self.stacks), default=0)
        lines = []
        for level in range(highest, 0, -1):
            lines.append(
                "".join(
                    "    " if len(stack) < level else f"[{stack[len(stack) - level]}] "
                    for stack in self.stacks
                )
            )
        lines.append("".join(f" {number}  " for number in range(1, len(self.stacks) + 1)))
        return "\n".join(lines)

    def tops(self) -> str:
        """Labels of the top crate of every non-empty stack."""
        return "".join(stack[0] for stack in self.stacks if stack)


def parse_movement_op(text: str) -> MovementOp:
    """Parse ``move N from A to B``."""
    if text == "":
        raise ValueError("movementop: empty string")
    match = _MOVE.match(text)
    if match is None:
        raise ValueError(f"invalid movement op '{text}'")
    count, start, end = (int(g) for g in match.groups())
    return MovementOp(start=start, end=end, count=count)


def parse_initial_crates_line(text: str) -> list[CrateLocation]:
    """Parse one row of the crate drawing into crate locations."""
    if text == "":
        raise ValueError("initialcratesline: empty string")

    locations: list[CrateLocation] = []
    for index, char in enumerate(text):
        column = index % 4
        if column == 0 and char not in " [":
            raise ValueError(f"invalid line.  unexpected char '{char}' at index {index}")
        if column == 1 and char != " ":
            locations.append(CrateLocation(char, index // 4 + 1))
        if column == 2 and char not in " ]":
            raise ValueError(f"invalid line.  unexpected char '{char}' at index {index}")
        if column == 3 and char != " ":
            raise ValueError(f"invalid line.  unexpected char '{char}' at index {index}")
    return locations


def is_legend_line(line: str) -> bool:
    """True for the line of stack numbers under the drawing."""
    return line.startswith(" 1 ")


def _parse_input(text: str) -> tuple[list[list[CrateLocation]], list[MovementOp]]:
    rows: list[list[CrateLocation]] = []
    ops: list[MovementOp] = []
    lines = iter(text.split("\n"))

    for line in lines:
        if line == "":
            break
        if is_legend_line(line):
            continue
        rows.append(parse_initial_crates_line(line))

    for line in lines:
        ops.append(parse_movement_op(line))

    return rows, ops


def _build_warehouse(rows: list[list[CrateLocation]]) -> Warehouse:
    warehouse = Warehouse()
    for row in rows:
        for location in row:
            warehouse.add_crate(location.crate, location.stack_index)
    return warehouse


def solve(text: str) -> tuple[str, str]:
    """Print both final arrangements and return the top crates of each."""
    rows, ops = _parse_input(text)

    first = _build_warehouse(rows)
    for op in ops:
        first.apply(op)
    print(first.describe())

    second = _build_warehouse(rows)
    for op in ops:
        second.apply_9001(op)
    print(second.describe())

    return first.tops(), second.tops()