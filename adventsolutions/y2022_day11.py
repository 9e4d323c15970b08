"""Monkey in the Middle: follow items thrown between monkeys."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

_INT = r"[+-]?\d+"
_MONKEY = re.compile(rf"\s*Monkey\s+({_INT}):")
_OPERATION = re.compile(r"\s*Operation:\s*new\s*=\s*(\S+)\s+(\S+)\s+(\S+)")
_TEST = re.compile(rf"\s*Test:\s*divisible\s+by\s+({_INT})")
_INTEGER = re.compile(_INT)

ITEMS_PREFIX = "  Starting items: "
LINES_PER_MONKEY = 6
DEFAULT_WORRY_ADJUSTMENT = 3


def _euclidean_div(a: int, b: int) -> int:
    """Euclidean division: the remainder is never negative."""
    remainder = a % abs(b)
    return (a - remainder) // b


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _euclidean_div,
}


@dataclass(frozen=True)
class Item:
    """An item and how worried you are about it."""

    worry_level: int

    def describe(self) -> str:
        return str(self.worry_level)


Operation = Callable[[Item], Item]
Test = Callable[[Item], bool]


@dataclass(eq=False)
class Monkey:
    """A monkey holding items, with the rules it uses to throw them."""

    items: list[Item] = field(default_factory=list)
    operation: Operation | None = None
    test: Test | None = None
    true_result: int = 0
    false_result: int = 0
    inspection_count: int = 0
    home: Jungle | None = field(default=None, repr=False)

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def evaluate_items(self) -> list[tuple[Item, int]]:
        """Inspect every held item; return each updated item with its target monkey."""
        if self.home is None:
            raise RuntimeError("monkey does not belong to a jungle")

        items, self.items = self.items, []
        destinations: list[tuple[Item, int]] = []
        for item in items:
            self.inspection_count += 1
            if self.operation is None:
                raise RuntimeError("unset Operation")
            updated = self.home.relieve(self.operation(item))
            if self.test is None:
                raise RuntimeError("unset Test")
            target = self.true_result if self.test(updated) else self.false_result
            destinations.append((updated, target))
        return destinations

    def describe(self) -> str:
        return ", ".join(item.describe() for item in self.items)


class Jungle:
    """The monkeys, and how much relief lowers your worry after each inspection."""

    def __init__(
        self, monkeys: Iterable[Monkey], worry_adjustment: int = DEFAULT_WORRY_ADJUSTMENT
    ) -> None:
        self.monkeys = list(monkeys)
        self.worry_adjustment = worry_adjustment
        for monkey in self.monkeys:
            monkey.home = self

    def relieve(self, item: Item) -> Item:
        return Item(_euclidean_div(item.worry_level, self.worry_adjustment))

    def evaluate(self) -> None:
        """Play one round: every monkey in turn throws all its items."""
        for monkey in self.monkeys:
            for item, target in monkey.evaluate_items():
                self.monkeys[target].add_item(item)

    def inspection_counts(self) -> list[int]:
        return [monkey.inspection_count for monkey in self.monkeys]

    def describe(self) -> str:
        return "".join(
            f"Monkey {index}: {monkey.describe()}\n"
            for index, monkey in enumerate(self.monkeys)
        )

    def monkey_business(self) -> int:
        """Product of the two highest inspection counts."""
        counts = sorted(self.inspection_counts(), reverse=True)
        if len(counts) < 2:
            raise ValueError("monkey business needs at least two monkeys")
        return counts[0] * counts[1]


def parse_item_list(line: str) -> list[Item]:
    """Parse ``  Starting items: 79, 98``."""
    if not line.startswith(ITEMS_PREFIX):
        raise ValueError("invalid starting items definition")

    items = []
    for part in line[len(ITEMS_PREFIX):].split(","):
        text = part.strip()
        if not _INTEGER.fullmatch(text):
            raise ValueError(f"invalid worry level '{text}'")
        items.append(Item(int(text)))
    return items


def _operand(text: str) -> int | None:
    """None stands for the old worry level; otherwise a constant."""
    if text == "old":
        return None
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid constant")
    return int(text)


def parse_operation(line: str) -> Operation:
    """Parse ``  Operation: new = old * 19`` into a function on items."""
    match = _OPERATION.match(line)
    if match is None:
        raise ValueError("invalid operation definition")

    left_text, operator_text, right_text = match.groups()
    left = _operand(left_text)
    right = _operand(right_text)
    try:
        apply = _OPERATORS[operator_text]
    except KeyError:
        raise ValueError("unknown operator") from None

    def operation(item: Item) -> Item:
        old = item.worry_level
        a = old if left is None else left
        b = old if right is None else right
        return Item(apply(a, b))

    return operation


def parse_test(line: str) -> Test:
    """Parse ``  Test: divisible by 23`` into a predicate on items."""
    match = _TEST.match(line)
    if match is None:
        raise ValueError("invalid test definition")
    divisor = int(match.group(1))

    def test(item: Item) -> bool:
        return item.worry_level % divisor == 0

    return test


def parse_test_result(line: str, evaluator: str) -> int:
    """Parse ``    If <evaluator>: throw to monkey N`` and return N."""
    pattern = re.compile(
        rf"\s*If\s+{re.escape(evaluator)}:\s*throw\s+to\s+monkey\s+({_INT})"
    )
    match = pattern.match(line)
    if match is None:
        raise ValueError("invalid test result definition")
    return int(match.group(1))


def parse_notes(lines: Sequence[str]) -> list[Monkey]:
    """Parse monkey definitions, each followed by a blank line."""
    monkeys: list[Monkey] = []
    for start in range(0, len(lines), LINES_PER_MONKEY + 1):
        block = lines[start:start + LINES_PER_MONKEY]
        if len(block) < LINES_PER_MONKEY:
            raise ValueError("incomplete monkey definition")
        header, items, operation, test, if_true, if_false = block

        if _MONKEY.match(header) is None:
            raise ValueError("invalid monkey definition")

        monkey = Monkey()
        for item in parse_item_list(items):
            monkey.add_item(item)
        monkey.operation = parse_operation(operation)
        monkey.test = parse_test(test)
        monkey.true_result = parse_test_result(if_true, "true")
        monkey.false_result = parse_test_result(if_false, "false")
        monkeys.append(monkey)
    return monkeys


def solve(text: str) -> tuple[int, int]:
    """Print and return the monkey business after both sets of rounds."""
    jungle = Jungle(parse_notes(text.split("\n")))
    for _ in range(20):
        jungle.evaluate()
    first = jungle.monkey_business()
    print(f"Level of monkey business: {first}")

    jungle = Jungle(parse_notes(text.split("\n")), worry_adjustment=1)
    for round_number in range(1, 10_001):
        jungle.evaluate()
        print(f"== After round {round_number} ==")
        for index, count in enumerate(jungle.inspection_counts()):
            print(f"Monkey {index} inspected items {count} times.")
    second = jungle.monkey_business()
    print(f"Level of monkey business: {second}")

    return first, second