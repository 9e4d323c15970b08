import pytest

from adventsolutions.y2022_day11 import (
    Item,
    Jungle,
    Monkey,
    parse_item_list,
    parse_notes,
    parse_operation,
    parse_test,
    parse_test_result,
)

SAMPLE = """Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1"""


def test_new_item():
    assert Item(5).worry_level == 5


@pytest.mark.parametrize(
    "line, expected",
    [
        ("  Starting items: 79, 98", [Item(79), Item(98)]),
        ("  Starting items: 74", [Item(74)]),
    ],
)
def test_parse_item_list(line, expected):
    assert parse_item_list(line) == expected


def test_parse_item_list_empty():
    with pytest.raises(ValueError):
        parse_item_list("")


@pytest.mark.parametrize(
    "line",
    [
        "",
        "  Test: divisible by xxz",
        "  Tests: divisible by 100",
        "  Test: multiply by 100",
    ],
)
def test_parse_test_invalid(line):
    with pytest.raises(ValueError):
        parse_test(line)


@pytest.mark.parametrize("item, expected", [(Item(23), True), (Item(22), False)])
def test_parse_test(item, expected):
    assert parse_test("  Test: divisible by 23")(item) is expected


@pytest.mark.parametrize(
    "line, evaluator",
    [
        ("", "true"),
        ("    If zztrue: throw to monkey 2", "true"),
        ("    If true: throw to monkey bb", "true"),
        ("    If true: throw to hyena 2", "true"),
        ("", "false"),
        ("    If zzfalse: throw to monkey 2", "false"),
        ("    If false: throw to monkey bb", "false"),
        ("    If false: throw to hyena 2", "false"),
    ],
)
def test_parse_test_result_invalid(line, evaluator):
    with pytest.raises(ValueError):
        parse_test_result(line, evaluator)


@pytest.mark.parametrize(
    "line, evaluator, expected",
    [
        ("    If true: throw to monkey 2", "true", 2),
        ("    If true: throw to monkey 5", "true", 5),
        ("    If false: throw to monkey 2", "false", 2),
        ("    If false: throw to monkey 5", "false", 5),
    ],
)
def test_parse_test_result(line, evaluator, expected):
    assert parse_test_result(line, evaluator) == expected


@pytest.mark.parametrize(
    "line",
    [
        "",
        "  Operation: new = old ? 19",
        "  Operation: new = old + bunko",
    ],
)
def test_parse_operation_invalid(line):
    with pytest.raises(ValueError):
        parse_operation(line)


@pytest.mark.parametrize(
    "line, item, expected",
    [
        ("  Operation: new = old * 19", Item(10), Item(190)),
        ("  Operation: new = old + 6", Item(10), Item(16)),
        ("  Operation: new = old - 5", Item(10), Item(5)),
        ("  Operation: new = old / old", Item(10), Item(1)),
        ("  Operation: new = old / 2", Item(10), Item(5)),
    ],
)
def test_parse_operation(line, item, expected):
    assert parse_operation(line)(item) == expected


def test_parse_notes_reads_every_monkey():
    monkeys = parse_notes(SAMPLE.split("\n"))
    assert len(monkeys) == 4
    assert monkeys[1].items == [Item(54), Item(65), Item(75), Item(74)]
    assert (monkeys[0].true_result, monkeys[0].false_result) == (2, 3)
    assert monkeys[2].operation(Item(3)) == Item(9)


def test_parse_notes_bad_header():
    lines = SAMPLE.split("\n")
    lines[0] = "Gorilla 0:"
    with pytest.raises(ValueError):
        parse_notes(lines)


def test_parse_notes_incomplete():
    with pytest.raises(ValueError):
        parse_notes(SAMPLE.split("\n")[:4])


def test_one_round():
    jungle = Jungle(parse_notes(SAMPLE.split("\n")))
    jungle.evaluate()
    assert jungle.describe() == (
        "Monkey 0: 20, 23, 27, 26\n"
        "Monkey 1: 2080, 25, 167, 207, 401, 1046\n"
        "Monkey 2: \n"
        "Monkey 3: \n"
    )


def test_twenty_rounds():
    jungle = Jungle(parse_notes(SAMPLE.split("\n")))
    for _ in range(20):
        jungle.evaluate()
    assert jungle.inspection_counts() == [101, 95, 7, 105]
    assert jungle.monkey_business() == 10605


def test_monkey_without_jungle():
    monkey = Monkey()
    monkey.add_item(Item(1))
    with pytest.raises(RuntimeError):
        monkey.evaluate_items()


def test_monkey_evaluate_items_empties_hand():
    monkey = Monkey(
        operation=parse_operation("  Operation: new = old * 2"),
        test=parse_test("  Test: divisible by 4"),
        true_result=1,
        false_result=0,
    )
    Jungle([monkey], worry_adjustment=1)
    monkey.add_item(Item(2))
    monkey.add_item(Item(3))
    assert monkey.evaluate_items() == [(Item(4), 1), (Item(6), 0)]
    assert monkey.items == []
    assert monkey.inspection_count == 2


def test_monkey_business_needs_two_monkeys():
    with pytest.raises(ValueError):
        Jungle([Monkey()]).monkey_business()