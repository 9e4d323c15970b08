import pytest

from adventsolutions.y2022_day05 import (
    CrateLocation,
    MovementOp,
    Warehouse,
    is_legend_line,
    parse_initial_crates_line,
    parse_movement_op,
    solve,
)

INITIAL_CRATES = [
    "        [H]         [S]         [D]",
    "    [S] [C]         [C]     [Q] [L]",
    "    [C] [R] [Z]     [R]     [H] [Z]",
    "    [G] [N] [H] [S] [B]     [R] [F]",
    "[D] [T] [Q] [F] [Q] [Z]     [Z] [N]",
    "[Z] [W] [F] [N] [F] [W] [J] [V] [G]",
    "[T] [R] [B] [C] [L] [P] [F] [L] [H]",
    "[H] [Q] [P] [L] [G] [V] [Z] [D] [B]",
]


def _stacks(*words):
    return [list(word) for word in words]


def _loaded_warehouse():
    warehouse = Warehouse()
    for line in INITIAL_CRATES:
        for location in parse_initial_crates_line(line):
            warehouse.add_crate(location.crate, location.stack_index)
    return warehouse


def test_movement_op_fields():
    op = MovementOp(0, 1, 3)
    assert (op.start, op.end, op.count) == (0, 1, 3)


def test_parse_movement_op_valid():
    assert parse_movement_op("move 5 from 2 to 3") == MovementOp(2, 3, 5)


@pytest.mark.parametrize("text", ["", "move 5 from ! to z"])
def test_parse_movement_op_invalid(text):
    with pytest.raises(ValueError):
        parse_movement_op(text)


def test_parse_initial_crates_line_sparse():
    assert parse_initial_crates_line("    [C] [R] [Z]     [R]     [H] [Z]") == [
        CrateLocation("C", 2),
        CrateLocation("R", 3),
        CrateLocation("Z", 4),
        CrateLocation("R", 6),
        CrateLocation("H", 8),
        CrateLocation("Z", 9),
    ]


def test_parse_initial_crates_line_full():
    labels = "TRBCLPFLH"
    assert parse_initial_crates_line("[T] [R] [B] [C] [L] [P] [F] [L] [H]") == [
        CrateLocation(label, index) for index, label in enumerate(labels, start=1)
    ]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "(T] [R] [B] [C] [L] [P] [F] [L] [H]",
        "[T]_[R] [B] [C] [L] [P] [F] [L] [H]",
        "[T] [RR] [B] [C] [L] [P] [F] [L] [H]",
    ],
)
def test_parse_initial_crates_line_invalid(text):
    with pytest.raises(ValueError):
        parse_initial_crates_line(text)


@pytest.mark.parametrize(
    "locations, expected",
    [
        (
            [CrateLocation("C", 2), CrateLocation("D", 5)],
            [[], ["C"], [], [], ["D"]],
        ),
        (
            [CrateLocation("C", 2), CrateLocation("D", 2)],
            [[], ["C", "D"]],
        ),
    ],
)
def test_add_crate(locations, expected):
    warehouse = Warehouse()
    for location in locations:
        warehouse.add_crate(location.crate, location.stack_index)
    assert warehouse.stacks == expected


def test_apply_single_move():
    warehouse = _loaded_warehouse()
    warehouse.apply(MovementOp(1, 2, 1))
    assert warehouse.stacks == _stacks(
        "ZTH", "DSCGTWRQ", "HCRNQFBP", "ZHFNCL", "SQFLG",
        "SCRBZWPV", "JFZ", "QHRZVLD", "DLZFNGHB",
    )


def test_apply_two_moves_reverses_order():
    warehouse = _loaded_warehouse()
    warehouse.apply(MovementOp(1, 2, 1))
    warehouse.apply(MovementOp(2, 3, 2))
    assert warehouse.stacks == _stacks(
        "ZTH", "CGTWRQ", "SDHCRNQFBP", "ZHFNCL", "SQFLG",
        "SCRBZWPV", "JFZ", "QHRZVLD", "DLZFNGHB",
    )


def test_apply_9001_single_move():
    warehouse = _loaded_warehouse()
    warehouse.apply_9001(MovementOp(1, 2, 1))
    assert warehouse.stacks == _stacks(
        "ZTH", "DSCGTWRQ", "HCRNQFBP", "ZHFNCL", "SQFLG",
        "SCRBZWPV", "JFZ", "QHRZVLD", "DLZFNGHB",
    )


def test_apply_9001_two_moves_keeps_order():
    warehouse = _loaded_warehouse()
    warehouse.apply_9001(MovementOp(1, 2, 1))
    warehouse.apply_9001(MovementOp(2, 3, 2))
    assert warehouse.stacks == _stacks(
        "ZTH", "CGTWRQ", "DSHCRNQFBP", "ZHFNCL", "SQFLG",
        "SCRBZWPV", "JFZ", "QHRZVLD", "DLZFNGHB",
    )


@pytest.mark.parametrize(
    "op", [MovementOp(10, 1, 1), MovementOp(1, 10, 1), MovementOp(1, 2, 0)]
)
def test_apply_invalid_op(op):
    warehouse = _loaded_warehouse()
    with pytest.raises(ValueError):
        warehouse.apply(op)


def test_describe():
    warehouse = Warehouse([["A"], ["B", "C"]])
    assert warehouse.describe() == "    [B] \n[A] [C] \n 1   2  "


def test_is_legend_line():
    assert is_legend_line(" 1   2   3 ")
    assert not is_legend_line("[A] [B]")


def test_solve_example():
    text = "\n".join(
        [
            "    [D]    ",
            "[N] [C]    ",
            "[Z] [M] [P]",
            " 1   2   3 ",
            "",
            "move 1 from 2 to 1",
            "move 3 from 1 to 3",
            "move 2 from 2 to 1",
            "move 1 from 1 to 2",
        ]
    )
    assert solve(text) == ("CMZ", "MCD")