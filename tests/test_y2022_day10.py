import io

import pytest

from adventsolutions.y2022_day10 import (
    CPU,
    Addx,
    BufferedOutput,
    Noop,
    NullOutput,
    Sample,
    StreamOutput,
    parse_instruction,
    parse_instructions,
    should_draw_sprite,
    solve,
)

PROGRAM = """addx 15
addx -11
addx 6
addx -3
addx 5
addx -1
addx -8
addx 13
addx 4
noop
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx -35
addx 1
addx 24
addx -19
addx 1
addx 16
addx -11
noop
noop
addx 21
addx -15
noop
noop
addx -3
addx 9
addx 1
addx -3
addx 8
addx 1
addx 5
noop
noop
noop
noop
noop
addx -36
noop
addx 1
addx 7
noop
noop
noop
addx 2
addx 6
noop
noop
noop
noop
noop
addx 1
noop
noop
addx 7
addx 1
noop
addx -13
addx 13
addx 7
noop
addx 1
addx -33
noop
noop
noop
addx 2
noop
noop
noop
addx 8
noop
addx -1
addx 2
addx 1
noop
addx 17
addx -9
addx 1
addx 1
addx -3
addx 11
noop
noop
addx 1
noop
addx 1
noop
noop
addx -13
addx -19
addx 1
addx 3
addx 26
addx -30
addx 12
addx -1
addx 3
addx 1
noop
noop
noop
addx -9
addx 18
addx 1
addx 2
noop
noop
addx 9
noop
noop
noop
addx -1
addx 2
addx -37
addx 1
addx 3
noop
addx 15
addx -21
addx 22
addx -6
addx 1
noop
addx 2
addx 1
noop
addx -10
noop
noop
addx 20
addx 1
addx 2
addx 2
addx -6
addx -11
noop
noop
noop"""

SCREEN = """##..##..##..##..##..##..##..##..##..##..
###...###...###...###...###...###...###.
####....####....####....####....####....
#####.....#####.....#####.....#####.....
######......######......######......####
#######.......#######.......#######....."""


def test_new_cpu():
    cpu = CPU()
    assert cpu.x == 1
    assert cpu.cycle == 1
    assert cpu.crt_position == 0
    assert cpu.samples == []
    assert isinstance(cpu.screen, NullOutput)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("noop", Noop()),
        ("addx 0", Addx(0)),
        ("addx 100", Addx(100)),
        ("addx -100", Addx(-100)),
    ],
)
def test_parse_instruction_valid(line, expected):
    assert parse_instruction(line) == expected


@pytest.mark.parametrize("line", ["", "addy 0", "addx a", "100 addx"])
def test_parse_instruction_invalid(line):
    with pytest.raises(ValueError):
        parse_instruction(line)


@pytest.mark.parametrize(
    "instruction, description, cycles",
    [
        (Noop(), "noop", 1),
        (Addx(0), "addx 0", 2),
        (Addx(-10), "addx -10", 2),
    ],
)
def test_instruction_details(instruction, description, cycles):
    assert instruction.describe() == description
    assert instruction.cycle_count() == cycles


@pytest.mark.parametrize(
    "instructions, expected_x, expected_cycle",
    [
        ([Noop()], 1, 2),
        ([Addx(0)], 1, 3),
        ([Addx(-10)], -9, 3),
        ([Addx(5)], 6, 3),
        ([Addx(5), Noop(), Addx(-2)], 4, 6),
    ],
)
def test_run_instructions(instructions, expected_x, expected_cycle):
    cpu = CPU()
    for instruction in instructions:
        cpu.run(instruction)
    assert cpu.x == expected_x
    assert cpu.cycle == expected_cycle


def test_sample_x():
    cpu = CPU()
    cpu.set_sample_cycles([20, 60, 100, 140, 180, 220])
    for instruction in parse_instructions(PROGRAM.split("\n")):
        cpu.run(instruction)

    assert cpu.samples == [
        Sample(20, 21),
        Sample(60, 19),
        Sample(100, 18),
        Sample(140, 21),
        Sample(180, 16),
        Sample(220, 18),
    ]
    assert sum(s.cycle * s.value for s in cpu.samples) == 13140


def test_set_sample_cycles_sorts():
    cpu = CPU()
    cpu.set_sample_cycles([60, 20])
    assert cpu.sample_cycles == [20, 60]


@pytest.mark.parametrize(
    "sprite, beam, expected",
    [
        (5, 5, True),
        (5, 4, True),
        (5, 6, True),
        (5, 7, False),
        (5, 1, False),
        (5, 10, False),
        (5, 3, False),
        (1, 0, True),
    ],
)
def test_should_draw_sprite(sprite, beam, expected):
    assert should_draw_sprite(sprite, beam) is expected


def test_buffered_output():
    cpu = CPU()
    output = BufferedOutput()
    cpu.set_output(output)
    for instruction in parse_instructions(PROGRAM.split("\n")):
        cpu.run(instruction)
    assert output.render() == SCREEN


def test_stream_output():
    stream = io.StringIO()
    cpu = CPU()
    cpu.set_output(StreamOutput(stream))
    for instruction in parse_instructions(PROGRAM.split("\n")):
        cpu.run(instruction)
    assert stream.getvalue() == SCREEN + "\n"


def test_solve_returns_signal_strength(capsys):
    assert solve(PROGRAM) == 13140
    assert SCREEN in capsys.readouterr().out