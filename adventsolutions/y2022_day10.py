"""Cathode-Ray Tube: run a tiny CPU and draw its sprite on a CRT."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, TextIO, Union

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6
SAMPLE_CYCLES = (20, 60, 100, 140, 180, 220)

_ADDX = re.compile(r"addx\s+([+-]?\d+)")


@dataclass(frozen=True)
class Sample:
    """The value of register X during a given cycle."""

    cycle: int
    value: int


class Output(Protocol):
    def set_screen_dimensions(self, width: int, height: int) -> None: ...

    def draw_lit_pixel(self) -> None: ...

    def draw_dark_pixel(self) -> None: ...

    def reset(self) -> None: ...

    def next_line(self) -> None: ...


@dataclass
class NullOutput:
    """A screen that shows nothing and only counts what it is asked to draw."""

    width: int = 0
    height: int = 0
    lit_pixels: int = 0
    dark_pixels: int = 0
    lines: int = 0

    def set_screen_dimensions(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def draw_lit_pixel(self) -> None:
        self.lit_pixels += 1

    def draw_dark_pixel(self) -> None:
        self.dark_pixels += 1

    def reset(self) -> None:
        self.lit_pixels = 0
        self.dark_pixels = 0
        self.lines = 0

    def next_line(self) -> None:
        self.lines += 1


class StreamOutput:
    """A screen that writes pixels to a text stream as they are drawn."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.column = 0

    def set_screen_dimensions(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def _write(self, pixel: str) -> None:
        self.stream.write(pixel)
        self.column += 1

    def draw_lit_pixel(self) -> None:
        self._write("#")

    def draw_dark_pixel(self) -> None:
        self._write(".")

    def reset(self) -> None:
        self.column = 0

    def next_line(self) -> None:
        self.stream.write("\n")
        self.column = 0


class BufferedOutput:
    """A screen held in memory."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self.current_x = 0
        self.current_y = 0
        self.set_screen_dimensions(width, height)

    def set_screen_dimensions(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.screen = [[" "] * width for _ in range(height)]

    def _draw(self, pixel: str) -> None:
        self.screen[self.current_y][self.current_x] = pixel
        self.current_x += 1

    def draw_lit_pixel(self) -> None:
        self._draw("#")

    def draw_dark_pixel(self) -> None:
        self._draw(".")

    def reset(self) -> None:
        self.current_x = 0
        self.current_y = 0

    def next_line(self) -> None:
        self.current_x = 0
        self.current_y += 1
        if self.current_y >= self.height:
            self.current_y = 0

    def render(self) -> str:
        """The screen as lines of text."""
        return "\n".join("".join(row) for row in self.screen)


@dataclass(frozen=True)
class Noop:
    def describe(self) -> str:
        return "noop"

    def cycle_count(self) -> int:
        return 1

    def apply(self, cpu: CPU) -> None:
        """Retire the instruction without touching X."""
        cpu.instructions_run += 1


@dataclass(frozen=True)
class Addx:
    value: int

    def describe(self) -> str:
        return f"addx {self.value}"

    def cycle_count(self) -> int:
        return 2

    def apply(self, cpu: CPU) -> None:
        cpu.x += self.value
        cpu.instructions_run += 1


Instruction = Union[Noop, Addx]


def should_draw_sprite(sprite_position: int, beam: int) -> bool:
    """True if the beam is within one pixel of the sprite."""
    return sprite_position - 1 <= beam <= sprite_position + 1


class CPU:
    """A CPU with one register, X, driving a CRT."""

    def __init__(self) -> None:
        self.x = 1
        self.cycle = 1
        self.crt_position = 0
        self.instructions_run = 0
        self.screen: Output = NullOutput()
        self.sample_cycles: list[int] = []
        self.samples: list[Sample] = []

    def run(self, instruction: Instruction) -> None:
        """Run one instruction, drawing a pixel and sampling X each cycle."""
        for _ in range(instruction.cycle_count()):
            if should_draw_sprite(self.x, self.crt_position):
                self.screen.draw_lit_pixel()
            else:
                self.screen.draw_dark_pixel()

            self.samples.extend(
                Sample(self.cycle, self.x)
                for cycle in self.sample_cycles
                if cycle == self.cycle
            )

            self.cycle += 1
            self.crt_position += 1
            if self.crt_position >= SCREEN_WIDTH:
                self.crt_position = 0
                self.screen.next_line()

        instruction.apply(self)

    def set_sample_cycles(self, cycles: Iterable[int]) -> None:
        self.sample_cycles = sorted(cycles)

    def set_output(self, output: Output) -> None:
        self.screen = output
        output.set_screen_dimensions(SCREEN_WIDTH, SCREEN_HEIGHT)
        output.reset()


def parse_instruction(line: str) -> Instruction:
    """Parse ``noop`` or ``addx N``."""
    operation = line.split(" ")[0]
    if operation == "noop":
        return Noop()
    if operation == "addx":
        match = _ADDX.match(line)
        if match is None:
            raise ValueError(f"malformed instruction '{line}'")
        return Addx(int(match.group(1)))
    raise ValueError(f"unknown instruction '{line}'")


def parse_instructions(lines: Iterable[str]) -> list[Instruction]:
    return [parse_instruction(line) for line in lines]


def solve(text: str) -> int:
    """Print the signal strength and the CRT image; return the strength."""
    instructions = parse_instructions(text.split("\n"))

    cpu = CPU()
    cpu.set_sample_cycles(SAMPLE_CYCLES)
    for instruction in instructions:
        cpu.run(instruction)

    strength = sum(sample.cycle * sample.value for sample in cpu.samples)
    print(f"Cycle count: {cpu.cycle}")
    print(f"Total signal strength: {strength}")

    display = CPU()
    display.set_output(StreamOutput())
    for instruction in instructions:
        display.run(instruction)

    return strength