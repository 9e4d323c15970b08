"""Distress Signal: compare and sort nested list packets."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Union

PacketItem = Union[int, list]

DIVIDER_PACKETS = ("[[2]]", "[[6]]")


class Comparison(enum.Enum):
    CORRECT_ORDER = enum.auto()
    INCORRECT_ORDER = enum.auto()
    EQUAL = enum.auto()


@dataclass
class Packet:
    """A packet's source line and its parsed items."""

    line: str
    items: list[PacketItem] = field(default_factory=list)

    def __lt__(self, other: Packet) -> bool:
        return compare_packets(self, other) is Comparison.CORRECT_ORDER


def parse_packet(line: str) -> Packet:
    """Parse a packet such as ``[1,[2,3],4]``."""
    root: list[PacketItem] = []
    stack: list[list[PacketItem]] = [root]
    digits = ""

    for char in line[1:]:
        if "0" <= char <= "9":
            digits += char
            continue
        if digits:
            # Inside a number only a separator ends it.
            if char not in ",]":
                continue
            stack[-1].append(int(digits))
            digits = ""
        if char == "[":
            child: list[PacketItem] = []
            stack[-1].append(child)
            stack.append(child)
        elif char == "]":
            stack.pop()
            if not stack:
                break

    if digits:
        raise ValueError(f"unexpected end of packet '{line}'")

    return Packet(line, root)


def _items(packet: Packet | list[PacketItem]) -> list[PacketItem]:
    return packet.items if isinstance(packet, Packet) else packet


def _compare_lists(left: list[PacketItem], right: list[PacketItem]) -> Comparison:
    for a, b in zip(left, right):
        if isinstance(a, int) and isinstance(b, int):
            if a < b:
                return Comparison.CORRECT_ORDER
            if a > b:
                return Comparison.INCORRECT_ORDER
            continue
        result = _compare_lists(
            a if isinstance(a, list) else [a],
            b if isinstance(b, list) else [b],
        )
        if result is not Comparison.EQUAL:
            return result

    if len(left) < len(right):
        return Comparison.CORRECT_ORDER
    if len(left) > len(right):
        return Comparison.INCORRECT_ORDER
    return Comparison.EQUAL


def compare_packets(
    left: Packet | list[PacketItem], right: Packet | list[PacketItem]
) -> Comparison:
    """Compare two packets, or two item lists, by the distress signal rules."""
    return _compare_lists(_items(left), _items(right))


def parse_pairs(text: str) -> list[tuple[Packet, Packet]]:
    """Parse pairs of packets separated by blank lines."""
    lines = text.split("\n")
    pairs: list[tuple[Packet, Packet]] = []
    for start in range(0, len(lines), 3):
        if start + 1 >= len(lines):
            raise ValueError("packet pair is missing its second packet")
        pairs.append((parse_packet(lines[start]), parse_packet(lines[start + 1])))
    return pairs


def parse_packets(text: str) -> list[Packet]:
    """Parse every non-blank line as a packet."""
    return [parse_packet(line) for line in text.split("\n") if line != ""]


def correct_order_indices(pairs: Sequence[tuple[Packet, Packet]]) -> list[int]:
    """1-based indices of the pairs that are in the right order."""
    return [
        index
        for index, (left, right) in enumerate(pairs, 1)
        if compare_packets(left, right) is Comparison.CORRECT_ORDER
    ]


def find_packet_index(line: str, packets: Sequence[Packet]) -> int:
    """1-based position of the packet with source ``line``, or 0."""
    return next(
        (index for index, packet in enumerate(packets, 1) if packet.line == line), 0
    )


def solve(text: str) -> tuple[int, int]:
    """Print and return the sum of ordered pair indices and the decoder key."""
    index_sum = sum(correct_order_indices(parse_pairs(text)))
    print(f"Index sum {index_sum}")

    packets = parse_packets(text)
    for divider in DIVIDER_PACKETS:
        packets.extend(parse_packets(divider))
    packets.sort()

    key = 1
    for divider in DIVIDER_PACKETS:
        key *= find_packet_index(divider, packets)
    print(f"Decoder key {key}")

    return index_sum, key