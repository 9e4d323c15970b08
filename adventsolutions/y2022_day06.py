"""Tuning Trouble: find start-of-packet and start-of-message markers."""

from __future__ import annotations

PACKET_MARKER_LENGTH = 4
MESSAGE_MARKER_LENGTH = 14


def marker_start(data: str, length: int) -> int | None:
    """Position just past the first run of ``length`` distinct characters.

    Returns None if the data holds no such run.
    """
    if length <= 0:
        raise ValueError(f"invalid marker length {length}")
    for end in range(length, len(data) + 1):
        if len(set(data[end - length:end])) == length:
            return end
    return None


def packet_marker_start(data: str) -> int | None:
    """Offset after the first start-of-packet marker (4 distinct characters)."""
    return marker_start(data, PACKET_MARKER_LENGTH)


def message_marker_start(data: str) -> int | None:
    """Offset after the first start-of-message marker (14 distinct characters)."""
    return marker_start(data, MESSAGE_MARKER_LENGTH)


def solve(text: str) -> tuple[int | None, int | None]:
    """Print and return the packet and message marker offsets."""
    packet = packet_marker_start(text)
    if packet is not None:
        print(f"Valid packet marker starting at offset {packet}")
    else:
        print("No valid packet marker found")

    message = message_marker_start(text)
    if message is not None:
        print(f"Valid message marker starting at offset {message}")
    else:
        print("No valid message marker found")

    return packet, message