"""Bit-by-bit transport of bytes over the two user signals.

Each byte travels as eight signals, least significant bit first: the first
user signal carries a 0 bit and the second carries a 1 bit.
"""

from __future__ import annotations

import enum
import operator
from signal import SIGUSR1, SIGUSR2
from typing import Iterator

__all__ = ["BITS_PER_CHAR", "Signal", "CharDecoder", "encode_char", "encode_message"]

BITS_PER_CHAR = 8


class Signal(enum.IntEnum):
    """The signal that carries each bit value."""

    ZERO = int(SIGUSR1)
    ONE = int(SIGUSR2)


def _byte_value(c: int | str | bytes) -> int:
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        return c[0]
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    value = operator.index(c)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value} does not fit in one byte")
    return value


def encode_char(c: int | str | bytes) -> list[Signal]:
    """Return the eight signals that carry one byte, least significant bit first."""
    value = _byte_value(c)
    return [
        Signal.ONE if (value >> bit) & 1 else Signal.ZERO
        for bit in range(BITS_PER_CHAR)
    ]


def encode_message(text: str | bytes) -> Iterator[Signal]:
    """Yield the signals for every byte of ``text`` (strings are sent as UTF-8)."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    for byte in data:
        yield from encode_char(byte)


class CharDecoder:
    """Collect signals into bytes, eight at a time."""

    def __init__(self) -> None:
        self._bits = 0
        self._value = 0

    @property
    def pending_bits(self) -> int:
        """How many bits of the current byte have arrived."""
        return self._bits

    def feed(self, signal: int) -> int | None:
        """Take one signal; return the completed byte, or None while it is partial."""
        try:
            bit = Signal(signal)
        except ValueError:
            raise ValueError(f"not a message signal: {signal!r}") from None
        if bit is Signal.ONE:
            self._value |= 1 << self._bits
        self._bits += 1
        if self._bits < BITS_PER_CHAR:
            return None
        value = self._value
        self._bits = 0
        self._value = 0
        return value