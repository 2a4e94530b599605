"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from functools import partial
from typing import Any, Callable, Iterator

__all__ = ["format_hex", "format_address", "render", "printf"]

_MASK_32 = 0xFFFF_FFFF
_MASK_64 = 0xFFFF_FFFF_FFFF_FFFF
_SIGN_32 = 0x8000_0000


def format_hex(n: int, spec: str = "x") -> str:
    """Hexadecimal digits of an unsigned 64-bit value.

    ``spec`` ``"x"`` gives lower-case digits; any other value gives upper case.
    """
    digits = format(operator.index(n) & _MASK_64, "x")
    return digits if spec == "x" else digits.upper()


def format_address(n: int | None) -> str:
    """Render a pointer value: ``(nil)`` for zero, otherwise ``0x`` and hex digits."""
    if n is None or operator.index(n) & _MASK_64 == 0:
        return "(nil)"
    return "0x" + format_hex(n, "x")


def _char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _signed(value: int) -> str:
    n = operator.index(value) & _MASK_32
    if n & _SIGN_32:
        n -= 1 << 32
    return str(n)


def _unsigned(value: int) -> str:
    return str(operator.index(value) & _MASK_32)


def _hex32(spec: str, value: int) -> str:
    return format_hex(operator.index(value) & _MASK_32, spec)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": format_address,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": partial(_hex32, "x"),
    "X": partial(_hex32, "X"),
}

_MISSING = object()


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERTERS.get(spec)
    if converter is None:
        return ""
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return converter(value)


def render(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end of the format produces nothing. Extra arguments are
    ignored.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output; return the characters written."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)