"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import operator
import sys
from typing import TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; None writes nothing at all."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    value = operator.index(n)
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit signed integer")
    _target(stream).write(str(value))