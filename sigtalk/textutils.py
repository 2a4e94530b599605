"""String and byte helpers: parsing, splitting, trimming, searching, comparing."""

from __future__ import annotations

from itertools import zip_longest

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "memcmp",
    "memchr",
]

_WHITESPACE = frozenset(" \f\n\r\t\v")
_DIGITS = frozenset("0123456789")


def _require_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. A string with no digits gives 0.
    """
    pos = 0
    length = len(s)
    while pos < length and s[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < length and s[end] in _DIGITS:
        end += 1
    digits = s[pos:end]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _require_char(sep)
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end of the string gives an empty string.
    """
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or None. An empty needle matches
    at index 0.
    """
    _require_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    _require_non_negative("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots (one kept for the terminator).

    Returns the copied text and the full length of ``src``, so truncation
    happened when the length is not smaller than ``size``.
    """
    _require_non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had (counting at most ``size`` characters of ``dst``).
    """
    _require_non_negative("size", size)
    dst_len = len(dst)
    total = len(src) + min(dst_len, size)
    if size == 0:
        return dst, total
    room = max(0, size - 1 - dst_len)
    return dst + src[:room], total


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the terminator at ``len(s)``.
    """
    _require_char(c)
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == "\0" else None


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the terminator at ``len(s)``.
    """
    _require_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def _check_span(data: bytes, n: int) -> None:
    _require_non_negative("n", n)
    if n > len(data):
        raise ValueError(f"n ({n}) exceeds the buffer length ({len(data)})")


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Return the index of byte ``c`` (taken modulo 256) within the first ``n`` bytes."""
    _check_span(data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return index if index >= 0 else None