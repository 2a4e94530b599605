"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Only the ASCII ranges are considered; anything else is treated as
neither a letter nor a digit and is left unchanged by the case converters.
"""

from __future__ import annotations

import operator

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "toupper",
    "tolower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def isalpha(c: int | str) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, code: int) -> int | str:
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Map a-z to A-Z; return anything else unchanged, in the form it was given."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return _convert(c, code)


def tolower(c: int | str) -> int | str:
    """Map A-Z to a-z; return anything else unchanged, in the form it was given."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return _convert(c, code)