import string

import pytest

from sigtalk.chartypes import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

CODES = range(0, 256)


def test_isalpha_matches_ascii_letters():
    for code in CODES:
        assert isalpha(code) == (chr(code) in string.ascii_letters)


def test_isalpha_accepts_strings():
    assert isalpha("Q") is True
    assert isalpha("7") is False
    assert isalpha("é") is False


def test_isdigit_matches_ascii_digits():
    for code in CODES:
        assert isdigit(code) == (chr(code) in string.digits)
    assert isdigit("5") is True
    assert isdigit("x") is False


def test_isalnum_is_union_of_alpha_and_digit():
    for code in CODES:
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False
    assert isascii("é") is False


def test_isprint_matches_printable_ascii():
    for code in CODES:
        expected = code < 128 and chr(code).isprintable()
        assert isprint(code) == expected


def test_isprint_edges():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint("\t") is False
    assert isprint(127) is False


def test_toupper_on_lowercase_letters():
    for ch in string.ascii_lowercase:
        assert toupper(ch) == ch.upper()
        assert toupper(ord(ch)) == ord(ch.upper())


def test_tolower_on_uppercase_letters():
    for ch in string.ascii_uppercase:
        assert tolower(ch) == ch.lower()
        assert tolower(ord(ch)) == ord(ch.lower())


def test_case_round_trip():
    for ch in string.ascii_lowercase:
        assert tolower(toupper(ch)) == ch
    for ch in string.ascii_uppercase:
        assert toupper(tolower(ch)) == ch


def test_non_letters_unchanged():
    for code in CODES:
        ch = chr(code)
        if ch not in string.ascii_letters:
            assert toupper(code) == code
            assert tolower(code) == code
            assert toupper(ch) == ch
            assert tolower(ch) == ch


def test_non_ascii_letters_unchanged():
    assert toupper("é") == "é"
    assert tolower("É") == "É"


@pytest.mark.parametrize("func", [isalpha, isdigit, isalnum, isascii, isprint, toupper, tolower])
def test_multi_character_string_rejected(func):
    with pytest.raises(ValueError):
        func("ab")


@pytest.mark.parametrize("func", [isalpha, toupper])
def test_non_integer_rejected(func):
    with pytest.raises(TypeError):
        func(1.5)