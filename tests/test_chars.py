import string

import pytest

from fractol.libft.chars import (
    is_num,
    is_sign,
    is_space,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    skip,
    tolower,
    toupper,
)


def test_isalpha_accepts_letters_only():
    assert all(isalpha(ch) for ch in string.ascii_letters)
    assert not any(isalpha(ch) for ch in string.digits + string.punctuation + " ")


def test_isalpha_accepts_integer_codes():
    assert isalpha(ord("q")) is True
    assert isalpha(ord("@")) is False


def test_isdigit_and_is_num_agree_on_ascii():
    for code in range(128):
        assert isdigit(code) == (chr(code) in string.digits)
        assert is_num(code) == isdigit(code)


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(-5, 200):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert all(isascii(code) for code in range(128))
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert all(isprint(code) for code in range(32, 127))
    assert not isprint(31)
    assert not isprint(127)
    assert isprint(" ")
    assert isprint("~")


def test_case_conversion_matches_ascii_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert toupper(lower) == upper
        assert tolower(upper) == lower


def test_case_conversion_round_trip_keeps_non_letters():
    for ch in string.digits + string.punctuation + " ":
        assert toupper(ch) == ch
        assert tolower(ch) == ch
    for ch in string.ascii_letters:
        assert tolower(toupper(ch)) == ch.lower()


def test_case_conversion_keeps_integer_type():
    result = toupper(ord("a"))
    assert result == ord("A")
    assert isinstance(result, int)
    assert tolower(ord("Z")) == ord("z")


def test_is_space_set():
    for ch in " \t\n\v\f\r":
        assert is_space(ch)
    for ch in "a0_-":
        assert not is_space(ch)


def test_is_sign():
    assert is_sign("+")
    assert is_sign("-")
    assert not is_sign("*")
    assert not is_sign("1")


def test_skip_leading_spaces():
    assert skip(" \t\n 42 x", is_space) == "42 x"


def test_skip_nothing_to_skip():
    assert skip("abc", is_num) == "abc"


def test_skip_everything():
    assert skip("   ", is_space) == ""
    assert skip("", is_space) == ""


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isdigit("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        isalpha(1.5)