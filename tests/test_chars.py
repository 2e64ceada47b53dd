import string

import pytest

from solong.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha(ch):
    assert is_alpha(ch) is True
    assert is_alpha(ord(ch)) is True


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " \n"))
def test_non_letters_are_not_alpha(ch):
    assert is_alpha(ch) is False


@pytest.mark.parametrize("ch", list(string.digits) + ["+", "-"])
def test_digits_and_signs_are_digits(ch):
    assert is_digit(ch) is True


@pytest.mark.parametrize("ch", ["a", "Z", " ", ".", "/", ":"])
def test_other_chars_are_not_digits(ch):
    assert is_digit(ch) is False


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_bounds():
    assert is_print(31) is False
    assert is_print(32) is True
    assert is_print("~") is True
    assert is_print(127) is False


def test_case_round_trip_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_lower(to_upper(lower)) == lower


def test_case_keeps_int_type():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("ch", ["1", "@", "[", "`", "{", " "])
def test_case_leaves_other_chars(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_alpha(1.5)


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi("  \t\n-42abc") == -42
    assert atoi("\v\f\r+7") == 7


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("--5") == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("123 456") == 123


def test_itoa_pins():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648, 1234567])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")