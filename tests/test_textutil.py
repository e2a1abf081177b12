import math
import struct

import pytest

from boogaloo.textutil import as_float, as_integer, chop_by_delim, chop_word, from_hex


@pytest.mark.parametrize("text", ["FF", "ff", "DeadBeef", "0", "12345678"])
def test_from_hex_matches_base16(text):
    assert from_hex(text) == int(text, 16)


def test_from_hex_empty_is_zero():
    assert from_hex("") == 0


@pytest.mark.parametrize("n", [0, 1, 15, 16, 0xFFFFFFFF, 123456789])
def test_from_hex_round_trip(n):
    assert from_hex(format(n, "x")) == n
    assert from_hex(format(n, "X")) == n


@pytest.mark.parametrize("text", ["0x1F", "g", "12 ", " 12", "-1", "+1", "1_0"])
def test_from_hex_rejects_invalid(text):
    with pytest.raises(ValueError):
        from_hex(text)


@pytest.mark.parametrize("n", [0, 7, 42, -17, 100000, -2147483648])
def test_as_integer_round_trip(n):
    assert as_integer(str(n)) == n


@pytest.mark.parametrize("text", ["", "+1", " 1", "1 ", "1a", "--1", "1.0", "٣"])
def test_as_integer_rejects_invalid(text):
    with pytest.raises(ValueError):
        as_integer(text)


def test_as_integer_lone_minus_is_zero():
    assert as_integer("-") == 0


def test_as_float_simple_values():
    assert as_float("1.5") == 1.5
    assert as_float("-2.25") == -2.25
    assert as_float("1e3") == 1000.0


def test_as_float_leading_whitespace_allowed():
    assert as_float("  \t1.5") == 1.5


@pytest.mark.parametrize("text", ["1.5 ", "abc", "1.5x", "1e", "1_0", "0x"])
def test_as_float_rejects_partial_parses(text):
    with pytest.raises(ValueError):
        as_float(text)


def test_as_float_empty_is_zero():
    assert as_float("") == 0.0


def test_as_float_too_long_fails():
    with pytest.raises(ValueError):
        as_float("1" * 300)


def test_as_float_is_single_precision():
    value = as_float("0.1")
    assert struct.unpack("f", struct.pack("f", value))[0] == value
    assert abs(value - 0.1) < 1e-7


def test_as_float_special_values():
    assert math.isinf(as_float("inf"))
    assert as_float("-Infinity") < 0
    assert math.isnan(as_float("nan"))
    assert math.isnan(as_float("NAN(abc)"))


def test_as_float_hex():
    assert as_float("0x1p3") == float.fromhex("0x1p3")


def test_as_float_overflow_is_infinite():
    assert as_float("1e100") == math.inf


def test_chop_by_delim_splits_at_first():
    assert chop_by_delim("a:b", ":") == ("a", "b")
    assert chop_by_delim("a::b", ":") == ("a", ":b")


def test_chop_by_delim_without_delim():
    assert chop_by_delim("abc", ":") == ("abc", "")


@pytest.mark.parametrize("text", ["name : int = 5", "x:", ":y", "p:q:r"])
def test_chop_by_delim_reassembles(text):
    head, rest = chop_by_delim(text, ":")
    assert head + ":" + rest == text
    assert ":" not in head


def test_chop_word_basic():
    assert chop_word("  hello world") == ("hello", " world")


def test_chop_word_blank():
    assert chop_word("") == ("", "")
    assert chop_word(" \t\n") == ("", "")


def test_chop_word_repeated_yields_all_words():
    text = " alpha  beta\tgamma\n"
    words = []
    word, rest = chop_word(text)
    while word:
        words.append(word)
        word, rest = chop_word(rest)
    assert words == text.split()