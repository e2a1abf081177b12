import pytest

from boogaloo.unicode_util import code_to_utf8, djb2_hash, escape, utf8_get_code


@pytest.mark.parametrize(
    "code", [0x00, 0x41, 0x7F, 0x80, 0x3B1, 0x7FF, 0x800, 0x20AC, 0xFFFF, 0x10000, 0x1F600, 0x10FFFF]
)
def test_code_to_utf8_matches_standard_encoding(code):
    assert code_to_utf8(code) == chr(code).encode("utf-8")


@pytest.mark.parametrize(
    "code", [0x00, 0x41, 0x7F, 0x80, 0x3B1, 0x7FF, 0x800, 0x20AC, 0xFFFF, 0x10000, 0x1F600, 0x10FFFF]
)
def test_round_trip(code):
    encoded = code_to_utf8(code)
    assert utf8_get_code(encoded) == (code, len(encoded))


def test_decode_ignores_trailing_bytes():
    data = "€abc".encode("utf-8")
    assert utf8_get_code(data) == (ord("€"), 3)


def test_code_too_big():
    with pytest.raises(ValueError):
        code_to_utf8(0x110000)


def test_negative_code():
    with pytest.raises(ValueError):
        code_to_utf8(-1)


def test_decode_empty():
    with pytest.raises(ValueError):
        utf8_get_code(b"")


def test_decode_invalid_lead():
    with pytest.raises(ValueError):
        utf8_get_code(b"\xff\xff\xff\xff")


def test_decode_truncated_sequence():
    encoded = code_to_utf8(0x1F600)
    with pytest.raises(ValueError):
        utf8_get_code(encoded[:1])


def test_hash_of_empty_is_seed():
    assert djb2_hash(b"") == 5381


def test_hash_str_and_bytes_agree():
    assert djb2_hash("hello") == djb2_hash(b"hello")


def test_hash_is_deterministic_and_distinguishes():
    assert djb2_hash(b"key") == djb2_hash(b"key")
    assert djb2_hash(b"ab") != djb2_hash(b"ba")


def test_hash_treats_high_bytes_as_signed():
    assert djb2_hash(b"\x80") < djb2_hash(b"\x7f")


def test_hash_fits_64_bits():
    value = djb2_hash(b"x" * 100)
    assert 0 <= value < 2**64


def test_escape_controls():
    assert escape("\a\b\f\n\r\t\v") == "\\a\\b\\f\\n\\r\\t\\v"


def test_escape_leaves_plain_text():
    assert escape("plain text") == "plain text"


def test_escape_mixed():
    assert escape("a\nb") == "a\\nb"