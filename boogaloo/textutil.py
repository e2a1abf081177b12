"""Small parsers and splitters for text read from configuration files."""

from __future__ import annotations

import math
import re
import struct

# The characters C's isspace() accepts in the "C" locale.
_WS = " \t\n\v\f\r"
_WS_CLASS = r"[ \t\n\v\f\r]"

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DEC_DIGITS = frozenset("0123456789")

# strtof() is handed at most this many characters of the input.
_FLOAT_BUFFER_LIMIT = 299

_DECIMAL_FLOAT = re.compile(
    _WS_CLASS + r"*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEX_FLOAT = re.compile(
    _WS_CLASS
    + r"*[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_SPECIAL_FLOAT = re.compile(
    _WS_CLASS + r"*([+-]?)(inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)",
    re.IGNORECASE,
)
_WORD = re.compile(_WS_CLASS + r"*([^ \t\n\v\f\r]*)")


def from_hex(text: str) -> int:
    """Parse a string made only of hexadecimal digits; an empty string is 0."""
    result = 0
    for ch in text:
        if ch not in _HEX_DIGITS:
            raise ValueError(f"invalid hexadecimal digit {ch!r} in {text!r}")
        result = result * 16 + int(ch, 16)
    return result


def as_integer(text: str) -> int:
    """Parse an optionally negative run of decimal digits.

    A leading '+' or any whitespace is rejected; a lone '-' yields 0.
    """
    if not text:
        raise ValueError("cannot parse an empty string as an integer")
    sign = 1
    digits = text
    if digits.startswith("-"):
        sign = -1
        digits = digits[1:]
    number = 0
    for ch in digits:
        if ch not in _DEC_DIGITS:
            raise ValueError(f"invalid decimal digit {ch!r} in {text!r}")
        number = number * 10 + (ord(ch) - ord("0"))
    return number * sign


def _to_single(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def as_float(text: str) -> float:
    """Parse the whole string as a single-precision float, strtof-style.

    Leading whitespace is allowed, trailing characters are not. An empty
    string parses as 0.0, and strings longer than the parse buffer fail.
    """
    if len(text) > _FLOAT_BUFFER_LIMIT:
        raise ValueError("text is too long to be parsed as a float")
    if not text:
        return 0.0

    if _HEX_FLOAT.fullmatch(text):
        return _to_single(float.fromhex(text.lstrip(_WS)))

    special = _SPECIAL_FLOAT.fullmatch(text)
    if special:
        sign, word = special.groups()
        base = "nan" if word.lower().startswith("nan") else "inf"
        return float(sign + base)

    if _DECIMAL_FLOAT.fullmatch(text):
        return _to_single(float(text.lstrip(_WS)))

    raise ValueError(f"cannot parse {text!r} as a float")


def chop_by_delim(text: str, delim: str) -> tuple[str, str]:
    """Split at the first delimiter: (before, after), the delimiter dropped.

    Without a delimiter the whole text comes first and the rest is empty.
    """
    head, _, rest = text.partition(delim)
    return head, rest


def chop_word(text: str) -> tuple[str, str]:
    """Skip leading whitespace and split off the first word.

    The remainder keeps the whitespace that ended the word.
    """
    match = _WORD.match(text)
    return match.group(1), text[match.end():]