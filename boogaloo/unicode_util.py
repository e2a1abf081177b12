"""UTF-8 encoding and decoding, string hashing and control-character escaping."""

from __future__ import annotations

_MAX_CODE_POINT = 0x10FFFF
_HASH_MASK = (1 << 64) - 1

_UTF8_1BYTE_MASK = 1 << 7
_UTF8_2BYTES_MASK = 1 << 5
_UTF8_3BYTES_MASK = 1 << 4
_UTF8_4BYTES_MASK = 1 << 3
_UTF8_EXTRA_BYTE_MASK = 1 << 6

_ESCAPES = str.maketrans(
    {
        "\a": "\\a",
        "\b": "\\b",
        "\f": "\\f",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\v": "\\v",
    }
)


def code_to_utf8(code: int) -> bytes:
    """Encode a code point as 1 to 4 UTF-8 bytes.

    Surrogate code points are encoded like any other; negative values and
    values above U+10FFFF raise ValueError.
    """
    if code < 0:
        raise ValueError(f"The code {code} point is negative")
    if code <= 0x7F:
        return bytes([code])
    if code <= 0x7FF:
        return bytes([
            ((code >> 6) & 0x1F) | 0xC0,
            (code & 0x3F) | 0x80,
        ])
    if code <= 0xFFFF:
        return bytes([
            ((code >> 12) & 0x0F) | 0xE0,
            ((code >> 6) & 0x3F) | 0x80,
            (code & 0x3F) | 0x80,
        ])
    if code <= _MAX_CODE_POINT:
        return bytes([
            ((code >> 18) & 0x07) | 0xF0,
            ((code >> 12) & 0x3F) | 0x80,
            ((code >> 6) & 0x3F) | 0x80,
            (code & 0x3F) | 0x80,
        ])
    raise ValueError(f"The code {code} point is too big")


def _extra_bytes_ok(data: bytes, count: int) -> bool:
    return all((b & _UTF8_EXTRA_BYTE_MASK) == 0 for b in data[1:count])


def utf8_get_code(data: bytes) -> tuple[int, int]:
    """Decode the code point at the start of data.

    Returns (code point, number of bytes used); raises ValueError when the
    leading bytes do not form a sequence.
    """
    n = len(data)
    if n >= 1 and (data[0] & _UTF8_1BYTE_MASK) == 0:
        return data[0], 1

    if n >= 2 and (data[0] & _UTF8_2BYTES_MASK) == 0 and _extra_bytes_ok(data, 2):
        code = ((data[0] & (_UTF8_2BYTES_MASK - 1)) << 6) | (
            data[1] & (_UTF8_EXTRA_BYTE_MASK - 1)
        )
        return code, 2

    if n >= 3 and (data[0] & _UTF8_3BYTES_MASK) == 0 and _extra_bytes_ok(data, 3):
        code = (
            ((data[0] & (_UTF8_3BYTES_MASK - 1)) << 12)
            | ((data[1] & (_UTF8_EXTRA_BYTE_MASK - 1)) << 6)
            | (data[2] & (_UTF8_EXTRA_BYTE_MASK - 1))
        )
        return code, 3

    if n >= 4 and (data[0] & _UTF8_4BYTES_MASK) == 0 and _extra_bytes_ok(data, 4):
        code = (
            ((data[0] & (_UTF8_3BYTES_MASK - 1)) << 18)
            | ((data[1] & (_UTF8_EXTRA_BYTE_MASK - 1)) << 12)
            | ((data[2] & (_UTF8_EXTRA_BYTE_MASK - 1)) << 6)
            | (data[3] & (_UTF8_EXTRA_BYTE_MASK - 1))
        )
        return code, 4

    raise ValueError(f"no UTF-8 sequence at the start of {bytes(data[:4])!r}")


def djb2_hash(data: bytes | str) -> int:
    """The djb2 hash as a 64-bit unsigned value; bytes are taken as signed chars."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    value = 5381
    for byte in data:
        signed = byte - 256 if byte >= 0x80 else byte
        value = ((value << 5) + value + signed) & _HASH_MASK
    return value


def escape(text: str) -> str:
    """Replace the C control characters \\a \\b \\f \\n \\r \\t \\v with escapes."""
    return text.translate(_ESCAPES)