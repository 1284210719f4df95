"""UTF-8 encoding and decoding, plus the special code values used by the editor.

Besides real Unicode code points, the editor carries a few artificial
values in the same integer space: function keys, input error codes and
the markers that bracket folded sections of text.
"""

from __future__ import annotations

__all__ = [
    "UNICODE_BAD",
    "FUNCTION_UP",
    "FUNCTION_DOWN",
    "FUNCTION_RIGHT",
    "FUNCTION_LEFT",
    "FUNCTION_PGUP",
    "FUNCTION_PGDOWN",
    "FUNCTION_HOME",
    "FUNCTION_END",
    "FUNCTION_INSERT",
    "FUNCTION_DELETE",
    "FUNCTION_FKEYS",
    "ERROR_EOF",
    "ERROR_CHANGED",
    "ERROR_INPUT",
    "ERROR_EMPTY",
    "FOLD_START",
    "FOLD_END",
    "UTF8_BYTES",
    "encode",
    "utf8_length",
    "utf8_length_backwards",
    "decode",
    "is_unicode",
    "is_codepoint",
    "function_key",
    "function_f",
    "is_function_key",
    "error_code",
    "is_error_code",
    "is_folded",
    "folded_bytes",
    "control",
]

_WORD = 0xFFFFFFFF

UNICODE_BAD = 1 << 31


def is_unicode(code: int) -> bool:
    """True for real characters and fold markers, false for keys and errors."""
    return code < UNICODE_BAD


def is_codepoint(code: int) -> bool:
    """True for code points of the Basic Multilingual Plane."""
    return code < 0x10000


def function_key(number: int) -> int:
    """Return the code used for function key *number*."""
    return UNICODE_BAD + 1 + number


def function_f(number: int) -> int:
    """Return the code used for the numbered key F<number>."""
    return function_key(20 + number)


def is_function_key(code: int) -> bool:
    """True when *code* lies in the range reserved for function keys."""
    return ((code - function_key(0)) & _WORD) < 256


FUNCTION_UP = function_key(1)
FUNCTION_DOWN = function_key(2)
FUNCTION_RIGHT = function_key(3)
FUNCTION_LEFT = function_key(4)
FUNCTION_PGUP = function_key(5)
FUNCTION_PGDOWN = function_key(6)
FUNCTION_HOME = function_key(7)
FUNCTION_END = function_key(8)
FUNCTION_INSERT = function_key(9)
FUNCTION_DELETE = function_key(10)
FUNCTION_FKEYS = 12


def error_code(number: int) -> int:
    """Return the code used to report input error *number*."""
    return function_key(256) + number


def is_error_code(code: int) -> bool:
    """True when *code* reports an input error."""
    return code >= error_code(0)


ERROR_EOF = error_code(1)
ERROR_CHANGED = error_code(2)
ERROR_INPUT = error_code(3)
ERROR_EMPTY = error_code(4)

FOLD_START = 0x40000000
FOLD_END = 0x60000000


def is_folded(code: int) -> bool:
    """True for a marker that opens a folded section."""
    return FOLD_START <= code < FOLD_END


def folded_bytes(code: int) -> int:
    """Return the byte count carried by a fold marker."""
    return code & 0x1FFFFFFF


def control(ch: str | int) -> int:
    """Return the control code for a character, as ^X is to X."""
    value = ord(ch) if isinstance(ch, str) else ch
    return value - ord("@")


def _first_byte_lengths() -> tuple[int, ...]:
    table = [1] * 0x100
    for first in range(0xC0, 0xE0):
        table[first] = 2
    for first in range(0xE0, 0xF0):
        table[first] = 3
    for first in range(0xF0, 0xF8):
        table[first] = 4
    for first in range(0xF8, 0xFC):
        table[first] = 5
    for first in range(0xFC, 0xFE):
        table[first] = 6
    return tuple(table)


UTF8_BYTES: tuple[int, ...] = _first_byte_lengths()
"""Sequence length announced by each possible first byte."""


def encode(code: int) -> bytes:
    """Encode *code* in (extended) UTF-8, up to six bytes long."""
    code &= _WORD
    if not code >> 7:
        return bytes([code])
    n = 1
    while n < 5 and code >> (6 + 5 * n):
        n += 1
    out = bytearray([((0xFC << (5 - n)) | (code >> (6 * n))) & 0xFF])
    out.extend(0x80 | ((code >> (6 * k)) & 0x3F) for k in range(n - 1, -1, -1))
    return bytes(out)


def utf8_length(data: bytes) -> int:
    """Return the length of the sequence at the start of *data*.

    A sequence that is truncated or malformed counts as a single byte.
    """
    if not data:
        raise ValueError("no bytes to measure")
    n = UTF8_BYTES[data[0]]
    if len(data) < n:
        return 1
    if any(byte & 0xC0 != 0x80 for byte in data[1:n]):
        return 1
    return n


def utf8_length_backwards(data: bytes) -> int:
    """Return the length of the sequence that ends *data*.

    A stray or malformed trailing byte counts as a single byte.
    """
    if not data:
        raise ValueError("no bytes to measure")
    if data[-1] & 0xC0 != 0x80:
        return 1
    limit = min(len(data), 6)
    n = 1
    while n < limit and data[-1 - n] & 0xC0 == 0x80:
        n += 1
    if n < len(data) and UTF8_BYTES[data[-1 - n]] == n + 1:
        return n + 1
    return 1


def decode(data: bytes) -> int:
    """Decode one sequence, whose whole length is ``len(data)``."""
    if not data:
        raise ValueError("no bytes to decode")
    length = len(data)
    if length <= 1 or length > 6:
        return data[0]
    code = data[0] & ((1 << (7 - length)) - 1)
    for byte in data[1:]:
        code = (code << 6) | (byte & 0x3F)
    return code