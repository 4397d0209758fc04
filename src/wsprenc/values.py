from __future__ import annotations

from typing import Union

from .errors import InvalidChar

Char = Union[str, int]


def _code(ch: Char) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError("expected a single character")
        # non-ASCII characters are reported by their leading UTF-8 byte
        return ch.encode("utf-8")[0]
    return int(ch)


def encode_num_str(ch: Char) -> int:
    """Alphanumeric-or-space value: '0'..'9' -> 0..9, 'A'..'Z' -> 10..35, ' ' -> 36."""
    c = _code(ch)
    if 0x30 <= c <= 0x39:
        return c - 0x30
    if 0x41 <= c <= 0x5A:
        return c - 0x41 + 10
    if c == 0x20:
        return 36
    raise InvalidChar(c)


def encode_locator_char(ch: Char) -> int:
    """Maidenhead field letter: 'A'..'R' -> 0..17."""
    c = _code(ch)
    if 0x41 <= c <= 0x52:
        return c - 0x41
    raise InvalidChar(c)


def encode_digit(ch: Char) -> int:
    c = _code(ch)
    if 0x30 <= c <= 0x39:
        return c - 0x30
    raise InvalidChar(c)
