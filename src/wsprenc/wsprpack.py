from __future__ import annotations

import operator

from .constants import MAX_POWER_DBM, MESSAGE_BYTES, MIN_POWER_DBM
from .errors import InvalidCallsign, InvalidChar, InvalidLocator, InvalidPower
from .values import encode_digit, encode_locator_char, encode_num_str


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def normalize_callsign(callsign: str) -> str:
    """Place a standard callsign into the 6-character WSPR form.

    The digit must land at index 2: " G0UPL" for G0UPL, "VK3XE " for VK3XE.
    """
    callsign = callsign.strip().upper()
    length = len(callsign)
    if length < 3 or length > 6:
        raise InvalidCallsign(callsign)
    if _is_digit(callsign[2]):
        # AB0XYZ
        return callsign.ljust(6)
    if length <= 5 and _is_digit(callsign[1]):
        # A0XYZ -> " A0XYZ"
        return (' ' + callsign).ljust(6)
    raise InvalidCallsign(callsign)


def encode_call(callsign: str) -> int:
    """Pack a 6-character callsign into its 28-bit integer.

    Positions: 0 alphanumeric or space, 1 alphanumeric, 2 digit, 3..5 letter
    or space. Short callsigns must be padded by the caller (see
    normalize_callsign). Length and characters are checked on the UTF-8 bytes.
    """
    raw = callsign.encode("utf-8")
    if len(raw) != 6:
        raise InvalidCallsign(callsign)
    n = encode_num_str(raw[0])
    i1 = encode_num_str(raw[1])
    if i1 == 36:
        raise InvalidChar(raw[1])
    n = n * 36 + i1
    n = n * 10 + encode_digit(raw[2])
    for b in raw[3:]:
        v = encode_num_str(b)
        if v < 10:
            # digits are not representable in the suffix
            raise InvalidChar(b)
        n = n * 27 + v - 10
    return n


def encode_m1(locator: str) -> int:
    """Locator index for a 4-character Maidenhead square (QF22 -> 3112)."""
    raw = locator.encode("utf-8")
    if len(raw) != 4:
        raise InvalidLocator(locator)
    lon_field = encode_locator_char(raw[0])
    lon_square = encode_digit(raw[2])
    lat_field = encode_locator_char(raw[1])
    lat_square = encode_digit(raw[3])
    return (179 - 10 * lon_field - lon_square) * 180 + 10 * lat_field + lat_square


def encode_m(locator: str, power_dbm: int) -> int:
    m1 = encode_m1(locator)
    try:
        power = operator.index(power_dbm)
    except TypeError:
        raise InvalidPower(power_dbm) from None
    if not MIN_POWER_DBM <= power <= MAX_POWER_DBM:
        raise InvalidPower(power)
    return m1 * 128 + power + 64


def pack_message(callsign: str, locator: str, power_dbm: int) -> bytes:
    """Pack a WSPR Type-1 message (28-bit call, 22-bit m) into 7 bytes, MSB-first.

    The low 6 bits of the last byte are always zero.
    """
    n = encode_call(callsign)
    m = encode_m(locator, power_dbm)

    a = bytearray(MESSAGE_BYTES)
    a[0] = (n >> 20) & 0xFF
    a[1] = (n >> 12) & 0xFF
    a[2] = (n >> 4) & 0xFF
    a[3] = ((n << 4) & 0xF0) | ((m >> 18) & 0x0F)
    a[4] = (m >> 10) & 0xFF
    a[5] = (m >> 2) & 0xFF
    a[6] = (m << 6) & 0xC0
    return bytes(a)


def message_str(message: bytes) -> str:
    """Render packed message bytes as space-separated uppercase hex."""
    return " ".join(f"{b:02X}" for b in message)
