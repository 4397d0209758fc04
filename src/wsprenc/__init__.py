"""WSPR transmit encoder.

Public API:
- Station(callsign, locator, power_dbm).encode() -> 162 channel symbols
- encode_wspr(callsign, locator, power_dbm) -> 162 channel symbols
"""
from .api import Station, encode_wspr
from .constants import WsprConstants, WSPR_SYNC
from .errors import EncodeError, InvalidCallsign, InvalidChar, InvalidLocator, InvalidPower
from .wsprpack import normalize_callsign

__all__ = [
    "Station",
    "encode_wspr",
    "WsprConstants",
    "WSPR_SYNC",
    "EncodeError",
    "InvalidCallsign",
    "InvalidChar",
    "InvalidLocator",
    "InvalidPower",
    "normalize_callsign",
]
