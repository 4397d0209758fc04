from __future__ import annotations

from dataclasses import dataclass
import logging
import numpy as np
from numpy.typing import NDArray

from .convolve import convolve
from .interleave import interleave
from .symbols import symbols_from_interleaved
from .wsprpack import encode_call, encode_m, encode_m1, message_str, normalize_callsign, pack_message

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Station:
    """A WSPR Type-1 station: 6-character callsign, 4-character locator, power in dBm."""

    callsign: str
    locator: str
    power_dbm: int

    def encode_call(self) -> int:
        return encode_call(self.callsign)

    def encode_m1(self) -> int:
        return encode_m1(self.locator)

    def encode_m(self) -> int:
        return encode_m(self.locator, self.power_dbm)

    def message(self) -> bytes:
        return pack_message(self.callsign, self.locator, self.power_dbm)

    def message_str(self) -> str:
        return message_str(self.message())

    def encode(self) -> NDArray[np.uint8]:
        """
        Run the full transmit pipeline and return the 162 channel symbols (0..3).

        Raises an EncodeError subclass for invalid station input; no later stage runs
        once a field fails to encode.
        """
        msg = self.message()
        if LOG.isEnabledFor(logging.DEBUG):
            LOG.debug("%r %s %s dBm packed as %s", self.callsign, self.locator, self.power_dbm, message_str(msg))
        coded = convolve(msg)
        interleaved = interleave(coded)
        return symbols_from_interleaved(interleaved)


def encode_wspr(callsign: str, locator: str, power_dbm: int, normalize: bool = False) -> NDArray[np.uint8]:
    """
    Encode a station into WSPR channel symbols.

    With normalize=True the callsign is upper-cased and padded to the 6-character
    form first (G0UPL -> " G0UPL") and the locator is upper-cased.
    """
    if normalize:
        callsign = normalize_callsign(callsign)
        locator = locator.strip().upper()
    return Station(callsign, locator, power_dbm).encode()
