from __future__ import annotations


class EncodeError(ValueError):
    """Base class for every station-input failure raised by the encoder."""


class InvalidChar(EncodeError):
    """A callsign or locator character falls outside the accepted alphabet."""

    def __init__(self, byte: int):
        self.byte = int(byte)
        super().__init__(f"Invalid alphanumeric char: {self.byte}")


class InvalidCallsign(EncodeError):
    def __init__(self, callsign: str = ""):
        self.callsign = callsign
        super().__init__("Invalid callsign")


class InvalidLocator(EncodeError):
    def __init__(self, locator: str = ""):
        self.locator = locator
        super().__init__(f"Invalid locator: {locator!r} (expected 4 characters)")


class InvalidPower(EncodeError):
    def __init__(self, power_dbm: int):
        self.power_dbm = power_dbm
        super().__init__(f"Invalid power: {power_dbm} dBm (expected 0..60)")
