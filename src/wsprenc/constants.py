from __future__ import annotations

"""
Core WSPR protocol constants and the channel sync vector.

Values follow the public WSPR Type-1 description (K1JT, G4JNT coding notes)
and match the symbols emitted by interoperable transmitters.
"""

from dataclasses import dataclass

# Frame layout
NN = 162                  # channel symbols per transmission
MESSAGE_BITS = 50         # 28 callsign + 15 locator + 7 power
MESSAGE_BYTES = 7         # packed message container (56 bits)
CONV_BUFFER_BYTES = 11    # packed message plus zero tail for the encoder

# Field widths
CALL_BITS = 28
M_BITS = 22               # locator index * 128 + power + 64

# Convolutional code, rate 1/2, K=32
CONV_POLY0 = 0xF2D05351
CONV_POLY1 = 0xE4613C47
CONSTRAINT_LENGTH = 32

# Power field
MIN_POWER_DBM = 0
MAX_POWER_DBM = 60

# Sync vector (one bit per channel symbol), protocol-defined.
WSPR_SYNC = (
    1, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 1, 1, 0, 0, 0, 1, 0, 0, 1, 0, 1, 1, 1, 1, 0, 0,
    0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 1, 1, 0, 0, 1, 1, 0, 1, 0, 0,
    0, 1, 1, 0, 1, 0, 0, 0, 0, 1, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 0, 1, 0, 0, 1, 0, 1, 1, 0,
    0, 0, 1, 1, 0, 1, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 1, 1, 1, 0, 1, 1,
    0, 0, 1, 1, 0, 1, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0,
    0, 0, 1, 1, 0, 1, 0, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0,
)


@dataclass(frozen=True)
class WsprConstants:
    num_symbols: int = NN
    num_tones: int = 4
    message_bits: int = MESSAGE_BITS
    message_bytes: int = MESSAGE_BYTES
    call_bits: int = CALL_BITS
    m_bits: int = M_BITS
    constraint_length: int = CONSTRAINT_LENGTH
    min_power_dbm: int = MIN_POWER_DBM
    max_power_dbm: int = MAX_POWER_DBM
