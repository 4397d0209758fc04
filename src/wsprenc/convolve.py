from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from .constants import CONV_BUFFER_BYTES, CONV_POLY0, CONV_POLY1, CONSTRAINT_LENGTH, MESSAGE_BYTES, NN


@dataclass(frozen=True)
class ConvolutionalCode:
    poly0: int = CONV_POLY0
    poly1: int = CONV_POLY1
    constraint_length: int = CONSTRAINT_LENGTH
    n_out: int = NN

    @property
    def register_mask(self) -> int:
        return (1 << self.constraint_length) - 1


WSPR_CODE = ConvolutionalCode()


def parity32(x: int) -> int:
    """XOR-fold a 32-bit word down to its parity bit."""
    x &= 0xFFFFFFFF
    x ^= x >> 16
    x ^= x >> 8
    x ^= x >> 4
    x ^= x >> 2
    x ^= x >> 1
    return x & 1


def convolve(message: bytes, code: ConvolutionalCode = WSPR_CODE) -> NDArray[np.uint8]:
    """
    Rate-1/2 convolutional encode of the 7-byte packed message.

    The message is zero-extended to 11 bytes so the registers drain, input bits
    are taken MSB-first and each one emits (parity(reg0 & poly0),
    parity(reg1 & poly1)). Output stops at code.n_out bits (162 for WSPR,
    i.e. 50 message bits plus 31 tail bits).
    """
    if len(message) != MESSAGE_BYTES:
        raise ValueError(f"message must have length {MESSAGE_BYTES}")
    padded = bytes(message) + bytes(CONV_BUFFER_BYTES - MESSAGE_BYTES)
    out = np.zeros(code.n_out, dtype=np.uint8)
    mask = code.register_mask
    reg0 = 0
    reg1 = 0
    k = 0
    for byte in padded:
        for j in range(8):
            bit = (byte >> (7 - j)) & 1
            reg0 = ((reg0 << 1) | bit) & mask
            reg1 = ((reg1 << 1) | bit) & mask
            out[k] = parity32(reg0 & code.poly0)
            out[k + 1] = parity32(reg1 & code.poly1)
            k += 2
            if k >= code.n_out:
                return out
    return out
