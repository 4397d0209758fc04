from __future__ import annotations

from typing import Optional
import numpy as np
from numpy.typing import NDArray

from .constants import NN

_perm_cached: Optional[NDArray[np.int64]] = None


def bit_reverse8(j: int) -> int:
    """Reverse the low 8 bits of j."""
    rev = 0
    for k in range(8):
        if (j >> k) & 1:
            rev |= 1 << (7 - k)
    return rev


def _build_permutation() -> NDArray[np.int64]:
    perm = np.zeros(NN, dtype=np.int64)
    i = 0
    for j in range(255):
        rev = bit_reverse8(j)
        if rev < NN:
            perm[i] = rev
            i += 1
        if i >= NN:
            break
    if i != NN:
        raise ValueError("bit-reversal table did not cover all channel positions")
    perm.setflags(write=False)
    return perm


def interleave_permutation() -> NDArray[np.int64]:
    """Return perm such that coded bit i is transmitted at position perm[i].

    Built once and cached read-only; depends only on position.
    """
    global _perm_cached
    if _perm_cached is None:
        _perm_cached = _build_permutation()
    return _perm_cached


def interleave(coded_bits: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Scatter 162 coded bits (generation order) to their bit-reversed channel positions."""
    coded_bits = np.asarray(coded_bits, dtype=np.uint8)
    if coded_bits.shape != (NN,):
        raise ValueError(f"coded_bits must have shape ({NN},)")
    out = np.zeros(NN, dtype=np.uint8)
    out[interleave_permutation()] = coded_bits
    return out
