from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .constants import NN, WSPR_SYNC

SYNC_VECTOR = np.array(WSPR_SYNC, dtype=np.uint8)
SYNC_VECTOR.setflags(write=False)


def symbols_from_interleaved(bits: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Map 162 interleaved data bits to 4-FSK channel symbols.

    symbol[i] = 2 * bits[i] + sync[i] over the full frame, so every symbol is in 0..3.
    """
    bits = np.asarray(bits, dtype=np.uint8)
    if bits.shape != SYNC_VECTOR.shape:
        raise ValueError(f"bits must have shape ({NN},)")
    return ((bits & 1) * 2 + SYNC_VECTOR).astype(np.uint8)
