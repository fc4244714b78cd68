"""Signed varint size accounting.

Sizes are those of a zigzag-mapped LEB128 varint (7 payload bits per byte,
high bit = continuation), the encoding protobuf uses for ``sint64``:

    zigzag:  0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, ...
    size:    0..127 -> 1 byte, 128..16383 -> 2 bytes, ... up to 10 bytes

Only sizes are computed; nothing is serialized. Inputs must fit in int64.
"""

from typing import Iterable, Union

import numpy as np

MAX_VARINT_LEN64 = 10

# Smallest zigzag value needing k + 1 bytes, for k = 1..9
_SIZE_THRESHOLDS = np.array([1 << (7 * k) for k in range(1, MAX_VARINT_LEN64)],
                            dtype=np.uint64)


_INT64_SIGN = 1 << 63
_UINT64_MASK = (1 << 64) - 1


def wrap_int64(values: Iterable[int]) -> list:
    """Wrap Python ints into int64 two's complement, as a 64-bit subtraction would.

    The difference of two int64 values can need 65 bits; wrapped, it costs
    what the same delta costs in fixed 64-bit arithmetic.
    """
    return [((int(v) + _INT64_SIGN) & _UINT64_MASK) - _INT64_SIGN for v in values]


def zigzag(values: Union[np.ndarray, Iterable[int]]) -> np.ndarray:
    """Map signed int64 values onto uint64 so small magnitudes stay small."""
    v = np.asarray(values, dtype=np.int64)
    return ((v << 1) ^ (v >> 63)).astype(np.uint64)


def varint_sizes(values: Union[np.ndarray, Iterable[int]]) -> np.ndarray:
    """Per-element varint sizes in bytes (1-10).

    Args:
        values: 1D sequence of signed integers.

    Returns:
        int64 array of the same length.
    """
    z = zigzag(values).ravel()
    if z.size == 0:
        return np.zeros(0, dtype=np.int64)
    # One byte, plus one for every threshold the value reaches
    return 1 + (z[:, None] >= _SIZE_THRESHOLDS[None, :]).sum(axis=1, dtype=np.int64)


def varint_size(value: int) -> int:
    """Varint size in bytes of a single signed integer."""
    return int(varint_sizes([value])[0])


def varint_size_total(values: Union[np.ndarray, Iterable[int]]) -> int:
    """Total varint size in bytes of a sequence (0 when empty)."""
    return int(varint_sizes(values).sum())
