"""tscol codec subpackage: run-length and delta column encoders."""

from .base import ColumnEncoder, Row
from .rle import RLEColumnEncoder, Run
from .delta import DeltaColumnEncoder
from .varint import varint_size, varint_sizes, varint_size_total, wrap_int64, zigzag

__all__ = [
    "ColumnEncoder",
    "Row",
    "RLEColumnEncoder",
    "Run",
    "DeltaColumnEncoder",
    "varint_size",
    "varint_sizes",
    "varint_size_total",
    "wrap_int64",
    "zigzag",
]
