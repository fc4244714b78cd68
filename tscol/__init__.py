"""tscol: columnar compression encoders for an in-memory time-series store.

    from tscol import Row, RLEColumnEncoder, DeltaColumnEncoder

    rle = RLEColumnEncoder()
    rle.append_row(Row(id=1, value=100, ts="10:00:00"))
    rle.get_ts_from_row_id_fast(1)          # "10:00:00"

    de = DeltaColumnEncoder(checkpoint_interval=4)
    de.append_row(Row(id=1, value=10, ts=1000))
    de.reconstruct_row(1).unwrap()          # Row(id=1, value=10, ts=1000)
"""

__version__ = "0.1.0"

from .config import DEFAULT_CHECKPOINT_INTERVAL, EncoderConfig
from .result import EncoderLookupError, Err, KeyNotFound, Ok, Result, RowNotFound
from .codec import ColumnEncoder, DeltaColumnEncoder, RLEColumnEncoder, Row, Run
from .evaluation import CompressionStats

__all__ = [
    "DEFAULT_CHECKPOINT_INTERVAL",
    "EncoderConfig",
    "EncoderLookupError",
    "Err",
    "KeyNotFound",
    "Ok",
    "Result",
    "RowNotFound",
    "ColumnEncoder",
    "DeltaColumnEncoder",
    "RLEColumnEncoder",
    "Row",
    "Run",
    "CompressionStats",
]
