"""Delta encoding with periodic checkpoints for slowly varying integer columns.

Each row stores ``value[i] - value[i-1]`` (and the same for ``ts``) instead of
the absolute value; row 0 stores the sentinel 0. Summing every delta from the
start of the table would make reconstruction O(n), so absolute snapshots are
kept at a fixed row interval:

    interval = 4
    values       10  20  30  30 | 20  50  10  15 | 10  10
    deltas        0  10  10   0 |-10  30 -40   5 | -5   0
    checkpoints  [10,            30,              15]

Checkpoint 0 is row 0. After every append that makes the row count a multiple
of the interval, the just-appended row becomes the next checkpoint, so
checkpoint ``g > 0`` is the last row before group ``g``. A row in group ``g``
is that checkpoint plus the group's own deltas up to the row, which touches at
most ``interval`` deltas whatever the table size.

The verifier and the size estimator are diagnostics. Verification needs a
retained copy of every appended row (``EncoderConfig.retain_originals``),
which doubles memory; turn it off for production use.
"""

from typing import List, Optional

from ..config import EncoderConfig
from ..evaluation.metrics import CompressionStats, compression_stats, rows_match
from ..result import Ok, Result, RowNotFound
from .base import ColumnEncoder, Row
from .varint import wrap_int64


class DeltaColumnEncoder(ColumnEncoder):
    """Delta-encoded value and timestamp columns with checkpoint snapshots."""

    def __init__(
        self,
        config: Optional[EncoderConfig] = None,
        *,
        checkpoint_interval: Optional[int] = None,
    ):
        """Initialize an empty encoder.

        Args:
            config: Encoder settings. Defaults to ``EncoderConfig()``.
            checkpoint_interval: Shortcut overriding ``config.checkpoint_interval``.
        """
        if config is None:
            config = EncoderConfig()
        if checkpoint_interval is not None:
            config = EncoderConfig(
                checkpoint_interval=checkpoint_interval,
                retain_originals=config.retain_originals,
            )
        self.config = config

        self._ids: List[int] = []
        self._delta_values: List[int] = []
        self._delta_ts: List[int] = []
        self._checkpoint_values: List[int] = []
        self._checkpoint_ts: List[int] = []
        self._original_rows: Optional[List[Row]] = [] if config.retain_originals else None
        self._last_value = 0
        self._last_ts = 0

    def __len__(self) -> int:
        return len(self._ids)

    @property
    def checkpoint_interval(self) -> int:
        return self.config.checkpoint_interval

    @property
    def retains_originals(self) -> bool:
        return self._original_rows is not None

    @property
    def delta_values(self) -> tuple:
        return tuple(self._delta_values)

    @property
    def delta_ts(self) -> tuple:
        return tuple(self._delta_ts)

    @property
    def checkpoint_values(self) -> tuple:
        return tuple(self._checkpoint_values)

    @property
    def checkpoint_ts(self) -> tuple:
        return tuple(self._checkpoint_ts)

    def append_row(self, row: Row) -> None:
        """Append a row, storing deltas and a checkpoint when a group fills."""
        if not self._ids:
            self._delta_values.append(0)
            self._delta_ts.append(0)
            self._checkpoint_values.append(row.value)
            self._checkpoint_ts.append(row.ts)
        else:
            self._delta_values.append(row.value - self._last_value)
            self._delta_ts.append(row.ts - self._last_ts)

        self._ids.append(row.id)
        self._last_value = row.value
        self._last_ts = row.ts
        if self._original_rows is not None:
            self._original_rows.append(row)

        if len(self._ids) % self.config.checkpoint_interval == 0:
            self._checkpoint_values.append(row.value)
            self._checkpoint_ts.append(row.ts)

    def reconstruct_row(self, row_id: int) -> Result[Row, RowNotFound]:
        """Rebuild a row from its group's checkpoint. O(checkpoint_interval)."""
        err = self._check_row_id(row_id)
        if err is not None:
            return err

        interval = self.config.checkpoint_interval
        row_index = row_id - 1
        checkpoint_index = row_index // interval
        value = self._checkpoint_values[checkpoint_index]
        ts = self._checkpoint_ts[checkpoint_index]
        for i in range(checkpoint_index * interval, row_index + 1):
            value += self._delta_values[i]
            ts += self._delta_ts[i]

        return Ok(Row(self._ids[row_index], value, ts))

    def reconstruct_table(self) -> Result[List[Row], RowNotFound]:
        """Rebuild every row in id-column order; stops at the first error."""
        rows = []
        for row_id in self._ids:
            result = self.reconstruct_row(row_id)
            if not result.ok:
                return result
            rows.append(result.value)
        return Ok(rows)

    # ---- Diagnostics ----

    def verify_correctness(self) -> bool:
        """Check that the full table reconstructs to exactly the appended rows.

        Returns:
            True when every row matches (and for an empty encoder), False on
            any mismatch or reconstruction failure.

        Raises:
            RuntimeError: originals were not retained (``retain_originals=False``).
        """
        if self._original_rows is None:
            raise RuntimeError(
                "verify_correctness requires EncoderConfig(retain_originals=True)"
            )
        result = self.reconstruct_table()
        if not result.ok:
            return False
        return rows_match(self._original_rows, result.value)

    def estimate_compression_stats(self) -> CompressionStats:
        """Projected varint size of the encoded columns versus the raw ones.

        The compressed side is ``ids + delta values + delta ts``; the baseline
        is ``ids + values + ts`` taken from the retained originals, or from
        the reconstructed table when originals are not kept. Deltas are sized
        after int64 wraparound, since a difference of two int64 values can
        overflow 64 bits.
        """
        if self._original_rows is not None:
            originals = self._original_rows
        else:
            originals = self.reconstruct_table().unwrap()
        return compression_stats(
            [self._ids, wrap_int64(self._delta_values), wrap_int64(self._delta_ts)],
            [
                [row.id for row in originals],
                [row.value for row in originals],
                [row.ts for row in originals],
            ],
        )
