"""Run-length encoding for a sorted, low-cardinality timestamp column.

Consecutive rows with the same timestamp collapse into one ``Run(ts, count)``.
A parallel prefix-sum list (``run_end_offsets``) holds the cumulative row count
at the end of each run, so the run that covers a row id is a binary search
away:

    runs             [("10:00:00", 2), ("10:00:02", 3), ("10:00:03", 1)]
    run_end_offsets  [2,               5,               6]

Row 4 -> first offset >= 4 is index 1 -> "10:00:02".

The id and value columns are stored uncompressed, indexed by row position.

Every query comes in two flavours, a linear scan and a binary search, as
separate methods. Both must return the same answer for every input.
"""

import warnings
from bisect import bisect_left
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, List, Optional

from ..result import Err, KeyNotFound, Ok, Result, RowNotFound
from .base import ColumnEncoder, Row


@dataclass(frozen=True)
class Run:
    """A maximal block of consecutive rows sharing one timestamp."""
    ts: Any
    count: int

    def __str__(self) -> str:
        return f"{{TS: {self.ts}, Count: {self.count}}}"


class RLEColumnEncoder(ColumnEncoder):
    """Run-length encoded timestamp column plus plain id/value columns.

    Assumes the timestamp column is sorted. Appends are O(1) amortized;
    ``get_ts_from_row_id_fast`` and ``reconstruct_row`` are O(log k) for
    ``k`` runs.
    """

    def __init__(self):
        self._ids: List[int] = []
        self._values: List[int] = []
        self._runs: List[Run] = []
        self._run_ends: List[int] = []
        self._runs_sorted = True

    def __len__(self) -> int:
        return len(self._ids)

    @property
    def runs(self) -> tuple:
        return tuple(self._runs)

    @property
    def run_end_offsets(self) -> tuple:
        return tuple(self._run_ends)

    @property
    def runs_sorted(self) -> bool:
        """Whether runs are in ascending ts order (``count_of_ts_fast`` precondition)."""
        return self._runs_sorted

    def append_row(self, row: Row) -> None:
        """Append a row, extending the last run or opening a new one."""
        new_run = not self._runs or self._runs[-1].ts != row.ts
        if new_run and self._runs and not self._ts_ascending(self._runs[-1].ts, row.ts):
            self._runs_sorted = False

        self._ids.append(row.id)
        self._values.append(row.value)

        if new_run:
            self._runs.append(Run(row.ts, 1))
            prev_end = self._run_ends[-1] if self._run_ends else 0
            self._run_ends.append(prev_end + 1)
        else:
            last = self._runs[-1]
            self._runs[-1] = Run(last.ts, last.count + 1)
            self._run_ends[-1] += 1

    @staticmethod
    def _ts_ascending(prev, ts) -> bool:
        # Timestamps that do not order against each other count as unsorted
        try:
            return prev < ts
        except TypeError:
            return False

    def reconstruct_row(self, row_id: int) -> Result[Row, RowNotFound]:
        """Rebuild a row; the timestamp comes from the prefix-sum search."""
        err = self._check_row_id(row_id)
        if err is not None:
            return err
        idx = row_id - 1
        return Ok(Row(self._ids[idx], self._values[idx],
                      self.get_ts_from_row_id_fast(row_id)))

    # ---- Point query: row id -> ts ----

    def get_ts_from_row_id(self, row_id: int) -> Optional[Any]:
        """Timestamp of a row by walking the runs. O(k).

        Returns:
            The timestamp, or None when ``row_id`` is outside ``[1, len]``.
        """
        if row_id < 1 or row_id > len(self._ids):
            return None

        remaining = row_id
        for run in self._runs:
            if run.count >= remaining:
                return run.ts
            remaining -= run.count
        return None

    def get_ts_from_row_id_fast(self, row_id: int) -> Optional[Any]:
        """Timestamp of a row by binary search over the run end offsets. O(log k).

        Returns:
            The timestamp, or None when ``row_id`` is outside
            ``[1, run_end_offsets[-1]]`` (always None for an empty encoder).
        """
        if not self._run_ends or row_id < 1 or row_id > self._run_ends[-1]:
            return None
        return self._runs[bisect_left(self._run_ends, row_id)].ts

    # ---- Aggregate: count(ts) ----

    def count_of_ts(self, ts) -> Result[int, KeyNotFound]:
        """Row count for a timestamp, scanning runs in order. O(k)."""
        for run in self._runs:
            if run.ts == ts:
                return Ok(run.count)
        return Err(KeyNotFound(ts))

    def count_of_ts_fast(self, ts) -> Result[int, KeyNotFound]:
        """Row count for a timestamp by binary search over the runs. O(log k).

        Precondition: runs are ordered by ts value, which holds when the
        column was appended in ascending timestamp order. Runs are kept in
        append order, so an unsorted column breaks the search: it can return
        a spurious ``KeyNotFound`` or another run's count. A RuntimeWarning
        is emitted in that case; use ``count_of_ts`` instead.
        """
        if not self._runs_sorted:
            warnings.warn(
                "RLE runs are not in ascending ts order; "
                "count_of_ts_fast may return a wrong result",
                RuntimeWarning,
                stacklevel=2,
            )
        try:
            i = bisect_left(self._runs, ts, key=attrgetter("ts"))
        except TypeError:
            # ts does not order against the stored timestamps, so no run can match
            return Err(KeyNotFound(ts))
        if i < len(self._runs) and self._runs[i].ts == ts:
            return Ok(self._runs[i].count)
        return Err(KeyNotFound(ts))
