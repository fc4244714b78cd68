"""Abstract column encoder interface for tscol."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..result import Err, Result, RowNotFound


@dataclass(frozen=True)
class Row:
    """One logical row as appended to (and reconstructed from) an encoder."""
    id: int
    value: int
    ts: Any    # "HH:MM:SS" string for RLE, int for delta


class ColumnEncoder(ABC):
    """Abstract base for append-only column encoders.

    Row ids are 1-based and positional: row ``n`` is the ``n``-th appended
    row and lives at index ``n - 1`` of every column.
    """

    @abstractmethod
    def append_row(self, row: Row) -> None:
        """Append one row. Never fails."""
        ...

    @abstractmethod
    def reconstruct_row(self, row_id: int) -> Result[Row, RowNotFound]:
        """Rebuild the row with the given id from the compressed columns."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def append_rows(self, rows: Iterable[Row]) -> None:
        """Append several rows in order."""
        for row in rows:
            self.append_row(row)

    def _check_row_id(self, row_id: int) -> Optional[Err]:
        """Return ``Err(RowNotFound)`` when ``row_id`` is outside ``[1, len]``."""
        n_rows = len(self)
        if row_id < 1 or row_id > n_rows:
            return Err(RowNotFound(row_id, n_rows))
        return None
