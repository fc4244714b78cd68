"""Evaluation metrics for tscol: varint compression accounting and round-trip checks."""

from dataclasses import asdict, dataclass
from typing import Sequence

from ..codec.varint import varint_size_total


@dataclass(frozen=True)
class CompressionStats:
    """Projected size of the encoded columns versus the raw columns."""
    compressed_bytes: int
    original_bytes: int
    saved_bytes: int
    saved_percent: float

    @property
    def compression_ratio(self) -> float:
        if self.compressed_bytes == 0:
            return 0.0
        return self.original_bytes / self.compressed_bytes

    def to_dict(self) -> dict:
        d = asdict(self)
        d["compression_ratio"] = self.compression_ratio
        return d


def compression_stats(
    compressed_columns: Sequence[Sequence[int]],
    original_columns: Sequence[Sequence[int]],
) -> CompressionStats:
    """Compare varint sizes of two column sets.

    Args:
        compressed_columns: Columns as stored by the encoder (e.g. ids and deltas).
        original_columns: The same data as raw absolute columns.

    Returns:
        CompressionStats; ``saved_percent`` is 0.0 when there is no data.
    """
    compressed = sum(varint_size_total(col) for col in compressed_columns)
    original = sum(varint_size_total(col) for col in original_columns)
    saved = original - compressed
    percent = saved * 100.0 / original if original > 0 else 0.0
    return CompressionStats(
        compressed_bytes=compressed,
        original_bytes=original,
        saved_bytes=saved,
        saved_percent=percent,
    )


def rows_match(original: Sequence, reconstructed: Sequence) -> bool:
    """Element-wise equality of two row sequences, lengths included."""
    if len(original) != len(reconstructed):
        return False
    return all(a == b for a, b in zip(original, reconstructed))
