"""Tests for compression accounting and row comparison helpers."""

import pytest

from tscol.codec.base import Row
from tscol.evaluation.metrics import CompressionStats, compression_stats, rows_match


class TestCompressionStats:

    def test_saved_bytes(self):
        stats = compression_stats([[0, 1, 1]], [[1000, 1001, 1002]])
        assert stats.compressed_bytes == 3
        assert stats.original_bytes == 6
        assert stats.saved_bytes == 3
        assert stats.saved_percent == pytest.approx(50.0)
        assert stats.compression_ratio == pytest.approx(2.0)

    def test_negative_savings(self):
        stats = compression_stats([[100000]], [[1]])
        assert stats.saved_bytes < 0
        assert stats.saved_percent < 0

    def test_no_data(self):
        stats = compression_stats([[], []], [[], []])
        assert stats == CompressionStats(0, 0, 0, 0.0)
        assert stats.compression_ratio == 0.0

    def test_to_dict(self):
        d = compression_stats([[0]], [[1000]]).to_dict()
        assert d == {
            "compressed_bytes": 1,
            "original_bytes": 2,
            "saved_bytes": 1,
            "saved_percent": 50.0,
            "compression_ratio": 2.0,
        }


class TestRowsMatch:

    def test_equal(self):
        rows = [Row(1, 5, 10), Row(2, 6, 12)]
        assert rows_match(rows, list(rows))

    def test_value_mismatch(self):
        assert not rows_match([Row(1, 5, 10)], [Row(1, 6, 10)])

    def test_length_mismatch(self):
        assert not rows_match([Row(1, 5, 10)], [])

    def test_empty(self):
        assert rows_match([], [])
