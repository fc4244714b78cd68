"""Tests for the run-length encoded timestamp column."""

import pytest

from tscol.codec.base import Row
from tscol.codec.rle import RLEColumnEncoder, Run
from tscol.result import EncoderLookupError, KeyNotFound, RowNotFound

SAMPLE_TS = ["10:00:00", "10:00:00", "10:00:02", "10:00:02", "10:00:02", "10:00:03"]


def _make_encoder(ts_column=SAMPLE_TS):
    encoder = RLEColumnEncoder()
    for i, ts in enumerate(ts_column, start=1):
        encoder.append_row(Row(id=i, value=i * 100, ts=ts))
    return encoder


class TestAppend:
    """Run building and the prefix-sum index."""

    def test_sample_runs(self):
        encoder = _make_encoder()
        assert encoder.runs == (
            Run("10:00:00", 2), Run("10:00:02", 3), Run("10:00:03", 1),
        )
        assert encoder.run_end_offsets == (2, 5, 6)
        assert len(encoder) == 6

    def test_identical_keys_merge_into_one_run(self):
        """k consecutive equal timestamps give exactly one run of count k."""
        encoder = _make_encoder(["09:59:59"] * 50)
        assert encoder.runs == (Run("09:59:59", 50),)
        assert encoder.run_end_offsets == (50,)

    def test_offsets_invariants(self):
        ts_column = ["a"] * 3 + ["b"] + ["c"] * 7 + ["d"] * 2
        encoder = _make_encoder(ts_column)
        offsets = encoder.run_end_offsets
        assert all(b > a for a, b in zip(offsets, offsets[1:]))
        assert offsets[-1] == len(encoder)
        runs = encoder.runs
        assert all(runs[i].ts != runs[i - 1].ts for i in range(1, len(runs)))

    def test_empty_encoder(self):
        encoder = RLEColumnEncoder()
        assert len(encoder) == 0
        assert encoder.runs == ()
        assert encoder.run_end_offsets == ()

    def test_append_rows(self):
        encoder = RLEColumnEncoder()
        encoder.append_rows(Row(i, 0, "t") for i in range(1, 4))
        assert encoder.runs == (Run("t", 3),)

    def test_run_str(self):
        encoder = _make_encoder()
        assert [str(r) for r in encoder.runs] == [
            "{TS: 10:00:00, Count: 2}",
            "{TS: 10:00:02, Count: 3}",
            "{TS: 10:00:03, Count: 1}",
        ]


class TestTsFromRowId:
    """Linear and binary-search point queries."""

    @pytest.mark.parametrize("row_id,expected", [
        (1, "10:00:00"), (2, "10:00:00"), (3, "10:00:02"),
        (4, "10:00:02"), (5, "10:00:02"), (6, "10:00:03"),
    ])
    def test_both_strategies(self, row_id, expected):
        encoder = _make_encoder()
        assert encoder.get_ts_from_row_id(row_id) == expected
        assert encoder.get_ts_from_row_id_fast(row_id) == expected

    @pytest.mark.parametrize("row_id", [-1, 0, 7, 8])
    def test_out_of_range(self, row_id):
        encoder = _make_encoder()
        assert encoder.get_ts_from_row_id(row_id) is None
        assert encoder.get_ts_from_row_id_fast(row_id) is None

    def test_empty_encoder_not_found(self):
        encoder = RLEColumnEncoder()
        assert encoder.get_ts_from_row_id(1) is None
        assert encoder.get_ts_from_row_id_fast(1) is None

    def test_strategies_agree(self):
        """Linear and binary search agree on every id, in range or not."""
        ts_column = []
        for minute in range(40):
            ts_column += [f"10:{minute:02d}:00"] * (minute % 5 + 1)
        encoder = _make_encoder(ts_column)
        for row_id in range(-2, len(encoder) + 3):
            assert encoder.get_ts_from_row_id(row_id) == encoder.get_ts_from_row_id_fast(row_id)


class TestReconstructRow:

    def test_rows(self):
        encoder = _make_encoder()
        assert encoder.reconstruct_row(2).unwrap() == Row(2, 200, "10:00:00")
        assert encoder.reconstruct_row(4).unwrap() == Row(4, 400, "10:00:02")
        assert encoder.reconstruct_row(6).unwrap() == Row(6, 600, "10:00:03")

    @pytest.mark.parametrize("row_id", [-1, 0, 7])
    def test_row_not_found(self, row_id):
        result = _make_encoder().reconstruct_row(row_id)
        assert not result.ok
        assert result.error == RowNotFound(row_id, 6)

    def test_unwrap_raises(self):
        result = _make_encoder().reconstruct_row(8)
        with pytest.raises(EncoderLookupError, match="row with id 8 does not exist"):
            result.unwrap()


class TestCountOfTs:
    """Linear and binary-search count(ts)."""

    @pytest.mark.parametrize("ts,expected", [
        ("10:00:00", 2), ("10:00:02", 3), ("10:00:03", 1),
    ])
    def test_both_strategies(self, ts, expected):
        encoder = _make_encoder()
        assert encoder.count_of_ts(ts).unwrap() == expected
        assert encoder.count_of_ts_fast(ts).unwrap() == expected

    @pytest.mark.parametrize("ts", ["10:00:01", "09:00:00", "23:59:59", "not-exist"])
    def test_key_not_found(self, ts):
        encoder = _make_encoder()
        assert encoder.count_of_ts(ts).error == KeyNotFound(ts)
        assert encoder.count_of_ts_fast(ts).error == KeyNotFound(ts)

    def test_empty_encoder(self):
        encoder = RLEColumnEncoder()
        assert not encoder.count_of_ts("10:00:00").ok
        assert not encoder.count_of_ts_fast("10:00:00").ok

    def test_strategies_agree_on_sorted_column(self):
        ts_column = []
        for second in range(0, 60, 3):
            ts_column += [f"12:00:{second:02d}"] * (second % 4 + 1)
        encoder = _make_encoder(ts_column)
        assert encoder.runs_sorted
        for second in range(60):
            ts = f"12:00:{second:02d}"
            assert encoder.count_of_ts(ts) == encoder.count_of_ts_fast(ts)


class TestUnsortedColumn:
    """count_of_ts_fast assumes runs in ascending ts order.

    These tests pin down the known limitation: on an unsorted column the
    binary search can miss a key the linear scan finds, and it warns.
    """

    def test_runs_sorted_flag(self):
        assert _make_encoder().runs_sorted
        assert not _make_encoder(["b", "a", "c"]).runs_sorted

    def test_fast_count_misses_key(self):
        encoder = _make_encoder(["b", "b", "c", "a"])
        assert encoder.count_of_ts("a").unwrap() == 1
        with pytest.warns(RuntimeWarning, match="not in ascending ts order"):
            result = encoder.count_of_ts_fast("a")
        assert result.error == KeyNotFound("a")

    def test_no_warning_when_sorted(self, recwarn):
        _make_encoder().count_of_ts_fast("10:00:00")
        assert len(recwarn) == 0

    def test_incomparable_ts_appends(self):
        """A ts that does not order against the previous one still appends."""
        encoder = RLEColumnEncoder()
        encoder.append_row(Row(1, 100, "10:00:00"))
        encoder.append_row(Row(2, 200, None))
        encoder.append_row(Row(3, 300, None))
        assert len(encoder) == 3
        assert encoder.run_end_offsets == (1, 3)
        assert encoder.runs == (Run("10:00:00", 1), Run(None, 2))
        assert not encoder.runs_sorted
        assert encoder.reconstruct_row(2).unwrap() == Row(2, 200, None)

    def test_fast_count_incomparable_key(self):
        encoder = _make_encoder()
        assert encoder.count_of_ts(None).error == KeyNotFound(None)
        assert encoder.count_of_ts_fast(None).error == KeyNotFound(None)
        assert encoder.count_of_ts_fast(1000).error == KeyNotFound(1000)

    def test_row_lookups_unaffected(self):
        """Point queries only depend on run order, not ts order."""
        encoder = _make_encoder(["b", "b", "c", "a"])
        for row_id, expected in [(1, "b"), (2, "b"), (3, "c"), (4, "a")]:
            assert encoder.get_ts_from_row_id(row_id) == expected
            assert encoder.get_ts_from_row_id_fast(row_id) == expected
