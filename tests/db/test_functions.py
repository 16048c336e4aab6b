import sqlite3

import pytest

from db.functions import percentile_cont, register_functions


class TestPercentileCont:
    """Tests for the percentile_cont helper."""

    def test_median_of_even_count_interpolates(self):
        assert percentile_cont([40, 10, 30, 20], 0.5) == 25.0

    def test_median_of_odd_count_is_middle_value(self):
        assert percentile_cont([3, 1, 2], 0.5) == 2.0

    def test_ninetieth_percentile(self):
        # position 0.9 * 3 = 2.7 -> 30 + 0.7 * (40 - 30)
        assert percentile_cont([10, 20, 30, 40], 0.9) == pytest.approx(37.0)

    def test_single_value(self):
        assert percentile_cont([42.5], 0.9) == 42.5

    def test_extremes(self):
        values = [5, -3, 8]

        assert percentile_cont(values, 0.0) == -3
        assert percentile_cont(values, 1.0) == 8

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="empty"):
            percentile_cont([], 0.5)

    def test_fraction_out_of_range_raises(self):
        with pytest.raises(ValueError, match="between 0 and 1"):
            percentile_cont([1, 2], 1.5)


class TestPercentileAggregate:
    """Tests for the SQL aggregate registered on connections."""

    @pytest.fixture
    def conn(self):
        conn = sqlite3.connect(":memory:")
        register_functions(conn)
        conn.execute("CREATE TABLE t (v REAL)")
        yield conn
        conn.close()

    def test_aggregate_over_rows(self, conn):
        conn.executemany("INSERT INTO t (v) VALUES (?)", [(10,), (20,), (30,), (40,)])

        (median,) = conn.execute("SELECT percentile_cont(v, 0.5) FROM t").fetchone()

        assert median == 25.0

    def test_empty_group_is_null(self, conn):
        (result,) = conn.execute("SELECT percentile_cont(v, 0.5) FROM t").fetchone()

        assert result is None

    def test_nulls_are_ignored(self, conn):
        conn.executemany("INSERT INTO t (v) VALUES (?)", [(None,), (4,), (8,)])

        (median,) = conn.execute("SELECT percentile_cont(v, 0.5) FROM t").fetchone()

        assert median == 6.0
