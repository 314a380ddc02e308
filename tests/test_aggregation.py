"""
Unit tests for averaging station series into one city series.
"""

import numpy as np
import pandas as pd
import pytest

from weather_lookup.core.aggregation import aggregate


def series(values, column="value"):
    """Build a DateSeries from {(month, day): value}."""
    dates = [pd.Timestamp(year=2000, month=m, day=d) for m, d in values]
    frame = pd.DataFrame(
        {
            "date": pd.to_datetime(dates).astype("datetime64[ns]"),
            column: [float(v) for v in values.values()],
        }
    )
    return frame.sort_values("date").reset_index(drop=True)


def as_dict(frame, column="value"):
    return {
        (ts.month, ts.day): value for ts, value in zip(frame["date"], frame[column])
    }


class TestAggregateBasics:
    """Test empty and single-series behavior."""

    def test_empty_list(self):
        assert aggregate([]).empty

    def test_all_empty_series(self):
        empty = series({})
        assert aggregate([empty, empty]).empty

    def test_none_entries_skipped(self):
        s = series({(1, 1): 10})
        pd.testing.assert_frame_equal(aggregate([None, s]), s)

    def test_single_series_is_identity(self):
        s = series({(1, 1): 10, (1, 2): 12, (3, 5): 40})
        pd.testing.assert_frame_equal(aggregate([s]), s)


class TestAggregateMean:
    """Test per-date averaging."""

    def test_shared_and_unique_dates(self):
        a = series({(1, 1): 10, (1, 2): 12})
        b = series({(1, 1): 20, (1, 3): 30})

        result = as_dict(aggregate([a, b]))

        assert result == {(1, 1): 15.0, (1, 2): 12.0, (1, 3): 30.0}

    def test_missing_station_does_not_lower_average(self):
        a = series({(1, 1): 10})
        b = series({(1, 1): 20})
        c = series({(6, 1): 70})

        result = as_dict(aggregate([a, b, c]))

        assert result[(1, 1)] == 15.0

    def test_nan_values_excluded_per_column(self):
        a = pd.DataFrame(
            {
                "date": pd.to_datetime(["2000-01-01"]).astype("datetime64[ns]"),
                "avg": [10.0],
                "max": [np.nan],
            }
        )
        b = pd.DataFrame(
            {
                "date": pd.to_datetime(["2000-01-01"]).astype("datetime64[ns]"),
                "avg": [20.0],
                "max": [30.0],
            }
        )

        result = aggregate([a, b])

        assert result["avg"].iloc[0] == 15.0
        assert result["max"].iloc[0] == 30.0

    def test_columns_missing_from_a_station(self):
        a = series({(1, 1): 10}, column="avg")
        b = pd.DataFrame(
            {
                "date": pd.to_datetime(["2000-01-01"]).astype("datetime64[ns]"),
                "avg": [20.0],
                "min": [5.0],
            }
        )

        result = aggregate([a, b])

        assert list(result.columns) == ["date", "avg", "min"]
        assert result["avg"].iloc[0] == 15.0
        assert result["min"].iloc[0] == 5.0


class TestAggregateOrdering:
    """Test ordering guarantees."""

    def test_sorted_by_calendar_date(self):
        a = series({(12, 31): 1, (2, 29): 2})
        b = series({(1, 1): 3, (7, 4): 4})

        result = aggregate([a, b])

        assert result["date"].is_monotonic_increasing
        assert list(as_dict(result)) == [(1, 1), (2, 29), (7, 4), (12, 31)]

    def test_input_order_does_not_matter(self):
        a = series({(1, 1): 10, (1, 2): 12})
        b = series({(1, 1): 20, (3, 1): 5})
        c = series({(1, 2): 3})

        forward = aggregate([a, b, c])
        backward = aggregate([c, b, a])

        pd.testing.assert_frame_equal(forward, backward)

    def test_input_frames_not_modified(self):
        a = series({(1, 2): 12, (1, 1): 10})
        before = a.copy()

        aggregate([a, series({(1, 1): 20})])

        pd.testing.assert_frame_equal(a, before)
