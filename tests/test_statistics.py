"""Tests for the numeric helpers."""

import math
from datetime import datetime, timedelta

import pytest

from recovery_engine.metrics.statistics import (
    linear_regression_slope,
    median,
    simple_moving_average,
    standard_deviation,
)
from recovery_engine.models import ChartPoint


def daily_points(values, start=datetime(2024, 1, 1)):
    return [ChartPoint(date=start + timedelta(days=i), value=v) for i, v in enumerate(values)]


class TestMedian:
    """Median uses the upper middle element for even lengths."""

    def test_empty_is_zero(self):
        assert median([]) == 0.0

    def test_odd_length(self):
        assert median([3, 1, 2]) == 2.0

    def test_even_length_takes_upper_middle(self):
        """[1, 2, 3, 4] gives 3, not 2.5."""
        assert median([4, 1, 3, 2]) == 3.0

    def test_single_value(self):
        assert median([42.5]) == 42.5


class TestStandardDeviation:
    """Sample standard deviation."""

    def test_fewer_than_two_values(self):
        assert standard_deviation([]) == 0.0
        assert standard_deviation([5.0]) == 0.0

    def test_uses_n_minus_one(self):
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        assert standard_deviation(values) == pytest.approx(math.sqrt(32 / 7))

    def test_constant_values(self):
        assert standard_deviation([40, 40, 40]) == 0.0


class TestSimpleMovingAverage:
    """Trailing SMA with a shrinking start window."""

    def test_trailing_window(self):
        smoothed = simple_moving_average(daily_points([1, 2, 3, 4, 5]), 3)
        assert [p.value for p in smoothed] == pytest.approx([1.0, 1.5, 2.0, 3.0, 4.0])

    def test_keeps_dates(self):
        points = daily_points([1, 2, 3])
        smoothed = simple_moving_average(points, 2)
        assert [p.date for p in smoothed] == [p.date for p in points]

    def test_short_input_returned_unchanged(self):
        points = daily_points([7])
        assert simple_moving_average(points, 3) == points
        assert simple_moving_average([], 3) == []

    def test_window_of_one_is_identity(self):
        points = daily_points([3, 1, 4, 1])
        assert [p.value for p in simple_moving_average(points, 1)] == [3, 1, 4, 1]

    def test_window_larger_than_series(self):
        smoothed = simple_moving_average(daily_points([2, 4]), 10)
        assert [p.value for p in smoothed] == pytest.approx([2.0, 3.0])


class TestLinearRegressionSlope:
    """Least-squares slope in units per day."""

    def test_one_per_day(self):
        assert linear_regression_slope(daily_points(range(10))) == pytest.approx(1.0)

    def test_flat_series(self):
        assert linear_regression_slope(daily_points([50] * 5)) == pytest.approx(0.0)

    def test_declining_series(self):
        assert linear_regression_slope(daily_points([10, 8, 6, 4])) == pytest.approx(-2.0)

    def test_fewer_than_two_points(self):
        assert linear_regression_slope([]) == 0.0
        assert linear_regression_slope(daily_points([5])) == 0.0

    def test_same_timestamp_is_degenerate(self):
        when = datetime(2024, 1, 1)
        points = [ChartPoint(date=when, value=1), ChartPoint(date=when, value=9)]
        assert linear_regression_slope(points) == 0.0

    def test_uses_elapsed_days_not_index(self):
        """Two points a week apart with a rise of 7 give 1 per day."""
        points = [
            ChartPoint(date=datetime(2024, 1, 1), value=0),
            ChartPoint(date=datetime(2024, 1, 8), value=7),
        ]
        assert linear_regression_slope(points) == pytest.approx(1.0)


class TestDocumentedExamples:
    """Reference values the score thresholds were tuned against."""

    def test_median_examples(self):
        assert median([]) == 0
        assert median([4]) == 4
        assert median([1, 3, 5, 7]) == 5

    def test_slope_ten_days_apart(self):
        points = [
            ChartPoint(date=datetime(2024, 1, 1), value=10),
            ChartPoint(date=datetime(2024, 1, 11), value=20),
        ]
        assert linear_regression_slope(points) == pytest.approx(1.0)
