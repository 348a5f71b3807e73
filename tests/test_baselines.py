"""Tests for personal baseline calculation."""

import math

import pytest

from recovery_engine.metrics.baselines import (
    calculate_baseline,
    filter_finite,
    resolve_baseline,
)
from recovery_engine.models import RecoveryBaseline


class TestCalculateBaseline:
    """calculate_baseline turns readings into medians and a spread."""

    def test_from_floats(self):
        baseline = calculate_baseline([40, 38, 44, 36, 42], [55, 54, 56, 53, 55])
        assert baseline.hrv_median == 40.0
        assert baseline.rhr_median == 55.0
        assert baseline.hrv_std_dev == pytest.approx(3.1623, abs=1e-4)

    def test_from_readings(self, make_readings):
        hrv = make_readings([30, 50, 40])
        rhr = make_readings([60, 58, 62])
        baseline = calculate_baseline(hrv, rhr)
        assert baseline.hrv_median == 40.0
        assert baseline.rhr_median == 60.0

    def test_empty_inputs_give_zeros(self):
        baseline = calculate_baseline([], [])
        assert baseline == RecoveryBaseline(hrv_median=0, hrv_std_dev=0, rhr_median=0)


class TestResolveBaseline:
    """Default vs computed baseline is decided by history length only."""

    def test_six_readings_uses_default(self):
        baseline = resolve_baseline([50] * 6, [50] * 6)
        assert baseline == RecoveryBaseline.default()

    def test_seven_readings_uses_history(self):
        baseline = resolve_baseline([50] * 7, [48] * 7)
        assert baseline.hrv_median == 50.0
        assert baseline.rhr_median == 48.0
        assert baseline.hrv_std_dev == 0.0

    def test_one_short_series_forces_default(self):
        baseline = resolve_baseline([50] * 30, [48] * 6)
        assert baseline == RecoveryBaseline.default()

    def test_custom_minimum(self):
        baseline = resolve_baseline([45, 47, 46], [52, 51, 53], min_readings=3)
        assert baseline.hrv_median == 46.0

    def test_default_values(self):
        default = RecoveryBaseline.default()
        assert (default.hrv_median, default.hrv_std_dev, default.rhr_median) == (36.0, 15.0, 60.0)


class TestFilterFinite:
    """NaN and infinities are dropped before statistics."""

    def test_floats(self):
        assert filter_finite([40.0, math.nan, 42.0, math.inf, -math.inf]) == [40.0, 42.0]

    def test_readings(self, make_readings):
        readings = make_readings([40.0, math.nan, 42.0])
        kept = filter_finite(readings)
        assert [r.value for r in kept] == [40.0, 42.0]

    def test_nan_does_not_count_towards_minimum(self):
        hrv = filter_finite([50.0] * 6 + [math.nan])
        assert resolve_baseline(hrv, [50.0] * 7) == RecoveryBaseline.default()
