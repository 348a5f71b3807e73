"""Shared fixtures for recovery engine tests."""

import json
from datetime import datetime, timedelta

import pytest

from recovery_engine.config import Settings
from recovery_engine.models import Reading, RecoveryBaseline, SleepMetrics


@pytest.fixture
def default_baseline():
    """Cold-start baseline (36 ms HRV, 15 ms spread, 60 bpm RHR)."""
    return RecoveryBaseline.default()


@pytest.fixture
def good_sleep():
    """7.8h asleep, ~94% efficiency, 20% deep: every sleep sub-score maxed."""
    return SleepMetrics(in_bed=30000, total_sleep=28080, core=16848, deep=5616, rem=5616, awake=1920)


@pytest.fixture
def settings():
    """Settings with the stock thresholds, independent of the environment."""
    return Settings(
        baseline_window_days=60,
        baseline_min_readings=7,
        baseline_refresh_hours=24.0,
        trend_sma_window=7,
        training_load_lookback_days=60,
    )


@pytest.fixture
def make_readings():
    """Factory: one reading per day, ending the day before ``end``."""

    def _make(values, end=datetime(2024, 1, 15, 6, 0)):
        count = len(values)
        return [
            Reading(date=end - timedelta(days=count - i), value=v)
            for i, v in enumerate(values)
        ]

    return _make


@pytest.fixture
def samples_payload():
    """Ten days of history plus a morning reading on 2024-01-15."""
    hrv = [40, 38, 44, 36, 42, 39, 41, 37, 43, 40]
    rhr = [55, 54, 56, 53, 55, 57, 54, 55, 56, 54]
    days = [datetime(2024, 1, 5, 6, 0) + timedelta(days=i) for i in range(10)]
    return {
        "hrv": [{"date": d.isoformat(), "value": v} for d, v in zip(days, hrv)]
        + [{"date": "2024-01-15T06:00:00", "value": 42.0}],
        "rhr": [{"date": d.isoformat(), "value": v} for d, v in zip(days, rhr)]
        + [{"date": "2024-01-15T06:00:00", "value": 52.0}],
        "sleep": {
            "2024-01-15": {"inBed": 30000, "totalSleep": 28080, "deep": 5616},
        },
        "activities": [
            {"date": "2024-01-13", "tss": 80.0},
            {"date": "2024-01-14T17:30:00", "tss": 45.0},
        ],
    }


@pytest.fixture
def samples_file(tmp_path, samples_payload):
    """Samples payload written to a JSON file."""
    path = tmp_path / "samples.json"
    path.write_text(json.dumps(samples_payload), encoding="utf-8")
    return path
