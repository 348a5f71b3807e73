"""Daily recovery score calculation.

Score = 70% HRV vs baseline + 20% RHR vs baseline + 10% sleep quality,
truncated to an integer in [0, 100] and mapped to a readiness state.
"""

from datetime import datetime

from ..models.recovery import (
    RecoveryBaseline,
    RecoveryData,
    RecoveryState,
    SleepMetrics,
)


HRV_WEIGHT = 0.70
RHR_WEIGHT = 0.20
SLEEP_WEIGHT = 0.10

# Points per unit of deviation around the neutral 50
DEVIATION_SCALE = 25.0
NEUTRAL_SCORE = 50.0

# ~1 std dev of resting heart rate
RHR_SPREAD_BPM = 5.0

# Sleep sub-scores: (target, max points)
SLEEP_HOURS_TARGET, SLEEP_HOURS_POINTS = 7.0, 40.0
SLEEP_EFFICIENCY_TARGET, SLEEP_EFFICIENCY_POINTS = 85.0, 30.0
DEEP_SLEEP_TARGET, DEEP_SLEEP_POINTS = 15.0, 30.0

READY_THRESHOLD = 70
MODERATE_THRESHOLD = 50


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


def hrv_component(hrv_ms: float, baseline: RecoveryBaseline) -> float:
    """HRV sub-score (0-100). Neutral 50 when the baseline has no spread."""
    if baseline.hrv_std_dev > 0:
        hrv_delta = (hrv_ms - baseline.hrv_median) / baseline.hrv_std_dev
    else:
        hrv_delta = 0.0
    return _clamp(NEUTRAL_SCORE + hrv_delta * DEVIATION_SCALE)


def rhr_component(rhr_bpm: float, baseline: RecoveryBaseline) -> float:
    """RHR sub-score (0-100). Lower than baseline is better."""
    rhr_delta = (baseline.rhr_median - rhr_bpm) / RHR_SPREAD_BPM
    return _clamp(NEUTRAL_SCORE + rhr_delta * DEVIATION_SCALE)


def _capped_share(value: float, target: float, points: float) -> float:
    return points if value >= target else (value / target) * points


def sleep_component(sleep: SleepMetrics) -> float:
    """Sleep sub-score (0-100): duration 40 + efficiency 30 + deep sleep 30."""
    return (
        _capped_share(sleep.total_sleep_hours, SLEEP_HOURS_TARGET, SLEEP_HOURS_POINTS)
        + _capped_share(sleep.efficiency, SLEEP_EFFICIENCY_TARGET, SLEEP_EFFICIENCY_POINTS)
        + _capped_share(sleep.deep_percent, DEEP_SLEEP_TARGET, DEEP_SLEEP_POINTS)
    )


def determine_recovery_state(score: int) -> RecoveryState:
    """Map a score to a state: >= 70 ready, >= 50 moderate, else recover."""
    if score >= READY_THRESHOLD:
        return RecoveryState.READY
    if score >= MODERATE_THRESHOLD:
        return RecoveryState.MODERATE
    return RecoveryState.RECOVER


def calculate_recovery(
    date: datetime,
    hrv_ms: float,
    baseline: RecoveryBaseline,
    rhr_bpm: float,
    sleep_metrics: SleepMetrics,
) -> RecoveryData:
    """
    Create a day's recovery assessment with calculated score and state.

    Args:
        date: Day being assessed
        hrv_ms: Latest overnight HRV in ms
        baseline: Baseline to compare against (already resolved by the caller)
        rhr_bpm: Today's resting heart rate
        sleep_metrics: Last night's sleep breakdown

    Returns:
        Fully populated RecoveryData
    """
    hrv_score = hrv_component(hrv_ms, baseline)
    if baseline.hrv_median > 0:
        hrv_vs_baseline = ((hrv_ms - baseline.hrv_median) / baseline.hrv_median) * 100
    else:
        hrv_vs_baseline = 0.0

    rhr_score = rhr_component(rhr_bpm, baseline)
    rhr_vs_baseline = rhr_bpm - baseline.rhr_median

    sleep_score = sleep_component(sleep_metrics)

    weighted = hrv_score * HRV_WEIGHT + rhr_score * RHR_WEIGHT + sleep_score * SLEEP_WEIGHT
    total_score = int(_clamp(weighted))

    return RecoveryData(
        date=date,
        hrv_ms=hrv_ms,
        hrv_vs_baseline=hrv_vs_baseline,
        rhr_bpm=rhr_bpm,
        rhr_vs_baseline=rhr_vs_baseline,
        sleep_hours=sleep_metrics.total_sleep_hours,
        sleep_efficiency=sleep_metrics.efficiency,
        deep_sleep_percent=sleep_metrics.deep_percent,
        score=total_score,
        state=determine_recovery_state(total_score),
    )
