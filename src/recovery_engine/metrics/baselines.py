"""Personal baselines for recovery scoring.

A baseline is "your HRV vs *your* rolling median", not a population norm.
The rolling window (canonically 60 days) is chosen by the caller; this
module only turns whatever readings it is handed into a RecoveryBaseline.
"""

import logging
import math
from typing import Iterable, List, Sequence, Union

from ..models.recovery import Reading, RecoveryBaseline
from .statistics import median, standard_deviation


logger = logging.getLogger(__name__)

DEFAULT_MIN_READINGS = 7

ReadingLike = Union[Reading, float, int]


def _values(readings: Iterable[ReadingLike]) -> List[float]:
    return [r.value if isinstance(r, Reading) else float(r) for r in readings]


def filter_finite(readings: Iterable[ReadingLike]) -> List[ReadingLike]:
    """Drop NaN and infinite readings before they reach the statistics."""
    return [
        r for r in readings
        if math.isfinite(r.value if isinstance(r, Reading) else float(r))
    ]


def calculate_baseline(
    hrv_readings: Sequence[ReadingLike],
    rhr_readings: Sequence[ReadingLike],
) -> RecoveryBaseline:
    """
    Calculate a baseline from historical readings.

    Medians are used because they resist outliers (a single sick night or
    a missed strap). Empty inputs give a median of 0; callers decide whether
    to fall back to the default baseline, see resolve_baseline.

    Args:
        hrv_readings: HRV readings (ms) in the lookback window
        rhr_readings: Resting heart rate readings (bpm) in the lookback window

    Returns:
        RecoveryBaseline with HRV median, HRV sample std dev and RHR median
    """
    hrv_values = _values(hrv_readings)
    rhr_values = _values(rhr_readings)

    return RecoveryBaseline(
        hrv_median=median(hrv_values),
        hrv_std_dev=standard_deviation(hrv_values),
        rhr_median=median(rhr_values),
    )


def resolve_baseline(
    hrv_readings: Sequence[ReadingLike],
    rhr_readings: Sequence[ReadingLike],
    min_readings: int = DEFAULT_MIN_READINGS,
) -> RecoveryBaseline:
    """
    Pick the baseline to score against.

    This is the one place that decides between a computed baseline and the
    cold-start default. The decision is based on how much history there is,
    never on the numeric values of a computed baseline.

    Args:
        hrv_readings: HRV readings in the lookback window
        rhr_readings: RHR readings in the lookback window
        min_readings: Readings of each kind required before trusting history

    Returns:
        Computed baseline when both series have at least ``min_readings``
        entries, otherwise RecoveryBaseline.default()
    """
    if len(hrv_readings) >= min_readings and len(rhr_readings) >= min_readings:
        baseline = calculate_baseline(hrv_readings, rhr_readings)
        logger.debug(
            f"Using computed baseline from {len(hrv_readings)} HRV / "
            f"{len(rhr_readings)} RHR readings"
        )
        return baseline

    logger.debug(
        f"Insufficient history ({len(hrv_readings)} HRV / {len(rhr_readings)} RHR, "
        f"need {min_readings}); using default baseline"
    )
    return RecoveryBaseline.default()
