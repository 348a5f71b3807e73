"""Training load calculations (TSS, IF, ATL, CTL, TSB).

ATL and CTL are exponential moving averages of daily TSS with
k = 2 / (N + 1), seeded at 0. The daily series must be gap-filled
(rest days as 0 TSS) for the averages to decay correctly; use
build_daily_tss_array for that.
"""

import logging
import math
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional

from ..exceptions import ErrorCode, ValidationError
from ..models.training import DailyTSS, TrainingLoadMetrics


logger = logging.getLogger(__name__)

ATL_PERIOD_DAYS = 7
CTL_PERIOD_DAYS = 42
DEFAULT_LOOKBACK_DAYS = 60


def round_half_up(value: float, digits: int) -> float:
    """Round to ``digits`` decimals with ties going up: 0.25 -> 0.3, -0.25 -> -0.2."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def _require_positive_ftp(ftp: float) -> None:
    if ftp <= 0:
        raise ValidationError(
            "FTP must be positive",
            field="ftp",
            code=ErrorCode.INVALID_THRESHOLD_POWER,
        )


def calculate_tss(
    duration_seconds: float,
    normalized_power: float,
    ftp: float,
) -> float:
    """
    Training Stress Score for a cycling activity.

    TSS = (duration_seconds * NP * IF) / (FTP * 3600) * 100, with IF = NP / FTP.
    One hour at FTP gives 100.

    Raises:
        ValidationError: If ftp is not positive
    """
    _require_positive_ftp(ftp)
    if duration_seconds <= 0 or normalized_power <= 0:
        return 0.0

    intensity_factor = normalized_power / ftp
    tss = (duration_seconds * normalized_power * intensity_factor) / (ftp * 3600) * 100
    return round_half_up(tss, 1)


def calculate_intensity_factor(normalized_power: float, ftp: float) -> float:
    """IF = NP / FTP, rounded to 2 decimals (typically 0.5 - 1.2)."""
    _require_positive_ftp(ftp)
    if normalized_power <= 0:
        return 0.0
    return round_half_up(normalized_power / ftp, 2)


def calculate_ema(daily_tss: List[DailyTSS], period: int) -> float:
    """
    Exponential moving average of daily TSS.

    EMA_today = EMA_yesterday + (TSS_today - EMA_yesterday) * k, k = 2 / (period + 1)

    Args:
        daily_tss: Daily values in any order (sorted by date here)
        period: Averaging period in days (7 for ATL, 42 for CTL)

    Returns:
        Final EMA rounded to 1 decimal, 0 for an empty series
    """
    if not daily_tss:
        return 0.0

    k = 2 / (period + 1)
    ema = 0.0
    for entry in sorted(daily_tss, key=lambda d: d.date):
        ema = ema + (entry.tss - ema) * k
    return round_half_up(ema, 1)


def calculate_atl(daily_tss: List[DailyTSS]) -> float:
    """Acute Training Load: 7-day EMA, short-term fatigue."""
    return calculate_ema(daily_tss, ATL_PERIOD_DAYS)


def calculate_ctl(daily_tss: List[DailyTSS]) -> float:
    """Chronic Training Load: 42-day EMA, long-term fitness."""
    return calculate_ema(daily_tss, CTL_PERIOD_DAYS)


def calculate_tsb(ctl: float, atl: float) -> float:
    """Training Stress Balance = CTL - ATL. Positive is fresh, negative is fatigued."""
    return round_half_up(ctl - atl, 1)


def _day_key(value: str) -> str:
    return value.split("T")[0]


def build_daily_tss_array(
    activities: List[DailyTSS],
    start_date: date,
    end_date: date,
) -> List[DailyTSS]:
    """
    Build a complete daily TSS series from sparse activities.

    Multiple activities on the same day are summed, missing days get 0 TSS.
    Activity dates may be plain dates or ISO timestamps; only the date part
    is used.

    Returns:
        One entry per day from start_date to end_date inclusive
    """
    per_day: Dict[str, float] = {}
    for activity in activities:
        key = _day_key(activity.date)
        if key:
            per_day[key] = per_day.get(key, 0.0) + activity.tss

    result = []
    current = start_date
    while current <= end_date:
        key = current.isoformat()
        result.append(DailyTSS(date=key, tss=per_day.get(key, 0.0)))
        current += timedelta(days=1)
    return result


def calculate_training_load_metrics(
    activities: List[DailyTSS],
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
    today: Optional[date] = None,
) -> TrainingLoadMetrics:
    """
    Calculate ATL, CTL and TSB over the last ``lookback_days`` days.

    Args:
        activities: Recent activities as (date, TSS)
        lookback_days: Days of history to include (60 gives CTL room to settle)
        today: End of the window, defaults to the current UTC date

    Returns:
        TrainingLoadMetrics
    """
    end = today or datetime.now(timezone.utc).date()
    start = end - timedelta(days=lookback_days)

    daily_tss = build_daily_tss_array(activities, start, end)
    atl = calculate_atl(daily_tss)
    ctl = calculate_ctl(daily_tss)

    logger.debug(f"Training load over {len(daily_tss)} days: ATL={atl} CTL={ctl}")
    return TrainingLoadMetrics(atl=atl, ctl=ctl, tsb=calculate_tsb(ctl, atl))
