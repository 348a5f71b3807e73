"""
Health metric trend series.

Turns raw dated samples (daily HRV averages, RHR, sleep totals...) into
chart-ready series: one point per calendar day, ascending, with an optional
moving-average overlay and a slope annotation. Also classifies a day's HRV
and RHR against the baseline it was scored with.
"""

from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..exceptions import ValidationError
from ..metrics.statistics import linear_regression_slope, simple_moving_average
from ..models.charts import ChartPoint, HealthChartRange, TrendSeries
from ..models.recovery import BaselineDirection, RecoveryBaseline, RecoveryData


DATE_FORMAT = "%Y-%m-%d"

# Changes smaller than this (percent of the baseline median) count as stable
STABLE_BAND_PCT = 5.0


def _parse_date(value: str) -> Optional[datetime]:
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except (TypeError, ValueError):
        return None


def parse_date_points(items: Iterable[Tuple[str, float]]) -> List[ChartPoint]:
    """
    Parse (date_string, value) pairs into deduplicated chart points.

    Dates use a fixed YYYY-MM-DD format and are parsed as naive calendar
    dates, so results do not depend on the host timezone. Entries whose date
    does not parse are dropped.

    When a day appears more than once, the entry listed last wins: the
    sorted points are scanned in reverse keeping the first one seen per day,
    then reversed back to ascending order.

    Args:
        items: (date_string, value) pairs in any order

    Returns:
        Points sorted ascending by date with at most one point per day
    """
    points = []
    for date_string, value in items:
        parsed = _parse_date(date_string)
        if parsed is None:
            continue
        points.append(ChartPoint(date=parsed, value=value))

    # sorted() is stable, so same-day entries keep their input order
    points = sorted(points, key=lambda p: p.date)

    seen: Set[str] = set()
    deduped: List[ChartPoint] = []
    for point in reversed(points):
        key = point.date.strftime(DATE_FORMAT)
        if key not in seen:
            seen.add(key)
            deduped.append(point)
    deduped.reverse()
    return deduped


def filter_range(
    points: List[ChartPoint],
    chart_range: HealthChartRange,
    now: Optional[datetime] = None,
) -> List[ChartPoint]:
    """Keep the points that fall within the last ``chart_range.days`` days."""
    now = now or datetime.now()
    cutoff = (now - timedelta(days=chart_range.days)).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    return [p for p in points if p.date >= cutoff]


def build_trend_series(
    items: Iterable[Tuple[str, float]],
    sma_window: Optional[int] = None,
    chart_range: Optional[HealthChartRange] = None,
    now: Optional[datetime] = None,
) -> TrendSeries:
    """
    Build a chart-ready series with slope and optional smoothing.

    Args:
        items: (date_string, value) pairs
        sma_window: Trailing moving-average window; no overlay when None
        chart_range: Restrict to a chart range before smoothing
        now: Reference time for chart_range

    Returns:
        TrendSeries

    Raises:
        ValidationError: If sma_window is given and below 1
    """
    if sma_window is not None and sma_window < 1:
        raise ValidationError(
            f"Moving average window must be at least 1 day, got {sma_window}",
            field="sma_window",
        )

    points = parse_date_points(items)
    if chart_range is not None:
        points = filter_range(points, chart_range, now)

    smoothed = simple_moving_average(points, sma_window) if sma_window is not None else None
    return TrendSeries(
        points=points,
        smoothed=smoothed,
        sma_window=sma_window,
        slope_per_day=linear_regression_slope(points),
    )


def _classify(improvement_pct: float) -> BaselineDirection:
    if abs(improvement_pct) < STABLE_BAND_PCT:
        return BaselineDirection.STABLE
    if improvement_pct > 0:
        return BaselineDirection.IMPROVING
    return BaselineDirection.DECLINING


def baseline_directions(
    recovery: RecoveryData,
    baseline: RecoveryBaseline,
) -> Dict[str, BaselineDirection]:
    """
    Classify a scored day's HRV and RHR against its baseline.

    HRV above the median is improving; RHR below the median is improving.
    Both are compared as a percentage of their baseline median, so a 3 bpm
    rise on a 60 bpm median (5%) is declining.

    Returns:
        {"hrv": direction, "rhr": direction}
    """
    if baseline.rhr_median > 0:
        rhr_change_pct = recovery.rhr_vs_baseline / baseline.rhr_median * 100
    else:
        rhr_change_pct = 0.0

    return {
        "hrv": _classify(recovery.hrv_vs_baseline),
        "rhr": _classify(-rhr_change_pct),
    }
