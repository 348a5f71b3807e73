"""Numeric helpers shared by baselines, trends and training load.

All functions are pure and total: degenerate inputs (empty lists, a single
value, zero variance) return a neutral 0 or the input unchanged instead of
raising.
"""

import math
from typing import List, Sequence

from ..models.charts import ChartPoint


SECONDS_PER_DAY = 86400.0
MIN_REGRESSION_DENOMINATOR = 1e-10


def median(values: Sequence[float]) -> float:
    """
    Middle element of the sorted values.

    For even lengths this returns ``sorted[len // 2]`` (the upper of the two
    middle values) rather than their mean. Readiness thresholds are tuned
    against this convention.

    Args:
        values: Values in any order

    Returns:
        The element at index ``len // 2`` after sorting, or 0 when empty
    """
    if not values:
        return 0.0
    ordered = sorted(values)
    return float(ordered[len(ordered) // 2])


def standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation (n - 1 denominator). 0 for fewer than 2 values."""
    count = len(values)
    if count <= 1:
        return 0.0
    mean = sum(values) / count
    sum_sq = sum((v - mean) ** 2 for v in values)
    return math.sqrt(sum_sq / (count - 1))


def simple_moving_average(points: List[ChartPoint], window: int) -> List[ChartPoint]:
    """
    Trailing simple moving average.

    Each output point averages the ``window`` points ending at the same
    index. Near the start the window shrinks to what is available, so there
    is never any look-ahead.

    Args:
        points: Chart points, ascending by date
        window: Number of trailing points to average (values below 1 act as 1)

    Returns:
        One averaged point per input point, or the input unchanged if it has
        fewer than 2 points
    """
    if len(points) < 2:
        return points

    window = max(1, window)
    averaged = []
    for index, point in enumerate(points):
        window_start = max(0, index - window + 1)
        window_slice = points[window_start:index + 1]
        avg = sum(p.value for p in window_slice) / len(window_slice)
        averaged.append(ChartPoint(date=point.date, value=avg))
    return averaged


def linear_regression_slope(points: List[ChartPoint]) -> float:
    """
    Ordinary least squares slope in value-per-day.

    x is the elapsed time in days since the first point's date.

    Returns:
        The slope, or 0 for fewer than 2 points or when all points share the
        same x (denominator below 1e-10)
    """
    count = len(points)
    if count < 2:
        return 0.0

    first_date = points[0].date
    sum_x = sum_y = sum_xy = sum_x2 = 0.0
    for point in points:
        x_val = (point.date - first_date).total_seconds() / SECONDS_PER_DAY
        y_val = point.value
        sum_x += x_val
        sum_y += y_val
        sum_xy += x_val * y_val
        sum_x2 += x_val * x_val

    denominator = count * sum_x2 - sum_x * sum_x
    if abs(denominator) <= MIN_REGRESSION_DENOMINATOR:
        return 0.0
    return (count * sum_xy - sum_x * sum_y) / denominator
