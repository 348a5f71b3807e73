"""Trend analysis over health metric history."""

from .trends import (
    baseline_directions,
    build_trend_series,
    filter_range,
    parse_date_points,
)

__all__ = [
    "baseline_directions",
    "build_trend_series",
    "filter_range",
    "parse_date_points",
]
