"""Trend series API routes for health metric history charts."""

from fastapi import APIRouter

from ...analysis.trends import build_trend_series
from ...models import TrendSeries
from ..schemas import TrendSeriesRequest


router = APIRouter()


@router.post("/series", response_model=TrendSeries)
def compute_series(request: TrendSeriesRequest) -> TrendSeries:
    """Deduplicate, sort, optionally smooth, and annotate a series with its slope."""
    return build_trend_series(
        [(item.date, item.value) for item in request.items],
        sma_window=request.sma_window,
        chart_range=request.range,
        now=request.now,
    )
