"""Chart-ready series models for health metric history views."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .recovery import FrozenModel


class HealthChartRange(str, Enum):
    """Time range shared by all health metric charts (HRV, RHR, sleep...)."""
    ONE_WEEK = "1W"
    TWO_WEEKS = "2W"
    ONE_MONTH = "1M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"

    @property
    def days(self) -> int:
        return _RANGE_DAYS[self]


_RANGE_DAYS = {
    HealthChartRange.ONE_WEEK: 7,
    HealthChartRange.TWO_WEEKS: 14,
    HealthChartRange.ONE_MONTH: 30,
    HealthChartRange.SIX_MONTHS: 180,
    HealthChartRange.ONE_YEAR: 365,
}


class ChartPoint(FrozenModel):
    """A single dated value on a chart."""

    date: datetime
    value: float


class TrendSeries(FrozenModel):
    """Deduplicated, ascending series with optional smoothing and a slope annotation."""

    points: List[ChartPoint] = Field(default_factory=list)
    smoothed: Optional[List[ChartPoint]] = Field(
        None, description="Simple moving average overlay, if requested"
    )
    sma_window: Optional[int] = Field(None, ge=1)
    slope_per_day: float = Field(0.0, description="Least-squares slope in units per day")

    @property
    def latest(self) -> Optional[ChartPoint]:
        return self.points[-1] if self.points else None
