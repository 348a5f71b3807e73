"""
API schemas for request/response validation.

Requests carry already-extracted samples; the API keeps no state between
calls.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import (
    DailyTSS,
    ExerciseProgression,
    HealthChartRange,
    PreviousWeekPerformance,
    Reading,
    RecoveryBaseline,
    SleepMetrics,
    to_camel,
)


class CamelModel(BaseModel):
    """Request/response base with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ============================================================================
# Errors
# ============================================================================

class ErrorDetail(BaseModel):
    """Error detail for API responses."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: ErrorDetail


# ============================================================================
# Recovery
# ============================================================================

class BaselineRequest(CamelModel):
    """Readings from the lookback window."""

    hrv: List[Reading] = Field(default_factory=list)
    rhr: List[Reading] = Field(default_factory=list)
    min_readings: Optional[int] = Field(None, ge=0, description="Defaults to the configured minimum")


class BaselineResponse(CamelModel):
    baseline: RecoveryBaseline
    used_default: bool = Field(..., description="True when history was too short")
    hrv_count: int
    rhr_count: int


class RecoveryScoreRequest(CamelModel):
    """One day's readings. Either an explicit baseline or the history to build one."""

    date: datetime
    hrv_ms: Optional[float] = Field(None, gt=0)
    rhr_bpm: Optional[float] = Field(None, gt=0)
    sleep: SleepMetrics = Field(default_factory=SleepMetrics)
    baseline: Optional[RecoveryBaseline] = None
    hrv_history: List[Reading] = Field(default_factory=list)
    rhr_history: List[Reading] = Field(default_factory=list)


# ============================================================================
# Trends
# ============================================================================

class DatedValue(CamelModel):
    date: str = Field(..., description="YYYY-MM-DD; entries that do not parse are dropped")
    value: float


class TrendSeriesRequest(CamelModel):
    items: List[DatedValue] = Field(default_factory=list)
    sma_window: Optional[int] = Field(None, ge=1)
    range: Optional[HealthChartRange] = None
    now: Optional[datetime] = Field(None, description="Reference time for range filtering")


# ============================================================================
# Training
# ============================================================================

class TrainingLoadRequest(CamelModel):
    activities: List[DailyTSS] = Field(default_factory=list)
    lookback_days: Optional[int] = Field(None, ge=1)
    today: Optional[date] = None


class ProgressionRequest(CamelModel):
    exercise: ExerciseProgression
    previous: Optional[PreviousWeekPerformance] = None
    is_deload_week: bool = False
