"""Data models for the recovery engine."""

from .recovery import (
    BaselineDirection,
    FrozenModel,
    Reading,
    RecoveryBaseline,
    RecoveryData,
    RecoveryState,
    SleepMetrics,
    to_camel,
)
from .charts import ChartPoint, HealthChartRange, TrendSeries
from .sleep import SleepSample, SleepStage
from .training import (
    CompletedSet,
    DailyTSS,
    ExerciseProgression,
    PreviousWeekPerformance,
    ProgressionReason,
    ProgressionResult,
    TrainingLoadMetrics,
)

__all__ = [
    "FrozenModel",
    "to_camel",
    # Recovery
    "BaselineDirection",
    "Reading",
    "RecoveryBaseline",
    "RecoveryData",
    "RecoveryState",
    "SleepMetrics",
    # Charts
    "ChartPoint",
    "HealthChartRange",
    "TrendSeries",
    # Sleep samples
    "SleepSample",
    "SleepStage",
    # Training
    "CompletedSet",
    "DailyTSS",
    "ExerciseProgression",
    "PreviousWeekPerformance",
    "ProgressionReason",
    "ProgressionResult",
    "TrainingLoadMetrics",
]
