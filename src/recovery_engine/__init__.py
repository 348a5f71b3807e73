"""Recovery/readiness scoring, personal baselines and health trend series."""

__version__ = "0.1.0"

from recovery_engine.models import (
    BaselineDirection,
    ChartPoint,
    HealthChartRange,
    Reading,
    RecoveryBaseline,
    RecoveryData,
    RecoveryState,
    SleepMetrics,
    TrendSeries,
)
from recovery_engine.metrics import (
    calculate_baseline,
    calculate_recovery,
    determine_recovery_state,
    linear_regression_slope,
    median,
    resolve_baseline,
    simple_moving_average,
    standard_deviation,
)
from recovery_engine.analysis import (
    baseline_directions,
    build_trend_series,
    parse_date_points,
)
from recovery_engine.services import (
    BaselineService,
    InMemorySampleSource,
    JsonSampleSource,
    ProgressionService,
    SampleSource,
)

__all__ = [
    # Models
    "BaselineDirection",
    "ChartPoint",
    "HealthChartRange",
    "Reading",
    "RecoveryBaseline",
    "RecoveryData",
    "RecoveryState",
    "SleepMetrics",
    "TrendSeries",
    # Statistics
    "median",
    "standard_deviation",
    "simple_moving_average",
    "linear_regression_slope",
    # Baselines and scoring
    "calculate_baseline",
    "resolve_baseline",
    "calculate_recovery",
    "determine_recovery_state",
    # Trends
    "baseline_directions",
    "build_trend_series",
    "parse_date_points",
    # Services
    "BaselineService",
    "InMemorySampleSource",
    "JsonSampleSource",
    "ProgressionService",
    "SampleSource",
]
