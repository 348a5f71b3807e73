"""Recovery data models: readings, sleep metrics, baselines and daily assessments."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class FrozenModel(BaseModel):
    """Immutable camelCase model. Equality and hashing are structural."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Enums
# =============================================================================

class RecoveryState(str, Enum):
    """Recovery state indicating training readiness."""
    READY = "ready"          # Green - train as planned
    MODERATE = "moderate"    # Yellow - reduce intensity
    RECOVER = "recover"      # Red - rest or easy only

    @property
    def display_name(self) -> str:
        return self.value.title()


class BaselineDirection(str, Enum):
    """How a metric compares with its baseline, from the athlete's point of view."""
    IMPROVING = "improving"  # HRV up / RHR down
    STABLE = "stable"
    DECLINING = "declining"  # HRV down / RHR up


# =============================================================================
# Readings
# =============================================================================

class Reading(FrozenModel):
    """A single HRV (ms) or resting heart rate (bpm) reading."""

    date: datetime = Field(..., description="When the reading was recorded")
    value: float = Field(..., description="HRV in ms or RHR in bpm")


# =============================================================================
# Sleep
# =============================================================================

class SleepMetrics(FrozenModel):
    """Sleep stage breakdown for one night. All durations are in seconds."""

    in_bed: float = Field(default=0.0, ge=0)
    total_sleep: float = Field(default=0.0, ge=0)
    core: float = Field(default=0.0, ge=0)
    deep: float = Field(default=0.0, ge=0)
    rem: float = Field(default=0.0, ge=0)
    awake: float = Field(default=0.0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def efficiency(self) -> float:
        """Sleep efficiency as percentage (0-100)."""
        return (self.total_sleep / self.in_bed) * 100 if self.in_bed > 0 else 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def deep_percent(self) -> float:
        """Deep sleep as percentage of total sleep (0-100)."""
        return (self.deep / self.total_sleep) * 100 if self.total_sleep > 0 else 0.0

    @property
    def total_sleep_hours(self) -> float:
        return self.total_sleep / 3600.0


# =============================================================================
# Baseline
# =============================================================================

DEFAULT_HRV_MEDIAN = 36.0
DEFAULT_HRV_STD_DEV = 15.0
DEFAULT_RHR_MEDIAN = 60.0


class RecoveryBaseline(FrozenModel):
    """Rolling baseline values (canonically 60-day medians) used for scoring."""

    hrv_median: float = Field(..., description="Rolling median HRV (ms)")
    hrv_std_dev: float = Field(..., ge=0, description="Sample std dev of HRV (ms)")
    rhr_median: float = Field(..., description="Rolling median resting HR (bpm)")

    @classmethod
    def default(cls) -> "RecoveryBaseline":
        """Baseline for users with no history (average wearable user values)."""
        return cls(
            hrv_median=DEFAULT_HRV_MEDIAN,
            hrv_std_dev=DEFAULT_HRV_STD_DEV,
            rhr_median=DEFAULT_RHR_MEDIAN,
        )


# =============================================================================
# Daily assessment
# =============================================================================

class RecoveryData(FrozenModel):
    """Complete recovery assessment for one day."""

    date: datetime
    hrv_ms: float
    hrv_vs_baseline: float = Field(..., description="% difference from baseline median")
    rhr_bpm: float
    rhr_vs_baseline: float = Field(..., description="BPM difference from baseline median")
    sleep_hours: float
    sleep_efficiency: float = Field(..., description="0-100")
    deep_sleep_percent: float = Field(..., description="0-100")
    score: int = Field(..., ge=0, le=100)
    state: RecoveryState
