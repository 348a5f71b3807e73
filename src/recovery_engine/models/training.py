"""Training load and progressive overload models."""

from enum import Enum

from pydantic import Field

from .recovery import FrozenModel


# =============================================================================
# Training load
# =============================================================================

class DailyTSS(FrozenModel):
    """Training Stress Score attributed to one day (or one activity on that day)."""

    date: str = Field(..., description="YYYY-MM-DD, or an ISO timestamp for raw activities")
    tss: float = Field(..., ge=0)


class TrainingLoadMetrics(FrozenModel):
    """Fitness-fatigue snapshot."""

    atl: float = Field(..., description="Acute Training Load (7-day EMA, fatigue)")
    ctl: float = Field(..., description="Chronic Training Load (42-day EMA, fitness)")
    tsb: float = Field(..., description="Training Stress Balance = CTL - ATL (form)")


# =============================================================================
# Progressive overload
# =============================================================================

class ProgressionReason(str, Enum):
    """Why next week's targets were chosen."""
    FIRST_WEEK = "first_week"        # No previous data, use base values
    HIT_MAX_REPS = "hit_max_reps"    # Hit max reps: add weight, drop to min reps
    HIT_TARGET = "hit_target"        # Hit target: add a rep
    HOLD = "hold"                    # Missed target but not regressing
    REGRESS = "regress"              # Failed min reps repeatedly: drop weight
    DELOAD = "deload"


class ExerciseProgression(FrozenModel):
    """Rep-range configuration for one exercise."""

    exercise_id: str
    base_weight: float = Field(..., ge=0)
    base_reps: int = Field(..., ge=1)
    base_sets: int = Field(..., ge=1)
    min_reps: int = Field(8, ge=1)
    max_reps: int = Field(12, ge=1)
    weight_increment: float = Field(5.0, gt=0)


class PreviousWeekPerformance(FrozenModel):
    """Best set an athlete achieved for an exercise in a given week."""

    exercise_id: str
    week_number: int = Field(..., ge=1)
    target_weight: float
    target_reps: int
    actual_weight: float
    actual_reps: int
    hit_target: bool
    consecutive_failures: int = Field(0, ge=0)


class CompletedSet(FrozenModel):
    """A logged set."""

    actual_weight: float = Field(..., ge=0)
    actual_reps: int = Field(..., ge=0)


class ProgressionResult(FrozenModel):
    """Targets for next week."""

    target_weight: float
    target_reps: int
    target_sets: int
    is_deload: bool
    reason: ProgressionReason
