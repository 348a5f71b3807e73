"""Raw sleep stage samples as delivered by a health store."""

from datetime import datetime
from enum import Enum

from pydantic import Field, model_validator

from .recovery import FrozenModel


class SleepStage(str, Enum):
    """Sleep analysis categories."""
    IN_BED = "in_bed"
    ASLEEP_CORE = "asleep_core"
    ASLEEP_UNSPECIFIED = "asleep_unspecified"
    ASLEEP_DEEP = "asleep_deep"
    ASLEEP_REM = "asleep_rem"
    AWAKE = "awake"


class SleepSample(FrozenModel):
    """One contiguous interval spent in a single sleep stage."""

    stage: SleepStage
    start: datetime
    end: datetime = Field(..., description="Must not precede start")

    @model_validator(mode="after")
    def _check_order(self) -> "SleepSample":
        if self.end < self.start:
            raise ValueError("sleep sample end precedes start")
        return self

    @property
    def duration(self) -> float:
        """Length of the interval in seconds."""
        return (self.end - self.start).total_seconds()
