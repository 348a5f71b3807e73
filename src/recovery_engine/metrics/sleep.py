"""Aggregate raw sleep stage samples into per-night SleepMetrics."""

from datetime import datetime, timedelta
from typing import Dict, Iterable

from ..models.recovery import SleepMetrics
from ..models.sleep import SleepSample, SleepStage


# Samples starting at or after this hour belong to the next day's night
NIGHT_CUTOFF_HOUR = 18

_ASLEEP_FIELDS = {
    SleepStage.ASLEEP_CORE: "core",
    SleepStage.ASLEEP_UNSPECIFIED: "core",
    SleepStage.ASLEEP_DEEP: "deep",
    SleepStage.ASLEEP_REM: "rem",
}


def accumulate_sleep_sample(
    metrics: SleepMetrics,
    stage: SleepStage,
    duration: float,
) -> SleepMetrics:
    """Return a copy of ``metrics`` with one sample's duration (seconds) added."""
    if stage == SleepStage.IN_BED:
        return metrics.model_copy(update={"in_bed": metrics.in_bed + duration})
    if stage == SleepStage.AWAKE:
        return metrics.model_copy(update={"awake": metrics.awake + duration})

    field = _ASLEEP_FIELDS[stage]
    return metrics.model_copy(update={
        field: getattr(metrics, field) + duration,
        "total_sleep": metrics.total_sleep + duration,
    })


def _fill_in_bed(metrics: SleepMetrics) -> SleepMetrics:
    # Some trackers never report in-bed time; derive it from asleep + awake
    if metrics.in_bed == 0 and metrics.total_sleep > 0:
        return metrics.model_copy(update={"in_bed": metrics.total_sleep + metrics.awake})
    return metrics


def summarize_sleep(samples: Iterable[SleepSample]) -> SleepMetrics:
    """Fold all samples of one night into a single SleepMetrics."""
    metrics = SleepMetrics()
    for sample in samples:
        metrics = accumulate_sleep_sample(metrics, sample.stage, sample.duration)
    return _fill_in_bed(metrics)


def night_of(start: datetime) -> str:
    """Calendar date (YYYY-MM-DD) of the night a sample starting at ``start`` belongs to."""
    night = start.date()
    if start.hour >= NIGHT_CUTOFF_HOUR:
        night += timedelta(days=1)
    return night.isoformat()


def group_samples_into_nights(samples: Iterable[SleepSample]) -> Dict[str, SleepMetrics]:
    """
    Group samples into nights using a 6 PM cutoff.

    A sample starting at 22:30 on the 4th counts towards the night of the
    5th; one starting at 02:00 on the 5th does too.

    Returns:
        Mapping of night date to its metrics, newest night first
    """
    nights: Dict[str, SleepMetrics] = {}
    for sample in samples:
        key = night_of(sample.start)
        current = nights.get(key, SleepMetrics())
        nights[key] = accumulate_sleep_sample(current, sample.stage, sample.duration)

    return {
        key: _fill_in_bed(nights[key])
        for key in sorted(nights, reverse=True)
    }
