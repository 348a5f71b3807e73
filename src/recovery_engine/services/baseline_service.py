"""
Baseline service: owns the current baseline snapshot and daily recovery orchestration.

One instance is constructed explicitly and passed to whoever needs it. It
holds an immutable RecoveryBaseline snapshot plus the time it was taken,
and recomputes it from the sample source when asked to refresh or when the
snapshot has gone stale.
"""

from datetime import datetime, timedelta
from typing import List, Optional
import logging

from ..config import Settings, get_settings
from ..exceptions import DataNotFoundError, SampleSourceError
from ..metrics.baselines import filter_finite, resolve_baseline
from ..metrics.recovery import calculate_recovery
from ..models.recovery import Reading, RecoveryBaseline, RecoveryData, SleepMetrics
from .base import BaseService, SampleSource


class BaselineService(BaseService):
    """Cached baseline plus the 'resolve baseline' boundary step."""

    def __init__(
        self,
        source: SampleSource,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(logger=logger)
        self._source = source
        self._settings = settings or get_settings()
        self._baseline: Optional[RecoveryBaseline] = None
        self._last_updated: Optional[datetime] = None

    @property
    def baseline(self) -> Optional[RecoveryBaseline]:
        """Current snapshot, or None before the first refresh."""
        return self._baseline

    @property
    def last_updated(self) -> Optional[datetime]:
        return self._last_updated

    def is_stale(self, now: Optional[datetime] = None) -> bool:
        """True when there is no snapshot or it is older than the refresh interval."""
        if self._baseline is None or self._last_updated is None:
            return True
        now = now or datetime.now()
        max_age = timedelta(hours=self._settings.baseline_refresh_hours)
        return now - self._last_updated > max_age

    def _history(self, metric: str, now: datetime) -> List[Reading]:
        days = self._settings.baseline_window_days
        try:
            if metric == "hrv":
                readings = self._source.fetch_hrv_history(days, now)
            else:
                readings = self._source.fetch_rhr_history(days, now)
        except SampleSourceError as e:
            self.logger.warning(f"Failed to fetch {metric} history, treating as empty: {e}")
            return []
        return filter_finite(readings)

    def refresh(self, now: Optional[datetime] = None) -> RecoveryBaseline:
        """Recompute the baseline from the sample source and replace the snapshot."""
        now = now or datetime.now()
        hrv = self._history("hrv", now)
        rhr = self._history("rhr", now)

        baseline = resolve_baseline(
            hrv, rhr, min_readings=self._settings.baseline_min_readings
        )
        self._baseline = baseline
        self._last_updated = now
        self.logger.info(
            f"Baseline refreshed from {len(hrv)} HRV / {len(rhr)} RHR readings: "
            f"HRV {baseline.hrv_median:.1f}±{baseline.hrv_std_dev:.1f} ms, "
            f"RHR {baseline.rhr_median:.1f} bpm"
        )
        return baseline

    def get_or_update_baseline(self, now: Optional[datetime] = None) -> RecoveryBaseline:
        """Return the cached snapshot, refreshing it first if stale."""
        if self.is_stale(now):
            return self.refresh(now)
        return self._baseline  # type: ignore[return-value]

    def calculate_recovery(self, now: Optional[datetime] = None) -> RecoveryData:
        """
        Score today's recovery from the sample source.

        A missing HRV or RHR value is replaced by the baseline median (a
        neutral contribution); if both are missing there is nothing to score.

        Raises:
            DataNotFoundError: If neither HRV nor RHR is available
        """
        now = now or datetime.now()
        hrv = self._source.fetch_latest_hrv(now)
        rhr = self._source.fetch_today_rhr(now)
        sleep = self._source.fetch_sleep(now.date())

        if hrv is None and rhr is None:
            raise DataNotFoundError(details={"date": now.date().isoformat()})

        return score_day(now, hrv, rhr, sleep, self.get_or_update_baseline(now))


def score_day(
    date: datetime,
    hrv_ms: Optional[float],
    rhr_bpm: Optional[float],
    sleep: SleepMetrics,
    baseline: RecoveryBaseline,
) -> RecoveryData:
    """
    Score a day where HRV or RHR may be missing.

    A missing value is replaced by the baseline median, which makes its
    component neutral.

    Raises:
        DataNotFoundError: If both hrv_ms and rhr_bpm are None
    """
    if hrv_ms is None and rhr_bpm is None:
        raise DataNotFoundError(details={"date": date.date().isoformat()})

    return calculate_recovery(
        date=date,
        hrv_ms=hrv_ms if hrv_ms is not None else baseline.hrv_median,
        baseline=baseline,
        rhr_bpm=rhr_bpm if rhr_bpm is not None else baseline.rhr_median,
        sleep_metrics=sleep,
    )
