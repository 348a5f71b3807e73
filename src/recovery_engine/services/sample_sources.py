"""
Sample sources backed by memory or a JSON file.

JSON layout (camelCase or snake_case keys are both accepted)::

    {
      "hrv": [{"date": "2024-01-15T06:00:00", "value": 42.0}, ...],
      "rhr": [{"date": "2024-01-15T06:00:00", "value": 52.0}, ...],
      "sleep": {"2024-01-15": {"inBed": 30600, "totalSleep": 28080, "deep": 5054}},
      "sleepSamples": [{"stage": "asleep_deep", "start": "...", "end": "..."}],
      "activities": [{"date": "2024-01-14", "tss": 85.0}]
    }

``sleep`` holds per-night summaries; ``sleepSamples`` holds raw stage
intervals that are grouped into nights on load. A summary wins over samples
for the same night.
"""

from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import logging

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import SampleFileError
from ..metrics.sleep import group_samples_into_nights
from ..models.recovery import Reading, SleepMetrics
from ..models.sleep import SleepSample
from ..models.training import DailyTSS


logger = logging.getLogger(__name__)


class InMemorySampleSource:
    """SampleSource over readings already held in memory."""

    def __init__(
        self,
        hrv: Optional[List[Reading]] = None,
        rhr: Optional[List[Reading]] = None,
        sleep: Optional[Dict[str, SleepMetrics]] = None,
        activities: Optional[List[DailyTSS]] = None,
    ) -> None:
        self._hrv = sorted(hrv or [], key=lambda r: r.date)
        self._rhr = sorted(rhr or [], key=lambda r: r.date)
        self._sleep = dict(sleep or {})
        self._activities = list(activities or [])

    @property
    def hrv(self) -> List[Reading]:
        return list(self._hrv)

    @property
    def rhr(self) -> List[Reading]:
        return list(self._rhr)

    @property
    def activities(self) -> List[DailyTSS]:
        return list(self._activities)

    @staticmethod
    def _window(readings: List[Reading], days: int, now: datetime) -> List[Reading]:
        start = now - timedelta(days=days)
        return [r for r in readings if start <= r.date < now]

    def fetch_hrv_history(self, days: int, now: datetime) -> List[Reading]:
        return self._window(self._hrv, days, now)

    def fetch_rhr_history(self, days: int, now: datetime) -> List[Reading]:
        return self._window(self._rhr, days, now)

    def fetch_latest_hrv(self, now: datetime) -> Optional[float]:
        past = [r for r in self._hrv if r.date <= now]
        return past[-1].value if past else None

    def fetch_today_rhr(self, now: datetime) -> Optional[float]:
        today = [r for r in self._rhr if r.date.date() == now.date() and r.date <= now]
        return today[-1].value if today else None

    def fetch_sleep(self, for_date: date) -> SleepMetrics:
        return self._sleep.get(for_date.isoformat(), SleepMetrics())


class JsonSampleSource(InMemorySampleSource):
    """SampleSource loaded from a JSON file. Call reload() to pick up changes."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(**self._load())

    def reload(self) -> None:
        """Re-read the file and swap in the new snapshot."""
        loaded = self._load()
        super().__init__(**loaded)
        logger.info(f"Reloaded samples from {self.path}")

    def _load(self) -> Dict[str, Any]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise SampleFileError(str(self.path), "file not found")
        except json.JSONDecodeError as e:
            raise SampleFileError(str(self.path), f"not valid JSON ({e.msg} at line {e.lineno})")

        if not isinstance(raw, dict):
            raise SampleFileError(str(self.path), "top level must be an object")

        try:
            hrv = [Reading.model_validate(r) for r in raw.get("hrv", [])]
            rhr = [Reading.model_validate(r) for r in raw.get("rhr", [])]
            samples = [
                SleepSample.model_validate(s)
                for s in raw.get("sleepSamples", raw.get("sleep_samples", []))
            ]
            sleep = group_samples_into_nights(samples)
            sleep.update({
                night: SleepMetrics.model_validate(metrics)
                for night, metrics in raw.get("sleep", {}).items()
            })
            activities = [DailyTSS.model_validate(a) for a in raw.get("activities", [])]
        except (PydanticValidationError, AttributeError, TypeError) as e:
            raise SampleFileError(str(self.path), str(e))

        logger.debug(
            f"Loaded {len(hrv)} HRV, {len(rhr)} RHR, {len(sleep)} nights, "
            f"{len(activities)} activities from {self.path}"
        )
        return {"hrv": hrv, "rhr": rhr, "sleep": sleep, "activities": activities}
