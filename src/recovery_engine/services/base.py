"""
Base service classes and protocols.

Defines the sample-source interface the services consume and the common
service base class.
"""

from abc import ABC
from datetime import date, datetime
from typing import List, Optional, Protocol, runtime_checkable
import logging

from ..models.recovery import Reading, SleepMetrics


@runtime_checkable
class SampleSource(Protocol):
    """
    Protocol for anything that supplies already-extracted health samples.

    Implementations wrap a health store, an API or a file. They should raise
    SampleSourceError when the underlying store fails, and return empty
    results (not errors) when there is simply no data.
    """

    def fetch_hrv_history(self, days: int, now: datetime) -> List[Reading]:
        """HRV readings (ms) from the ``days`` days before ``now``."""
        ...

    def fetch_rhr_history(self, days: int, now: datetime) -> List[Reading]:
        """Resting heart rate readings (bpm) from the ``days`` days before ``now``."""
        ...

    def fetch_latest_hrv(self, now: datetime) -> Optional[float]:
        """Most recent HRV value at or before ``now``."""
        ...

    def fetch_today_rhr(self, now: datetime) -> Optional[float]:
        """Resting heart rate recorded on ``now``'s calendar day."""
        ...

    def fetch_sleep(self, for_date: date) -> SleepMetrics:
        """Sleep for the night ending on ``for_date`` (empty metrics if none)."""
        ...


class BaseService(ABC):
    """
    Abstract base class for all services.

    Provides a module logger under the package namespace, overridable for tests.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(self.__class__.__module__)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger
