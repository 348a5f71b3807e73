"""Services that orchestrate the recovery calculations."""

from .base import BaseService, SampleSource
from .baseline_service import BaselineService, score_day
from .progression import ProgressionService
from .sample_sources import InMemorySampleSource, JsonSampleSource

__all__ = [
    "BaseService",
    "SampleSource",
    "BaselineService",
    "score_day",
    "ProgressionService",
    "InMemorySampleSource",
    "JsonSampleSource",
]
