"""Dependency injection for API routes."""

from functools import lru_cache

from ..config import Settings, get_settings
from ..services.progression import ProgressionService


def get_app_settings() -> Settings:
    """Settings dependency; override in tests with app.dependency_overrides."""
    return get_settings()


@lru_cache
def get_progression_service() -> ProgressionService:
    """Get the progression service instance."""
    return ProgressionService()
