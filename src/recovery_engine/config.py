"""Configuration settings for the recovery engine."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/recovery_engine/config.py
PACKAGE_ROOT = Path(__file__).parent  # src/recovery_engine/
PROJECT_ROOT = PACKAGE_ROOT.parent.parent

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables (RECOVERY_*)."""

    model_config = SettingsConfigDict(
        env_prefix="RECOVERY_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Baselines
    baseline_window_days: int = 60
    baseline_min_readings: int = 7
    baseline_refresh_hours: float = 24.0

    # Trends and training load
    trend_sma_window: int = 7
    training_load_lookback_days: int = 60


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger("recovery_engine")
    logger.setLevel(level.upper())
    if not any(getattr(h, "_recovery_engine", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._recovery_engine = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
