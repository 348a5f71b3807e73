"""Tests for settings and logging setup."""

import logging

from recovery_engine.config import Settings, configure_logging, get_settings


class TestSettings:
    """Environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RECOVERY_BASELINE_MIN_READINGS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.baseline_window_days == 60
        assert settings.baseline_min_readings == 7
        assert settings.baseline_refresh_hours == 24.0
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("RECOVERY_BASELINE_MIN_READINGS", "10")
        monkeypatch.setenv("RECOVERY_TREND_SMA_WINDOW", "14")
        settings = Settings(_env_file=None)
        assert settings.baseline_min_readings == 10
        assert settings.trend_sma_window == 14

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Package logger setup."""

    def test_idempotent(self):
        logger = configure_logging("DEBUG")
        configure_logging("DEBUG")

        marked = [h for h in logger.handlers if getattr(h, "_recovery_engine", False)]
        assert len(marked) == 1
        assert logger.name == "recovery_engine"

    def test_sets_level(self):
        logger = configure_logging("warning")
        assert logger.level == logging.WARNING
