"""Unit tests for settings and logging setup."""

from __future__ import annotations

import pytest
import structlog

from econdash.infrastructure.config import Settings
from econdash.infrastructure.logging_config import configure_logging


@pytest.mark.unit
class TestSettings:
    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ECONDASH_FRED_API_KEY", "env-key")
        monkeypatch.setenv("ECONDASH_DEFAULT_WINDOW_YEARS", "3")

        settings = Settings(_env_file=None)

        assert settings.fred_api_key == "env-key"
        assert settings.default_window_years == 3

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ECONDASH_FRED_API_KEY", raising=False)

        settings = Settings(_env_file=None)

        assert settings.fred_api_key is None
        assert settings.fred_base_url == "https://api.stlouisfed.org/fred"
        assert settings.default_moving_average_windows == [3, 6, 12]


@pytest.mark.unit
class TestConfigureLogging:
    def test_debug_uses_console_renderer(self) -> None:
        configure_logging(Settings(_env_file=None, debug=True, log_level="DEBUG"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_default_uses_json_renderer(self) -> None:
        configure_logging(Settings(_env_file=None))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
