"""Tests for settings validation and the logging processors."""

import pytest
from pydantic import ValidationError

from core.logging import add_correlation_id, add_service_info, set_correlation_id
from core.settings import Settings, get_settings


class TestSettings:

    def test_defaults(self):
        settings = get_settings()
        assert settings.display_timezone == "US/Central"
        assert settings.players_page_size == 25
        assert settings.live_match_window_hours == 4

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_settings().log_level == "DEBUG"

    @pytest.mark.parametrize(
        "name,value",
        [("LOG_LEVEL", "chatty"), ("LOG_FORMAT", "xml"), ("DISPLAY_TIMEZONE", "Mars/Olympus")],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            get_settings()

    def test_database_url_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLoggingProcessors:

    def test_correlation_id_attached(self):
        set_correlation_id("req-1")
        assert add_correlation_id(None, "info", {"event": "x"})["correlation_id"] == "req-1"

    def test_no_correlation_id(self):
        set_correlation_id("")
        assert "correlation_id" not in add_correlation_id(None, "info", {"event": "x"})

    def test_service_name(self):
        processor = add_service_info("dashboard")
        assert processor(None, "info", {"event": "x"})["service"] == "dashboard"

    def test_tournament_stamped(self):
        processor = add_service_info("dashboard", tournament="UPA Summer Championship")
        event = processor(None, "info", {"event": "x"})
        assert event["tournament"] == "UPA Summer Championship"
