"""Tests for application settings."""
import pytest
from sokoban_generator import config
from sokoban_generator.config import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop the cached settings and any DEBUG flag from the environment."""
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr(config, "_settings", None)


class TestCorsOrigins:
    """Test cases for CORS origin parsing."""

    def test_comma_separated(self):
        """Test a comma separated list with blanks."""
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]

    def test_json_list(self):
        """Test a JSON array."""
        settings = Settings(cors_origins='["http://a.test", "http://b.test"]')
        assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]

    def test_empty_falls_back_to_dev_server(self):
        """Test the default origin when nothing is configured."""
        assert Settings(cors_origins="").get_cors_origins() == ["http://localhost:5173"]


class TestGetSettings:
    """Test cases for get_settings."""

    def test_cached_without_debug(self, monkeypatch):
        """Test that later environment changes are ignored once loaded."""
        first = get_settings()
        monkeypatch.setenv("MAX_BOXES", "1")

        assert get_settings() is first
        assert get_settings().max_boxes == first.max_boxes

    def test_reloaded_in_debug(self, monkeypatch):
        """Test that DEBUG re-reads the environment on every call."""
        monkeypatch.setenv("DEBUG", "true")
        first = get_settings()
        monkeypatch.setenv("MAX_BOXES", "1")

        second = get_settings()

        assert second is not first
        assert second.debug is True
        assert second.max_boxes == 1

    def test_environment_overrides_limits(self, monkeypatch):
        """Test that request limits come from the environment."""
        monkeypatch.setenv("MAX_ROOM_ROWS", "3")
        monkeypatch.setenv("MAX_ASSEMBLY_ATTEMPTS", "50")

        settings = get_settings()

        assert settings.max_room_rows == 3
        assert settings.max_assembly_attempts == 50
