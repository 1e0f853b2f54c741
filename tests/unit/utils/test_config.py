"""Unit tests for settings loading."""
import pytest
from datetime import date

from src.utils import config
from src.utils.config import load_settings


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep a developer's .env out of the tests."""
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for key in (
        "AGENDA_CATALOG_FILE",
        "AGENDA_ATTENDEES_FILE",
        "AGENDA_CONFERENCE_START",
        "AGENDA_LOCK_TIMEOUT",
        "AGENDA_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


class TestLoadSettings:
    """Test load_settings."""

    def test_defaults(self):
        settings = load_settings()
        assert settings.catalog_file == "data/catalog.json"
        assert settings.attendees_file == "data/attendees.json"
        assert settings.conference_start is None
        assert settings.lock_timeout == 5.0
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("AGENDA_CATALOG_FILE", "/srv/catalog.json")
        monkeypatch.setenv("AGENDA_CONFERENCE_START", "2026-11-20")
        monkeypatch.setenv("AGENDA_LOCK_TIMEOUT", "1.5")
        monkeypatch.setenv("AGENDA_LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.catalog_file == "/srv/catalog.json"
        assert settings.conference_start == date(2026, 11, 20)
        assert settings.lock_timeout == 1.5
        assert settings.log_level == "DEBUG"

    def test_bad_conference_start_raises_error(self, monkeypatch):
        monkeypatch.setenv("AGENDA_CONFERENCE_START", "20/11/2026")
        with pytest.raises(ValueError):
            load_settings()

    def test_bad_lock_timeout_raises_error(self, monkeypatch):
        monkeypatch.setenv("AGENDA_LOCK_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="AGENDA_LOCK_TIMEOUT"):
            load_settings()
