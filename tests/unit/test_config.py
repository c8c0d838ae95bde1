"""Tests for configuration management and constants.

Settings are read from the environment through Pydantic Settings. We
verify defaults, environment overrides picked up by reload_settings(),
the singleton accessor, and that invalid values surface as
ConfigurationError.
"""

import pytest

import spur_search.config.settings as settings_module
from spur_search.config.constants import (
    DEFAULT_DESCENDING,
    DEFAULT_EVENTS_DB_PATH,
    DEFAULT_SORT_STRATEGY,
    EARTH_RADIUS_KM,
)
from spur_search.config.settings import (
    DatabaseSettings,
    SearchSettings,
    Settings,
    get_settings,
    reload_settings,
)
from spur_search.core.exceptions import ConfigurationError
from spur_search.core.types import SortStrategy


@pytest.fixture(autouse=True)
def restore_settings():
    """Put the original singleton back after each test."""
    original = settings_module._settings_instance
    yield
    settings_module._settings_instance = original


class TestConstants:
    def test_earth_radius(self):
        assert EARTH_RADIUS_KM == 6371.0

    def test_default_sort_is_a_strategy(self):
        assert SortStrategy(DEFAULT_SORT_STRATEGY) is SortStrategy.DISTANCE

    def test_default_descending(self):
        assert DEFAULT_DESCENDING is False


class TestSettingsDefaults:
    def test_database_defaults(self, monkeypatch):
        monkeypatch.delenv("DB_EVENTS_PATH", raising=False)
        assert DatabaseSettings().events_path == DEFAULT_EVENTS_DB_PATH

    def test_search_defaults(self, monkeypatch):
        monkeypatch.delenv("SEARCH_DEFAULT_SORT", raising=False)
        monkeypatch.delenv("SEARCH_DESCENDING", raising=False)
        s = SearchSettings()
        assert s.default_sort == "distance"
        assert s.descending is False


class TestEnvironmentOverrides:
    def test_database_path(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DB_EVENTS_PATH", str(tmp_path / "e.sqlite"))
        assert reload_settings().database.events_path == str(tmp_path / "e.sqlite")

    def test_search_section(self, monkeypatch):
        monkeypatch.setenv("SEARCH_DEFAULT_SORT", "cost")
        monkeypatch.setenv("SEARCH_DESCENDING", "true")
        s = reload_settings()
        assert s.search.default_sort == "cost"
        assert s.search.descending is True

    def test_invalid_sort_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("SEARCH_DEFAULT_SORT", "popularity")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            reload_settings()


class TestRootSettings:
    def test_has_all_sections(self):
        s = Settings()
        assert hasattr(s, "database")
        assert hasattr(s, "search")

    def test_extra_ignore(self):
        """Prefixed env vars belong to nested classes and must be ignored."""
        assert Settings.model_config.get("extra") == "ignore"


class TestSingleton:
    def test_get_settings_returns_settings(self):
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()

    def test_reload_updates_global(self):
        s_old = get_settings()
        s_new = reload_settings()
        assert get_settings() is s_new
        assert s_new is not s_old
