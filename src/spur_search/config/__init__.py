"""Configuration module: settings and constants."""

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

__all__ = [
    # Constants
    "EARTH_RADIUS_KM",
    "DEFAULT_EVENTS_DB_PATH",
    "DEFAULT_SORT_STRATEGY",
    "DEFAULT_DESCENDING",
    # Settings
    "Settings",
    "DatabaseSettings",
    "SearchSettings",
    "get_settings",
    "reload_settings",
]
