"""Configuration management using Pydantic Settings v2."""

from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from spur_search.config.constants import (
    DEFAULT_DESCENDING,
    DEFAULT_EVENTS_DB_PATH,
    DEFAULT_SORT_STRATEGY,
)
from spur_search.core.exceptions import ConfigurationError

# Load .env into os.environ before any nested BaseSettings class is built;
# they only search os.environ and have no env_file of their own.
load_dotenv()


class DatabaseSettings(BaseSettings):
    """Local event store configuration."""

    events_path: str = DEFAULT_EVENTS_DB_PATH

    model_config = SettingsConfigDict(env_prefix="DB_")


class SearchSettings(BaseSettings):
    """Search defaults used when the caller does not choose an ordering."""

    default_sort: Literal["distance", "cost"] = DEFAULT_SORT_STRATEGY
    descending: bool = DEFAULT_DESCENDING

    model_config = SettingsConfigDict(env_prefix="SEARCH_")


class Settings(BaseSettings):
    """Root settings class combining all sections."""

    # default_factory so that reload_settings() re-reads the environment
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore prefixed env vars handled by nested classes
    )


_settings_instance: Optional[Settings] = None


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            details=str(e),
        ) from e


def get_settings() -> Settings:
    """Return the process-wide Settings instance, loading it on first use.

    Raises:
        ConfigurationError: If an environment value fails validation.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = _load_settings()
    return _settings_instance


def reload_settings() -> Settings:
    """Reload settings from environment (mainly for testing)."""
    global _settings_instance
    _settings_instance = _load_settings()
    return _settings_instance
