"""Configuration for the CastGraph service.

Each concern has its own pydantic-settings section, read from the
environment and ``.env``. Only the TMDB API key lacks a usable default:
without it, credit endpoints answer 503 until it is set.

Usage:
    from src.settings import settings

    settings.tmdb.api_key
    settings.matching.token_set_threshold
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.settings.api import APISettings, CORSSettings
from src.settings.base import LoggingSettings
from src.settings.matching import MatchingSettings
from src.settings.sources import TMDBSettings

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "MatchingSettings",
    "APISettings",
    "CORSSettings",
    "TMDBSettings",
    "get_masked_settings",
]

ENVIRONMENTS = frozenset({"development", "production", "test"})

_SECRETS = (("tmdb", "api_key"),)
_MASK = "***MASKED***"


class Settings(BaseSettings):
    """All configuration sections, exposed through ``settings``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    tmdb: TMDBSettings = Field(default_factory=TMDBSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    api: APISettings = Field(default_factory=APISettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        """Lowercase the environment name and reject unknown ones."""
        environment = v.lower()
        if environment not in ENVIRONMENTS:
            raise ValueError(f"ENVIRONMENT must be one of {sorted(ENVIRONMENTS)}, got {v!r}")
        return environment

    @property
    def is_production(self) -> bool:
        """True in the production environment."""
        return self.environment == "production"

    @property
    def log_level(self) -> str:
        """Effective log level: DEBUG forces debug output."""
        return "DEBUG" if self.debug else self.logging.level

    @property
    def reload_enabled(self) -> bool:
        """Uvicorn auto-reload, never in production."""
        return self.api.reload and not self.is_production


settings = Settings()


def get_masked_settings() -> dict[str, Any]:
    """Dump settings with secrets replaced, for startup logging.

    Unset secrets stay empty so a missing key remains visible.
    """
    config = settings.model_dump()

    for section, key in _SECRETS:
        if config.get(section, {}).get(key):
            config[section][key] = _MASK

    return config
