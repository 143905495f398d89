"""Shared settings plumbing and logging configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
)
"""Every settings section reads the process environment, then ``.env``."""

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class LoggingSettings(BaseSettings):
    """Logging configuration.

    Attributes:
        level: Level name applied to every named logger.
        log_dir: Directory receiving the dated log files.
        to_file: Write log files in addition to stdout.
    """

    model_config = ENV_CONFIG

    level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", alias="LOG_DIR")
    to_file: bool = Field(default=True, alias="LOG_TO_FILE")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Uppercase the level name and reject unknown ones."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {v!r}")
        return level
