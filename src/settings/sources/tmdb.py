"""TMDB credits endpoint configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.settings.base import ENV_CONFIG

PLACEHOLDER_API_KEY = "your_api_key_here"


class TMDBSettings(BaseSettings):
    """Connection settings for The Movie Database API.

    Attributes:
        api_key: API key sent as the ``api_key`` query parameter.
        base_url: API root, without trailing slash.
        language: ``language`` query parameter for credits.
        timeout: Per-request timeout, in seconds.
        user_agent: ``User-Agent`` header.
    """

    model_config = ENV_CONFIG

    api_key: str = Field(default="", alias="TMDB_API_KEY")
    base_url: str = Field(default="https://api.themoviedb.org/3", alias="TMDB_BASE_URL")
    language: str = Field(default="en-US", alias="TMDB_LANGUAGE")
    timeout: float = Field(default=30.0, alias="TMDB_TIMEOUT")
    user_agent: str = Field(default="CastGraph/1.0", alias="TMDB_USER_AGENT")

    @property
    def is_configured(self) -> bool:
        """True when a real API key is set."""
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop a trailing slash so endpoints can be appended verbatim."""
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Reject zero or negative timeouts."""
        if v <= 0:
            raise ValueError("TMDB_TIMEOUT must be > 0")
        return v
