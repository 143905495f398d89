"""HTTP server and CORS settings."""

from pydantic import Field
from pydantic_settings import BaseSettings

from src.settings.base import ENV_CONFIG


class APISettings(BaseSettings):
    """Uvicorn and OpenAPI settings.

    Attributes:
        host: Bind address.
        port: Bind port (``PORT``, 3000 by default).
        reload: Restart uvicorn on code changes.
        title: OpenAPI title.
        version: Version reported by /health and OpenAPI.
    """

    model_config = ENV_CONFIG

    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=3000, alias="PORT")
    reload: bool = Field(default=False, alias="API_RELOAD")
    title: str = Field(default="CastGraph API", alias="API_TITLE")
    version: str = Field(default="1.0.0", alias="API_VERSION")


class CORSSettings(BaseSettings):
    """Allowed browser origins, as one comma-separated variable."""

    model_config = ENV_CONFIG

    origins_raw: str = Field(default="http://localhost:3000", alias="CORS_ORIGINS")

    @property
    def origins(self) -> list[str]:
        """Origins with blanks dropped."""
        return [origin.strip() for origin in self.origins_raw.split(",") if origin.strip()]
