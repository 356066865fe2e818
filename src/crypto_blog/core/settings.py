"""Application settings and configuration.

This module defines all configuration options for the Crypto Blog client.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Crypto Blog", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Remote post store
    store_base_url: str = Field(
        default="http://127.0.0.1:8000",
        alias="BLOG_STORE_BASE_URL",
    )
    store_api_prefix: str = Field(default="/api/v1", alias="BLOG_STORE_API_PREFIX")
    # None leaves call resolution entirely to the store
    store_http_timeout_seconds: float | None = Field(
        default=None,
        alias="BLOG_STORE_HTTP_TIMEOUT_SECONDS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def posts_path(self) -> str:
        """Return the path of the posts collection relative to the base URL."""
        return f"{self.store_api_prefix.rstrip('/')}/posts"

    @property
    def effective_log_level(self) -> str:
        """Return the log level, forced to DEBUG when debug mode is on."""
        if self.debug:
            return "DEBUG"
        return self.log_level.upper()


settings = Settings()
