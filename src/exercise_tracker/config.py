"""
Application configuration using Pydantic settings.

Configuration is loaded from environment variables (or a ``.env`` file)
with defaults suitable for local development.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_title: str = "Exercise Tracker API"

    # Storage
    database_path: Path = Field(
        default=Path("data/exercise_tracker.db"),
        description="SQLite database file. Relative paths resolve against the working directory.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional file to mirror log output to",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get the cached settings instance.

    Tests can call ``get_settings.cache_clear()`` after changing the
    environment.
    """
    return Settings()
