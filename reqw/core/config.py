"""Package configuration settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package configuration settings.

    All settings can be overridden via environment variables prefixed with ``REQW_``.
    The classification rule itself is fixed and has no setting.
    """

    model_config = SettingsConfigDict(
        env_prefix="REQW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "reqw"
    environment: Literal["development", "staging", "production"] = Field(
        default="production", description="Selects the log output format"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="The log level to use"
    )

    # Exchange helpers
    log_outcomes: bool = Field(
        default=True,
        description="Emit one structured log event per classified exchange",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
