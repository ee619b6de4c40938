"""Configuration management for errorkit using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main errorkit configuration.

    Configuration is loaded from:
    1. Environment variables (ERRORKIT_* prefix)
    2. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRORKIT_",
        extra="ignore",
    )

    environment: str = Field(
        default="production", description="Deployment environment name"
    )
    log_level: str = Field(default="INFO", description="Level for the errorkit logger")

    @property
    def is_development(self) -> bool:
        """Whether diagnostic error logging is enabled by default."""
        return self.environment.strip().lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get the application settings (cached)."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to reload configuration."""
    get_settings.cache_clear()
