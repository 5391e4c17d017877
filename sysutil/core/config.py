"""
sysutil - Application Configuration

Settings consumed by the property loader and the logging setup.

Patterns Applied:
- Pydantic Settings with SettingsConfigDict
- Environment variable prefix SYSUTIL_

Anti-Patterns Avoided:
- Settings re-read from the environment on every call (cached via lru_cache)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    All settings can be overridden via environment variables with SYSUTIL_ prefix.
    Example: SYSUTIL_RESOURCE_PACKAGE=myapp.conf, SYSUTIL_LOG_LEVEL=DEBUG
    """

    # Logging configuration
    log_level: str = "INFO"
    log_json: bool = False

    # Resource resolution
    resource_package: str | None = None  # package holding bundled .properties files
    resource_base_dir: str | None = None  # file-system lookups relative to CWD when unset

    # Property loading
    properties_encoding: str = "latin-1"
    properties_files: list[str] = []
    properties_action: str = "REPLACE"

    model_config = SettingsConfigDict(
        env_prefix="SYSUTIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("properties_action")
    @classmethod
    def _normalise_action(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings instance with values from environment
    """
    return Settings()
