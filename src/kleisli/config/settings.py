"""Environment-based configuration using pydantic-settings.

Example:
    >>> from kleisli.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.laws.raise_on_violation
    True

    # Or with environment variables:
    # KLEISLI_LOG_LEVEL=DEBUG
    # KLEISLI_LAWS_RAISE_ON_VIOLATION=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="KLEISLI_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class LawSettings(BaseSettings):
    """Defaults for law verification."""

    model_config = SettingsConfigDict(
        env_prefix="KLEISLI_LAWS_",
        extra="ignore",
    )

    raise_on_violation: bool = True
    sample_environments: list[int] = Field(
        default_factory=lambda: [0, 1, 7, -3],
        min_length=1,
        description="Environments readers are run against when comparing them",
    )


class KleisliSettings(BaseSettings):
    """Root settings, loaded from ``KLEISLI_*`` variables and ``.env``.

    Example environment variables:
        KLEISLI_DEBUG=true
        KLEISLI_LOG_FORMAT=json
        KLEISLI_LAWS_SAMPLE_ENVIRONMENTS=[1,2,3]
    """

    model_config = SettingsConfigDict(
        env_prefix="KLEISLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    environment: Literal["development", "staging", "production"] = "development"

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    laws: LawSettings = Field(default_factory=LawSettings)

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_env(cls, v: str) -> str:
        """Normalize environment name to lowercase."""
        return v.lower() if isinstance(v, str) else v

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG whenever debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> KleisliSettings:
    """Get the global settings instance (cached)."""
    return KleisliSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
