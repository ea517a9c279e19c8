"""Configuration management using pydantic-settings."""

from .settings import (
    KleisliSettings,
    LawSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "KleisliSettings",
    "LawSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
