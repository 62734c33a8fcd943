"""Configuration module with YAML and environment variable support."""

from .settings import (
    CatalogSettings,
    LoggingSettings,
    Settings,
    get_settings,
)


__all__ = [
    "CatalogSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
