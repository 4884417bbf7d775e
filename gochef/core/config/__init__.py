"""Configuration management for gochef."""

from gochef.core.config.loader import ConfigLoader
from gochef.core.config.settings import (
    CookSettings,
    LoggingSettings,
    PrepareSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "CookSettings",
    "LoggingSettings",
    "PrepareSettings",
    "Settings",
    "get_settings",
]
