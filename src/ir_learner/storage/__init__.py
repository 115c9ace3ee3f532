"""Storage and persistence layer."""

from .settings import SettingsManager, AppSettings, DEFAULT_SERVICE_URL

__all__ = ["SettingsManager", "AppSettings", "DEFAULT_SERVICE_URL"]
