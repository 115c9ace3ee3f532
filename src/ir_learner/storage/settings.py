"""Application settings management."""

import json
import math
import os
from pathlib import Path
from dataclasses import dataclass, asdict, fields
from typing import Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_URL = "http://localhost:8080/broadlink"


@dataclass
class AppSettings:
    """Application settings with defaults."""

    # Companion service
    service_url: str = DEFAULT_SERVICE_URL
    learn_path: str = "learn"
    request_timeout: float = 10.0  # seconds
    refresh_on_start: bool = True

    # Appearance
    theme: str = "dark"  # "dark", "light", or "system"
    language: str = "en"

    # Window
    window_width: int = 720
    window_height: int = 480

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Build settings from a dict.

        Unknown keys are ignored. Values are coerced to the type of their
        field; a value that cannot be coerced keeps the field's default.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        known = {f.name: f for f in fields(cls)}
        unknown = set(data) - set(known)
        if unknown:
            logger.warning(f"Ignoring unknown settings: {', '.join(sorted(unknown))}")

        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            try:
                values[key] = _coerce(value, known[key].default)
            except (TypeError, ValueError, OverflowError):
                logger.warning(f"Invalid value for setting {key}: {value!r}, using default")

        settings = cls(**values)
        if not is_valid_timeout(settings.request_timeout):
            logger.warning(f"Invalid request timeout {settings.request_timeout}, using default")
            settings.request_timeout = cls.request_timeout
        return settings


def _coerce(value, default):
    """Convert a loaded value to the type of the field's default."""
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise TypeError("expected a boolean")
        return value
    if isinstance(default, (int, float)):
        if isinstance(value, bool):
            raise TypeError("expected a number")
        return type(default)(value)
    if not isinstance(value, str):
        raise TypeError("expected a string")
    return value


class SettingsManager:
    """Manages application settings persistence."""

    def __init__(self, app_name: str = "IRLearner", settings_dir: Optional[Path] = None):
        """Initialize the settings manager.

        Args:
            app_name: Name of the application (used for config directory)
            settings_dir: Explicit directory, overriding the platform default
        """
        self._app_name = app_name
        self._settings_dir = settings_dir or self._get_settings_dir()
        self._settings_file = self._settings_dir / "settings.json"
        self._settings: Optional[AppSettings] = None

    def _get_settings_dir(self) -> Path:
        """Get the appropriate settings directory for the platform."""
        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        else:  # Linux/Mac
            base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

        return base / self._app_name

    def load(self) -> AppSettings:
        """Load settings from disk or return defaults.

        Returns:
            The loaded or default settings
        """
        if self._settings is not None:
            return self._settings

        if self._settings_file.exists():
            try:
                with open(self._settings_file, "r", encoding="utf-8") as f:
                    self._settings = AppSettings.from_dict(json.load(f))
                logger.info(f"Settings loaded from {self._settings_file}")
            except (ValueError, TypeError) as e:
                logger.warning(f"Failed to load settings, using defaults: {e}")
                self._settings = AppSettings()
        else:
            self._settings = AppSettings()
            logger.info("No settings file found, using defaults")

        return self._settings

    def save(self, settings: Optional[AppSettings] = None) -> None:
        """Save settings to disk.

        Args:
            settings: Settings to save (uses current if None)
        """
        if settings is not None:
            self._settings = settings

        if self._settings is None:
            return

        try:
            self._settings_dir.mkdir(parents=True, exist_ok=True)
            with open(self._settings_file, "w", encoding="utf-8") as f:
                json.dump(asdict(self._settings), f, indent=2)
            logger.info(f"Settings saved to {self._settings_file}")
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")

    def update(self, **kwargs) -> AppSettings:
        """Update specific settings and save.

        Args:
            **kwargs: Setting names and values to update

        Returns:
            The updated settings
        """
        settings = self.load()

        for key, value in kwargs.items():
            if hasattr(settings, key):
                setattr(settings, key, value)
            else:
                logger.warning(f"Unknown setting: {key}")

        self.save(settings)
        return settings

    @property
    def settings_dir(self) -> Path:
        """Get the settings directory path."""
        return self._settings_dir


def is_valid_timeout(value: float) -> bool:
    """A request timeout must be a finite, positive number of seconds."""
    return math.isfinite(value) and value > 0
