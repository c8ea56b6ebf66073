"""
Configuration management for rayfield-qt.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from logging import getLevelName
from pathlib import Path
from typing import Optional

from .errors import SettingsError


@dataclass
class WindowConfig:
    width: int = 500
    height: int = 400
    title_height: int = 40
    corner_radius: int = 8
    padding: int = 5  # Spacing between widgets in the content column


@dataclass
class NotificationsConfig:
    width: int = 300
    height: int = 60
    margin: int = 20  # Distance from the top-right screen corner
    spacing: int = 10  # Gap between stacked toasts
    default_duration: float = 3.0  # Seconds a toast stays on screen
    exit_delay: float = 0.5  # Seconds between slide-out and destruction


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[Path] = None


@dataclass
class Config:
    """Main configuration container."""

    theme: str = "dark"
    window: WindowConfig = field(default_factory=WindowConfig)
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> Config:
        """Load configuration from JSON file, falling back to defaults."""
        if config_path is None:
            # Look in standard locations
            candidates = [
                Path.cwd() / "rayfield.json",
                Path.home() / ".config" / "rayfield-qt" / "config.json",
            ]
            for path in candidates:
                if path.exists():
                    config_path = path
                    break
            else:
                return cls()

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise SettingsError(f"Invalid JSON in {config_path}: {e}") from e

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> Config:
        """Parse configuration from dictionary."""
        if not isinstance(data, dict):
            raise SettingsError("Config root must be a JSON object")

        try:
            window = WindowConfig(**data.get("window", {}))
            notifications = NotificationsConfig(**data.get("notifications", {}))
            logging_data = dict(data.get("logging", {}))
        except TypeError as e:
            raise SettingsError(f"Unknown config key: {e}") from e

        log_file = logging_data.get("file")
        logging = LoggingConfig(
            level=str(logging_data.get("level", "INFO")).upper(),
            file=Path(log_file).expanduser() if log_file else None,
        )

        config = cls(
            theme=str(data.get("theme", "dark")).lower(),
            window=window,
            notifications=notifications,
            logging=logging,
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.window.width <= 0 or self.window.height <= 0:
            raise SettingsError("Window size must be positive")
        if self.window.title_height <= 0 or self.window.title_height >= self.window.height:
            raise SettingsError("Title height must fit inside the window")
        if self.notifications.width <= 0 or self.notifications.height <= 0:
            raise SettingsError("Notification size must be positive")
        if self.notifications.default_duration < 0 or self.notifications.exit_delay < 0:
            raise SettingsError("Notification timings must not be negative")
        if not isinstance(getLevelName(self.logging.level.upper()), int):
            raise SettingsError(f"Unknown logging level: {self.logging.level!r}")
