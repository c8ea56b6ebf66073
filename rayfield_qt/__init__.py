"""
rayfield-qt - windows, buttons, toggles, sliders and toast notifications
for PyQt6 applications.
"""

from .config import Config, WindowConfig, NotificationsConfig, LoggingConfig
from .errors import RayfieldError, SettingsError, WidgetDestroyedError
from .library import Library
from .settings import (
    WindowSettings,
    ButtonSettings,
    ToggleSettings,
    SliderSettings,
    NotificationSettings,
)
from .ui.widgets import Button, Toggle, Slider, WidgetHandle
from .ui.window import Window
from .ui.notifications import Toast

__version__ = "0.1.0"

__all__ = [
    "Config",
    "WindowConfig",
    "NotificationsConfig",
    "LoggingConfig",
    "RayfieldError",
    "SettingsError",
    "WidgetDestroyedError",
    "Library",
    "WindowSettings",
    "ButtonSettings",
    "ToggleSettings",
    "SliderSettings",
    "NotificationSettings",
    "Button",
    "Toggle",
    "Slider",
    "WidgetHandle",
    "Window",
    "Toast",
]
