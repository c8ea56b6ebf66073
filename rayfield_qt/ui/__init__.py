"""
UI components - theme, tweens, elements, window, widgets, notifications.
"""

from .theme import Theme, DARK, LIGHT, THEMES, get_theme, css_color
from .tween import Tween, TweenPreset, create_tween
from .elements import create_element, attach
from .window import Window, TitleBar
from .notifications import NotificationCenter, Toast

__all__ = [
    "Theme",
    "DARK",
    "LIGHT",
    "THEMES",
    "get_theme",
    "css_color",
    "Tween",
    "TweenPreset",
    "create_tween",
    "create_element",
    "attach",
    "Window",
    "TitleBar",
    "NotificationCenter",
    "Toast",
]
