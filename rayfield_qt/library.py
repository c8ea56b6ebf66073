"""
Library facade - owns the config, the active theme, windows and notifications.
"""

from __future__ import annotations

from typing import Any, Optional

from .config import Config
from .core.logging_setup import get_logger
from .settings import NotificationSettings, WindowSettings
from .ui.notifications import NotificationCenter, Toast
from .ui.theme import Theme, get_theme
from .ui.widgets import WidgetHandle
from .ui.window import Window


logger = get_logger("library")


class Library:
    """
    Entry point for building interfaces.

    A QApplication must exist before windows or notifications are created.
    The theme is chosen per instance; windows keep the theme they were
    created with.
    """

    def __init__(self, config: Optional[Config] = None):
        self._config = config or Config()
        self._config.validate()
        self._theme = get_theme(self._config.theme)
        self._windows: list[Window] = []
        self.flags: dict[str, WidgetHandle] = {}
        self._notifications = NotificationCenter(self._theme, self._config.notifications)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def windows(self) -> list[Window]:
        return list(self._windows)

    @property
    def notifications(self) -> NotificationCenter:
        return self._notifications

    def set_theme(self, name: str) -> Theme:
        """Select the theme used by windows and toasts created from now on."""
        self._theme = get_theme(name)
        self._config.theme = self._theme.name
        self._notifications.theme = self._theme
        return self._theme

    def create_window(self, settings: Optional[WindowSettings] = None, **kwargs: Any) -> Window:
        if settings is not None and kwargs:
            raise TypeError("Pass either a settings object or keyword arguments, not both")
        if settings is None:
            settings = WindowSettings(**kwargs)
        elif isinstance(settings, dict):
            settings = WindowSettings.from_mapping(settings)

        window = Window(settings, self._theme, self._config.window)
        window.handle_created.connect(self._register_flag)
        window.disposed.connect(lambda: self._on_window_disposed(window))
        self._windows.append(window)
        window.show()
        logger.debug("window %r created with %s theme", settings.name, self._theme.name)
        return window

    def notify(self, settings: Optional[NotificationSettings] = None, **kwargs: Any) -> Toast:
        return self._notifications.notify(settings, **kwargs)

    def _register_flag(self, handle: WidgetHandle) -> None:
        if handle.flag:
            if handle.flag in self.flags:
                logger.warning("flag %r re-registered by %s %r", handle.flag, handle.kind, handle.name)
            self.flags[handle.flag] = handle

    def _on_window_disposed(self, window: Window) -> None:
        if window in self._windows:
            self._windows.remove(window)
        for handle in window.handles:
            if handle.flag and self.flags.get(handle.flag) is handle:
                del self.flags[handle.flag]
