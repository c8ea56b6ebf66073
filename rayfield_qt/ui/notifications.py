"""
Notification Center - timed toast notifications that slide in from the right.
"""

from __future__ import annotations

from typing import Any, Optional

from PyQt6.QtCore import Qt, QPoint, QRect, QTimer, pyqtSignal
from PyQt6.QtWidgets import QApplication, QVBoxLayout, QWidget

from ..config import NotificationsConfig
from ..core.logging_setup import get_logger
from ..settings import NotificationSettings
from .elements import create_element
from .theme import Theme, css_color
from .tween import Tween, TweenPreset, create_tween


logger = get_logger("notifications")


class Toast(QWidget):
    """A single notification: bold title above wrapped content text."""

    dismissed = pyqtSignal(object)  # Emits self when destroyed

    def __init__(self, settings: NotificationSettings, theme: Theme, config: NotificationsConfig):
        super().__init__()
        self._settings = settings
        self._config = config
        self._tween: Optional[Tween] = None
        self._hiding = False
        self._alive = True
        self._rest_pos = QPoint()
        self._away_pos = QPoint()

        # Frameless, transparent, always on top, no taskbar, no focus
        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
            | Qt.WindowType.Tool
            | Qt.WindowType.WindowDoesNotAcceptFocus
        )
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setWindowTitle(settings.title)
        self.setFixedSize(config.width, config.height)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        frame = create_element("Frame", {
            "objectName": "Notification",
            "styleSheet": f"""
                QFrame#Notification {{
                    background-color: {css_color(theme.element_background)};
                    border-radius: 8px;
                }}
            """,
        }, self)
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(10, 5, 10, 5)
        layout.setSpacing(2)

        self.title_label = create_element("TextLabel", {
            "objectName": "Title",
            "text": settings.title,
            "styleSheet": f"""
                color: {css_color(theme.text_color)};
                {Theme.css_font(14, bold=True)}
                background: transparent;
            """,
        }, frame)
        self.content_label = create_element("TextLabel", {
            "objectName": "Content",
            "text": settings.content,
            "wordWrap": True,
            "alignment": Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
            "styleSheet": f"""
                color: {css_color(theme.text_color)};
                {Theme.css_font(12)}
                background: transparent;
            """,
        }, frame)
        layout.addStretch()

    @property
    def title(self) -> str:
        return self._settings.title

    @property
    def content(self) -> str:
        return self._settings.content

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def hiding(self) -> bool:
        return self._hiding

    @property
    def rest_pos(self) -> QPoint:
        return QPoint(self._rest_pos)

    def place(self, rest: QPoint, away: QPoint) -> None:
        """Set the resting and off-screen positions, starting off-screen."""
        self._rest_pos = QPoint(rest)
        self._away_pos = QPoint(away)
        self.move(self._away_pos)

    def slide_in(self) -> None:
        self._animate_to(self._rest_pos)

    def slide_out(self) -> None:
        self._hiding = True
        self._animate_to(self._away_pos)

    def _animate_to(self, pos: QPoint) -> None:
        if self._tween is not None:
            self._tween.stop()
        self._tween = create_tween(self, {"pos": pos}, TweenPreset.NORMAL).play()

    def destroy_toast(self) -> None:
        if not self._alive:
            return
        self._alive = False
        self.hide()
        self.dismissed.emit(self)
        self.deleteLater()


class NotificationCenter:
    """
    Schedules toasts without blocking the caller.

    Each toast runs its own timeline on the Qt event loop: slide in, wait
    ``duration`` seconds, slide out, wait ``exit_delay`` seconds, destroy.
    Concurrent toasts stack downward from the top-right corner.
    """

    def __init__(self, theme: Theme, config: Optional[NotificationsConfig] = None):
        self._theme = theme
        self._config = config or NotificationsConfig()
        self._toasts: list[Toast] = []

    @property
    def theme(self) -> Theme:
        return self._theme

    @theme.setter
    def theme(self, theme: Theme) -> None:
        self._theme = theme

    @property
    def active(self) -> list[Toast]:
        return list(self._toasts)

    def _screen_geometry(self) -> QRect:
        screen = QApplication.primaryScreen()
        if not screen:
            return QRect(0, 0, 1920, 1080)
        return screen.availableGeometry()

    def _slot_y(self, geo: QRect) -> int:
        """First vertical slot not taken by a visible toast."""
        step = self._config.height + self._config.spacing
        taken = {t.rest_pos.y() for t in self._toasts if not t.hiding}
        y = geo.y() + self._config.margin
        while y in taken:
            y += step
        return y

    def notify(self, settings: Optional[NotificationSettings] = None, **kwargs: Any) -> Toast:
        """Show a toast and return immediately."""
        if settings is not None and kwargs:
            raise TypeError("Pass either a settings object or keyword arguments, not both")
        if settings is None:
            settings = NotificationSettings(**kwargs)
        elif isinstance(settings, dict):
            settings = NotificationSettings.from_mapping(settings)

        duration = settings.duration
        if duration is None:
            duration = self._config.default_duration

        geo = self._screen_geometry()
        y = self._slot_y(geo)
        right = geo.x() + geo.width()
        toast = Toast(settings, self._theme, self._config)
        toast.place(
            rest=QPoint(right - self._config.width - self._config.margin, y),
            away=QPoint(right, y),
        )
        toast.dismissed.connect(self._on_dismissed)
        self._toasts.append(toast)

        toast.show()
        toast.slide_in()
        QTimer.singleShot(int(duration * 1000), lambda: self._hide(toast))

        logger.debug("notification %r shown for %.2fs", settings.title, duration)
        return toast

    def _hide(self, toast: Toast) -> None:
        if not toast.alive:
            return
        toast.slide_out()
        QTimer.singleShot(int(self._config.exit_delay * 1000), toast.destroy_toast)

    def _on_dismissed(self, toast: Toast) -> None:
        if toast in self._toasts:
            self._toasts.remove(toast)

    def clear_all(self) -> None:
        """Destroy every toast immediately."""
        for toast in self._toasts[:]:
            toast.destroy_toast()
