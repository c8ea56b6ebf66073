"""
Button widget - a labelled push button with hover tint.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt, pyqtProperty, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QPushButton, QWidget

from ...core.callbacks import safe_callback
from ...settings import ButtonSettings
from ..elements import attach
from ..theme import Theme, css_color
from ..tween import Tween, TweenPreset, create_tween
from .base import WidgetHandle


class ButtonElement(QPushButton):
    """Push button whose background color is an animatable property."""

    HEIGHT = 35

    hovered = pyqtSignal(bool)  # True on enter, False on leave

    def __init__(self, text: str, theme: Theme, parent=None):
        super().__init__(text, parent)
        self._theme = theme
        self._bg_color = QColor(theme.element_background)

        self.setObjectName("Button")
        self.setFixedHeight(self.HEIGHT)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._update_style()

    def _update_style(self) -> None:
        self.setStyleSheet(f"""
            QPushButton#Button {{
                background-color: {css_color(self._bg_color)};
                color: {css_color(self._theme.text_color)};
                border: none;
                border-radius: 6px;
                {Theme.css_font(14)}
            }}
        """)

    def _get_background(self) -> QColor:
        return self._bg_color

    def _set_background(self, value: QColor) -> None:
        self._bg_color = QColor(value)
        self._update_style()

    backgroundColor = pyqtProperty(QColor, _get_background, _set_background)

    def enterEvent(self, event):
        self.hovered.emit(True)
        super().enterEvent(event)

    def leaveEvent(self, event):
        self.hovered.emit(False)
        super().leaveEvent(event)


class Button(WidgetHandle):
    """Handle for a button: ``set(text)`` replaces the label."""

    kind = "Button"

    def __init__(self, settings: ButtonSettings, theme: Theme, parent: Optional[QWidget] = None):
        element = ButtonElement(settings.name, theme)
        super().__init__(element, settings, theme)
        self._hover_tween: Optional[Tween] = None

        element.hovered.connect(self._on_hovered)
        element.clicked.connect(self._on_clicked)
        attach(element, parent)

    @property
    def value(self) -> str:
        return self.element.text()

    def _apply(self, text: str) -> None:
        self.element.setText(str(text))

    def _on_hovered(self, entered: bool) -> None:
        if not self._alive:
            return
        target = self._theme.accent_color if entered else self._theme.element_background
        if self._hover_tween is not None:
            self._hover_tween.stop()
        self._hover_tween = create_tween(
            self.element, {"backgroundColor": target}, TweenPreset.FAST
        ).play()

    def _on_clicked(self, checked: bool = False) -> None:
        if not self._alive:
            return
        safe_callback(self.settings.callback, context=self._callback_context())
