"""
Toggle widget - a labelled row with an on/off switch.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt, QPoint, pyqtProperty, pyqtSignal
from PyQt6.QtGui import QColor, QMouseEvent
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget

from ...core.callbacks import safe_callback
from ...core.state import ToggleState
from ...settings import ToggleSettings
from ..elements import attach, create_element
from ..theme import SWITCH_OFF, WHITE, Theme, css_color
from ..tween import Tween, TweenPreset, create_tween
from .base import WidgetHandle


class SwitchElement(QFrame):
    """40x20 track with a sliding 16x16 indicator."""

    WIDTH = 40
    HEIGHT = 20
    KNOB = 16
    INSET = 2

    def __init__(self, color: QColor, parent=None):
        super().__init__(parent)
        self._track_color = QColor(color)
        self.setObjectName("Switch")
        self.setFixedSize(self.WIDTH, self.HEIGHT)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

        self.indicator = create_element("Frame", {
            "objectName": "Indicator",
            "fixedSize": (self.KNOB, self.KNOB),
            "styleSheet": f"""
                QFrame#Indicator {{
                    background-color: {css_color(WHITE)};
                    border-radius: {self.KNOB // 2}px;
                }}
            """,
        }, self)
        self._update_style()

    def indicator_pos(self, on: bool) -> QPoint:
        if on:
            return QPoint(self.WIDTH - self.KNOB - self.INSET, self.INSET)
        return QPoint(self.INSET, self.INSET)

    def _update_style(self) -> None:
        self.setStyleSheet(f"""
            QFrame#Switch {{
                background-color: {css_color(self._track_color)};
                border-radius: {self.HEIGHT // 2}px;
            }}
        """)

    def _get_track_color(self) -> QColor:
        return self._track_color

    def _set_track_color(self, value: QColor) -> None:
        self._track_color = QColor(value)
        self._update_style()

    trackColor = pyqtProperty(QColor, _get_track_color, _set_track_color)


class ToggleElement(QFrame):
    """Row frame that reports left clicks anywhere inside it."""

    HEIGHT = 35

    clicked = pyqtSignal()

    def __init__(self, text: str, theme: Theme, on: bool, parent=None):
        super().__init__(parent)
        self._pressed = False
        self.setObjectName("Toggle")
        self.setFixedHeight(self.HEIGHT)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet(f"""
            QFrame#Toggle {{
                background-color: {css_color(theme.element_background)};
                border-radius: 6px;
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 0, 10, 0)
        layout.setSpacing(8)

        self.label = QLabel(text)
        self.label.setStyleSheet(f"""
            color: {css_color(theme.text_color)};
            {Theme.css_font(14)}
            background: transparent;
        """)
        self.switch = SwitchElement(theme.accent_color if on else SWITCH_OFF)
        self.switch.indicator.move(self.switch.indicator_pos(on))

        layout.addWidget(self.label)
        layout.addStretch()
        layout.addWidget(self.switch)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self._pressed = True
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton and self._pressed:
            self._pressed = False
            if self.rect().contains(event.position().toPoint()):
                self.clicked.emit()
            event.accept()
        else:
            super().mouseReleaseEvent(event)


class Toggle(WidgetHandle):
    """Handle for a toggle: ``set(bool)`` forces the state without a callback."""

    kind = "Toggle"

    def __init__(self, settings: ToggleSettings, theme: Theme, parent: Optional[QWidget] = None):
        self.state = ToggleState(settings.current_value)
        element = ToggleElement(settings.name, theme, self.state.value)
        super().__init__(element, settings, theme)
        self._tweens: list[Tween] = []

        element.clicked.connect(self._on_clicked)
        attach(element, parent)

    @property
    def value(self) -> bool:
        return self.state.value

    def _render(self) -> None:
        on = self.state.value
        switch = self.element.switch
        for tween in self._tweens:
            tween.stop()
        self._tweens = [
            create_tween(
                switch,
                {"trackColor": self._theme.accent_color if on else SWITCH_OFF},
                TweenPreset.FAST,
            ).play(),
            create_tween(
                switch.indicator,
                {"pos": switch.indicator_pos(on)},
                TweenPreset.FAST,
            ).play(),
        ]

    def _apply(self, value: bool) -> None:
        self.state.set(value)
        self._render()

    def _on_clicked(self) -> None:
        if not self._alive:
            return
        value = self.state.flip()
        self._render()
        safe_callback(self.settings.callback, value, context=self._callback_context())
