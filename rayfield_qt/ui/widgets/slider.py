"""
Slider widget - a labelled track with a draggable fill.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt, QRectF, pyqtProperty, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QMouseEvent, QPainter
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from ...core.callbacks import safe_callback
from ...core.state import SliderState, clamp, format_value
from ...settings import SliderSettings
from ..elements import attach
from ..theme import TRACK, Theme, css_color
from ..tween import Tween, TweenPreset, create_tween
from .base import WidgetHandle


class TrackElement(QWidget):
    """Slider track; paints a 4px bar and the fill, reports pointer x."""

    HEIGHT = 12
    BAR = 4

    pressed = pyqtSignal(float)
    moved = pyqtSignal(float)
    released = pyqtSignal()

    def __init__(self, accent: QColor, fraction: float = 0.0, parent=None):
        super().__init__(parent)
        self._accent = QColor(accent)
        self._fraction = fraction
        self.setObjectName("Track")
        self.setFixedHeight(self.HEIGHT)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def _get_fill_fraction(self) -> float:
        return self._fraction

    def _set_fill_fraction(self, value: float) -> None:
        self._fraction = clamp(value, 0.0, 1.0)
        self.update()

    fillFraction = pyqtProperty(float, _get_fill_fraction, _set_fill_fraction)

    @property
    def fill_width(self) -> float:
        return self.width() * self._fraction

    def fraction_at(self, x: float) -> Optional[float]:
        """Fraction of the track under local x, or None for a zero-width track."""
        width = self.width()
        if width <= 0:
            return None
        return clamp(x / width, 0.0, 1.0)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)

        radius = self.BAR / 2
        bar = QRectF(0, (self.height() - self.BAR) / 2, self.width(), self.BAR)
        painter.setBrush(QBrush(TRACK))
        painter.drawRoundedRect(bar, radius, radius)

        if self._fraction > 0:
            fill = QRectF(bar.x(), bar.y(), self.fill_width, self.BAR)
            painter.setBrush(QBrush(self._accent))
            painter.drawRoundedRect(fill, radius, radius)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.pressed.emit(event.position().x())
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        # Delivered while the button is held; the track keeps the mouse grab
        # even after the pointer leaves it
        self.moved.emit(event.position().x())

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.released.emit()
            event.accept()
        else:
            super().mouseReleaseEvent(event)


class SliderElement(QFrame):
    HEIGHT = 50

    def __init__(self, text: str, theme: Theme, value_text: str, fraction: float, parent=None):
        super().__init__(parent)
        self.setObjectName("Slider")
        self.setFixedHeight(self.HEIGHT)
        self.setStyleSheet(f"""
            QFrame#Slider {{
                background-color: {css_color(theme.element_background)};
                border-radius: 6px;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 5, 10, 5)
        layout.setSpacing(4)

        header = QHBoxLayout()
        header.setContentsMargins(0, 0, 0, 0)

        self.label = QLabel(text)
        self.label.setStyleSheet(f"""
            color: {css_color(theme.text_color)};
            {Theme.css_font(14)}
            background: transparent;
        """)
        self.value_label = QLabel(value_text)
        self.value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.value_label.setStyleSheet(f"""
            color: {css_color(theme.text_color)};
            {Theme.css_font(12)}
            background: transparent;
        """)
        header.addWidget(self.label)
        header.addStretch()
        header.addWidget(self.value_label)

        self.track = TrackElement(theme.accent_color, fraction)

        layout.addLayout(header)
        layout.addWidget(self.track)


class Slider(WidgetHandle):
    """
    Handle for a slider over a numeric range.

    Dragging maps the pointer onto the range (snapping to the increment if
    one is set) and calls the callback on every move. ``set(value)`` clamps
    and animates the fill without calling back.
    """

    kind = "Slider"

    def __init__(self, settings: SliderSettings, theme: Theme, parent: Optional[QWidget] = None):
        self.state = SliderState(
            minimum=settings.minimum,
            maximum=settings.maximum,
            increment=settings.increment,
            value=settings.current_value,
        )
        element = SliderElement(
            settings.name, theme, format_value(self.state.value), self.state.fraction
        )
        super().__init__(element, settings, theme)
        self._dragging = False
        self._fill_tween: Optional[Tween] = None

        track = element.track
        track.pressed.connect(self._on_pressed)
        track.moved.connect(self._on_moved)
        track.released.connect(self._on_released)
        attach(element, parent)

    @property
    def value(self) -> float:
        return self.state.value

    @property
    def dragging(self) -> bool:
        return self._dragging

    def _apply(self, value: float) -> None:
        self.state.set_value(value)
        if self._fill_tween is not None:
            self._fill_tween.stop()
        self._fill_tween = create_tween(
            self.element.track, {"fillFraction": self.state.fraction}, TweenPreset.FAST
        ).play()
        self.element.value_label.setText(format_value(self.state.value))

    def _on_pressed(self, x: float) -> None:
        if self._alive:
            self._dragging = True

    def _on_released(self) -> None:
        self._dragging = False

    def _on_moved(self, x: float) -> None:
        if not (self._dragging and self._alive):
            return
        fraction = self.element.track.fraction_at(x)
        if fraction is None:
            return

        value = self.state.set_fraction(fraction)
        if self._fill_tween is not None:
            self._fill_tween.stop()
            self._fill_tween = None
        self.element.track.fillFraction = self.state.fraction
        self.element.value_label.setText(format_value(value))

        safe_callback(self.settings.callback, value, context=self._callback_context())
