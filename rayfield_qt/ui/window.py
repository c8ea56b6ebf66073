"""
Window class - a draggable, closable panel that hosts widgets.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from PyQt6.QtCore import Qt, QPoint, QSize, QTimer, pyqtSignal
from PyQt6.QtGui import QCloseEvent, QMouseEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLayout,
    QVBoxLayout,
    QWidget,
)

from ..config import WindowConfig
from ..core.logging_setup import get_logger
from ..errors import WidgetDestroyedError
from ..settings import ButtonSettings, SliderSettings, ToggleSettings, WindowSettings
from .elements import create_element
from .theme import CLOSE_BUTTON, SHADOW, WHITE, Theme, css_color
from .tween import Tween, TweenPreset, create_tween
from .widgets import Button, Slider, Toggle, WidgetHandle


logger = get_logger("window")

S = TypeVar("S")


class TitleBar(QFrame):
    """Draggable title bar carrying the window title and the close button."""

    close_clicked = pyqtSignal()

    def __init__(self, title: str, theme: Theme, height: int, parent=None):
        super().__init__(parent)
        self._drag_start: Optional[QPoint] = None
        self._window_start: Optional[QPoint] = None

        self.setObjectName("TitleBar")
        self.setFixedHeight(height)
        self.setStyleSheet(f"""
            QFrame#TitleBar {{
                background-color: {css_color(theme.element_background)};
                border-top-left-radius: 8px;
                border-top-right-radius: 8px;
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 0, 5, 0)
        layout.setSpacing(8)

        self._title_label = create_element("TextLabel", {
            "objectName": "Title",
            "text": title,
            "styleSheet": f"""
                color: {css_color(theme.text_color)};
                {Theme.css_font(16)}
                background: transparent;
            """,
        }, self)
        layout.addStretch()

        self.close_button = create_element("TextButton", {
            "objectName": "Close",
            "text": "×",
            "fixedSize": (30, 30),
            "cursor": Qt.CursorShape.PointingHandCursor,
            "styleSheet": f"""
                QPushButton#Close {{
                    background-color: {css_color(CLOSE_BUTTON)};
                    color: {css_color(WHITE)};
                    border: none;
                    border-radius: 4px;
                    {Theme.css_font(18, bold=True)}
                }}
            """,
        }, self)
        self.close_button.clicked.connect(self.close_clicked)

    @property
    def title(self) -> str:
        return self._title_label.text()

    def set_title(self, text: str) -> None:
        self._title_label.setText(text)

    @property
    def dragging(self) -> bool:
        return self._drag_start is not None

    def begin_drag(self, global_pos: QPoint) -> None:
        self._drag_start = global_pos
        self._window_start = self.window().pos()

    def drag_to(self, global_pos: QPoint) -> None:
        if self._drag_start is None:
            return
        self.window().move(self._window_start + (global_pos - self._drag_start))

    def end_drag(self) -> None:
        self._drag_start = None
        self._window_start = None

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.begin_drag(event.globalPosition().toPoint())
            event.accept()

    def mouseMoveEvent(self, event: QMouseEvent):
        if self.dragging:
            self.drag_to(event.globalPosition().toPoint())
            event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.end_drag()


class Window(QWidget):
    """
    Top-level panel built from a title bar and a scrollable content column.

    Widgets are added through ``create_button``/``create_toggle``/
    ``create_slider`` and live inside ``content``; disposing the window
    destroys them with it and releases their handles.
    """

    SHADOW_MARGIN = 10
    CONTENT_MARGIN = 10

    disposed = pyqtSignal()
    handle_created = pyqtSignal(object)  # WidgetHandle

    def __init__(
        self,
        settings: WindowSettings,
        theme: Theme,
        window_config: Optional[WindowConfig] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._settings = settings
        self._theme = theme
        self._window_config = window_config or WindowConfig()
        self._handles: list[WidgetHandle] = []
        self._closing = False
        self._disposed = False
        self._close_tween: Optional[Tween] = None

        # Window flags
        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
        )
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setWindowTitle(settings.name)

        # Outer layout leaves room for the shadow
        outer = QVBoxLayout(self)
        outer.setContentsMargins(*[self.SHADOW_MARGIN] * 4)
        outer.setSpacing(0)

        radius = self._window_config.corner_radius
        self._main = create_element("Frame", {
            "objectName": "Main",
            "styleSheet": f"""
                QFrame#Main {{
                    background-color: {css_color(theme.background)};
                    border-radius: {radius}px;
                }}
            """,
        }, self)

        shadow = QGraphicsDropShadowEffect(self._main)
        shadow.setBlurRadius(20)
        shadow.setColor(SHADOW)
        shadow.setOffset(0, 4)
        self._main.setGraphicsEffect(shadow)

        main_layout = QVBoxLayout(self._main)
        main_layout.setContentsMargins(0, 0, 0, self.CONTENT_MARGIN)
        main_layout.setSpacing(self.CONTENT_MARGIN)

        # Title bar
        self._title_bar = TitleBar(settings.name, theme, self._window_config.title_height)
        self._title_bar.close_clicked.connect(self.close_animated)
        main_layout.addWidget(self._title_bar)

        # Content region - widgets stack top-down in a single column
        self._scroll = create_element("ScrollingFrame", {
            "objectName": "ContentScroll",
            "widgetResizable": True,
            "frameShape": QFrame.Shape.NoFrame,
            "horizontalScrollBarPolicy": Qt.ScrollBarPolicy.ScrollBarAlwaysOff,
            "styleSheet": """
                QScrollArea#ContentScroll { background: transparent; }
                QScrollBar:vertical { width: 4px; background: transparent; }
                QScrollBar::handle:vertical { background: rgba(120, 120, 120, 160); border-radius: 2px; }
                QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical { height: 0px; }
            """,
        })
        self._scroll.viewport().setAutoFillBackground(False)

        self._content = QWidget()
        self._content.setObjectName("Content")
        self._content.setStyleSheet("QWidget#Content { background: transparent; }")
        content_layout = QVBoxLayout(self._content)
        content_layout.setContentsMargins(self.CONTENT_MARGIN, 0, self.CONTENT_MARGIN, 0)
        content_layout.setSpacing(self._window_config.padding)
        content_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self._scroll.setWidget(self._content)
        main_layout.addWidget(self._scroll, 1)

        self.resize(
            self._window_config.width + self.SHADOW_MARGIN * 2,
            self._window_config.height + self.SHADOW_MARGIN * 2,
        )
        self._position_on_screen()

    def _position_on_screen(self) -> None:
        """Center the window on the primary screen."""
        screen = QApplication.primaryScreen()
        if not screen:
            return
        geo = screen.availableGeometry()
        self.move(geo.center() - self.rect().center())

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def name(self) -> str:
        return self._settings.name

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def title_bar(self) -> TitleBar:
        return self._title_bar

    @property
    def content(self) -> QWidget:
        return self._content

    @property
    def handles(self) -> list[WidgetHandle]:
        return list(self._handles)

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # =========================================================================
    # Widgets
    # =========================================================================

    def create_button(self, settings: Optional[ButtonSettings] = None, **kwargs: Any) -> Button:
        settings = self._resolve_settings(ButtonSettings, settings, kwargs)
        return self._add_handle(Button(settings, self._theme, self._content))

    def create_toggle(self, settings: Optional[ToggleSettings] = None, **kwargs: Any) -> Toggle:
        settings = self._resolve_settings(ToggleSettings, settings, kwargs)
        return self._add_handle(Toggle(settings, self._theme, self._content))

    def create_slider(self, settings: Optional[SliderSettings] = None, **kwargs: Any) -> Slider:
        settings = self._resolve_settings(SliderSettings, settings, kwargs)
        return self._add_handle(Slider(settings, self._theme, self._content))

    def _resolve_settings(self, cls: type[S], settings: Any, kwargs: dict[str, Any]) -> S:
        if self._disposed:
            raise WidgetDestroyedError(f"Window {self.name!r} was closed")
        if settings is not None and kwargs:
            raise TypeError("Pass either a settings object or keyword arguments, not both")
        if settings is None:
            return cls(**kwargs)
        if isinstance(settings, dict):
            return cls.from_mapping(settings)
        return settings

    def _add_handle(self, handle: WidgetHandle) -> WidgetHandle:
        self._handles.append(handle)
        self.handle_created.emit(handle)
        logger.debug("%s %r added to window %r", handle.kind, handle.name, self.name)
        return handle

    # =========================================================================
    # Closing
    # =========================================================================

    def close_animated(self) -> None:
        """Shrink the window to nothing, then dispose of it."""
        if self._closing or self._disposed:
            return
        self._closing = True
        # Layouts pin a top-level window to their minimum size hint
        self.layout().setSizeConstraint(QLayout.SizeConstraint.SetNoConstraint)
        self.setMinimumSize(0, 0)
        self._close_tween = create_tween(self, {"size": QSize(0, 0)}, TweenPreset.FAST).play()
        QTimer.singleShot(int(self._close_tween.duration * 1000), self.dispose)

    def dispose(self) -> None:
        """Destroy the window's native tree; every widget handle is released."""
        if self._disposed:
            return
        self._disposed = True
        for handle in self._handles:
            handle.release()
        self.hide()
        logger.debug("window %r disposed with %d widgets", self.name, len(self._handles))
        self.disposed.emit()
        self.deleteLater()

    def closeEvent(self, event: QCloseEvent):
        """Closing through Qt (``close()``, the window manager) disposes too."""
        self.dispose()
        event.accept()
