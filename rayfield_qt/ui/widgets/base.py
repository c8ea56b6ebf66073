"""
Widget handle base - the object returned to callers for each widget.
"""

from __future__ import annotations

from typing import Any, Optional

from PyQt6.QtWidgets import QWidget

from ...errors import WidgetDestroyedError
from ..theme import Theme


class WidgetHandle:
    """
    Owns one widget's root element and its value state.

    ``set()`` is the programmatic mutation path; it re-renders but never
    invokes the user callback. Once the owning window is disposed the
    handle is released and ``set()`` raises WidgetDestroyedError.
    """

    kind = "Widget"

    def __init__(self, element: QWidget, settings: Any, theme: Theme):
        self.element = element
        self.settings = settings
        self._theme = theme
        self._alive = True

    @property
    def name(self) -> str:
        return self.settings.name

    @property
    def flag(self) -> Optional[str]:
        return getattr(self.settings, "flag", None)

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def value(self) -> Any:
        return None

    def set(self, value: Any) -> None:
        self._ensure_alive()
        self._apply(value)

    def release(self) -> None:
        """Detach from the element; called when the owning window is disposed."""
        self._alive = False

    def _ensure_alive(self) -> None:
        if not self._alive:
            raise WidgetDestroyedError(
                f"{self.kind} {self.name!r} belongs to a window that was closed"
            )

    def _apply(self, value: Any) -> None:
        raise NotImplementedError

    def _callback_context(self) -> str:
        return f"{self.kind} {self.name!r} callback"

    def __repr__(self) -> str:
        state = "alive" if self._alive else "released"
        return f"<{type(self).__name__} {self.name!r} value={self.value!r} {state}>"
