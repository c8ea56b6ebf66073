"""
Element factory - build one Qt widget from a kind tag and a property table.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from PyQt6.QtWidgets import QFrame, QLabel, QPushButton, QScrollArea, QWidget

from ..errors import SettingsError


ELEMENT_KINDS: dict[str, type[QWidget]] = {
    "Widget": QWidget,
    "Frame": QFrame,
    "TextLabel": QLabel,
    "TextButton": QPushButton,
    "ScrollingFrame": QScrollArea,
}


def _setter_name(prop: str) -> str:
    return "set" + prop[0].upper() + prop[1:]


def create_element(
    kind: Union[str, type[QWidget]],
    properties: Optional[dict[str, Any]] = None,
    parent: Optional[QWidget] = None,
) -> QWidget:
    """
    Create a widget, assign each property through its Qt setter and attach it.

    ``{"objectName": "Title"}`` calls ``setObjectName("Title")``; tuple values
    are spread, so ``{"fixedSize": (30, 30)}`` calls ``setFixedSize(30, 30)``.
    Unknown properties raise AttributeError from the widget itself.
    """
    if isinstance(kind, str):
        try:
            cls = ELEMENT_KINDS[kind]
        except KeyError:
            raise SettingsError(f"Unknown element kind: {kind!r}") from None
    else:
        cls = kind

    element = cls()
    for prop, value in (properties or {}).items():
        setter = getattr(element, _setter_name(prop))
        if isinstance(value, tuple):
            setter(*value)
        else:
            setter(value)

    return attach(element, parent)


def attach(element: QWidget, parent: Optional[QWidget]) -> QWidget:
    """Append element to parent's layout, or reparent it when there is none."""
    if parent is None:
        return element
    layout = parent.layout()
    if layout is not None:
        layout.addWidget(element)
    else:
        element.setParent(parent)
    return element
