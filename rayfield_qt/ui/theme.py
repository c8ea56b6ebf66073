"""
Themes for rayfield-qt - colors, fonts, and styling helpers.
"""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor, QFont

from ..errors import SettingsError


# =============================================================================
# SHARED PALETTE
# =============================================================================

# Colors that do not change between themes
SWITCH_OFF = QColor(100, 100, 100)
TRACK = QColor(100, 100, 100)
CLOSE_BUTTON = QColor(255, 100, 100)
WHITE = QColor(255, 255, 255)
SHADOW = QColor(0, 0, 0, 50)

FONT_FAMILY = "Segoe UI"


# =============================================================================
# THEME CLASS
# =============================================================================


@dataclass(frozen=True)
class Theme:
    """One of the two palettes a library instance can draw with."""

    name: str
    background: QColor
    element_background: QColor
    text_color: QColor
    accent_color: QColor

    # Font helpers
    @staticmethod
    def font(size: int = 11, bold: bool = False) -> QFont:
        weight = QFont.Weight.Bold if bold else QFont.Weight.Normal
        return QFont(FONT_FAMILY, size, weight)

    @staticmethod
    def css_font(size: int = 11, bold: bool = False) -> str:
        weight = "bold" if bold else "normal"
        return f"font-family: '{FONT_FAMILY}'; font-size: {size}px; font-weight: {weight};"


def css_color(color: QColor) -> str:
    """Format a QColor for a Qt stylesheet."""
    return f"rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()})"


DARK = Theme(
    name="dark",
    background=QColor(25, 25, 25),
    element_background=QColor(35, 35, 35),
    text_color=QColor(240, 240, 240),
    accent_color=QColor(50, 138, 220),
)

LIGHT = Theme(
    name="light",
    background=QColor(245, 245, 245),
    element_background=QColor(240, 240, 240),
    text_color=QColor(40, 40, 40),
    accent_color=QColor(100, 150, 200),
)

THEMES: dict[str, Theme] = {
    "dark": DARK,
    "light": LIGHT,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    try:
        return THEMES[name.lower()]
    except (KeyError, AttributeError):
        raise SettingsError(
            f"Unknown theme {name!r}, expected one of: {', '.join(THEMES)}"
        ) from None
