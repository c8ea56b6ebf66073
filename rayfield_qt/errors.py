"""
Exception types raised by rayfield-qt.
"""

from __future__ import annotations


class RayfieldError(Exception):
    """Base class for all library errors."""


class SettingsError(RayfieldError, ValueError):
    """Raised when a window, widget or config section is malformed."""


class WidgetDestroyedError(RayfieldError, RuntimeError):
    """Raised when a handle is used after its window was disposed."""
