"""
Core functionality - widget state, callback guarding, logging.
"""

from .callbacks import CallbackResult, invoke_callback, safe_callback
from .logging_setup import configure_logging, get_logger
from .state import (
    ToggleState,
    SliderState,
    clamp,
    snap_to_increment,
    fraction_to_value,
    value_to_fraction,
    format_value,
)

__all__ = [
    "CallbackResult",
    "invoke_callback",
    "safe_callback",
    "configure_logging",
    "get_logger",
    "ToggleState",
    "SliderState",
    "clamp",
    "snap_to_increment",
    "fraction_to_value",
    "value_to_fraction",
    "format_value",
]
