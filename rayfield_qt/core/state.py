"""
Per-widget value state and the slider arithmetic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


# =============================================================================
# MATH HELPERS
# =============================================================================


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


def snap_to_increment(value: float, increment: float) -> float:
    """Snap to the nearest multiple of increment, ties rounding up."""
    return math.floor(value / increment + 0.5) * increment


def fraction_to_value(
    fraction: float,
    minimum: float,
    maximum: float,
    increment: Optional[float] = None,
) -> float:
    """Map a track fraction onto [minimum, maximum]."""
    fraction = clamp(fraction, 0.0, 1.0)
    value = minimum + (maximum - minimum) * fraction
    if increment:
        value = snap_to_increment(value, increment)
    return clamp(value, minimum, maximum)


def value_to_fraction(value: float, minimum: float, maximum: float) -> float:
    return clamp((value - minimum) / (maximum - minimum), 0.0, 1.0)


def format_value(value: float) -> str:
    """Render a slider value, dropping the decimal point for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.10g}"


# =============================================================================
# WIDGET STATE
# =============================================================================


@dataclass
class ToggleState:
    """Boolean state owned by a toggle handle."""
    value: bool = False

    def flip(self) -> bool:
        self.value = not self.value
        return self.value

    def set(self, value: bool) -> bool:
        self.value = bool(value)
        return self.value


@dataclass
class SliderState:
    """Numeric state owned by a slider handle, always kept inside the range."""
    minimum: float
    maximum: float
    increment: Optional[float] = None
    value: float = 0.0

    def __post_init__(self):
        self.value = clamp(self.value, self.minimum, self.maximum)

    @property
    def fraction(self) -> float:
        return value_to_fraction(self.value, self.minimum, self.maximum)

    def set_value(self, value: float) -> float:
        self.value = clamp(value, self.minimum, self.maximum)
        return self.value

    def set_fraction(self, fraction: float) -> float:
        self.value = fraction_to_value(
            fraction, self.minimum, self.maximum, self.increment
        )
        return self.value
