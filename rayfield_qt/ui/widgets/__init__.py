"""
Window widgets - each returns a handle with ``element`` and ``set()``.
"""

from .base import WidgetHandle
from .button import Button, ButtonElement
from .toggle import Toggle, ToggleElement, SwitchElement
from .slider import Slider, SliderElement, TrackElement

__all__ = [
    "WidgetHandle",
    "Button",
    "ButtonElement",
    "Toggle",
    "ToggleElement",
    "SwitchElement",
    "Slider",
    "SliderElement",
    "TrackElement",
]
