"""
Typed settings for windows, widgets and notifications.

Every settings object validates itself on construction, so a malformed
widget fails where it is declared rather than inside an input handler.
The ``from_mapping`` constructors accept the PascalCase keys used by
Rayfield scripts (``Name``, ``Callback``, ``CurrentValue``, ...).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from numbers import Real
from typing import Any, Callable, ClassVar, Optional

from .errors import SettingsError


def _check_callback(callback: Any) -> None:
    if callback is not None and not callable(callback):
        raise SettingsError(f"Callback must be callable, got {type(callback).__name__}")


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise SettingsError(f"{name} must be a number, got {value!r}")


class _MappingSettings:
    """Mixin adding construction from a Rayfield-style PascalCase mapping."""

    _KEYS: ClassVar[dict[str, str]] = {}

    @classmethod
    def from_mapping(cls, mapping: Optional[dict[str, Any]] = None):
        kwargs = {}
        for key, value in (mapping or {}).items():
            attr = cls._KEYS.get(key)
            if attr is None:
                attr = key if key in {f.name for f in fields(cls)} else None
            if attr is None:
                raise SettingsError(f"Unknown {cls.__name__} key: {key!r}")
            kwargs[attr] = value
        return cls(**kwargs)


@dataclass
class WindowSettings(_MappingSettings):
    name: str = "Rayfield"

    _KEYS: ClassVar[dict[str, str]] = {"Name": "name"}


@dataclass
class ButtonSettings(_MappingSettings):
    name: str = "Button"
    callback: Optional[Callable[[], Any]] = None
    flag: Optional[str] = None

    _KEYS: ClassVar[dict[str, str]] = {"Name": "name", "Callback": "callback", "Flag": "flag"}

    def __post_init__(self):
        _check_callback(self.callback)


@dataclass
class ToggleSettings(_MappingSettings):
    name: str = "Toggle"
    current_value: bool = False
    callback: Optional[Callable[[bool], Any]] = None
    flag: Optional[str] = None

    _KEYS: ClassVar[dict[str, str]] = {
        "Name": "name",
        "CurrentValue": "current_value",
        "Callback": "callback",
        "Flag": "flag",
    }

    def __post_init__(self):
        _check_callback(self.callback)
        self.current_value = bool(self.current_value)


@dataclass
class SliderSettings(_MappingSettings):
    name: str = "Slider"
    range: tuple[float, float] = (0, 100)
    increment: Optional[float] = None
    current_value: Optional[float] = None
    callback: Optional[Callable[[float], Any]] = None
    flag: Optional[str] = None

    _KEYS: ClassVar[dict[str, str]] = {
        "Name": "name",
        "Range": "range",
        "Increment": "increment",
        "CurrentValue": "current_value",
        "Callback": "callback",
        "Flag": "flag",
    }

    def __post_init__(self):
        _check_callback(self.callback)

        try:
            minimum, maximum = self.range
        except (TypeError, ValueError) as e:
            raise SettingsError(f"Range must be a (min, max) pair, got {self.range!r}") from e
        _check_number("Range minimum", minimum)
        _check_number("Range maximum", maximum)
        if minimum >= maximum:
            raise SettingsError(f"Range minimum must be below maximum, got {self.range!r}")
        self.range = (minimum, maximum)

        if self.increment is not None:
            _check_number("Increment", self.increment)
            if self.increment <= 0:
                raise SettingsError(f"Increment must be positive, got {self.increment!r}")

        if self.current_value is None:
            self.current_value = minimum
        else:
            _check_number("CurrentValue", self.current_value)

    @property
    def minimum(self) -> float:
        return self.range[0]

    @property
    def maximum(self) -> float:
        return self.range[1]


@dataclass
class NotificationSettings(_MappingSettings):
    title: str = "Notification"
    content: str = ""
    duration: Optional[float] = None  # None means the configured default

    _KEYS: ClassVar[dict[str, str]] = {
        "Title": "title",
        "Content": "content",
        "Duration": "duration",
    }

    def __post_init__(self):
        if self.duration is not None:
            _check_number("Duration", self.duration)
            if self.duration < 0:
                raise SettingsError(f"Duration must not be negative, got {self.duration!r}")
