"""
Property tweens on top of QPropertyAnimation, with three named presets.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from PyQt6 import sip
from PyQt6.QtCore import (
    QAbstractAnimation,
    QEasingCurve,
    QObject,
    QParallelAnimationGroup,
    QPropertyAnimation,
)

from ..errors import SettingsError


class TweenPreset(Enum):
    """Named duration (ms) presets, all exponential ease-out."""
    FAST = 300
    NORMAL = 500
    SLOW = 700

    @property
    def seconds(self) -> float:
        return self.value / 1000.0

    @classmethod
    def resolve(cls, preset: Union[TweenPreset, str, None]) -> TweenPreset:
        if preset is None:
            return cls.NORMAL
        if isinstance(preset, cls):
            return preset
        try:
            return cls[str(preset).upper()]
        except KeyError:
            raise SettingsError(f"Unknown tween preset: {preset!r}") from None


EASING = QEasingCurve.Type.OutExpo


class Tween:
    """A group of property animations on one target, started by play()."""

    def __init__(self, target: QObject, properties: dict[str, Any], preset: TweenPreset):
        self._target = target
        self._preset = preset
        self._group = QParallelAnimationGroup(target)
        for name, end_value in properties.items():
            anim = QPropertyAnimation(target, name.encode(), self._group)
            anim.setDuration(preset.value)
            anim.setEasingCurve(EASING)
            anim.setEndValue(end_value)
            self._group.addAnimation(anim)
        self._group.finished.connect(self._group.deleteLater)

    @property
    def preset(self) -> TweenPreset:
        return self._preset

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return self._preset.seconds

    @property
    def finished(self):
        return self._group.finished

    @property
    def running(self) -> bool:
        if sip.isdeleted(self._group):
            return False
        return self._group.state() == QAbstractAnimation.State.Running

    def play(self) -> Tween:
        self._group.start()
        return self

    def stop(self) -> None:
        if not sip.isdeleted(self._group) and self.running:
            self._group.stop()
            self._group.deleteLater()


def create_tween(
    target: QObject,
    properties: dict[str, Any],
    preset: Union[TweenPreset, str, None] = None,
) -> Tween:
    """Build (but do not start) a tween of target's Qt properties."""
    return Tween(target, properties, TweenPreset.resolve(preset))
