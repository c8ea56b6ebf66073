import pytest
from PyQt6.QtCore import QSize
from PyQt6.QtTest import QTest
from PyQt6.QtWidgets import QFrame, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget

from rayfield_qt import SettingsError
from rayfield_qt.ui.elements import create_element
from rayfield_qt.ui.tween import TweenPreset, create_tween


# =============================================================================
# Element factory
# =============================================================================


def test_kind_tags(qapp):
    assert isinstance(create_element("Frame"), QFrame)
    assert isinstance(create_element("TextLabel"), QLabel)
    assert isinstance(create_element("TextButton"), QPushButton)
    assert isinstance(create_element("ScrollingFrame"), QScrollArea)


def test_properties_are_assigned(qapp):
    label = create_element("TextLabel", {"objectName": "Title", "text": "Hello", "wordWrap": True})
    assert label.objectName() == "Title"
    assert label.text() == "Hello"
    assert label.wordWrap()


def test_tuple_values_are_spread(qapp):
    frame = create_element("Frame", {"fixedSize": (30, 20)})
    assert frame.size() == QSize(30, 20)


def test_widget_class_as_kind(qapp):
    button = create_element(QPushButton, {"text": "Go"})
    assert button.text() == "Go"


def test_parent_with_layout_appends(qapp):
    parent = QWidget()
    layout = QVBoxLayout(parent)
    first = create_element("Frame", {}, parent)
    second = create_element("TextLabel", {"text": "b"}, parent)
    assert layout.indexOf(first) == 0
    assert layout.indexOf(second) == 1
    assert second.parent() is parent


def test_parent_without_layout_reparents(qapp):
    parent = QWidget()
    child = create_element("Frame", {}, parent)
    assert child.parent() is parent


def test_unknown_kind(qapp):
    with pytest.raises(SettingsError):
        create_element("Hologram")


def test_unknown_property_fails(qapp):
    with pytest.raises(AttributeError):
        create_element("Frame", {"sparkle": 3})


# =============================================================================
# Tweens
# =============================================================================


@pytest.mark.parametrize("name, seconds", [("fast", 0.3), ("normal", 0.5), ("slow", 0.7)])
def test_presets(name, seconds):
    assert TweenPreset.resolve(name).seconds == seconds


def test_default_preset_is_normal():
    assert TweenPreset.resolve(None) is TweenPreset.NORMAL


def test_unknown_preset():
    with pytest.raises(SettingsError):
        TweenPreset.resolve("ludicrous")


def test_tween_runs_without_blocking(qapp):
    widget = QWidget()
    tween = create_tween(widget, {"minimumWidth": 50}, "fast")
    assert tween.duration == 0.3
    assert not tween.running

    tween.play()
    assert tween.running
    assert widget.minimumWidth() < 50

    QTest.qWait(500)
    assert widget.minimumWidth() == 50


def test_tween_stop(qapp):
    widget = QWidget()
    tween = create_tween(widget, {"minimumWidth": 80}, TweenPreset.SLOW).play()
    tween.stop()
    assert not tween.running
    QTest.qWait(50)
    assert widget.minimumWidth() < 80
