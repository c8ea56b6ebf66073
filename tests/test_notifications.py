import time

import pytest
from PyQt6.QtTest import QTest
from PyQt6.QtWidgets import QApplication

from rayfield_qt import NotificationSettings, SettingsError


def _screen_right():
    geo = QApplication.primaryScreen().availableGeometry()
    return geo.x() + geo.width()


def test_notify_returns_immediately(library):
    start = time.monotonic()
    first = library.notify(title="One", content="first", duration=3)
    second = library.notify(title="Two", content="second", duration=3)
    assert time.monotonic() - start < 1.0

    assert library.notifications.active == [first, second]
    assert first.alive and second.alive


def test_toasts_start_off_screen_and_stack(library):
    first = library.notify(title="One", duration=3)
    second = library.notify(title="Two", duration=3)

    right = _screen_right()
    assert first.x() == right
    assert second.x() == right
    assert first.rest_pos.x() == right - 300 - 20
    assert second.rest_pos.y() == first.rest_pos.y() + 60 + 10


def test_toast_content(library):
    toast = library.notify({"Title": "Saved", "Content": "All good", "Duration": 3})
    assert toast.title_label.text() == "Saved"
    assert toast.content_label.text() == "All good"


def test_default_title(library):
    toast = library.notify()
    assert toast.title == "Notification"
    assert toast.content == ""


def test_overlapping_toasts_run_independently(library):
    dismissed = []
    first = library.notify(title="One", duration=0.1)
    second = library.notify(title="Two", duration=0.1)
    for toast in (first, second):
        toast.dismissed.connect(lambda t: dismissed.append(t.title))

    QTest.qWait(30)
    # Both are still on screen; neither waited for the other
    assert len(library.notifications.active) == 2

    QTest.qWait(900)
    assert sorted(dismissed) == ["One", "Two"]
    assert library.notifications.active == []
    assert not first.alive and not second.alive


def test_configured_default_duration(library):
    toast = library.notify(title="Default")
    QTest.qWait(900)
    assert not toast.alive


def test_slot_freed_after_dismissal(library):
    first = library.notify(title="One", duration=0.1)
    QTest.qWait(600)
    assert not first.alive
    second = library.notify(title="Two", duration=3)
    assert second.rest_pos.y() == first.rest_pos.y()


def test_bad_notification_settings(library):
    with pytest.raises(SettingsError):
        library.notify(duration=-2)
    with pytest.raises(SettingsError):
        library.notify({"Colour": "red"})
    with pytest.raises(TypeError):
        library.notify(NotificationSettings(), title="both")
