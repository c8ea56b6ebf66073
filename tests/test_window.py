import pytest
from PyQt6 import sip
from PyQt6.QtCore import QPoint
from PyQt6.QtTest import QTest

from rayfield_qt import WidgetDestroyedError, Window


def test_window_structure(window):
    assert isinstance(window, Window)
    assert window.title_bar.title == "Test Window"
    assert window.title_bar.close_button.text() == "×"
    assert window.content.layout().spacing() == 5


def test_default_window_title(library):
    assert library.create_window().title_bar.title == "Rayfield"


def test_widgets_live_in_content(window):
    button = window.create_button(name="A")
    toggle = window.create_toggle(name="B")
    slider = window.create_slider(name="C")
    layout = window.content.layout()
    assert [layout.indexOf(h.element) for h in (button, toggle, slider)] == [0, 1, 2]
    assert window.handles == [button, toggle, slider]
    assert all(window.content.isAncestorOf(h.element) for h in window.handles)


def test_title_bar_drag_moves_window(window):
    window.hide()
    window.move(QPoint(100, 100))
    bar = window.title_bar

    bar.begin_drag(QPoint(10, 10))
    assert bar.dragging
    bar.drag_to(QPoint(40, 25))
    assert window.pos() == QPoint(130, 115)
    bar.drag_to(QPoint(5, 5))
    assert window.pos() == QPoint(95, 95)

    bar.end_drag()
    assert not bar.dragging
    bar.drag_to(QPoint(500, 500))
    assert window.pos() == QPoint(95, 95)


def test_dispose_destroys_widgets(window):
    button = window.create_button(name="A")
    slider = window.create_slider(name="B")
    elements = [button.element, slider.element, window.content]

    window.dispose()
    assert window.is_disposed
    assert not button.alive
    assert not slider.alive
    with pytest.raises(WidgetDestroyedError):
        button.set("again")
    with pytest.raises(WidgetDestroyedError):
        slider.set(10)

    QTest.qWait(50)
    assert all(sip.isdeleted(element) for element in elements)


def test_close_button_animates_then_disposes(window):
    toggle = window.create_toggle(name="A")
    disposed = []
    window.disposed.connect(lambda: disposed.append(True))

    window.title_bar.close_button.click()
    assert not window.is_disposed
    assert toggle.alive

    QTest.qWait(700)
    assert window.is_disposed
    assert disposed == [True]
    assert not toggle.alive


def test_close_is_idempotent(window):
    disposed = []
    window.disposed.connect(lambda: disposed.append(True))
    window.close_animated()
    window.close_animated()
    QTest.qWait(700)
    window.dispose()
    assert disposed == [True]


def test_create_on_disposed_window_fails(window):
    window.dispose()
    with pytest.raises(WidgetDestroyedError):
        window.create_button(name="late")


def test_close_animation_shrinks_to_nothing(window):
    window.create_slider(name="A")
    sizes = []
    window.disposed.connect(lambda: sizes.append(window.size()))

    window.close_animated()
    QTest.qWait(700)
    assert len(sizes) == 1
    assert sizes[0].width() < 40
    assert sizes[0].height() < 40


def test_qt_close_disposes(window):
    toggle = window.create_toggle(name="A")
    window.close()
    assert window.is_disposed
    assert not toggle.alive
    with pytest.raises(WidgetDestroyedError):
        toggle.set(True)
