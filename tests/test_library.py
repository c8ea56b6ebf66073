import pytest

from rayfield_qt import Config, Library, SettingsError
from rayfield_qt.ui.theme import DARK, LIGHT


def test_default_theme_is_dark(library):
    assert library.theme is DARK
    assert library.create_window().theme is DARK


def test_set_theme_affects_new_windows_only(library):
    old = library.create_window(name="Old")
    library.set_theme("light")
    new = library.create_window(name="New")
    assert old.theme is DARK
    assert new.theme is LIGHT
    assert library.config.theme == "light"
    assert library.notifications.theme is LIGHT


def test_independent_libraries(qapp):
    dark = Library(Config(theme="dark"))
    light = Library(Config(theme="light"))
    assert dark.theme is DARK
    assert light.theme is LIGHT


def test_unknown_theme(qapp):
    with pytest.raises(SettingsError):
        Library(Config(theme="neon"))


def test_window_mapping_settings(library):
    window = library.create_window({"Name": "Mapped"})
    assert window.name == "Mapped"
    assert window in library.windows


def test_flags_registry(library):
    window = library.create_window()
    toggle = window.create_toggle(name="Fly", flag="fly")
    slider = window.create_slider(name="Speed", flag="speed", range=(0, 10))
    window.create_button(name="No flag")

    assert library.flags == {"fly": toggle, "speed": slider}
    toggle.element.clicked.emit()
    assert library.flags["fly"].value is True


def test_dispose_unregisters_window_and_flags(library):
    window = library.create_window()
    window.create_toggle(flag="fly")
    window.dispose()
    assert window not in library.windows
    assert library.flags == {}


def test_qt_close_unregisters_window_and_flags(library):
    window = library.create_window()
    toggle = window.create_toggle(flag="fly")
    window.close()
    assert not toggle.alive
    assert window not in library.windows
    assert library.flags == {}
