import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from rayfield_qt import Config, Library, NotificationsConfig
from rayfield_qt.ui.theme import DARK


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def theme():
    return DARK


@pytest.fixture
def library(qapp):
    # Short timings so notification tests finish quickly
    config = Config(notifications=NotificationsConfig(default_duration=0.1, exit_delay=0.1))
    lib = Library(config)
    yield lib
    lib.notifications.clear_all()
    for window in lib.windows:
        window.dispose()


@pytest.fixture
def window(library):
    return library.create_window(name="Test Window")
