import os

import pytest

from arcseekbar.core import ArcSeekBar, ArcSeekBarConfig

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6 import QtWidgets
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def events():
    return []


@pytest.fixture
def seekbar(events):
    """300x300 seek bar with default config: center (150, 150), radius 130."""
    bar = ArcSeekBar(ArcSeekBarConfig())
    bar.on_size_changed(300, 300)
    bar.add_listener(events.append)
    return bar
