"""Shared pytest fixtures."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtGui import QColor, QImage  # noqa: E402
from pytestqt.qtbot import QtBot  # noqa: E402

from pixelprobe.main_window import MainWindow  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path) -> None:
    """Keep QSettings writes out of the user's real configuration."""
    QSettings.setPath(
        QSettings.Format.NativeFormat, QSettings.Scope.UserScope, str(tmp_path / "settings")
    )


@pytest.fixture()
def main_window(qtbot: QtBot) -> MainWindow:
    """Create a MainWindow instance managed by qtbot."""
    window = MainWindow()
    qtbot.addWidget(window)
    return window


@pytest.fixture()
def png_path(tmp_path: Path) -> Path:
    """A 100x50 opaque PNG filled with #102030."""
    image = QImage(100, 50, QImage.Format.Format_ARGB32)
    image.fill(QColor(16, 32, 48))
    path = tmp_path / "sample.png"
    assert image.save(str(path))
    return path
