"""Tests for the QWidget tree adapter and pointer subscriptions."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QApplication, QLabel, QScrollArea, QWidget
from pytestqt.qtbot import QtBot

from pixelprobe.config.constants import EMPTY_READOUT
from pixelprobe.core.discovery import discover, resolve_viewing_surface
from pixelprobe.core.geometry import Point, Rect
from pixelprobe.core.session import PixelProbe
from pixelprobe.ui.widget_tree import PointerSubscription, QtWidgetTree, subscribe_pointer


class SolidBitmap:
    width = 100
    height = 50

    def sample(self, x: int, y: int) -> int | None:
        return 0xFF102030


@pytest.fixture()
def tree() -> QtWidgetTree:
    return QtWidgetTree()


@pytest.fixture()
def editor(qtbot: QtBot) -> tuple[QWidget, QLabel, QWidget]:
    """Top-level editor with a toolbar strip and a 200x100 image label."""
    root = QWidget()
    qtbot.addWidget(root)
    root.resize(400, 300)
    toolbar = QWidget(root)
    toolbar.setGeometry(0, 0, 400, 30)
    canvas = QLabel(root)
    canvas.setGeometry(10, 40, 200, 100)
    root.show()
    return root, canvas, toolbar


def _move(widget: QWidget, x: float, y: float) -> None:
    event = QMouseEvent(
        QEvent.Type.MouseMove,
        QPointF(x, y),
        QPointF(x, y),
        Qt.MouseButton.NoButton,
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
    )
    QApplication.sendEvent(widget, event)


def test_children_and_parent(tree: QtWidgetTree, editor: tuple[QWidget, QLabel, QWidget]) -> None:
    root, canvas, toolbar = editor
    assert tree.children(root) == [toolbar, canvas]
    assert tree.parent(canvas) is root
    assert tree.parent(root) is None
    assert tree.is_leaf(canvas)
    assert not tree.is_leaf(root)


def test_bounds_are_local(tree: QtWidgetTree, editor: tuple[QWidget, QLabel, QWidget]) -> None:
    _root, canvas, _toolbar = editor
    assert tree.bounds(canvas) == Rect(0, 0, 200, 100)
    assert tree.is_visible(canvas)


def test_discover_finds_label(tree: QtWidgetTree, editor: tuple[QWidget, QLabel, QWidget]) -> None:
    root, canvas, _toolbar = editor
    match = discover(tree, root, 100, 50)
    assert match is not None
    assert match.node is canvas


def test_hidden_widget_not_discovered(
    tree: QtWidgetTree, editor: tuple[QWidget, QLabel, QWidget]
) -> None:
    root, canvas, _toolbar = editor
    canvas.hide()
    assert discover(tree, root, 100, 50) is None


def test_map_point_between_siblings(
    tree: QtWidgetTree, editor: tuple[QWidget, QLabel, QWidget]
) -> None:
    _root, canvas, toolbar = editor
    mapped = tree.map_point(toolbar, Point(20, 45), canvas)
    assert (mapped.x, mapped.y) == (10, 5)


def test_scroll_area_resolution(qtbot: QtBot, tree: QtWidgetTree) -> None:
    area = QScrollArea()
    qtbot.addWidget(area)
    area.resize(300, 300)
    content = QWidget()
    content.setFixedSize(500, 500)
    inner = QLabel(content)
    inner.setGeometry(50, 50, 200, 100)
    area.setWidget(content)
    area.show()

    assert tree.is_scrollable(area)
    assert tree.viewed_content(area) is content
    viewport = area.viewport()
    assert viewport is not None
    assert resolve_viewing_surface(tree, viewport, 100, 50) is inner


def test_subscription_forwards_moves(editor: tuple[QWidget, QLabel, QWidget]) -> None:
    root, canvas, _toolbar = editor
    texts: list[str] = []
    probe = PixelProbe(QtWidgetTree(), sink=texts.append)
    probe.attach(root, SolidBitmap(), subscribe=subscribe_pointer)

    assert canvas.hasMouseTracking()
    assert canvas.cursor().shape() == Qt.CursorShape.CrossCursor

    _move(canvas, 150, 75)
    assert probe.current_readout_text() == "x: 75, y: 37 RGBA(16,32,48,255) HEX #102030"
    assert texts == [probe.current_readout_text()]


def test_release_restores_surface(editor: tuple[QWidget, QLabel, QWidget]) -> None:
    root, canvas, _toolbar = editor
    probe = PixelProbe(QtWidgetTree())
    attachment = probe.attach(root, SolidBitmap(), subscribe=subscribe_pointer)
    subscription = attachment.subscription
    assert isinstance(subscription, PointerSubscription)

    probe.detach()
    assert not subscription.is_active
    assert not canvas.hasMouseTracking()
    assert canvas.cursor().shape() == Qt.CursorShape.ArrowCursor

    _move(canvas, 150, 75)
    assert probe.current_readout_text() == EMPTY_READOUT


def test_zero_size_surface_detaches(editor: tuple[QWidget, QLabel, QWidget]) -> None:
    root, canvas, _toolbar = editor
    probe = PixelProbe(QtWidgetTree())
    probe.attach(root, SolidBitmap(), subscribe=subscribe_pointer)
    _move(canvas, 150, 75)

    canvas.resize(0, 0)
    assert not probe.is_attached
    assert probe.current_readout_text() == EMPTY_READOUT


def test_leave_clears_readout(editor: tuple[QWidget, QLabel, QWidget]) -> None:
    root, canvas, _toolbar = editor
    probe = PixelProbe(QtWidgetTree())
    probe.attach(root, SolidBitmap(), subscribe=subscribe_pointer)
    _move(canvas, 150, 75)

    QApplication.sendEvent(canvas, QEvent(QEvent.Type.Leave))
    assert probe.current_readout_text() == EMPTY_READOUT
