"""Qt host adapters — widget hierarchy capabilities and pointer subscriptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6 import sip
from PyQt6.QtCore import QEvent, QObject, QPointF, Qt
from PyQt6.QtGui import QMouseEvent, QResizeEvent
from PyQt6.QtWidgets import QAbstractScrollArea, QScrollArea, QWidget

from pixelprobe.core.geometry import Point, Rect
from pixelprobe.core.surface import SurfaceTree

if TYPE_CHECKING:
    from pixelprobe.core.session import PixelProbe


class QtWidgetTree(SurfaceTree):
    """SurfaceTree over a live QWidget hierarchy."""

    def children(self, node: QWidget) -> list[QWidget]:
        return [c for c in node.children() if isinstance(c, QWidget)]

    def parent(self, node: QWidget) -> QWidget | None:
        return node.parentWidget()

    def bounds(self, node: QWidget) -> Rect:
        return Rect(0, 0, max(0, node.width()), max(0, node.height()))

    def is_visible(self, node: QWidget) -> bool:
        return node.isVisible()

    def is_scrollable(self, node: QWidget) -> bool:
        return isinstance(node, QAbstractScrollArea)

    def viewed_content(self, node: QWidget) -> QWidget | None:
        if isinstance(node, QScrollArea):
            return node.widget()
        if isinstance(node, QAbstractScrollArea):
            return node.viewport()
        return None

    def map_point(self, source: QWidget, point: Point, target: QWidget) -> Point:
        # Global coordinates work for any pair of widgets, related or not
        mapped = target.mapFromGlobal(source.mapToGlobal(QPointF(point.x, point.y)))
        return Point(mapped.x(), mapped.y())


class PointerSubscription(QObject):
    """Event filter that forwards one surface's pointer moves to a probe.

    Installing it turns on mouse tracking and the crosshair cursor for the
    surface; :meth:`release` restores both.  Leaving the surface clears the
    live readout.  A surface that collapses to zero size or is destroyed
    detaches the probe.
    """

    def __init__(self, surface: QWidget, probe: PixelProbe) -> None:
        super().__init__()
        self._surface: QWidget | None = surface
        self._probe = probe
        self._had_mouse_tracking = surface.hasMouseTracking()

        surface.setMouseTracking(True)
        surface.setCursor(Qt.CursorShape.CrossCursor)
        surface.installEventFilter(self)
        surface.destroyed.connect(self._on_surface_destroyed)

    @property
    def surface(self) -> QWidget | None:
        return self._surface

    @property
    def is_active(self) -> bool:
        return self._surface is not None

    def eventFilter(self, obj: QObject | None, event: QEvent | None) -> bool:  # noqa: N802
        if obj is None or event is None or obj is not self._surface:
            return False
        etype = event.type()
        if etype == QEvent.Type.MouseMove and isinstance(event, QMouseEvent):
            pos = event.position()
            self._probe.on_pointer_move(Point(pos.x(), pos.y()), obj)
        elif etype == QEvent.Type.Leave:
            self._probe.on_pointer_exit()
        elif etype == QEvent.Type.Resize and isinstance(event, QResizeEvent):
            if event.size().isEmpty():
                self._probe.detach()
        return False

    def release(self) -> None:
        surface = self._surface
        self._surface = None
        if surface is None or sip.isdeleted(surface):
            return
        surface.removeEventFilter(self)
        surface.destroyed.disconnect(self._on_surface_destroyed)
        surface.unsetCursor()
        surface.setMouseTracking(self._had_mouse_tracking)

    def _on_surface_destroyed(self, _obj: QObject | None = None) -> None:
        self._surface = None
        self._probe.detach()


def subscribe_pointer(surface: QWidget, probe: PixelProbe) -> PointerSubscription:
    """Subscription factory passed to :meth:`PixelProbe.attach`."""
    return PointerSubscription(surface, probe)
