"""ImageView — scrollable, zoomable display of a single raster image."""

from __future__ import annotations

import bisect

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QImage, QPixmap
from PyQt6.QtWidgets import QLabel, QScrollArea, QWidget

from pixelprobe.config.constants import ZOOM_DEFAULT, ZOOM_MAX, ZOOM_MIN, ZOOM_STEPS


class ImageView(QScrollArea):
    """QScrollArea with an image canvas and zoom (10%-3200%).

    The canvas label is always sized to exactly ``round(image size * zoom)``
    so it is the widget that renders the bitmap.

    Signals
    -------
    zoom_changed(int)
        Emitted with the new zoom percentage after every zoom change.
    """

    zoom_changed = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._image: QImage | None = None
        self._zoom_pct: int = ZOOM_DEFAULT

        self._canvas = QLabel()
        self._canvas.setScaledContents(True)
        self._canvas.setFixedSize(1, 1)
        self.setWidget(self._canvas)
        self.setWidgetResizable(False)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)

    @property
    def canvas(self) -> QLabel:
        return self._canvas

    @property
    def image(self) -> QImage | None:
        return self._image

    def set_image(self, image: QImage | None) -> None:
        self._image = image
        if image is None:
            self._canvas.clear()
        else:
            self._canvas.setPixmap(QPixmap.fromImage(image))
        self._update_canvas_size()

    # --- zoom ---

    @property
    def zoom_percent(self) -> int:
        return self._zoom_pct

    def zoom_factor(self) -> float | None:
        """Current display zoom, or ``None`` when no image is shown."""
        if self._image is None:
            return None
        return self._zoom_pct / 100.0

    def set_zoom(self, percent: int) -> None:
        """Set the zoom level to *percent* (clamped to ZOOM_MIN..ZOOM_MAX)."""
        percent = max(ZOOM_MIN, min(ZOOM_MAX, percent))
        if percent == self._zoom_pct:
            return
        self._zoom_pct = percent
        self._update_canvas_size()
        self.zoom_changed.emit(self._zoom_pct)

    def _next_zoom_step(self) -> int:
        idx = bisect.bisect_right(ZOOM_STEPS, self._zoom_pct)
        if idx < len(ZOOM_STEPS):
            return ZOOM_STEPS[idx]
        return ZOOM_STEPS[-1]

    def _prev_zoom_step(self) -> int:
        idx = bisect.bisect_left(ZOOM_STEPS, self._zoom_pct) - 1
        if idx >= 0:
            return ZOOM_STEPS[idx]
        return ZOOM_STEPS[0]

    def zoom_in(self) -> None:
        self.set_zoom(self._next_zoom_step())

    def zoom_out(self) -> None:
        self.set_zoom(self._prev_zoom_step())

    def actual_size(self) -> None:
        self.set_zoom(ZOOM_DEFAULT)

    def fit_to_window(self) -> None:
        """Pick the largest zoom at which the whole image fits the viewport."""
        vp = self.viewport()
        if self._image is None or vp is None:
            return
        fx = vp.width() / max(1, self._image.width())
        fy = vp.height() / max(1, self._image.height())
        self.set_zoom(int(min(fx, fy) * 100))

    def _update_canvas_size(self) -> None:
        if self._image is None:
            self._canvas.setFixedSize(1, 1)
            return
        factor = self._zoom_pct / 100.0
        w = max(1, round(self._image.width() * factor))
        h = max(1, round(self._image.height() * factor))
        self._canvas.setFixedSize(w, h)
