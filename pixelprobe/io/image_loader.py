"""Image loading — raster detection by suffix and QImage-backed bitmaps."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QImage

from pixelprobe.config.constants import IMAGE_EXTENSIONS

log = logging.getLogger(__name__)


def is_image_file(path: Path | str | None) -> bool:
    """Whether *path* names a raster format the probe can read."""
    if path is None:
        return False
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS


def load_image(path: Path) -> QImage:
    """Decode the image at *path*.

    Raises ``ValueError`` when the suffix is not a supported raster format
    or the file cannot be decoded.
    """
    if not is_image_file(path):
        raise ValueError(f"not a supported image file: {path.name}")
    image = QImage(str(path))
    if image.isNull():
        raise ValueError(f"could not decode image: {path}")
    log.info("loaded %s (%dx%d)", path.name, image.width(), image.height())
    return image


class QImageBitmap:
    """Read-only bitmap view of a QImage."""

    def __init__(self, image: QImage) -> None:
        self._image = image

    @property
    def image(self) -> QImage:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width()

    @property
    def height(self) -> int:
        return self._image.height()

    def sample(self, x: int, y: int) -> int | None:
        """ARGB value at (*x*, *y*), or ``None`` outside the image."""
        if self._image.isNull() or not self._image.valid(x, y):
            return None
        return self._image.pixel(x, y)
