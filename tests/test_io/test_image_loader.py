"""Tests for image detection, decoding and the QImage bitmap adapter."""

from pathlib import Path

import pytest
from PyQt6.QtGui import QColor, QImage

from pixelprobe.io.image_loader import QImageBitmap, is_image_file, load_image


@pytest.mark.parametrize("name", ["a.png", "b.JPG", "c.jpeg", "d.gif", "e.bmp", "f.webp"])
def test_image_suffixes_recognised(name: str) -> None:
    assert is_image_file(name)


@pytest.mark.parametrize("name", ["notes.txt", "archive.png.zip", "noext", None])
def test_other_files_rejected(name: str | None) -> None:
    assert not is_image_file(name)


def test_load_image(png_path: Path) -> None:
    image = load_image(png_path)
    assert (image.width(), image.height()) == (100, 50)


def test_load_rejects_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    with pytest.raises(ValueError, match="not a supported image"):
        load_image(path)


def test_load_rejects_corrupt_data(tmp_path: Path) -> None:
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(ValueError, match="could not decode"):
        load_image(path)


def test_bitmap_samples_argb() -> None:
    image = QImage(4, 3, QImage.Format.Format_ARGB32)
    image.fill(QColor(16, 32, 48, 128))
    bitmap = QImageBitmap(image)
    assert (bitmap.width, bitmap.height) == (4, 3)
    assert bitmap.sample(3, 2) == 0x80102030
    assert bitmap.sample(4, 0) is None
    assert bitmap.sample(-1, 0) is None
