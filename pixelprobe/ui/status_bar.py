"""ProbeStatusBar — displays the pixel readout, zoom level, and hints."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QStatusBar

from pixelprobe.config.constants import EMPTY_READOUT, ZOOM_DEFAULT


class ProbeStatusBar(QStatusBar):
    """Status bar whose readout label is the probe's display sink."""

    def __init__(self) -> None:
        super().__init__()
        self._readout_label = QLabel(EMPTY_READOUT)
        self._hint_label = QLabel("")
        self._zoom_label = QLabel(f"Zoom: {ZOOM_DEFAULT}%")

        # Readout is the leftmost widget
        self.addWidget(self._readout_label, 1)
        self.addPermanentWidget(self._hint_label)
        self.addPermanentWidget(self._zoom_label)

    @property
    def readout_text(self) -> str:
        return self._readout_label.text()

    @property
    def hint_text(self) -> str:
        return self._hint_label.text()

    def set_readout(self, text: str) -> None:
        self._readout_label.setText(text)

    def set_readout_tooltip(self, text: str | None) -> None:
        self._readout_label.setToolTip(text or "")

    def set_zoom(self, percent: int) -> None:
        self._zoom_label.setText(f"Zoom: {percent}%")

    def set_hint(self, text: str) -> None:
        """Set a context-sensitive hint message in the status bar."""
        self._hint_label.setText(text)
