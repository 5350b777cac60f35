"""MainWindow — image viewer hosting the pixel probe."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QCloseEvent, QKeySequence
from PyQt6.QtWidgets import QFileDialog, QMainWindow, QMenu, QMenuBar, QMessageBox

from pixelprobe.config.constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    IMAGE_EXTENSIONS,
)
from pixelprobe.config.settings import AppSettings
from pixelprobe.config.shortcuts import SHORTCUTS
from pixelprobe.core.session import PixelProbe
from pixelprobe.io.image_loader import QImageBitmap, load_image
from pixelprobe.ui.image_view import ImageView
from pixelprobe.ui.status_bar import ProbeStatusBar
from pixelprobe.ui.widget_tree import QtWidgetTree, subscribe_pointer

log = logging.getLogger(__name__)

LOCK_HINT = f"{SHORTCUTS['probe.toggle_lock']}: lock pixel"


class MainWindow(QMainWindow):
    """Primary application window.

    Owns the ImageView, the status bar and the PixelProbe attached to the
    view's canvas.
    """

    def __init__(self) -> None:
        super().__init__()
        self._settings = AppSettings()
        self._current_file: Path | None = None
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self._view = ImageView(self)
        self.setCentralWidget(self._view)

        self._status_bar = ProbeStatusBar()
        self.setStatusBar(self._status_bar)

        self._probe = PixelProbe(QtWidgetTree(), sink=self._status_bar.set_readout)

        self._view.zoom_changed.connect(self._status_bar.set_zoom)
        self._view.zoom_changed.connect(self._update_readout_tooltip)

        self._recent_menu: QMenu | None = None
        self._setup_menus()

        geo = self._settings.window_geometry()
        if geo is not None:
            self.restoreGeometry(geo)

        self._update_title()

    # ---- accessors ----

    @property
    def view(self) -> ImageView:
        return self._view

    @property
    def probe(self) -> PixelProbe:
        return self._probe

    @property
    def status_bar(self) -> ProbeStatusBar:
        return self._status_bar

    @property
    def current_file(self) -> Path | None:
        return self._current_file

    # ---- menus ----

    def _setup_menus(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        self._setup_file_menu(menu_bar)
        self._setup_view_menu(menu_bar)
        self._setup_probe_menu(menu_bar)
        self._setup_help_menu(menu_bar)

    def _setup_file_menu(self, menu_bar: QMenuBar) -> None:
        file_menu = menu_bar.addMenu("&File")
        if file_menu is None:
            return

        open_action = file_menu.addAction("&Open...")
        if open_action is not None:
            open_action.setShortcut(QKeySequence(SHORTCUTS["file.open"]))
            open_action.triggered.connect(self._file_open)

        self._recent_menu = file_menu.addMenu("Recent Files")
        self._update_recent_files_menu()

        close_action = file_menu.addAction("&Close Image")
        if close_action is not None:
            close_action.setShortcut(QKeySequence(SHORTCUTS["file.close"]))
            close_action.triggered.connect(self.close_image)

        file_menu.addSeparator()

        quit_action = file_menu.addAction("&Quit")
        if quit_action is not None:
            quit_action.setShortcut(QKeySequence(SHORTCUTS["file.quit"]))
            quit_action.triggered.connect(self.close)

    def _setup_view_menu(self, menu_bar: QMenuBar) -> None:
        view_menu = menu_bar.addMenu("&View")
        if view_menu is None:
            return

        entries = [
            ("Zoom &In", "view.zoom_in", self._view.zoom_in),
            ("Zoom &Out", "view.zoom_out", self._view.zoom_out),
            ("&Fit to Window", "view.fit_window", self._view.fit_to_window),
            ("&Actual Size", "view.actual_size", self._view.actual_size),
        ]
        for label, key, slot in entries:
            action = view_menu.addAction(label)
            if action is not None:
                action.setShortcut(QKeySequence(SHORTCUTS[key]))
                action.triggered.connect(slot)

    def _setup_probe_menu(self, menu_bar: QMenuBar) -> None:
        probe_menu = menu_bar.addMenu("&Probe")
        if probe_menu is None:
            return

        lock_action = probe_menu.addAction("&Lock Pixel")
        if lock_action is not None:
            lock_action.setShortcut(QKeySequence(SHORTCUTS["probe.toggle_lock"]))
            lock_action.triggered.connect(self.toggle_lock)

    def _setup_help_menu(self, menu_bar: QMenuBar) -> None:
        help_menu = menu_bar.addMenu("&Help")
        if help_menu is None:
            return
        about_action = help_menu.addAction(f"&About {APP_NAME}")
        if about_action is not None:
            about_action.triggered.connect(self._help_about)

    def _update_recent_files_menu(self) -> None:
        if self._recent_menu is None:
            return
        self._recent_menu.clear()
        recent = self._settings.recent_files()
        if not recent:
            no_action = self._recent_menu.addAction("(No recent files)")
            if no_action is not None:
                no_action.setEnabled(False)
            return
        for path_str in recent:
            action = self._recent_menu.addAction(Path(path_str).name)
            if action is not None:
                action.triggered.connect(
                    lambda _checked=False, p=path_str: self.open_image(Path(p))
                )

    # ---- file actions ----

    def _file_open(self) -> None:
        patterns = " ".join(f"*{ext}" for ext in sorted(IMAGE_EXTENSIONS))
        path_str, _ = QFileDialog.getOpenFileName(
            self,
            "Open Image",
            self._settings.last_directory(),
            f"Images ({patterns});;All Files (*)",
        )
        if not path_str:
            return
        self.open_image(Path(path_str))

    def open_image(self, path: Path) -> bool:
        """Load *path* into the view and attach the probe to it."""
        try:
            image = load_image(path)
        except ValueError as e:
            log.warning("open failed: %s", e)
            QMessageBox.critical(self, "Open Error", f"Could not open image:\n{e}")
            return False

        self._current_file = path
        self._view.set_image(image)
        self._probe.attach(
            self._view,
            QImageBitmap(image),
            zoom_provider=self._view.zoom_factor,
            subscribe=subscribe_pointer,
        )
        self._update_readout_tooltip()
        self._status_bar.set_hint(LOCK_HINT)

        self._settings.set_last_directory(str(path.parent))
        self._settings.add_recent_file(str(path))
        self._update_recent_files_menu()
        self._update_title()
        return True

    def close_image(self) -> None:
        self._probe.detach()
        self._current_file = None
        self._view.set_image(None)
        self._update_readout_tooltip()
        self._status_bar.set_hint("")
        self._update_title()

    def toggle_lock(self) -> None:
        self._probe.on_lock_toggle_requested()

    def _help_about(self) -> None:
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} {APP_VERSION}\n\nLive pixel coordinates and colors under the cursor.",
        )

    # ---- helpers ----

    def _update_readout_tooltip(self, _percent: int = 0) -> None:
        tip = self._probe.tooltip_text()
        zoom = self._probe.display_zoom()
        if tip is not None and zoom is not None:
            tip = f"{tip} at {zoom:.0%}"
        self._status_bar.set_readout_tooltip(tip)

    def _update_title(self) -> None:
        name = self._current_file.name if self._current_file else "No Image"
        self.setWindowTitle(f"{name} — {APP_NAME}")

    def closeEvent(self, event: QCloseEvent | None) -> None:  # noqa: N802
        self._probe.detach()
        self._settings.save_window_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
