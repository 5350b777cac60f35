"""Persistent application settings backed by QSettings."""

from PyQt6.QtCore import QSettings

from pixelprobe.config.constants import APP_NAME, MAX_RECENT_FILES, ORG_NAME


class AppSettings:
    """Thin wrapper around QSettings for typed access to viewer preferences."""

    def __init__(self) -> None:
        self._qs = QSettings(ORG_NAME, APP_NAME)

    # --- window geometry ---

    def save_window_geometry(self, geometry: bytes) -> None:
        self._qs.setValue("window/geometry", geometry)

    def window_geometry(self) -> bytes | None:
        val = self._qs.value("window/geometry")
        if isinstance(val, bytes):
            return val
        return None

    # --- files ---

    def last_directory(self) -> str:
        val = self._qs.value("files/lastDirectory", "")
        return str(val) if val else ""

    def set_last_directory(self, path: str) -> None:
        self._qs.setValue("files/lastDirectory", path)

    def recent_files(self) -> list[str]:
        val = self._qs.value("files/recent", [])
        if isinstance(val, list):
            return [str(v) for v in val]
        if isinstance(val, str) and val:
            # QSettings collapses single-item lists to a plain string on some backends
            return [val]
        return []

    def set_recent_files(self, paths: list[str]) -> None:
        self._qs.setValue("files/recent", paths)

    def add_recent_file(self, path: str) -> list[str]:
        """Move *path* to the front of the recent list and return the new list."""
        recent = [p for p in self.recent_files() if p != path]
        recent.insert(0, path)
        recent = recent[:MAX_RECENT_FILES]
        self.set_recent_files(recent)
        return recent
