"""Keyboard shortcut definitions.

Each entry maps a logical action name to a key sequence string
compatible with ``QKeySequence``.
"""

SHORTCUTS: dict[str, str] = {
    # File
    "file.open": "Ctrl+O",
    "file.close": "Ctrl+W",
    "file.quit": "Ctrl+Q",
    # View
    "view.zoom_in": "Ctrl+=",
    "view.zoom_out": "Ctrl+-",
    "view.fit_window": "Ctrl+0",
    "view.actual_size": "Ctrl+1",
    # Probe
    "probe.toggle_lock": "Ctrl+L",
}
