"""QApplication bootstrap."""

import logging
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pixelprobe.config.constants import APP_NAME, ORG_DOMAIN, ORG_NAME
from pixelprobe.main_window import MainWindow


def main() -> None:
    """Launch the viewer, optionally opening the image given on the command line."""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORG_NAME)
    app.setOrganizationDomain(ORG_DOMAIN)
    window = MainWindow()
    window.show()
    args = app.arguments()[1:]
    if args:
        window.open_image(Path(args[0]))
    sys.exit(app.exec())
