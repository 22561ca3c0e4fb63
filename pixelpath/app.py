# File: pixelpath/app.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-15
# Purpose: Entry-point de la aplicación (GUI).
# Notes: La sesión del editor se crea acá y se pasa a la ventana (sin estado global).
from __future__ import annotations

import os
import sys

from PySide6.QtWidgets import QApplication

from pixelpath.core.editor import EditorSession
from pixelpath.core.settings import ENV_LOG_LEVEL, AppSettings, apply_project_settings
from pixelpath.core.version import APP_VERSION
from pixelpath.ui.main_window import MainWindow
from pixelpath.utils.log import get_logger, level_from_name, setup_logging

log = get_logger(__name__)


def main() -> int:
    # Project-level defaults (repo-local): pixelpath_settings.json -> env
    apply_project_settings(logger=log, prefer_env=True)
    setup_logging(level=level_from_name(os.environ.get(ENV_LOG_LEVEL)))

    settings = AppSettings.load()
    session = EditorSession(echo_state=settings.echo_state)

    app = QApplication(sys.argv)
    w = MainWindow(session, settings)
    w.show()
    log.info("PixelPath iniciado (v%s)", APP_VERSION)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
