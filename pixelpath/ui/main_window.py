# File: pixelpath/ui/main_window.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-15
# Purpose: Ventana principal: lienzo + menú + barra de estado + destinos de export.
# Notes: El diálogo de guardado cancelado es no-op; errores de E/S no tocan el estado.
from __future__ import annotations

import base64
import sys
from pathlib import Path

from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QFileDialog, QLabel, QMainWindow, QMessageBox, QStatusBar

from pixelpath.core.commands import Command
from pixelpath.core.editor import EditorSession
from pixelpath.core.settings import AppSettings
from pixelpath.core.version import APP_NAME, APP_VERSION
from pixelpath.geom.svgelements_bbox import compute_document_bbox, exceeds_canvas
from pixelpath.svg.exporter import write_svg
from pixelpath.ui.canvas_view import CanvasView
from pixelpath.utils.errors import PixelPathIOError
from pixelpath.utils.log import get_logger

log = get_logger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, session: EditorSession | None = None, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("{} v{}".format(APP_NAME, APP_VERSION))
        self.resize(900, 700)

        self._settings = settings or AppSettings.load()
        self._session = session or EditorSession(echo_state=self._settings.echo_state)
        self._session.set_sink(Command.EXPORT_PRINT, self._export_to_stdout)
        self._session.set_sink(Command.EXPORT_FILE, self._export_to_file)

        self._build_ui()
        self._build_menu()
        self._restore_ui_state()
        self._refresh_status()

    def _build_ui(self) -> None:
        self._canvas = CanvasView(self._session, self)
        self._canvas.set_show_grid(self._settings.effective_show_grid())
        self._canvas.state_changed.connect(self._refresh_status)
        self.setCentralWidget(self._canvas)

        sb = QStatusBar(self)
        self.setStatusBar(sb)
        self._status_label = QLabel("Listo", self)
        sb.addWidget(self._status_label, 1)
        self._state_label = QLabel("", self)
        sb.addPermanentWidget(self._state_label)

        self._canvas.setFocus()

    def _build_menu(self) -> None:
        m_file = self.menuBar().addMenu("&Archivo")

        # Las teclas de edición las atiende el lienzo; acá solo se muestran como ayuda.
        act_export = QAction("&Exportar SVG…\tS", self)
        act_export.triggered.connect(lambda: self._canvas.dispatch(Command.EXPORT_FILE))
        m_file.addAction(act_export)

        act_print = QAction("&Imprimir SVG (salida)\tP", self)
        act_print.triggered.connect(lambda: self._canvas.dispatch(Command.EXPORT_PRINT))
        m_file.addAction(act_print)

        m_file.addSeparator()

        act_exit = QAction("&Salir", self)
        act_exit.setShortcut("Ctrl+Q")
        act_exit.triggered.connect(self.close)
        m_file.addAction(act_exit)

        m_edit = self.menuBar().addMenu("&Edición")
        for text, cmd in (
            ("Agregar punto\tEspacio", Command.ADD_POINT),
            ("Quitar último punto\tBackspace", Command.REMOVE_LAST_POINT),
            ("Cerrar path\tEnter", Command.COMMIT_PATH),
            ("Cancelar path\tEsc", Command.CANCEL_PATH),
            ("Listar paths\tL", Command.LIST_PATHS),
        ):
            act = QAction(text, self)
            act.triggered.connect(lambda _checked=False, c=cmd: self._canvas.dispatch(c))
            m_edit.addAction(act)

        m_view = self.menuBar().addMenu("&Ver")
        self._act_grid = QAction("Mostrar &grilla", self)
        self._act_grid.setCheckable(True)
        self._act_grid.setChecked(self._canvas.show_grid())
        self._act_grid.toggled.connect(self._on_toggle_grid)
        m_view.addAction(self._act_grid)

        m_view.addSeparator()
        for text, cmd in (
            ("Grilla X +1\tX", Command.GRID_X_INCREASE),
            ("Grilla X -1\tShift+X", Command.GRID_X_DECREASE),
            ("Grilla Y +1\tY", Command.GRID_Y_INCREASE),
            ("Grilla Y -1\tShift+Y", Command.GRID_Y_DECREASE),
        ):
            act = QAction(text, self)
            act.triggered.connect(lambda _checked=False, c=cmd: self._canvas.dispatch(c))
            m_view.addAction(act)

    # ----------------------------
    # Export sinks
    # ----------------------------
    def _export_to_stdout(self, text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.write("\n")
        sys.stdout.flush()
        self._status("SVG impreso en la salida estándar")

    def _export_to_file(self, text: str) -> None:
        start_dir = self._settings.last_export_dir or str(Path.cwd())
        path, _ = QFileDialog.getSaveFileName(
            self,
            "Exportar SVG",
            str(Path(start_dir) / "pixelpath.svg"),
            "SVG (*.svg)",
        )
        if not path:
            return

        try:
            p = write_svg(text, path)
        except PixelPathIOError as e:
            log.warning("Error al exportar SVG: %s", e, exc_info=True)
            QMessageBox.warning(self, "Error al exportar", str(e))
            return

        self._settings.last_export_dir = str(p.parent)
        self._settings.save()

        report = compute_document_bbox(text)
        if report.get("error"):
            log.debug("No se pudo verificar bbox del SVG exportado: %s", report["error"])
        if exceeds_canvas(report):
            log.warning("Geometría fuera del lienzo declarado (bbox=%s, size=%s)", report["bbox"], report["doc_size"])
            self._status(f"Exportado: {p.name} (hay geometría fuera del lienzo)")
        else:
            self._status(f"Exportado: {p.name}")

    # ----------------------------
    # Estado / UI
    # ----------------------------
    def _on_toggle_grid(self, on: bool) -> None:
        self._canvas.set_show_grid(on)
        self._settings.show_grid = bool(on)

    def _refresh_status(self) -> None:
        s = self._session.snapshot()
        mode = "dibujando" if s.is_drawing else "libre"
        self._state_label.setText(
            f"cursor ({s.cursor.x}, {s.cursor.y}) | {mode} | paths {len(s.paths)} "
            f"| grilla {s.grid_count.x}x{s.grid_count.y}"
        )

    def _status(self, text: str) -> None:
        self._status_label.setText(text)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._persist_ui_state()
        event.accept()

    def _restore_ui_state(self) -> None:
        try:
            if self._settings.ui_main_geometry_b64:
                raw = base64.b64decode(self._settings.ui_main_geometry_b64.encode("ascii"), validate=False)
                self.restoreGeometry(raw)
        except Exception:
            # No romper arranque
            log.debug("No se pudo restaurar geometry", exc_info=True)

    def _persist_ui_state(self) -> None:
        try:
            self._settings.ui_main_geometry_b64 = base64.b64encode(bytes(self.saveGeometry())).decode("ascii")
        except Exception:
            log.debug("No se pudo capturar geometry", exc_info=True)
        self._settings.save()
