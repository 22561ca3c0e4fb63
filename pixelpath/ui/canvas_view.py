# File: pixelpath/ui/canvas_view.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-15
# Purpose: Lienzo: dibuja grilla, paths, preview del path activo y cruz del cursor.
# Notes: Solo lectura del estado (snapshot). Las teclas se traducen y se despachan a la sesión.
from __future__ import annotations

from PySide6.QtCore import QPoint, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget

from pixelpath.core.commands import Command
from pixelpath.core.editor import EditorSession
from pixelpath.core.models import ClosedPath, EditorState, Point, to_curve_commands
from pixelpath.core.transform import crosshair_lines, grid_lines, to_display
from pixelpath.core.version import CROSSHAIR_THICKNESS
from pixelpath.ui.keymap import translate_key

DRAWING_CROSSHAIR_COLOR = QColor(0xFF, 0x00, 0x00)
NOT_DRAWING_CROSSHAIR_COLOR = QColor(0x00, 0x00, 0xFF)
GRID_COLOR = QColor(200, 200, 200)

_REPEATABLE = (Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.MOVE_UP, Command.MOVE_DOWN)


class CanvasView(QWidget):
    """Widget central del editor."""

    # Se emite después de cada comando que pide redibujo.
    state_changed = Signal()

    def __init__(self, session: EditorSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._session = session
        self._show_grid = True
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAutoFillBackground(True)
        self.setMinimumSize(400, 300)

    def session(self) -> EditorSession:
        return self._session

    def set_show_grid(self, on: bool) -> None:
        self._show_grid = bool(on)
        self.update()

    def show_grid(self) -> bool:
        return self._show_grid

    # ------------------------------ Entrada
    def dispatch(self, command) -> bool:
        refresh = self._session.dispatch(command)
        if refresh:
            self.update()
            self.state_changed.emit()
        return refresh

    def keyPressEvent(self, event) -> None:
        cmd = translate_key(event.key(), event.modifiers())
        # Auto-repeat solo para moverse; evita exportar/agregar puntos en ráfaga.
        if event.isAutoRepeat() and cmd not in _REPEATABLE:
            event.accept()
            return
        if self.dispatch(cmd) or cmd.is_export or cmd == Command.LIST_PATHS:
            event.accept()
            return
        super().keyPressEvent(event)

    # ------------------------------ Dibujo
    def paintEvent(self, event) -> None:
        _ = event
        state = self._session.snapshot()
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), self.palette().window())
            if self._show_grid:
                self._draw_grid(painter, state)
            self._draw_paths(painter, state)
            self._draw_crosshair(painter, state)
        finally:
            painter.end()

    def _draw_grid(self, painter: QPainter, state: EditorState) -> None:
        lines = grid_lines(state.grid_count)
        if not lines:
            return
        pen = QPen(GRID_COLOR)
        pen.setCosmetic(True)
        painter.setPen(pen)
        for (x1, y1), (x2, y2) in lines:
            painter.drawLine(QPoint(x1, y1), QPoint(x2, y2))

    def _draw_paths(self, painter: QPainter, state: EditorState) -> None:
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(Qt.black))
        for idx, path in enumerate(state.paths):
            if idx != state.active_path:
                self._fill_path(painter, path)
        # Preview: el path activo (siempre el último) se extiende hasta el cursor.
        active = state.active()
        if active is not None:
            self._fill_path(painter, active, state.cursor)
        painter.restore()

    def _fill_path(self, painter: QPainter, path: ClosedPath, extend_to: Point | None = None) -> None:
        if path.is_empty:
            return
        qp = QPainterPath()
        for c in to_curve_commands(path):
            x, y = to_display(c.point)
            if c.op == "moveto":
                qp.moveTo(x, y)
            else:
                qp.lineTo(x, y)
        if extend_to is not None:
            qp.lineTo(*to_display(extend_to))
        qp.closeSubpath()
        painter.fillPath(qp, painter.brush())

    def _draw_crosshair(self, painter: QPainter, state: EditorState) -> None:
        if state.is_drawing:
            pen = QPen(DRAWING_CROSSHAIR_COLOR, CROSSHAIR_THICKNESS)
            pen.setCapStyle(Qt.SquareCap)
        else:
            pen = QPen(NOT_DRAWING_CROSSHAIR_COLOR, CROSSHAIR_THICKNESS)
            pen.setCapStyle(Qt.FlatCap)
        painter.save()
        painter.setPen(pen)
        for (x1, y1), (x2, y2) in crosshair_lines(state.cursor):
            painter.drawLine(QPoint(x1, y1), QPoint(x2, y2))
        painter.restore()
