# File: pixelpath/core/commands.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Vocabulario de comandos discretos que acepta el editor.
# Notes: Los tokens (value) son los que usa el CLI de replay.

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    """Comandos del editor.

    - movimiento: left/right/up/down (paso fijo, clamp en 0 para left/up)
    - edición: add_point, remove_point, commit, cancel
    - grilla: grid_x_inc/grid_x_dec, grid_y_inc/grid_y_dec
    - export: export (salida del proceso), export_file (archivo .svg)
    - diagnóstico: list
    """

    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    ADD_POINT = "add_point"
    REMOVE_LAST_POINT = "remove_point"
    COMMIT_PATH = "commit"
    CANCEL_PATH = "cancel"
    GRID_X_INCREASE = "grid_x_inc"
    GRID_X_DECREASE = "grid_x_dec"
    GRID_Y_INCREASE = "grid_y_inc"
    GRID_Y_DECREASE = "grid_y_dec"
    EXPORT_PRINT = "export"
    EXPORT_FILE = "export_file"
    LIST_PATHS = "list"
    UNKNOWN = "unknown"

    @property
    def is_export(self) -> bool:
        return self in (Command.EXPORT_PRINT, Command.EXPORT_FILE)


# Alias de teclado / abreviaturas aceptados por el replay.
_ALIASES = {
    "space": Command.ADD_POINT,
    "add": Command.ADD_POINT,
    "backspace": Command.REMOVE_LAST_POINT,
    "undo": Command.REMOVE_LAST_POINT,
    "enter": Command.COMMIT_PATH,
    "return": Command.COMMIT_PATH,
    "esc": Command.CANCEL_PATH,
    "escape": Command.CANCEL_PATH,
    "x+": Command.GRID_X_INCREASE,
    "x-": Command.GRID_X_DECREASE,
    "y+": Command.GRID_Y_INCREASE,
    "y-": Command.GRID_Y_DECREASE,
    "p": Command.EXPORT_PRINT,
    "print": Command.EXPORT_PRINT,
    "save": Command.EXPORT_FILE,
}


def coerce_command(v: object) -> Command:
    """Token -> Command. Cualquier cosa no reconocida es Command.UNKNOWN."""
    if isinstance(v, Command):
        return v
    s = str(v or "").strip().lower()
    for c in Command:
        if c.value == s:
            return c
    return _ALIASES.get(s, Command.UNKNOWN)
