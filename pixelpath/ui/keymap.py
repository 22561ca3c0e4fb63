# File: pixelpath/ui/keymap.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-14
# Purpose: Traducción tecla Qt (+ modificadores) -> Command.
# Notes: Sin lógica de edición: solo mapea. Shift en X/Y = achicar grilla.

from __future__ import annotations

from PySide6.QtCore import Qt

from pixelpath.core.commands import Command

_PLAIN_KEYS = {
    int(Qt.Key_Left): Command.MOVE_LEFT,
    int(Qt.Key_Right): Command.MOVE_RIGHT,
    int(Qt.Key_Up): Command.MOVE_UP,
    int(Qt.Key_Down): Command.MOVE_DOWN,
    int(Qt.Key_Space): Command.ADD_POINT,
    int(Qt.Key_Backspace): Command.REMOVE_LAST_POINT,
    int(Qt.Key_Return): Command.COMMIT_PATH,
    int(Qt.Key_Enter): Command.COMMIT_PATH,
    int(Qt.Key_Escape): Command.CANCEL_PATH,
    int(Qt.Key_P): Command.EXPORT_PRINT,
    int(Qt.Key_S): Command.EXPORT_FILE,
    int(Qt.Key_L): Command.LIST_PATHS,
}

# (aumentar, achicar)
_GRID_KEYS = {
    int(Qt.Key_X): (Command.GRID_X_INCREASE, Command.GRID_X_DECREASE),
    int(Qt.Key_Y): (Command.GRID_Y_INCREASE, Command.GRID_Y_DECREASE),
}


def translate_key(key: int, modifiers=Qt.NoModifier) -> Command:
    """Tecla -> Command. Teclas sin binding devuelven Command.UNKNOWN.

    Ctrl/Alt quedan para atajos de menú: cualquier combinación con ellos es UNKNOWN.
    """
    k = int(key)
    if modifiers & (Qt.ControlModifier | Qt.AltModifier):
        return Command.UNKNOWN

    grid = _GRID_KEYS.get(k)
    if grid is not None:
        inc, dec = grid
        return dec if (modifiers & Qt.ShiftModifier) else inc

    return _PLAIN_KEYS.get(k, Command.UNKNOWN)
