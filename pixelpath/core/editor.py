# File: pixelpath/core/editor.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-13
# Purpose: Máquina de estados del editor: aplica un comando por vez al EditorState.
# Notes: apply_command es pura; EditorSession serializa el acceso con un lock.
from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Callable, Optional

from pixelpath.core.commands import Command, coerce_command
from pixelpath.core.models import ClosedPath, EditorState
from pixelpath.core.version import HORIZONTAL_STEP, VERTICAL_STEP
from pixelpath.svg.exporter import path_element, serialize_svg
from pixelpath.utils.errors import PixelPathIOError
from pixelpath.utils.log import get_logger

log = get_logger(__name__)

ExportSink = Callable[[str], None]


@dataclass(frozen=True)
class CommandResult:
    state: EditorState
    refresh: bool
    # Solo para pedidos de export: a qué sink va y el documento serializado.
    export_target: Optional[Command] = None
    export_text: Optional[str] = None


_MOVES = {
    Command.MOVE_LEFT: (-HORIZONTAL_STEP, 0),
    Command.MOVE_RIGHT: (HORIZONTAL_STEP, 0),
    Command.MOVE_UP: (0, -VERTICAL_STEP),
    Command.MOVE_DOWN: (0, VERTICAL_STEP),
}

_GRID = {
    Command.GRID_X_INCREASE: (1, 0),
    Command.GRID_X_DECREASE: (-1, 0),
    Command.GRID_Y_INCREASE: (0, 1),
    Command.GRID_Y_DECREASE: (0, -1),
}


def apply_command(state: EditorState, command: Command | str) -> CommandResult:
    """Aplica un comando y devuelve el nuevo estado + si hace falta redibujar.

    No muta `state`. Comandos desconocidos y colecciones vacías son no-op.
    """
    cmd = coerce_command(command)

    if cmd in _MOVES:
        dx, dy = _MOVES[cmd]
        return CommandResult(replace(state, cursor=state.cursor.moved(dx, dy)), True)

    if cmd in _GRID:
        dx, dy = _GRID[cmd]
        return CommandResult(replace(state, grid_count=state.grid_count.moved(dx, dy)), True)

    if cmd == Command.ADD_POINT:
        if state.is_drawing:
            paths = state.paths
        else:
            # Después de un commit siempre arranca un path nuevo.
            paths = state.paths + (ClosedPath(),)
        last = paths[-1].with_point(state.cursor)
        return CommandResult(
            replace(state, paths=paths[:-1] + (last,), active_path=len(paths) - 1),
            True,
        )

    if cmd == Command.REMOVE_LAST_POINT:
        if not state.paths:
            return CommandResult(state, True)
        # No toca active_path: el path abierto puede quedar vacío.
        return CommandResult(state.replace_last_path(state.paths[-1].without_last_point()), True)

    if cmd == Command.COMMIT_PATH:
        return CommandResult(replace(state, active_path=None), True)

    if cmd == Command.CANCEL_PATH:
        return CommandResult(replace(state, paths=state.paths[:-1], active_path=None), True)

    if cmd.is_export:
        text = serialize_svg(state.grid_count, state.paths)
        return CommandResult(state, False, export_target=cmd, export_text=text)

    # LIST_PATHS (diagnóstico en la sesión) y UNKNOWN: sin cambios, sin redibujo.
    return CommandResult(state, False)


class EditorSession:
    """Dueño del EditorState de una ventana / corrida de replay.

    - `dispatch()` aplica un comando por vez bajo lock; el efecto queda visible
      antes de aceptar el siguiente.
    - `snapshot()` devuelve el estado actual (inmutable) para render/export.
    - Los sinks de export se llaman fuera del lock; su resultado no vuelve al estado.
    """

    def __init__(
        self,
        state: EditorState | None = None,
        *,
        sinks: dict[Command, ExportSink] | None = None,
        list_sink: Callable[[str], None] | None = None,
        echo_state: bool = False,
    ) -> None:
        self._lock = threading.Lock()
        self._state = state or EditorState()
        self._sinks: dict[Command, ExportSink] = dict(sinks or {})
        self._list_sink = list_sink
        self.echo_state = bool(echo_state)
        # Exports cuyo sink falló por E/S (no fatal; el estado sigue igual).
        self.export_failures = 0

    def snapshot(self) -> EditorState:
        with self._lock:
            return self._state

    @property
    def state(self) -> EditorState:
        return self.snapshot()

    def set_sink(self, target: Command, sink: ExportSink | None) -> None:
        if not target.is_export:
            raise ValueError(f"No es un comando de export: {target!r}")
        with self._lock:
            if sink is None:
                self._sinks.pop(target, None)
            else:
                self._sinks[target] = sink

    def dispatch(self, command: Command | str) -> bool:
        """Aplica `command` y devuelve True si hay que redibujar."""
        cmd = coerce_command(command)
        with self._lock:
            result = apply_command(self._state, cmd)
            self._state = result.state
            sink = self._sinks.get(result.export_target) if result.export_target else None
            state = result.state

        if cmd == Command.UNKNOWN:
            log.debug("Comando desconocido: %r (ignorado)", command)
            return False

        if self.echo_state:
            log.info("%s -> %s", cmd.value, state.to_dict())
        else:
            log.debug("%s -> %s", cmd.value, state.to_dict())

        if cmd == Command.LIST_PATHS:
            self._list_paths(state)
        elif result.export_text is not None:
            self._forward_export(cmd, sink, result.export_text)

        return result.refresh

    def _list_paths(self, state: EditorState) -> None:
        log.info("Paths (%d):", len(state.paths))
        for path in state.paths:
            line = path_element(path)
            log.info("  %s", line)
            if self._list_sink is not None:
                self._list_sink(line)

    def _forward_export(self, cmd: Command, sink: ExportSink | None, text: str) -> None:
        if sink is None:
            log.warning("Export '%s' sin destino configurado; se ignora", cmd.value)
            return
        log.info("Export '%s' (%d bytes)", cmd.value, len(text.encode("utf-8")))
        try:
            sink(text)
        except PixelPathIOError:
            with self._lock:
                self.export_failures += 1
            log.warning("Export '%s' falló; se sigue con el mismo estado", cmd.value, exc_info=True)
