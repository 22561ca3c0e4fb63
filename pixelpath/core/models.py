# File: pixelpath/core/models.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Modelos de datos del editor (Point, ClosedPath, EditorState).
# Notes: Valores inmutables; el editor reemplaza el estado completo en cada comando.
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal, Optional

CurveOp = Literal["moveto", "lineto"]


@dataclass(frozen=True)
class Point:
    """Coordenada lógica de grilla (enteros)."""

    x: int = 0
    y: int = 0

    def moved(self, dx: int = 0, dy: int = 0, *, clamp: bool = True) -> "Point":
        x = self.x + int(dx)
        y = self.y + int(dy)
        if clamp:
            x = max(0, x)
            y = max(0, y)
        return Point(x, y)

    def to_dict(self) -> dict[str, int]:
        return {"x": int(self.x), "y": int(self.y)}


@dataclass(frozen=True)
class CurveCommand:
    op: CurveOp
    point: Point


@dataclass(frozen=True)
class ClosedPath:
    """Lista de vértices; se dibuja/exporta como polígono cerrado implícito.

    Puede estar vacía (commit después de borrar todos los puntos). Render y
    export la saltean, pero sigue ocupando su lugar en la secuencia.
    """

    points: tuple[Point, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.points

    def with_point(self, p: Point) -> "ClosedPath":
        return ClosedPath(self.points + (p,))

    def without_last_point(self) -> "ClosedPath":
        if not self.points:
            return self
        return ClosedPath(self.points[:-1])

    @staticmethod
    def from_coords(coords) -> "ClosedPath":
        """Construye desde [(x, y), ...] (helper para tests/replay)."""
        return ClosedPath(tuple(Point(int(x), int(y)) for x, y in coords))


@dataclass(frozen=True)
class EditorState:
    """Estado de sesión del editor.

    - `active_path` es el índice del path abierto (siempre el último) o None.
    - `grid_count` es independiente de `paths`: solo dimensiona el lienzo exportado.
    """

    cursor: Point = field(default_factory=Point)
    active_path: Optional[int] = None
    paths: tuple[ClosedPath, ...] = ()
    grid_count: Point = field(default_factory=Point)

    @property
    def is_drawing(self) -> bool:
        return self.active_path is not None

    def active(self) -> ClosedPath | None:
        if self.active_path is None:
            return None
        return self.paths[self.active_path]

    def replace_last_path(self, path: ClosedPath) -> "EditorState":
        if not self.paths:
            return self
        return replace(self, paths=self.paths[:-1] + (path,))

    def to_dict(self) -> dict:
        # Solo diagnóstico (log); no existe formato persistente del estado editable.
        return {
            "cursor": self.cursor.to_dict(),
            "is_drawing": self.is_drawing,
            "paths": [[p.to_dict() for p in path.points] for path in self.paths],
            "grid_count": self.grid_count.to_dict(),
        }


def to_curve_commands(path: ClosedPath) -> list[CurveCommand]:
    """moveto para el primer punto, lineto para el resto. Sin comando de cierre.

    El cierre ("z" en SVG, closeSubpath en Qt) lo agrega cada consumidor cuando
    hay puntos.
    """
    out: list[CurveCommand] = []
    for i, p in enumerate(path.points):
        out.append(CurveCommand("moveto" if i == 0 else "lineto", p))
    return out
