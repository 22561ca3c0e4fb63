# File: pixelpath/core/transform.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Transformaciones lógicas -> pantalla (offset + escala) y -> export (crudo).
# Notes: La divergencia pantalla/export es intencional; no unificar.
from __future__ import annotations

from pixelpath.core.models import Point
from pixelpath.core.version import (
    CROSSHAIR_LENGTH,
    HORIZONTAL_STEP,
    LEFT_OFFSET,
    RENDER_DENOMINATOR,
    RENDER_NUMERATOR,
    TOP_OFFSET,
    VERTICAL_STEP,
)

DisplayXY = tuple[int, int]
DisplayLine = tuple[DisplayXY, DisplayXY]


def _div_trunc(a: int, b: int) -> int:
    # División entera truncando hacia cero (// de Python redondea hacia -inf).
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def scale_display(value: int) -> int:
    return _div_trunc(RENDER_NUMERATOR * int(value), RENDER_DENOMINATOR)


def to_display(p: Point) -> DisplayXY:
    """Coordenada de pantalla: (NUM * (offset + v)) / DEN por eje."""
    return scale_display(LEFT_OFFSET + p.x), scale_display(TOP_OFFSET + p.y)


def to_export(p: Point) -> Point:
    """El SVG usa unidades de grilla crudas: sin offset ni escala."""
    return p


def export_canvas_size(grid_count: Point) -> tuple[int, int]:
    """Ancho/alto declarados del SVG. No depende de dónde caen los puntos."""
    return int(grid_count.x) * HORIZONTAL_STEP, int(grid_count.y) * VERTICAL_STEP


def crosshair_lines(cursor: Point) -> tuple[DisplayLine, DisplayLine]:
    """Segmentos (vertical, horizontal) de la cruz del cursor, en pantalla."""
    half = CROSSHAIR_LENGTH // 2
    lx = LEFT_OFFSET + cursor.x
    ty = TOP_OFFSET + cursor.y

    vertical = (
        (scale_display(lx), scale_display(ty - half)),
        (scale_display(lx), scale_display(ty - half + CROSSHAIR_LENGTH)),
    )
    horizontal = (
        (scale_display(lx - half), scale_display(ty)),
        (scale_display(lx - half + CROSSHAIR_LENGTH), scale_display(ty)),
    )
    return vertical, horizontal


def grid_lines(grid_count: Point) -> list[DisplayLine]:
    """Líneas de la grilla de fondo (pantalla) que encierran el lienzo exportado.

    Vacío si alguno de los conteos es 0: no hay lienzo que mostrar.
    """
    nx, ny = int(grid_count.x), int(grid_count.y)
    if nx <= 0 or ny <= 0:
        return []

    w, h = export_canvas_size(grid_count)
    out: list[DisplayLine] = []
    for i in range(nx + 1):
        x = i * HORIZONTAL_STEP
        out.append((to_display(Point(x, 0)), to_display(Point(x, h))))
    for j in range(ny + 1):
        y = j * VERTICAL_STEP
        out.append((to_display(Point(0, y)), to_display(Point(w, y))))
    return out
