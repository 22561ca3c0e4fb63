# File: pixelpath/svg/exporter.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-13
# Purpose: Export SVG (unidades de grilla crudas) de los paths cerrados.
# Notes: Un solo <path> con todos los subpaths; los paths vacíos se saltean.
from __future__ import annotations

from pathlib import Path
from typing import Iterable
from xml.etree.ElementTree import Element, SubElement, tostring

from pixelpath.core.models import ClosedPath, Point, to_curve_commands
from pixelpath.core.transform import export_canvas_size, to_export
from pixelpath.core.version import SVG_NS_URI
from pixelpath.utils.errors import PixelPathInternalError, PixelPathIOError
from pixelpath.utils.log import get_logger

log = get_logger(__name__)

_PREFIX = {"moveto": "M", "lineto": "L"}


def subpath_data(path: ClosedPath) -> str:
    """Tokens de un path: 'M x y L x y ... z'. Vacío si no tiene puntos."""
    if path.is_empty:
        return ""
    parts = []
    for c in to_curve_commands(path):
        p = to_export(c.point)
        parts.append(f"{_PREFIX[c.op]} {p.x} {p.y}")
    parts.append("z")
    return " ".join(parts)


def path_data(paths: Iterable[ClosedPath]) -> str:
    """Atributo `d` combinado: subpaths no vacíos separados por un espacio."""
    return " ".join(d for d in (subpath_data(p) for p in paths) if d)


def path_element(path: ClosedPath) -> str:
    """Markup suelto `<path d="..." />` de un path (diagnóstico / listado)."""
    return tostring(Element("path", {"d": subpath_data(path)}), encoding="unicode")


def serialize_svg(grid_count: Point, paths: Iterable[ClosedPath]) -> str:
    """Documento SVG completo (con declaración XML) como texto UTF-8.

    - width/height = grid_count * paso, aunque la geometría caiga afuera (sin clipping).
    - Si todos los paths están vacíos se emite igual el <path> con d="".
    """
    w, h = export_canvas_size(grid_count)
    svg = Element(
        "svg",
        {
            "xmlns": SVG_NS_URI,
            "width": str(w),
            "height": str(h),
        },
    )
    SubElement(svg, "path", {"d": path_data(paths)})

    try:
        raw = tostring(svg, encoding="utf-8", xml_declaration=True)
        return raw.decode("utf-8")
    except Exception as e:
        # No es un error de usuario: indica geometría corrupta.
        raise PixelPathInternalError("No se pudo serializar el SVG") from e


def write_svg(text: str, out_path: str | Path) -> Path:
    """Escribe el SVG exportado. Fuerza extensión .svg."""
    p = Path(out_path)
    if p.suffix.lower() != ".svg":
        p = p.with_suffix(".svg")

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    except Exception as e:
        raise PixelPathIOError(f"No se pudo exportar SVG: {p}") from e

    log.info("SVG exportado: %s", p)
    return p
