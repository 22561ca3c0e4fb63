"""svgelements adapter: bbox of an exported SVG document.

The editor never clips geometry to the declared canvas. After an export we
parse the produced text back with `svgelements` and compare its geometry
bbox against the declared width/height, so the UI can warn when paths fall
outside the canvas.

Design constraints
- Must never raise: a failed check must not break an export.
- Keep output JSON-friendly.
"""

from __future__ import annotations

import io
from typing import Any, Dict, Optional

from svgelements import SVG


def _safe_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    try:
        return float(v)
    except Exception:
        # Length-like objects might store a numeric `.value`
        try:
            return float(getattr(v, "value"))
        except Exception:
            return None


def compute_document_bbox(svg_text: str, *, ppi: float = 96.0) -> Dict[str, Any]:
    """Compute the geometry bbox of an SVG given as text.

    Returns a dict like:
    - bbox: (x0, y0, x1, y1) or None (no geometry)
    - doc_size: [w, h] or None
    - error: str (optional)
    """
    try:
        svg = SVG.parse(io.BytesIO(svg_text.encode("utf-8")), ppi=float(ppi), reify=True)
    except Exception as e:
        return {"bbox": None, "doc_size": None, "error": f"{type(e).__name__}: {e}"}

    bbox = None
    try:
        b = svg.bbox(with_stroke=False)
        if b is not None:
            bbox = (float(b[0]), float(b[1]), float(b[2]), float(b[3]))
    except Exception as e:
        return {"bbox": None, "doc_size": None, "error": f"{type(e).__name__}: {e}"}

    doc_w = _safe_float(getattr(svg, "width", None))
    doc_h = _safe_float(getattr(svg, "height", None))
    doc_size = None
    if doc_w is not None and doc_h is not None:
        doc_size = [doc_w, doc_h]

    return {"bbox": bbox, "doc_size": doc_size}


def exceeds_canvas(report: Dict[str, Any], *, tol: float = 1e-6) -> bool:
    """True si la geometría cae fuera de [0, w] x [0, h] del documento."""
    bbox = report.get("bbox")
    size = report.get("doc_size")
    if not bbox or not size:
        return False
    x0, y0, x1, y1 = bbox
    w, h = size
    return x0 < -tol or y0 < -tol or x1 > w + tol or y1 > h + tol
