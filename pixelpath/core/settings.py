# File: pixelpath/core/settings.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-14
# Purpose: Preferencias de usuario (JSON) + settings de proyecto (repo-local) vía env.
# Notes: No depende de Qt; guarda en ~/.pixelpath/settings.json.
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

log = logging.getLogger(__name__)

ENV_SHOW_GRID = "PIXELPATH_SHOW_GRID"
ENV_LOG_LEVEL = "PIXELPATH_LOG_LEVEL"

_VALID_LOG_LEVELS = ("debug", "info", "warning", "error")


def settings_dir() -> Path:
    """Carpeta de settings del usuario (ruta explícita, no QSettings)."""
    return Path.home() / ".pixelpath"


def settings_path() -> Path:
    return settings_dir() / "settings.json"


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: pixelpath_settings.json en el CWD o en algún padre.
PROJECT_SETTINGS_FILENAME = "pixelpath_settings.json"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca pixelpath_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga pixelpath_settings.json (si existe) y aplica overrides vía variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa.
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores aplicados desde JSON.
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("Settings de proyecto inválidos (raíz no es objeto): %s", p)
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    show_grid = _deep_get(data, "ui.canvas.show_grid")
    if isinstance(show_grid, bool):
        applied["ui.canvas.show_grid"] = show_grid
        _set_env(ENV_SHOW_GRID, "1" if show_grid else "0")

    level = _deep_get(data, "log.level")
    if isinstance(level, str) and level.strip().lower() in _VALID_LOG_LEVELS:
        applied["log.level"] = level.strip().lower()
        _set_env(ENV_LOG_LEVEL, level.strip().lower())

    if applied:
        _log.info("Project settings aplicados desde %s: %s", p, applied)
    return applied


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or str(raw).strip() == "":
        return default
    return str(raw).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppSettings:
    """Preferencias persistentes del usuario."""

    # Grilla de fondo en el lienzo (solo visual; no afecta el export).
    show_grid: bool = True

    # Loguea el estado completo a nivel INFO después de cada comando.
    echo_state: bool = False

    # Última carpeta usada en "Exportar SVG…".
    last_export_dir: str = ""

    # Layout de la ventana (base64, sin depender de Qt acá).
    ui_main_geometry_b64: str = ""

    @classmethod
    def load(cls) -> "AppSettings":
        p = settings_path()
        try:
            if not p.exists():
                return cls()
            data = json.loads(p.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                return cls()
            out = cls()
            out.show_grid = bool(data.get("show_grid", out.show_grid))
            out.echo_state = bool(data.get("echo_state", out.echo_state))
            out.last_export_dir = str(data.get("last_export_dir", "") or "")
            out.ui_main_geometry_b64 = str(data.get("ui_main_geometry_b64", "") or "")
            return out
        except Exception:
            log.debug("No se pudieron cargar settings: %s", p, exc_info=True)
            return cls()

    def effective_show_grid(self) -> bool:
        """Valor a usar al arrancar: la env var de proyecto pisa la preferencia guardada.

        No modifica `show_grid`, así el override no termina persistido en save().
        """
        return env_bool(ENV_SHOW_GRID, self.show_grid)

    def save(self) -> None:
        # Guardar settings no debe romper la app.
        try:
            d = settings_dir()
            d.mkdir(parents=True, exist_ok=True)
            payload: Dict[str, Any] = {
                "schema_version": 1,
                "show_grid": bool(self.show_grid),
                "echo_state": bool(self.echo_state),
                "last_export_dir": str(self.last_export_dir or ""),
                "ui_main_geometry_b64": str(self.ui_main_geometry_b64 or ""),
            }
            settings_path().write_text(
                json.dumps(payload, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except Exception:
            log.debug("No se pudieron guardar settings", exc_info=True)
