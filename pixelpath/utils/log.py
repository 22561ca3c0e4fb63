# File: pixelpath/utils/log.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Logging centralizado (consola + archivo) y helpers.
# Notes: Se configura una sola vez por proceso (GUI o replay).
from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False

LOG_FILE_NAME = "pixelpath.log"


def setup_logging(log_dir: str | os.PathLike | None = "logs", level: int = logging.INFO) -> None:
    """Configura logging en consola + archivo.

    Nota:
        - `log_dir=None` deja solo la consola (útil para el CLI de replay).
        - No lanza excepción si no puede escribir el archivo; cae a consola.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Consola
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # Archivo
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / LOG_FILE_NAME, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
        except Exception as e:
            logging.getLogger(__name__).warning("No se pudo inicializar FileHandler: %s", e)

    _LOGGER_CONFIGURED = True


def level_from_name(name: str | None, default: int = logging.INFO) -> int:
    """Traduce 'debug'/'INFO'/... a nivel numérico. Valores inválidos -> default."""
    s = str(name or "").strip().upper()
    if not s:
        return default
    value = logging.getLevelName(s)
    return value if isinstance(value, int) else default


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
