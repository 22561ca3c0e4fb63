# File: pixelpath/utils/errors.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Errores tipados del proyecto.
# Notes: Comandos desconocidos y colecciones vacías NO son errores (no-op).
from __future__ import annotations


class PixelPathError(Exception):
    """Error base del proyecto."""


class PixelPathValidationError(PixelPathError):
    """Error de validación (tokens en modo estricto, settings, argumentos)."""


class PixelPathIOError(PixelPathError):
    """Error de E/S (lectura/escritura). Nunca altera el estado del editor."""


class PixelPathInternalError(PixelPathError):
    """Invariante roto (p.ej. fallo serializando XML). Se trata como fatal."""
