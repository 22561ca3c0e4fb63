# File: pixelpath/replay.py
# Project: PixelPath (PXP)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-16
# Purpose: CLI sin UI: aplica una secuencia de tokens de comando y exporta el SVG.
# Notes: Mismo EditorSession que la GUI; útil para reproducir sesiones y para pipelines.
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, TextIO

from pixelpath.core.commands import Command, coerce_command
from pixelpath.core.editor import EditorSession
from pixelpath.core.settings import ENV_LOG_LEVEL, apply_project_settings
from pixelpath.svg.exporter import serialize_svg, write_svg
from pixelpath.utils.errors import PixelPathError, PixelPathIOError, PixelPathValidationError
from pixelpath.utils.log import get_logger, level_from_name, setup_logging

log = get_logger(__name__)


def read_script(path: str | Path) -> list[str]:
    """Tokens de un archivo: separados por espacios/líneas; '#' comenta hasta fin de línea."""
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except Exception as e:
        raise PixelPathIOError(f"No se pudo leer el script: {p}") from e

    tokens: list[str] = []
    for line in raw.splitlines():
        line = line.split("#", 1)[0]
        tokens.extend(line.split())
    return tokens


def run_tokens(
    tokens: Iterable[str],
    *,
    out: Path | None = None,
    strict: bool = False,
    stdout: TextIO | None = None,
) -> EditorSession:
    """Aplica los tokens en orden. Devuelve la sesión (estado final en snapshot()).

    Un error de escritura del SVG no corta la corrida: queda en
    `session.export_failures` y se sigue con el próximo token.
    """
    stream = stdout or sys.stdout

    def _print(text: str) -> None:
        stream.write(text + "\n")

    def _to_file(text: str) -> None:
        if out is None:
            log.warning("export_file sin --out; se ignora")
            return
        # PixelPathIOError lo registra la sesión (export_failures).
        write_svg(text, out)

    session = EditorSession(
        sinks={Command.EXPORT_PRINT: _print, Command.EXPORT_FILE: _to_file},
        list_sink=_print,
    )

    exported = False
    for tok in tokens:
        cmd = coerce_command(tok)
        if cmd == Command.UNKNOWN and strict:
            raise PixelPathValidationError(f"Token desconocido: {tok!r}")
        session.dispatch(cmd)
        exported = exported or cmd.is_export

    if not exported:
        s = session.snapshot()
        text = serialize_svg(s.grid_count, s.paths)
        if out is not None:
            try:
                write_svg(text, out)
            except PixelPathIOError:
                session.export_failures += 1
                log.warning("Export final falló", exc_info=True)
        else:
            _print(text)
    return session


def main(argv: list[str] | None = None) -> int:
    # pixelpath_settings.json -> env, antes de calcular los defaults.
    apply_project_settings(logger=log, prefer_env=True)

    ap = argparse.ArgumentParser(
        prog="pixelpath.replay",
        description="PixelPath: aplica tokens de comando sin UI y exporta SVG.",
    )
    ap.add_argument("tokens", nargs="*", help="Tokens (left, right, up, down, add_point, commit, ...)")
    ap.add_argument("--script", default="", help="Archivo con tokens (se aplican antes que los posicionales)")
    ap.add_argument("--out", default="", help="Archivo .svg destino (export_file y export final)")
    ap.add_argument("--strict", action="store_true", help="Falla ante tokens desconocidos")
    ap.add_argument(
        "--log-level",
        default=os.environ.get(ENV_LOG_LEVEL, "warning"),
        help="debug | info | warning | error (default: warning)",
    )
    args = ap.parse_args(argv)

    setup_logging(log_dir=None, level=level_from_name(args.log_level, default=logging.WARNING))

    try:
        tokens = read_script(args.script) if args.script else []
        tokens.extend(args.tokens)
        out = Path(args.out).expanduser() if args.out else None
        session = run_tokens(tokens, out=out, strict=bool(args.strict))
    except PixelPathValidationError as e:
        print(f"[PXP] {e}", file=sys.stderr)
        return 2
    except PixelPathError as e:
        log.error("%s", e)
        return 1
    if session.export_failures:
        log.error("%d export(s) no se pudieron escribir", session.export_failures)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
