"""Configuración de logging.

Por qué aquí:
- La librería solo pide loggers por módulo; nunca toca el root logger al importarse.
- Solo los entry points (la CLI) configuran handlers y nivel.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configura el logging del proceso.

    Los logs van a stderr para que la salida `--json` en stdout siga siendo parseable.
    `force=True` reemplaza handlers previos (p.ej. al invocar la CLI varias veces en tests).
    """

    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Logger con nombre de módulo (`__name__`), sin handlers propios."""

    return logging.getLogger(name)
