"""Configuración del logging de la aplicación."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "usuarios_app"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str = LOGGER_NAME, level: str = "INFO") -> logging.Logger:
    """Instala un único handler a stdout en el logger raíz de la aplicación.

    Llamarla varias veces no duplica la salida: los handlers previos se
    descartan antes de añadir el nuevo.
    """

    nivel = logging.getLevelName(level.upper())
    if not isinstance(nivel, int):
        nivel = logging.INFO
    logger = logging.getLogger(name)
    logger.setLevel(nivel)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(nivel)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger


__all__ = ["LOGGER_NAME", "setup_logger"]
