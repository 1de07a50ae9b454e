"""Parámetros de configuración leídos del entorno."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Settings:
    """Configuración de la aplicación.

    Los valores por defecto apuntan al servicio público de ejemplo. Cada uno
    puede sobrescribirse con una variable de entorno:

    - ``USUARIOS_API_URL``
    - ``USUARIOS_TIMEOUT_SECONDS``
    - ``USUARIOS_LOG_LEVEL``
    """

    API_URL = "https://jsonplaceholder.typicode.com/users"
    TIMEOUT_SECONDS = 15.0
    LOG_LEVEL = "INFO"

    api_url: str = API_URL
    timeout_seconds: float = TIMEOUT_SECONDS
    log_level: str = LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        api_url = env.get("USUARIOS_API_URL", "").strip() or cls.API_URL
        log_level = env.get("USUARIOS_LOG_LEVEL", "").strip().upper() or cls.LOG_LEVEL
        timeout = _parse_timeout(env.get("USUARIOS_TIMEOUT_SECONDS"), cls.TIMEOUT_SECONDS)

        return cls(api_url=api_url, timeout_seconds=timeout, log_level=log_level)


def _parse_timeout(raw: str | None, default: float) -> float:
    if raw is None or not raw.strip():
        return default
    try:
        valor = float(raw)
    except ValueError:
        logger.warning("USUARIOS_TIMEOUT_SECONDS inválido (%r); se usa %s", raw, default)
        return default
    if valor <= 0:
        logger.warning("USUARIOS_TIMEOUT_SECONDS debe ser positivo (%r); se usa %s", raw, default)
        return default
    return valor


__all__ = ["Settings"]
