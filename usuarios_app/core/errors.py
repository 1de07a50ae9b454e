"""Errores propios de la aplicación."""

from __future__ import annotations


class NetworkError(Exception):
    """Fallo al descargar o decodificar el listado de usuarios."""


class ParseError(ValueError):
    """Coordenada no numérica o no finita."""


__all__ = ["NetworkError", "ParseError"]
