"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Geo:
    """Coordenadas tal como las entrega el servicio (cadenas de texto)."""

    lat: str
    lng: str


@dataclass(frozen=True, slots=True)
class Address:
    """Dirección postal de un usuario."""

    street: str
    city: str
    zipcode: str
    geo: Geo
    suite: str = ""

    def linea(self) -> str:
        """Texto de la dirección tal como se muestra en el listado."""

        return f"{self.street}, {self.city}, {self.zipcode}"


@dataclass(frozen=True, slots=True)
class User:
    """Usuario recuperado del servicio remoto. Inmutable durante la sesión."""

    id: int
    name: str
    username: str
    email: str
    address: Address


@dataclass(frozen=True, slots=True)
class MapTarget:
    """Parámetros que la pantalla de mapa recibe al navegar.

    Attributes
    ----------
    lat, lng:
        Coordenadas ya convertidas a ``float``.
    label:
        Texto del popup del marcador (el nombre del usuario).
    """

    lat: float
    lng: float
    label: str


__all__ = ["Address", "Geo", "MapTarget", "User"]
