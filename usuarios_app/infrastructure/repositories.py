"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from usuarios_app.core.errors import NetworkError
from usuarios_app.infrastructure.api_client import APIClient
from usuarios_app.models.user import Address, Geo, User


class UserRepository:
    """Repositorio de usuarios basado en un cliente API."""

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    def obtener_usuarios(self) -> tuple[User, ...]:
        """Devuelve la colección completa en el orden de la respuesta."""

        usuarios_crudos = self._api_client.obtener_usuarios()
        try:
            return tuple(_a_usuario(datos) for datos in usuarios_crudos)
        except (KeyError, TypeError, ValueError) as exc:
            raise NetworkError(f"Registro de usuario con formato inesperado: {exc!r}") from exc


def _a_usuario(datos: dict) -> User:
    direccion = datos["address"]
    geo = direccion["geo"]
    return User(
        id=int(datos["id"]),
        name=str(datos["name"]),
        username=str(datos["username"]),
        email=str(datos["email"]),
        address=Address(
            street=str(direccion["street"]),
            suite=str(direccion.get("suite", "")),
            city=str(direccion["city"]),
            zipcode=str(direccion["zipcode"]),
            geo=Geo(lat=str(geo["lat"]), lng=str(geo["lng"])),
        ),
    )


__all__ = ["UserRepository"]
