"""Estado del listado de usuarios."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from usuarios_app.models.user import User


class EstadoCarga(Enum):
    SIN_CARGAR = "sin_cargar"
    CARGADO = "cargado"
    FALLIDO = "fallido"


@dataclass
class UserListState:
    """Mantiene la colección descargada, la búsqueda y el resultado de la carga."""

    usuarios: tuple[User, ...] = ()
    consulta: str = ""
    estado: EstadoCarga = EstadoCarga.SIN_CARGAR
    error_carga: str | None = None

    def actualizar_usuarios(self, usuarios: tuple[User, ...]) -> None:
        self.usuarios = usuarios
        self.estado = EstadoCarga.CARGADO
        self.error_carga = None

    def marcar_fallo(self, mensaje: str) -> None:
        self.usuarios = ()
        self.estado = EstadoCarga.FALLIDO
        self.error_carga = mensaje

    @property
    def cargado(self) -> bool:
        return self.estado is not EstadoCarga.SIN_CARGAR


__all__ = ["EstadoCarga", "UserListState"]
