"""Filtro de búsqueda del listado de usuarios."""

from __future__ import annotations

from typing import Iterator, Sequence

from usuarios_app.models.user import User


def coincide(usuario: User, consulta: str) -> bool:
    """Indica si ``usuario`` satisface la búsqueda ``consulta``.

    El id se compara como subcadena de su forma decimal usando la consulta
    tal cual; nombre, usuario y email se comparan en minúsculas.
    """

    normalizada = consulta.lower()
    return (
        consulta in str(usuario.id)
        or normalizada in usuario.name.lower()
        or normalizada in usuario.username.lower()
        or normalizada in usuario.email.lower()
    )


class FilteredView:
    """Vista perezosa y reiniciable de los usuarios que coinciden.

    Cada iteración recorre de nuevo la colección completa; la vista no
    guarda resultados intermedios.
    """

    __slots__ = ("_usuarios", "_consulta")

    def __init__(self, usuarios: Sequence[User], consulta: str) -> None:
        self._usuarios = usuarios
        self._consulta = consulta

    def __iter__(self) -> Iterator[User]:
        return (usuario for usuario in self._usuarios if coincide(usuario, self._consulta))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def a_lista(self) -> list[User]:
        return list(self)


__all__ = ["FilteredView", "coincide"]
