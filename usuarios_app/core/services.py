"""Servicios de aplicación que coordinan el acceso a datos."""

from __future__ import annotations

import logging

from usuarios_app.core.errors import NetworkError
from usuarios_app.core.filtering import FilteredView
from usuarios_app.core.map_document import a_coordenada
from usuarios_app.core.state import EstadoCarga, UserListState
from usuarios_app.infrastructure.repositories import UserRepository
from usuarios_app.models.user import MapTarget, User

logger = logging.getLogger(__name__)


class CancellationToken:
    """Marca que la pantalla dueña de una carga ya no está visible."""

    __slots__ = ("_cancelado",)

    def __init__(self) -> None:
        self._cancelado = False

    def cancelar(self) -> None:
        self._cancelado = True

    @property
    def cancelado(self) -> bool:
        return self._cancelado


class UserListController:
    """Orquesta la carga única, la búsqueda y la selección de usuarios.

    El estado pertenece al controlador y sólo se modifica desde el hilo de la
    interfaz: :meth:`descargar` puede ejecutarse en otro hilo, pero el
    resultado se aplica con :meth:`aplicar_usuarios` o :meth:`aplicar_error`.
    """

    def __init__(self, repository: UserRepository, state: UserListState | None = None) -> None:
        self._repository = repository
        self.state = state if state is not None else UserListState()

    # ------------------------------------------------------------------
    # Carga
    # ------------------------------------------------------------------
    def cargar_usuarios(self, token: CancellationToken | None = None) -> tuple[User, ...]:
        """Descarga y aplica la colección de forma síncrona.

        Nunca propaga :class:`NetworkError`: el fallo queda registrado en el
        log y en ``state.error_carga`` y la colección queda vacía.
        """

        if self.state.cargado:
            logger.info("La colección ya fue cargada (%s); no se repite la descarga", self.state.estado.value)
            return self.state.usuarios

        try:
            usuarios = self.descargar()
        except NetworkError as exc:
            self.aplicar_error(exc, token)
        else:
            self.aplicar_usuarios(usuarios, token)
        return self.state.usuarios

    def descargar(self) -> tuple[User, ...]:
        return self._repository.obtener_usuarios()

    def aplicar_usuarios(self, usuarios: tuple[User, ...], token: CancellationToken | None = None) -> None:
        if self._descartar(token):
            return
        self.state.actualizar_usuarios(tuple(usuarios))
        logger.info("Cargados %d usuarios", len(self.state.usuarios))

    def aplicar_error(self, exc: Exception, token: CancellationToken | None = None) -> None:
        logger.error("Error al obtener usuarios: %s", exc)
        if self._descartar(token):
            return
        self.state.marcar_fallo(str(exc))

    def _descartar(self, token: CancellationToken | None) -> bool:
        if token is not None and token.cancelado:
            logger.debug("Carga descartada: la pantalla ya fue cerrada")
            return True
        if self.state.cargado:
            logger.debug("Carga descartada: el estado ya es %s", self.state.estado.value)
            return True
        return False

    @property
    def fallo_carga(self) -> bool:
        return self.state.estado is EstadoCarga.FALLIDO

    # ------------------------------------------------------------------
    # Búsqueda y selección
    # ------------------------------------------------------------------
    def establecer_consulta(self, consulta: str) -> None:
        self.state.consulta = consulta

    def vista_filtrada(self) -> FilteredView:
        """Usuarios que coinciden con la consulta actual, en el orden original."""

        return FilteredView(self.state.usuarios, self.state.consulta)

    def seleccionar_usuario(self, usuario: User) -> MapTarget:
        """Convierte la geolocalización del usuario en parámetros de mapa."""

        geo = usuario.address.geo
        return MapTarget(
            lat=a_coordenada(geo.lat, "lat"),
            lng=a_coordenada(geo.lng, "lng"),
            label=usuario.name,
        )


__all__ = ["CancellationToken", "UserListController"]
