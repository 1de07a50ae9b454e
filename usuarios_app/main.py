"""Punto de entrada de la aplicación.

Crea la configuración, los componentes de infraestructura y el controlador,
y arranca la interfaz gráfica principal.
"""

from __future__ import annotations

import sys

from PyQt6.QtWidgets import QApplication

from usuarios_app.config import Settings
from usuarios_app.core.logging import setup_logger
from usuarios_app.core.services import UserListController
from usuarios_app.infrastructure.api_client import APIClient
from usuarios_app.infrastructure.repositories import UserRepository
from usuarios_app.ui.main_window import MainWindow


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    settings = Settings.from_env()
    logger = setup_logger(level=settings.log_level)
    logger.info("Servicio de usuarios: %s", settings.api_url)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    api_client = APIClient(settings.api_url, timeout=settings.timeout_seconds)
    repository = UserRepository(api_client)
    controller = UserListController(repository)

    window = MainWindow(controller=controller)
    window.show()

    codigo = app.exec()
    window.finalizar_carga(int(settings.timeout_seconds * 1000) + 1000)
    sys.exit(codigo)


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
