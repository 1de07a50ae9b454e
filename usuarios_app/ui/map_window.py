"""Ventana con el mapa de la dirección de un usuario."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWebEngineCore import QWebEngineSettings
from PyQt6.QtWebEngineWidgets import QWebEngineView
from PyQt6.QtWidgets import QMainWindow

from usuarios_app.core.map_document import construir_documento_mapa
from usuarios_app.models.user import MapTarget


class MapWindow(QMainWindow):
    """Muestra el documento Leaflet generado para ``objetivo``."""

    def __init__(self, objetivo: MapTarget, parent=None) -> None:
        super().__init__(parent)
        self.objetivo = objetivo
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self.setWindowTitle(f"Mapa - {objetivo.label}")
        self.resize(720, 520)

        # Lanza ParseError antes de crear la vista si las coordenadas no sirven.
        documento = construir_documento_mapa(objetivo)

        self.view = QWebEngineView(self)
        self.view.settings().setAttribute(
            QWebEngineSettings.WebAttribute.LocalContentCanAccessRemoteUrls, True
        )
        self.view.setHtml(documento)
        self.setCentralWidget(self.view)


__all__ = ["MapWindow"]
