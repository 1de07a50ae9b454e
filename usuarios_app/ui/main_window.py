"""Ventana principal con el listado de usuarios."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PyQt6.QtCore import QObject, Qt, QThread, pyqtSignal
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from usuarios_app.core.errors import NetworkError, ParseError
from usuarios_app.core.services import CancellationToken, UserListController
from usuarios_app.models.user import User
from usuarios_app.ui.map_window import MapWindow

logger = logging.getLogger(__name__)


class _LoadWorker(QObject):
    finished = pyqtSignal(tuple)
    error = pyqtSignal(object)

    def __init__(self, controller: UserListController) -> None:
        super().__init__()
        self.controller = controller

    def run(self) -> None:
        try:
            usuarios = self.controller.descargar()
        except NetworkError as exc:
            self.error.emit(exc)
            return
        self.finished.emit(usuarios)


@dataclass(slots=True)
class _TableColumns:
    id: int = 0
    nombre: int = 1
    usuario: int = 2
    email: int = 3
    direccion: int = 4


class MainWindow(QMainWindow):
    """Listado de usuarios con búsqueda y acceso al mapa."""

    def __init__(self, *, controller: UserListController) -> None:
        super().__init__()
        self.controller = controller
        self._columns = _TableColumns()
        self._visibles: list[User] = []
        self._token = CancellationToken()
        self._load_thread: QThread | None = None
        self._load_worker: _LoadWorker | None = None
        self._map_windows: list[MapWindow] = []

        self.setWindowTitle("Usuarios")
        self.resize(900, 520)

        self.search_box = QLineEdit(placeholderText="Buscar por id, nombre, usuario o email")
        self.search_box.textChanged.connect(self._on_search_changed)

        self.map_button = QPushButton("Ver mapa")
        self.map_button.setEnabled(False)
        self.map_button.clicked.connect(self._on_view_map)

        self.status_label = QLabel("Cargando usuarios...")
        self.status_label.setObjectName("statusLabel")

        self.table = QTableWidget(columnCount=5)
        self.table.setHorizontalHeaderLabels(["ID", "Nombre", "Usuario", "Email", "Dirección"])
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.itemSelectionChanged.connect(self._on_selection_changed)
        self.table.cellDoubleClicked.connect(self._on_cell_double_clicked)

        top_bar = QHBoxLayout()
        top_bar.addWidget(QLabel("Usuarios"))
        top_bar.addStretch(1)
        top_bar.addWidget(self.search_box)
        top_bar.addWidget(self.map_button)

        layout = QVBoxLayout()
        layout.addLayout(top_bar)
        layout.addWidget(self.status_label)
        layout.addWidget(self.table)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        self._iniciar_carga_async()

    # ------------------------------------------------------------------
    # Carga asíncrona
    # ------------------------------------------------------------------
    def _iniciar_carga_async(self) -> None:
        self._load_thread = QThread(self)
        self._load_worker = _LoadWorker(self.controller)
        self._load_worker.moveToThread(self._load_thread)

        self._load_thread.started.connect(self._load_worker.run)
        self._load_worker.finished.connect(self._load_thread.quit)
        self._load_worker.error.connect(self._load_thread.quit)
        self._load_worker.finished.connect(self._on_load_completed)
        self._load_worker.error.connect(self._on_load_failed)
        self._load_thread.finished.connect(self._limpiar_hilo_carga)

        self._load_thread.start()

    def _on_load_completed(self, usuarios: tuple) -> None:
        self.controller.aplicar_usuarios(usuarios, self._token)
        if self._token.cancelado:
            return
        self.status_label.clear()
        self.status_label.setVisible(False)
        self._refrescar()

    def _on_load_failed(self, exc: Exception) -> None:
        self.controller.aplicar_error(exc, self._token)
        if not self.controller.fallo_carga:
            return
        self.status_label.setText(f"No se pudieron cargar los usuarios: {self.controller.state.error_carga}")
        self.status_label.setStyleSheet("color: #b91c1c; font-weight: 600;")
        self._refrescar()

    def _limpiar_hilo_carga(self) -> None:
        if self._load_worker is not None:
            self._load_worker.deleteLater()
        if self._load_thread is not None:
            self._load_thread.deleteLater()
        self._load_worker = None
        self._load_thread = None

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - API de Qt
        # No se bloquea la interfaz: el resultado tardío se descarta por el token.
        self._token.cancelar()
        super().closeEvent(event)

    def finalizar_carga(self, timeout_ms: int) -> bool:
        """Espera a que termine el hilo de carga, como máximo ``timeout_ms``."""

        if self._load_thread is None or not self._load_thread.isRunning():
            return True
        self._load_thread.quit()
        if self._load_thread.wait(timeout_ms):
            return True
        logger.warning("El hilo de carga sigue activo tras %d ms", timeout_ms)
        return False

    # ------------------------------------------------------------------
    # Eventos y acciones
    # ------------------------------------------------------------------
    def _on_search_changed(self, text: str) -> None:
        self.controller.establecer_consulta(text)
        self._refrescar()

    def _on_selection_changed(self) -> None:
        self.map_button.setEnabled(self._usuario_actual() is not None)

    def _on_cell_double_clicked(self, row: int, _column: int) -> None:
        if 0 <= row < len(self._visibles):
            self._abrir_mapa(self._visibles[row])

    def _on_view_map(self) -> None:
        usuario = self._usuario_actual()
        if usuario is not None:
            self._abrir_mapa(usuario)

    def _abrir_mapa(self, usuario: User) -> None:
        try:
            objetivo = self.controller.seleccionar_usuario(usuario)
            ventana = MapWindow(objetivo)
        except ParseError as exc:
            logger.warning("No se puede mostrar el mapa de %s: %s", usuario.name, exc)
            QMessageBox.warning(self, "Mapa", f"Coordenadas inválidas para {usuario.name}: {exc}")
            return

        ventana.destroyed.connect(lambda _=None, v=ventana: self._olvidar_mapa(v))
        self._map_windows.append(ventana)
        ventana.show()

    def _olvidar_mapa(self, ventana: MapWindow) -> None:
        if ventana in self._map_windows:
            self._map_windows.remove(ventana)

    def _usuario_actual(self) -> User | None:
        row = self.table.currentRow()
        if row < 0 or row >= len(self._visibles) or not self.table.selectedItems():
            return None
        return self._visibles[row]

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def _refrescar(self) -> None:
        self._visibles = self.controller.vista_filtrada().a_lista()
        self._populate_table(self._visibles)

    def _populate_table(self, usuarios: list[User]) -> None:
        self.table.clearSelection()
        self.table.setRowCount(len(usuarios))

        for row, usuario in enumerate(usuarios):
            valores = {
                self._columns.id: str(usuario.id),
                self._columns.nombre: usuario.name,
                self._columns.usuario: usuario.username,
                self._columns.email: usuario.email,
                self._columns.direccion: usuario.address.linea(),
            }
            for column, texto in valores.items():
                item = QTableWidgetItem(texto)
                item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
                self.table.setItem(row, column, item)

        self.table.resizeColumnsToContents()
        self.map_button.setEnabled(False)


__all__ = ["MainWindow"]
