"""Ventana principal de la aplicación."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from usuarios_app.core.controller import UserListController
from usuarios_app.core.state import Error, Loading, Success, ViewState
from usuarios_app.models.user import User


@dataclass(slots=True)
class _TableColumns:
    id: int = 0
    nombre: int = 1
    email: int = 2
    telefono: int = 3
    usuario: int = 4
    ciudad: int = 5
    empresa: int = 6


_ENCABEZADOS = ["#", "Nombre", "Email", "Teléfono", "Usuario", "Ciudad", "Empresa"]


class MainWindow(QMainWindow):
    """Ventana principal con listado de usuarios."""

    def __init__(self, *, controller: UserListController) -> None:
        super().__init__()
        self.controller = controller
        self._columns = _TableColumns()

        self.setWindowTitle("Lista de Usuarios")
        self.resize(900, 520)

        self.search_box = QLineEdit(placeholderText="Buscar por nombre, email, ciudad o empresa")
        self.search_box.setText(controller.search_query)
        self.search_box.textChanged.connect(self.controller.set_search_query)

        self.refresh_button = QPushButton("Recargar")
        self.refresh_button.clicked.connect(self.controller.reload)

        self.table = QTableWidget(columnCount=len(_ENCABEZADOS))
        self.table.setHorizontalHeaderLabels(_ENCABEZADOS)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)

        self.loading_label = QLabel("Cargando usuarios...")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.error_title = QLabel("¡Ups! Algo salió mal")
        self.error_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_title.setStyleSheet("color: #b91c1c; font-size: 16pt; font-weight: 600;")
        self.error_message = QLabel("")
        self.error_message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_message.setWordWrap(True)
        self.retry_button = QPushButton("Reintentar")
        self.retry_button.clicked.connect(self.controller.reload)

        self.pages = QStackedWidget()
        self._loading_page = self.pages.addWidget(self.loading_label)
        self._list_page = self.pages.addWidget(self.table)
        self._error_page = self.pages.addWidget(self._build_error_page())

        top_bar = QHBoxLayout()
        top_bar.addWidget(QLabel("Usuarios"))
        top_bar.addStretch(1)
        top_bar.addWidget(self.search_box)
        top_bar.addWidget(self.refresh_button)

        layout = QVBoxLayout()
        layout.addLayout(top_bar)
        layout.addWidget(self.pages)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        self.controller.state_changed.connect(self.render_state)
        self.render_state(self.controller.view_state)

    def _build_error_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch(1)
        layout.addWidget(self.error_title)
        layout.addWidget(self.error_message)
        layout.addWidget(self.retry_button, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch(1)
        return page

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def render_state(self, state: ViewState) -> None:
        """Muestra la página que corresponde a la variante del estado."""

        self.refresh_button.setEnabled(not isinstance(state, Loading))

        if isinstance(state, Loading):
            self.pages.setCurrentIndex(self._loading_page)
            self.statusBar().showMessage("Cargando usuarios...")
        elif isinstance(state, Success):
            self._populate_table(state.users)
            self.pages.setCurrentIndex(self._list_page)
            if state.users:
                self.statusBar().showMessage(f"{len(state.users)} usuarios")
            else:
                self.statusBar().showMessage("Sin resultados")
        elif isinstance(state, Error):
            self.error_message.setText(state.message)
            self.pages.setCurrentIndex(self._error_page)
            self.statusBar().showMessage(state.message, 5000)
        else:
            raise TypeError(f"Estado de vista desconocido: {state!r}")

    def _populate_table(self, usuarios: tuple[User, ...]) -> None:
        self.table.setRowCount(len(usuarios))

        for row, usuario in enumerate(usuarios):
            valores = {
                self._columns.id: f"#{usuario.id}",
                self._columns.nombre: usuario.name,
                self._columns.email: usuario.email,
                self._columns.telefono: usuario.phone,
                self._columns.usuario: usuario.username,
                self._columns.ciudad: usuario.address.city,
                self._columns.empresa: usuario.company.name,
            }
            for column, texto in valores.items():
                item = QTableWidgetItem(texto)
                item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
                self.table.setItem(row, column, item)

        self.table.resizeColumnsToContents()

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------
    def closeEvent(self, event: QCloseEvent) -> None:
        shutdown = getattr(self.controller.runner, "shutdown", None)
        if shutdown is not None:
            shutdown()
        super().closeEvent(event)


__all__ = ["MainWindow"]
