"""Punto de entrada de la aplicación.

Crea los componentes de infraestructura y el controlador, y arranca la
interfaz gráfica principal.
"""

from __future__ import annotations

import sys

from PyQt6.QtWidgets import QApplication

from usuarios_app.core.controller import UserListController
from usuarios_app.core.workers import QThreadRunner, esperar_hilos_retenidos
from usuarios_app.infrastructure.api_client import APIClient
from usuarios_app.infrastructure.repositories import UserRepository
from usuarios_app.logging_config import get_logger, setup_logging
from usuarios_app.ui.main_window import MainWindow

logger = get_logger(__name__)


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    setup_logging()
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    api_client = APIClient()
    repository = UserRepository(api_client)
    runner = QThreadRunner()
    controller = UserListController(repository, runner=runner)

    window = MainWindow(controller=controller)
    window.show()
    logger.info("Ventana principal lista (%s)", api_client.users_url)

    codigo = app.exec()
    esperar_hilos_retenidos()
    sys.exit(codigo)


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
