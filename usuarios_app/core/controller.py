"""Controlador del listado de usuarios.

Mantiene el estado que observa la interfaz (estado de la vista, texto de
búsqueda y la lista completa sin filtrar) y coordina las cargas remotas.
"""

from __future__ import annotations

import threading
from functools import partial
from typing import Any, Callable, Protocol, Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from usuarios_app.core.search import apply_filter
from usuarios_app.core.state import Error, Loading, Success, ViewState
from usuarios_app.core.workers import QThreadRunner
from usuarios_app.logging_config import get_logger
from usuarios_app.models.user import User

logger = get_logger(__name__)

MENSAJE_ERROR_DESCONOCIDO = "Error desconocido al cargar usuarios"


class UserFetcher(Protocol):
    def fetch_users(self) -> Sequence[User]: ...


class Runner(Protocol):
    def submit(
        self,
        job: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_failure: Callable[[Exception], None],
    ) -> None: ...


class UserListController(QObject):
    """Orquesta la carga de usuarios y el filtrado en memoria.

    Solo el controlador modifica su estado. La interfaz lee ``view_state`` y
    ``search_query`` y se suscribe a ``state_changed`` y
    ``search_query_changed``; las señales solo se emiten cuando el valor
    cambia.

    Si se llama a ``reload()`` con otra carga en curso, gana la última: los
    resultados de cargas anteriores se descartan al llegar.
    """

    state_changed = pyqtSignal(object)
    search_query_changed = pyqtSignal(str)

    def __init__(
        self,
        fetcher: UserFetcher,
        *,
        runner: Runner | None = None,
        parent: QObject | None = None,
        auto_initialize: bool = True,
    ) -> None:
        super().__init__(parent)
        self._fetcher = fetcher
        self._runner = runner if runner is not None else QThreadRunner(self)
        self._lock = threading.RLock()
        self._view_state: ViewState = Loading()
        self._search_query = ""
        self._usuarios: tuple[User, ...] = ()
        self._ticket = 0

        if auto_initialize:
            self.initialize()

    # ------------------------------------------------------------------
    # Proyección de solo lectura
    # ------------------------------------------------------------------
    @property
    def view_state(self) -> ViewState:
        return self._view_state

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def is_loading(self) -> bool:
        return isinstance(self._view_state, Loading)

    @property
    def runner(self) -> Runner:
        return self._runner

    # ------------------------------------------------------------------
    # Comandos
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Lanza la primera carga de usuarios."""

        self.reload()

    def reload(self) -> None:
        """Pasa a ``Loading`` y solicita los usuarios sin bloquear al llamador."""

        with self._lock:
            self._ticket += 1
            ticket = self._ticket
            cambio = self._asignar_estado(Loading())
            nuevo_estado = self._view_state
        if cambio:
            self.state_changed.emit(nuevo_estado)

        logger.debug("Carga %d iniciada", ticket)
        self._runner.submit(
            self._fetcher.fetch_users,
            partial(self._on_fetch_succeeded, ticket),
            partial(self._on_fetch_failed, ticket),
        )

    def set_search_query(self, text: str) -> None:
        """Registra la búsqueda y, si hay datos visibles, vuelve a filtrarlos."""

        with self._lock:
            consulta_cambio = text != self._search_query
            self._search_query = text
            estado_cambio = False
            if isinstance(self._view_state, Success):
                estado_cambio = self._asignar_estado(Success(apply_filter(self._usuarios, text)))
            nuevo_estado = self._view_state

        if consulta_cambio:
            self.search_query_changed.emit(text)
        if estado_cambio:
            self.state_changed.emit(nuevo_estado)

    # ------------------------------------------------------------------
    # Resultados de la carga
    # ------------------------------------------------------------------
    def _on_fetch_succeeded(self, ticket: int, usuarios: Sequence[User]) -> None:
        with self._lock:
            if ticket != self._ticket:
                logger.debug("Resultado de la carga %d descartado (vigente: %d)", ticket, self._ticket)
                return
            self._usuarios = tuple(usuarios)
            cambio = self._asignar_estado(Success(apply_filter(self._usuarios, self._search_query)))
            nuevo_estado = self._view_state
            total = len(self._usuarios)

        logger.info("Carga %d completada con %d usuarios", ticket, total)
        if cambio:
            self.state_changed.emit(nuevo_estado)

    def _on_fetch_failed(self, ticket: int, error: Exception) -> None:
        with self._lock:
            if ticket != self._ticket:
                logger.debug("Error de la carga %d descartado (vigente: %d)", ticket, self._ticket)
                return
            mensaje = mensaje_de_error(error)
            cambio = self._asignar_estado(Error(mensaje))
            nuevo_estado = self._view_state

        logger.warning("Carga %d fallida (%s): %s", ticket, type(error).__name__, mensaje)
        if cambio:
            self.state_changed.emit(nuevo_estado)

    def _asignar_estado(self, nuevo: ViewState) -> bool:
        if nuevo == self._view_state:
            return False
        logger.debug("Estado: %s -> %s", type(self._view_state).__name__, type(nuevo).__name__)
        self._view_state = nuevo
        return True


def mensaje_de_error(error: BaseException) -> str:
    """Texto del error apto para la interfaz, con un mensaje genérico de respaldo."""

    return str(error).strip() or MENSAJE_ERROR_DESCONOCIDO


__all__ = [
    "MENSAJE_ERROR_DESCONOCIDO",
    "Runner",
    "UserFetcher",
    "UserListController",
    "mensaje_de_error",
]
