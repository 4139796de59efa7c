"""Ejecución de trabajos bloqueantes fuera del hilo de la interfaz."""

from __future__ import annotations

from itertools import count
from typing import Any, Callable

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from usuarios_app.logging_config import get_logger

logger = get_logger(__name__)

Job = Callable[[], Any]
OnSuccess = Callable[[Any], None]
OnFailure = Callable[[Exception], None]


class _JobWorker(QObject):
    succeeded = pyqtSignal(int, object)
    failed = pyqtSignal(int, object)

    def __init__(self, job_id: int, job: Job) -> None:
        super().__init__()
        self.job_id = job_id
        self._job = job

    def run(self) -> None:
        try:
            resultado = self._job()
        except Exception as exc:
            self.failed.emit(self.job_id, exc)
            return
        self.succeeded.emit(self.job_id, resultado)


class QThreadRunner(QObject):
    """Lanza cada trabajo en su propio ``QThread``.

    Los resultados llegan por señales encoladas, de modo que los callbacks se
    ejecutan en el hilo donde vive el runner (normalmente el de la UI).

    Los hilos no son hijos del runner: si ``shutdown`` vence su plazo con un
    trabajo aún en curso, el hilo queda retenido a nivel de módulo hasta que
    termine, y destruir el runner no lo destruye.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._ids = count(1)
        self._hilos: dict[int, tuple[QThread, _JobWorker]] = {}
        self._callbacks: dict[int, tuple[OnSuccess, OnFailure]] = {}

    @property
    def active_count(self) -> int:
        return len(self._hilos)

    def submit(self, job: Job, on_success: OnSuccess, on_failure: OnFailure) -> None:
        _barrer_retenidos()
        job_id = next(self._ids)
        thread = QThread()
        worker = _JobWorker(job_id, job)
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.succeeded.connect(thread.quit)
        worker.failed.connect(thread.quit)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        thread.finished.connect(worker.deleteLater)
        thread.finished.connect(self._limpiar_hilos)

        self._hilos[job_id] = (thread, worker)
        self._callbacks[job_id] = (on_success, on_failure)
        logger.debug("Trabajo %d enviado a un hilo nuevo", job_id)
        thread.start()

    def shutdown(self, timeout_ms: int = 3000) -> None:
        """Descarta callbacks pendientes y espera a que terminen los hilos.

        Los hilos que no terminan en ``timeout_ms`` pasan a estar retenidos;
        ``esperar_hilos_retenidos`` los espera antes de salir del proceso.
        """

        self._callbacks.clear()
        for job_id, (thread, worker) in list(self._hilos.items()):
            thread.quit()
            if not thread.wait(timeout_ms):
                logger.warning("El trabajo %d no terminó en %d ms", job_id, timeout_ms)
                _RETENIDOS[id(thread)] = (thread, worker)
            del self._hilos[job_id]

    @pyqtSlot(int, object)
    def _on_succeeded(self, job_id: int, resultado: object) -> None:
        callbacks = self._callbacks.pop(job_id, None)
        if callbacks is not None:
            callbacks[0](resultado)

    @pyqtSlot(int, object)
    def _on_failed(self, job_id: int, error: object) -> None:
        callbacks = self._callbacks.pop(job_id, None)
        if callbacks is not None:
            callbacks[1](error)

    @pyqtSlot()
    def _limpiar_hilos(self) -> None:
        for job_id, (thread, _worker) in list(self._hilos.items()):
            if thread.isFinished():
                del self._hilos[job_id]


# Hilos abandonados por ``shutdown`` mientras su trabajo seguía en curso.
_RETENIDOS: dict[int, tuple[QThread, _JobWorker]] = {}


def _barrer_retenidos() -> None:
    for clave, (thread, _worker) in list(_RETENIDOS.items()):
        if thread.isFinished():
            del _RETENIDOS[clave]


def hilos_retenidos() -> int:
    """Cantidad de hilos retenidos que todavía no han terminado."""

    _barrer_retenidos()
    return len(_RETENIDOS)


def esperar_hilos_retenidos() -> None:
    """Bloquea hasta que terminen todos los hilos retenidos."""

    for thread, _worker in list(_RETENIDOS.values()):
        thread.quit()
        thread.wait()
    _barrer_retenidos()


__all__ = ["QThreadRunner", "esperar_hilos_retenidos", "hilos_retenidos"]
