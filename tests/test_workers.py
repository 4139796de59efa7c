"""Tests for core.workers.QThreadRunner driven by a real Qt event loop."""

import gc
import threading
import time

from PyQt6.QtCore import QCoreApplication

from conftest import FakeFetcher
from usuarios_app.core.controller import UserListController
from usuarios_app.core.state import Error, Loading, Success
from usuarios_app.core.workers import QThreadRunner, esperar_hilos_retenidos, hilos_retenidos
from usuarios_app.infrastructure.errors import NetworkError


def _pump_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QCoreApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class TestQThreadRunner:
    def test_success_callback_runs_on_caller_thread(self, qapp):
        runner = QThreadRunner()
        results = []
        main_thread = threading.get_ident()
        job_threads = []

        def job():
            job_threads.append(threading.get_ident())
            return 42

        runner.submit(job, lambda value: results.append((value, threading.get_ident())), results.append)

        assert _pump_until(lambda: results and runner.active_count == 0)
        assert results == [(42, main_thread)]
        assert job_threads and job_threads[0] != main_thread

    def test_failure_callback_receives_exception(self, qapp):
        runner = QThreadRunner()
        errors = []
        boom = NetworkError("timeout")

        def job():
            raise boom

        runner.submit(job, lambda value: None, errors.append)
        assert _pump_until(lambda: errors and runner.active_count == 0)
        assert errors == [boom]

    def test_shutdown_drops_pending_callbacks(self, qapp):
        runner = QThreadRunner()
        started = threading.Event()
        release = threading.Event()
        results = []

        def job():
            started.set()
            release.wait(1)
            return "tarde"

        runner.submit(job, results.append, results.append)
        assert _pump_until(started.is_set)
        release.set()
        runner.shutdown(timeout_ms=2000)
        _pump_until(lambda: False, timeout=0.2)
        assert results == []
        assert runner.active_count == 0


class TestControllerWithThreads:
    def test_reload_does_not_block_and_settles(self, qapp, directory):
        release = threading.Event()

        class _SlowFetcher:
            def fetch_users(self):
                release.wait(2)
                return directory

        controller = UserListController(_SlowFetcher())
        assert controller.view_state == Loading()
        release.set()
        assert _pump_until(lambda: not controller.is_loading)
        assert controller.view_state == Success(tuple(directory))
        controller.runner.shutdown()

    def test_failure_settles_in_error(self, qapp):
        controller = UserListController(FakeFetcher(NetworkError("timeout")))
        assert _pump_until(lambda: not controller.is_loading)
        assert controller.view_state == Error("timeout")
        controller.runner.shutdown()


class TestShutdownTimeout:
    def test_runner_can_be_destroyed_while_job_still_runs(self, qapp):
        runner = QThreadRunner()
        started = threading.Event()
        release = threading.Event()
        results = []

        def job():
            started.set()
            release.wait(5)
            return "tarde"

        runner.submit(job, results.append, results.append)
        assert _pump_until(started.is_set)

        runner.shutdown(timeout_ms=50)
        assert runner.active_count == 0
        assert hilos_retenidos() == 1

        del runner
        gc.collect()

        release.set()
        esperar_hilos_retenidos()
        assert hilos_retenidos() == 0
        _pump_until(lambda: False, timeout=0.1)
        assert results == []
