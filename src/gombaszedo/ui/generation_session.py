"""Path generation session orchestration for the main UI thread."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from gombaszedo.core.path_generator import GenerationFailure
from gombaszedo.engine.qt_bridge import GeneratorWorker
from gombaszedo.game.interfaces import HuntPhase
from gombaszedo.game.session import HuntSession
from gombaszedo.ui.i18n import t


class GenerationRequestSignal(Protocol):
    """Minimal signal interface used by :class:`GenerationSession`."""

    def connect(self, slot: Callable[..., object]) -> object: ...

    def emit(self, rule_obj: object, length: int, request_id: int) -> object: ...


class _GeneratorCommandBus(QObject):
    """Signal bridge for issuing worker commands with queued delivery."""

    set_limits_requested = pyqtSignal(int, int)
    seed_requested = pyqtSignal(object)


class GenerationSession:
    """Owns worker-thread generation lifecycle and hands paths to the hunt."""

    __slots__ = (
        "__weakref__",
        "_hunt",
        "_generation_request",
        "_set_status",
        "_on_board_ready",
        "_command_bus",
        "_thread",
        "_worker",
        "_request_id",
        "_pending_request",
        "_is_shutting_down",
        "_is_started",
    )

    def __init__(
        self,
        *,
        hunt: HuntSession,
        generation_request: GenerationRequestSignal,
        set_status: Callable[[str], None],
        on_board_ready: Callable[[bool], None],
        parent: QObject | None = None,
        max_attempts: int = 300,
        max_steps: int = 10_000,
        seed: int | None = None,
    ) -> None:
        self._hunt = hunt
        self._generation_request = generation_request
        self._set_status = set_status
        self._on_board_ready = on_board_ready

        self._command_bus = _GeneratorCommandBus(parent)
        self._thread = QThread(parent)
        self._worker = GeneratorWorker(
            max_attempts=max_attempts, max_steps=max_steps, seed=seed
        )
        self._request_id = 0
        self._pending_request: int | None = None
        self._is_shutting_down = False
        self._is_started = False

    @property
    def is_busy(self) -> bool:
        return self._pending_request is not None

    def setup(self) -> None:
        """Start the worker in a dedicated thread and connect callbacks."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._worker.moveToThread(self._thread)
        self._generation_request.connect(self._worker.request_path)
        self._command_bus.set_limits_requested.connect(self._worker.set_limits)
        self._command_bus.seed_requested.connect(self._worker.set_seed)
        self._worker.path_ready.connect(self._on_path_ready)
        self._worker.generation_failed.connect(self._on_generation_failed)
        self._worker.generation_cancelled.connect(self._on_generation_cancelled)
        self._worker.generation_error.connect(self._on_generation_error)
        self._thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Stop the active search and shut down the worker thread."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self.cancel()
        self._thread.quit()
        self._thread.wait(2000)
        self._is_started = False

    def set_limits(self, max_attempts: int, max_steps: int) -> None:
        """Update generator limits for subsequent requests."""
        if self._is_started:
            self._command_bus.set_limits_requested.emit(max_attempts, max_steps)
            return
        self._worker.set_limits(max_attempts, max_steps)

    def set_seed(self, seed: int | None) -> None:
        """Restart the generator's random stream for subsequent requests."""
        if self._is_started:
            self._command_bus.seed_requested.emit(seed)
            return
        self._worker.set_seed(seed)

    def request_board(self) -> None:
        """Ask the worker for a path matching the hunt's prepared request."""
        request = self._hunt.request
        if request is None or not self._is_started or self._is_shutting_down:
            return
        self.cancel()

        self._request_id += 1
        self._pending_request = self._request_id
        self._set_status(t().status_generating)
        self._generation_request.emit(
            request.rule, request.path_length, self._request_id
        )

    def cancel(self) -> None:
        """Drop the pending request and stop the running search."""
        self._pending_request = None
        # threading.Event is safe to set from the UI thread.
        self._worker.cancel()

    # ── Worker callbacks ─────────────────────────────────────────────────

    def _is_current(self, request_id: int) -> bool:
        if self._is_shutting_down or request_id != self._pending_request:
            return False
        return self._hunt.phase == HuntPhase.GENERATING

    def _on_path_ready(self, request_id: int, path_obj: object) -> None:
        if not self._is_current(request_id) or not isinstance(path_obj, tuple):
            return
        self._pending_request = None
        self._on_board_ready(self._hunt.load_result(path_obj))

    def _on_generation_failed(self, request_id: int, failure_obj: object) -> None:
        if not self._is_current(request_id):
            return
        if not isinstance(failure_obj, GenerationFailure):
            return
        self._pending_request = None
        self._on_board_ready(self._hunt.load_result(failure_obj))

    def _on_generation_cancelled(self, request_id: int) -> None:
        if request_id == self._pending_request:
            self._pending_request = None

    def _on_generation_error(self, request_id: int, message: str) -> None:
        if not self._is_current(request_id):
            return
        self._pending_request = None
        self._set_status(t().status_generator_error.format(msg=message))
