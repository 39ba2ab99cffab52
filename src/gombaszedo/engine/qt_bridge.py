"""Qt bridge to run path generation in a worker thread."""

from __future__ import annotations

import random
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.path_generator import (
    GenerationFailure,
    GeneratorLimits,
    PathGenerator,
)


class GeneratorWorker(QObject):
    """Thread-affine worker that generates mushroom paths on demand."""

    path_ready = pyqtSignal(int, object)
    generation_failed = pyqtSignal(int, object)
    generation_cancelled = pyqtSignal(int)
    generation_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_generator")

    def __init__(
        self,
        *,
        max_attempts: int = 300,
        max_steps: int = 10_000,
        seed: int | None = None,
    ) -> None:
        super().__init__()
        self._generator = PathGenerator(
            rng=random.Random(seed),
            limits=GeneratorLimits(max_attempts=max_attempts, max_steps=max_steps),
        )
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int, int)
    def request_path(self, rule_obj: object, length: int, request_id: int) -> None:
        """Generate a path of *length* for *rule_obj* and emit the result."""
        if not isinstance(rule_obj, PieceRule):
            self.generation_error.emit(request_id, "Worker received invalid piece rule")
            return

        self._cancel_event.clear()
        try:
            result = self._generator.generate(
                rule_obj,
                length,
                is_cancelled=self._cancel_event.is_set,
            )
        except Exception as exc:
            self.generation_error.emit(request_id, str(exc))
            return

        if isinstance(result, GenerationFailure):
            if result.cancelled:
                self.generation_cancelled.emit(request_id)
            else:
                self.generation_failed.emit(request_id, result)
            return

        self.path_ready.emit(request_id, result)

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current generation."""
        self._cancel_event.set()

    @pyqtSlot(int, int)
    def set_limits(self, max_attempts: int, max_steps: int) -> None:
        """Update search limits (takes effect on the next request)."""
        self._generator = PathGenerator(
            rng=self._generator.rng,
            limits=GeneratorLimits(max_attempts=max_attempts, max_steps=max_steps),
        )

    @pyqtSlot(object)
    def set_seed(self, seed: object) -> None:
        """Restart the random stream; ``None`` seeds from system entropy."""
        if seed is not None and not isinstance(seed, int):
            return
        self._generator = PathGenerator(
            rng=random.Random(seed),
            limits=self._generator.limits,
        )
