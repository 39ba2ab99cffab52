"""Randomized backtracking search for mushroom paths.

A path is a sequence of distinct squares where each square is one move of
the active piece rule away from the previous one.  The search restarts from
a fresh random square whenever an attempt runs out of its step budget, so a
valid path is not guaranteed even when one exists.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, MutableSequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeAlias, TypeVar

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.move_rules import legal_moves
from gombaszedo.core.types import BOARD_SIZE, Square

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 300
DEFAULT_MAX_STEPS = 10_000

CancelCheck = Callable[[], bool]
Path: TypeAlias = tuple[Square, ...]

_T = TypeVar("_T")


class RandomSource(Protocol):
    """Minimal random interface; :class:`random.Random` satisfies it."""

    def randrange(self, stop: int, /) -> int: ...


class InvalidTargetLength(ValueError):
    """Requested path length can never be produced on this board."""


class FailureReason(Enum):
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"


@dataclass(slots=True, frozen=True)
class GeneratorLimits:
    """Work bounds for a single :meth:`PathGenerator.generate` call."""

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    max_steps: int = DEFAULT_MAX_STEPS  # per attempt, across the whole recursion

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.max_steps < 1:
            raise ValueError("max_steps must be >= 1")


@dataclass(slots=True, frozen=True)
class GenerationFailure:
    """No path was found within the budget (or the search was cancelled)."""

    reason: FailureReason
    attempts: int
    steps: int

    @property
    def cancelled(self) -> bool:
        return self.reason is FailureReason.CANCELLED


GenerationResult: TypeAlias = Path | GenerationFailure


def _never_cancelled() -> bool:
    return False


def fisher_yates_shuffle(items: MutableSequence[_T], rng: RandomSource) -> None:
    """Shuffle *items* in place, drawing one ``randrange`` per position."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


def split_mover(path: Path) -> tuple[Square, Path]:
    """Split a path into the mover's start square and the collectibles."""
    if not path:
        raise ValueError("Cannot split an empty path")
    return path[0], path[1:]


class PathGenerator:
    """Produces random paths for a piece rule.

    The generator owns its random source, so reusing one instance gives a
    single reproducible stream of paths for a seeded ``random.Random``.
    Instances are not thread-safe; use one per thread.
    """

    __slots__ = (
        "_rng",
        "_limits",
        "_board_size",
        "_cancel_check",
        "_rule",
        "_target",
        "_steps",
        "_total_steps",
        "_stop",
    )

    def __init__(
        self,
        rng: RandomSource | None = None,
        limits: GeneratorLimits | None = None,
        board_size: int = BOARD_SIZE,
    ) -> None:
        if board_size < 1:
            raise ValueError(f"Board size must be >= 1, got {board_size}")
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._limits = limits or GeneratorLimits()
        self._board_size = board_size
        self._cancel_check: CancelCheck = _never_cancelled
        self._rule = PieceRule.ROOK
        self._target = 0
        self._steps = 0
        self._total_steps = 0
        self._stop: FailureReason | None = None

    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def limits(self) -> GeneratorLimits:
        return self._limits

    @property
    def board_size(self) -> int:
        return self._board_size

    # -- Public API ---------------------------------------------------------

    def generate(
        self,
        rule: PieceRule,
        target_length: int,
        is_cancelled: CancelCheck | None = None,
    ) -> GenerationResult:
        """Find a path of exactly *target_length* squares for *rule*.

        Raises :class:`InvalidTargetLength` when the length is below one or
        not smaller than the number of squares on the board.
        """
        square_count = self._board_size * self._board_size
        if target_length < 1 or target_length >= square_count:
            raise InvalidTargetLength(
                f"Target length must be in [1, {square_count - 1}], "
                f"got {target_length}"
            )

        self._rule = rule
        self._target = target_length
        self._cancel_check = is_cancelled or _never_cancelled
        self._total_steps = 0

        attempt = 0
        try:
            for attempt in range(1, self._limits.max_attempts + 1):
                start = self._rng.randrange(square_count)
                path = [start]
                self._steps = 0
                self._stop = None

                found = self._extend(path)
                self._total_steps += self._steps

                if found:
                    _LOGGER.info(
                        "%s path of %d found on attempt %d (%d steps)",
                        rule,
                        target_length,
                        attempt,
                        self._total_steps,
                    )
                    return tuple(path)

                if self._stop is FailureReason.CANCELLED:
                    _LOGGER.info("Path generation cancelled on attempt %d", attempt)
                    return GenerationFailure(
                        FailureReason.CANCELLED, attempt, self._total_steps
                    )

                _LOGGER.debug(
                    "Attempt %d from square %d failed after %d steps",
                    attempt,
                    start,
                    self._steps,
                )
        finally:
            self._cancel_check = _never_cancelled

        _LOGGER.info(
            "No %s path of %d within %d attempts",
            rule,
            target_length,
            attempt,
        )
        return GenerationFailure(FailureReason.EXHAUSTED, attempt, self._total_steps)

    # -- Search (private) -------------------------------------------------

    def _extend(self, path: list[Square]) -> bool:
        if len(path) >= self._target:
            return True
        if self._should_stop():
            return False

        candidates = [
            sq
            for sq in legal_moves(path[-1], self._rule, self._board_size)
            if sq not in path
        ]
        fisher_yates_shuffle(candidates, self._rng)

        for sq in candidates:
            path.append(sq)
            if self._extend(path):
                return True
            path.pop()
            if self._stop is not None:
                return False
        return False

    def _should_stop(self) -> bool:
        self._steps += 1
        if self._steps > self._limits.max_steps:
            self._stop = FailureReason.EXHAUSTED
            return True
        if self._cancel_check():
            self._stop = FailureReason.CANCELLED
            return True
        return False


def generate(
    rule: PieceRule,
    target_length: int,
    board_size: int = BOARD_SIZE,
    rng: RandomSource | None = None,
    limits: GeneratorLimits | None = None,
    is_cancelled: CancelCheck | None = None,
) -> GenerationResult:
    """One-shot convenience wrapper around :class:`PathGenerator`."""
    generator = PathGenerator(rng=rng, limits=limits, board_size=board_size)
    return generator.generate(rule, target_length, is_cancelled=is_cancelled)
