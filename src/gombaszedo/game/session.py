"""HuntSession — a single mushroom-hunt game.

Turns a generated path into mushroom placements and judges clicks against
the expected order.  Emits events via simple callbacks so the UI / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.path_generator import (
    GenerationFailure,
    GenerationResult,
    InvalidTargetLength,
    Path,
    PathGenerator,
    split_mover,
)
from gombaszedo.core.types import Square
from gombaszedo.game.interfaces import ClickOutcome, HuntPhase

_LOGGER = logging.getLogger(__name__)

DEFAULT_MUSHROOM_COUNT = 5
MAX_MUSHROOM_COUNT = 20

# ── Event definitions ────────────────────────────────────────────────────────

CollectedCallback = Callable[[Square, int], None]  # square, collected so far
MistakeCallback = Callable[[Square, ClickOutcome], None]
PhaseCallback = Callable[[HuntPhase], None]
WonCallback = Callable[[], None]


@dataclass
class HuntEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_collected: list[CollectedCallback] = field(default_factory=list)
    on_mistake: list[MistakeCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_won: list[WonCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class HuntRequest:
    """Parameters of the game being set up."""

    rule: PieceRule
    mushroom_count: int = DEFAULT_MUSHROOM_COUNT
    with_mover: bool = False

    @property
    def path_length(self) -> int:
        """Number of squares the generator must produce."""
        return self.mushroom_count + 1 if self.with_mover else self.mushroom_count


# ── Session ──────────────────────────────────────────────────────────────────


class HuntSession:
    """Owns the progress index of one game.

    A click is correct iff it hits ``sequence[progress]``.  Correct clicks
    collect the mushroom and advance the index; anything else leaves the
    state untouched.

    Set-up is split in two so the UI can run the search on a worker thread:
    :meth:`prepare` → (search elsewhere) → :meth:`load_result`.
    :meth:`new_game` does all of it synchronously.
    """

    __slots__ = (
        "_generator",
        "_request",
        "_phase",
        "_sequence",
        "_pos_to_index",
        "_progress",
        "_mover",
        "events",
    )

    def __init__(self, generator: PathGenerator | None = None) -> None:
        self._generator = generator or PathGenerator()
        self._request: HuntRequest | None = None
        self._phase = HuntPhase.NOT_STARTED
        self._sequence: Path = ()
        self._pos_to_index: dict[Square, int] = {}
        self._progress = 0
        self._mover: Square | None = None
        self.events = HuntEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def phase(self) -> HuntPhase:
        return self._phase

    @property
    def request(self) -> HuntRequest | None:
        return self._request

    @property
    def rule(self) -> PieceRule | None:
        return self._request.rule if self._request is not None else None

    @property
    def sequence(self) -> Path:
        """Mushroom squares in the order they must be collected."""
        return self._sequence

    @property
    def progress(self) -> int:
        """Index of the next mushroom to collect."""
        return self._progress

    @property
    def remaining(self) -> int:
        return len(self._sequence) - self._progress

    @property
    def mover_square(self) -> Square | None:
        """Current square of the mover piece, ``None`` without a mover."""
        return self._mover

    @property
    def expected_square(self) -> Square | None:
        if self._phase != HuntPhase.PLAYING:
            return None
        return self._sequence[self._progress]

    @property
    def mushrooms(self) -> frozenset[Square]:
        """Squares still holding a mushroom."""
        return frozenset(self._pos_to_index)

    @property
    def is_active(self) -> bool:
        return self._phase == HuntPhase.PLAYING

    def index_of(self, sq: Square) -> int | None:
        """Order index of an uncollected mushroom on *sq*."""
        return self._pos_to_index.get(sq)

    # ── Set-up ───────────────────────────────────────────────────────────

    def new_game(
        self,
        rule: PieceRule,
        mushroom_count: int = DEFAULT_MUSHROOM_COUNT,
        *,
        with_mover: bool = False,
    ) -> bool:
        """Generate a fresh board synchronously. ``False`` if none was found."""
        request = self.prepare(rule, mushroom_count, with_mover=with_mover)
        result = self._generator.generate(request.rule, request.path_length)
        return self.load_result(result)

    def prepare(
        self,
        rule: PieceRule,
        mushroom_count: int = DEFAULT_MUSHROOM_COUNT,
        *,
        with_mover: bool = False,
    ) -> HuntRequest:
        """Clear the board and enter :attr:`HuntPhase.GENERATING`."""
        if mushroom_count < 1:
            raise ValueError(f"Mushroom count must be >= 1, got {mushroom_count}")
        request = HuntRequest(rule, mushroom_count, with_mover)
        square_count = self._generator.board_size**2
        if request.path_length >= square_count:
            raise InvalidTargetLength(
                f"{request.path_length} squares do not fit a board of {square_count}"
            )
        self._request = request
        self._clear()
        self._set_phase(HuntPhase.GENERATING)
        return self._request

    def load_result(self, result: GenerationResult) -> bool:
        """Install a generator result for the prepared request."""
        request = self._request
        if request is None or self._phase != HuntPhase.GENERATING:
            raise RuntimeError("load_result() called without a prepared game")

        if isinstance(result, GenerationFailure):
            _LOGGER.info(
                "No board for %s x%d (%s after %d attempts)",
                request.rule,
                request.mushroom_count,
                result.reason.value,
                result.attempts,
            )
            self._set_phase(HuntPhase.GENERATION_FAILED)
            return False

        if len(result) != request.path_length:
            raise ValueError(
                f"Expected a path of {request.path_length}, got {len(result)}"
            )

        if request.with_mover:
            self._mover, self._sequence = split_mover(result)
        else:
            self._mover, self._sequence = None, result
        self._pos_to_index = {sq: i for i, sq in enumerate(self._sequence)}
        self._progress = 0
        self._set_phase(HuntPhase.PLAYING)
        return True

    # ── Play ─────────────────────────────────────────────────────────────

    def click(self, sq: Square) -> ClickOutcome:
        """Judge a click on *sq* and advance on a correct one."""
        if self._phase != HuntPhase.PLAYING:
            return self._mistake(sq, ClickOutcome.NO_GAME)

        idx = self._pos_to_index.get(sq)
        if idx is None:
            return self._mistake(sq, ClickOutcome.NOT_A_MUSHROOM)
        if idx != self._progress:
            return self._mistake(sq, ClickOutcome.WRONG_ORDER)

        del self._pos_to_index[sq]
        self._progress += 1
        if self._mover is not None:
            self._mover = sq

        for cb in self.events.on_collected:
            cb(sq, self._progress)

        if self._progress < len(self._sequence):
            return ClickOutcome.CORRECT

        self._set_phase(HuntPhase.WON)
        for won_cb in self.events.on_won:
            won_cb()
        return ClickOutcome.COMPLETED

    # ── Internal helpers ─────────────────────────────────────────────────

    def _clear(self) -> None:
        self._sequence = ()
        self._pos_to_index = {}
        self._progress = 0
        self._mover = None

    def _mistake(self, sq: Square, outcome: ClickOutcome) -> ClickOutcome:
        for cb in self.events.on_mistake:
            cb(sq, outcome)
        return outcome

    def _set_phase(self, phase: HuntPhase) -> None:
        if phase == self._phase:
            return
        _LOGGER.debug("Hunt phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
