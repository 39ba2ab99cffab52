"""State enums shared by the session and the UI."""

from __future__ import annotations

from enum import IntEnum, auto


class HuntPhase(IntEnum):
    """Finite-state-machine states for a mushroom hunt."""

    NOT_STARTED = auto()
    GENERATING = auto()  # path search running off the UI thread
    PLAYING = auto()
    GENERATION_FAILED = auto()
    WON = auto()


class ClickOutcome(IntEnum):
    """How a single square click was judged."""

    NO_GAME = auto()
    NOT_A_MUSHROOM = auto()
    WRONG_ORDER = auto()
    CORRECT = auto()
    COMPLETED = auto()  # correct, and it was the last mushroom

    @property
    def is_correct(self) -> bool:
        return self in (ClickOutcome.CORRECT, ClickOutcome.COMPLETED)
