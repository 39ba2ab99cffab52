"""Game management layer — hunt session and its state machine.

Quick start::

    from gombaszedo.core import PieceRule
    from gombaszedo.game import HuntSession

    session = HuntSession()
    if session.new_game(PieceRule.ROOK, 5):
        outcome = session.click(session.sequence[0])
"""

from gombaszedo.game.interfaces import ClickOutcome, HuntPhase
from gombaszedo.game.session import (
    DEFAULT_MUSHROOM_COUNT,
    MAX_MUSHROOM_COUNT,
    HuntEvents,
    HuntRequest,
    HuntSession,
)

__all__ = [
    "ClickOutcome",
    "DEFAULT_MUSHROOM_COUNT",
    "HuntEvents",
    "HuntPhase",
    "HuntRequest",
    "HuntSession",
    "MAX_MUSHROOM_COUNT",
]
