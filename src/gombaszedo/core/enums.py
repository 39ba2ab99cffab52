"""Core enumerations for the puzzle domain."""

from __future__ import annotations

from enum import IntEnum


class PieceRule(IntEnum):
    """Move pattern used to link consecutive mushrooms."""

    ROOK = 1
    BISHOP = 2
    QUEEN = 3
    KNIGHT = 4

    @classmethod
    def from_name(cls, name: str) -> PieceRule:
        """Parse a rule name such as ``"Rook"`` or ``"knight"``."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown piece rule: {name!r}") from None

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♖."""
        return _SYMBOLS[self]

    def __str__(self) -> str:
        return self.name.capitalize()


_SYMBOLS: dict[PieceRule, str] = {
    PieceRule.ROOK: "♖",
    PieceRule.BISHOP: "♗",
    PieceRule.QUEEN: "♕",
    PieceRule.KNIGHT: "♘",
}
