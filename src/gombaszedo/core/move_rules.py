"""Reachability of squares under the supported piece rules.

Moves are computed on an empty board: a piece reaches every square along its
rays up to the edge, nothing ever blocks it.
"""

from __future__ import annotations

from functools import lru_cache

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.types import (
    BOARD_SIZE,
    Square,
    in_board,
    is_valid_square,
    make_square,
)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

_NO_MOVES: tuple[Square, ...] = ()

MoveTable = tuple[tuple[Square, ...], ...]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
    board_size: int,
) -> MoveTable:
    targets: list[tuple[Square, ...]] = []
    for sq in range(board_size * board_size):
        row, col = divmod(sq, board_size)
        moves: list[Square] = []
        for dr, dc in offsets:
            ar = row + dr
            ac = col + dc
            if in_board(ar, ac, board_size):
                moves.append(make_square(ar, ac, board_size))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
    board_size: int,
) -> MoveTable:
    targets: list[tuple[Square, ...]] = []
    for sq in range(board_size * board_size):
        row, col = divmod(sq, board_size)
        moves: list[Square] = []
        for dr, dc in directions:
            ar = row + dr
            ac = col + dc
            while in_board(ar, ac, board_size):
                moves.append(make_square(ar, ac, board_size))
                ar += dr
                ac += dc
        targets.append(tuple(moves))
    return tuple(targets)


@lru_cache(maxsize=8)
def move_tables(board_size: int = BOARD_SIZE) -> dict[PieceRule, MoveTable]:
    """Per-rule target tables for a *board_size* × *board_size* board."""
    if board_size < 1:
        raise ValueError(f"Board size must be >= 1, got {board_size}")

    rook = _build_rays(ROOK_DIRS, board_size)
    bishop = _build_rays(BISHOP_DIRS, board_size)
    # Rook and bishop targets never overlap, so concatenation is the union.
    queen = tuple(r + b for r, b in zip(rook, bishop))
    return {
        PieceRule.ROOK: rook,
        PieceRule.BISHOP: bishop,
        PieceRule.QUEEN: queen,
        PieceRule.KNIGHT: _build_targets(KNIGHT_OFFSETS, board_size),
    }


# -- Public API ---------------------------------------------------------


def legal_moves(
    sq: Square,
    rule: PieceRule,
    board_size: int = BOARD_SIZE,
) -> tuple[Square, ...]:
    """Squares reachable from *sq* in one move of *rule*.

    The order is fixed for a given square and rule, which keeps seeded path
    generation reproducible. An unrecognised rule moves nowhere and yields
    an empty tuple.
    """
    if not is_valid_square(sq, board_size):
        raise ValueError(f"Square {sq!r} is off a {board_size}x{board_size} board")

    table = move_tables(board_size).get(rule)
    if table is None:
        return _NO_MOVES
    return table[sq]


def is_legal_move(
    from_sq: Square,
    to_sq: Square,
    rule: PieceRule,
    board_size: int = BOARD_SIZE,
) -> bool:
    """Can a *rule* piece on *from_sq* reach *to_sq* in one move?"""
    return to_sq in legal_moves(from_sq, rule, board_size)
