"""Square type alias and coordinate helpers.

Board layout (row-major, row 0 at the top of the window)::

    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Every helper takes an optional *board_size* so the generator can work on
boards other than 8×8; algebraic names only exist for the standard board.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0 – board_size² - 1

BOARD_SIZE = 8


def row_of(sq: Square, board_size: int = BOARD_SIZE) -> int:
    """Row index 0 – board_size - 1."""
    return sq // board_size


def col_of(sq: Square, board_size: int = BOARD_SIZE) -> int:
    """Column index 0 – board_size - 1."""
    return sq % board_size


def make_square(row: int, col: int, board_size: int = BOARD_SIZE) -> Square:
    """Create square from row and column."""
    return row * board_size + col


def in_board(row: int, col: int, board_size: int = BOARD_SIZE) -> bool:
    """Whether (row, col) lies on a *board_size* × *board_size* board."""
    return 0 <= row < board_size and 0 <= col < board_size


def is_valid_square(sq: int, board_size: int = BOARD_SIZE) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < board_size * board_size


def square_name(sq: Square) -> str:
    """Human-readable name on the 8×8 board, e.g. 0 → 'a1', 63 → 'h8'."""
    if not is_valid_square(sq):
        raise ValueError(f"Invalid square index: {sq!r}")
    return chr(ord("a") + col_of(sq)) + str(row_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(int(name[1]) - 1, ord(name[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
