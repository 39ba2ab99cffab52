"""Tests for piece-rule move tables."""

import pytest

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.move_rules import is_legal_move, legal_moves
from gombaszedo.core.types import (
    A1, B3, C2, D4, E5, H1, H8,
    col_of,
    make_square,
    row_of,
)

ALL_RULES = tuple(PieceRule)


class TestRook:
    @pytest.mark.parametrize("sq", [A1, D4, H8, E5])
    def test_fourteen_moves_everywhere(self, sq: int) -> None:
        assert len(legal_moves(sq, PieceRule.ROOK)) == 14

    def test_moves_share_row_or_column(self) -> None:
        moves = legal_moves(D4, PieceRule.ROOK)
        expected = {
            sq
            for sq in range(64)
            if sq != D4 and (row_of(sq) == row_of(D4) or col_of(sq) == col_of(D4))
        }
        assert set(moves) == expected


class TestBishop:
    def test_corner_has_one_diagonal(self) -> None:
        moves = legal_moves(A1, PieceRule.BISHOP)
        assert len(moves) == 7
        assert set(moves) == {make_square(i, i) for i in range(1, 8)}

    def test_center_square(self) -> None:
        assert len(legal_moves(D4, PieceRule.BISHOP)) == 13

    def test_stays_on_square_colour(self) -> None:
        colour = (row_of(E5) + col_of(E5)) % 2
        for sq in legal_moves(E5, PieceRule.BISHOP):
            assert (row_of(sq) + col_of(sq)) % 2 == colour


class TestKnight:
    def test_corner(self) -> None:
        assert set(legal_moves(A1, PieceRule.KNIGHT)) == {
            make_square(1, 2),
            make_square(2, 1),
        }

    def test_center_has_eight(self) -> None:
        assert len(legal_moves(make_square(4, 4), PieceRule.KNIGHT)) == 8

    def test_opposite_corner(self) -> None:
        assert len(legal_moves(H1, PieceRule.KNIGHT)) == 2
        assert is_legal_move(A1, B3, PieceRule.KNIGHT)
        assert is_legal_move(A1, C2, PieceRule.KNIGHT)


class TestQueen:
    @pytest.mark.parametrize("sq", range(64))
    def test_union_of_rook_and_bishop(self, sq: int) -> None:
        queen = legal_moves(sq, PieceRule.QUEEN)
        rook = set(legal_moves(sq, PieceRule.ROOK))
        bishop = set(legal_moves(sq, PieceRule.BISHOP))

        assert not rook & bishop
        assert len(queen) == len(set(queen))
        assert set(queen) == rook | bishop

    def test_center_count(self) -> None:
        assert len(legal_moves(D4, PieceRule.QUEEN)) == 27


class TestGeneral:
    @pytest.mark.parametrize("rule", ALL_RULES)
    def test_never_contains_origin(self, rule: PieceRule) -> None:
        for sq in range(64):
            assert sq not in legal_moves(sq, rule)

    @pytest.mark.parametrize("rule", ALL_RULES)
    def test_moves_are_symmetric(self, rule: PieceRule) -> None:
        for sq in range(64):
            for to_sq in legal_moves(sq, rule):
                assert sq in legal_moves(to_sq, rule)

    def test_order_is_stable(self) -> None:
        assert legal_moves(D4, PieceRule.QUEEN) == legal_moves(D4, PieceRule.QUEEN)

    def test_unknown_rule_moves_nowhere(self) -> None:
        assert legal_moves(D4, "Pawn") == ()  # type: ignore[arg-type]
        assert legal_moves(D4, 99) == ()  # type: ignore[arg-type]

    @pytest.mark.parametrize("sq", [-1, 64, 100])
    def test_off_board_square_rejected(self, sq: int) -> None:
        with pytest.raises(ValueError):
            legal_moves(sq, PieceRule.ROOK)


class TestOtherBoardSizes:
    def test_small_board_rook(self) -> None:
        assert len(legal_moves(0, PieceRule.ROOK, board_size=5)) == 8

    def test_knight_on_three_by_three_center_is_stuck(self) -> None:
        assert legal_moves(4, PieceRule.KNIGHT, board_size=3) == ()

    def test_invalid_board_size(self) -> None:
        with pytest.raises(ValueError):
            legal_moves(0, PieceRule.ROOK, board_size=0)
