"""Tests for the board grid widget."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from gombaszedo.core.types import A1, C3, D4, H8
from gombaszedo.ui.board.board_view import BoardView
from gombaszedo.ui.styles.theme import MUSHROOM_GLYPH, SMILE_GLYPH


class TestBoardView:
    def test_click_emits_square_index(self) -> None:
        view = BoardView()
        spy = QSignalSpy(view.square_clicked)

        view.button_at(D4).click()
        view.button_at(H8).click()

        assert [spy[i][0] for i in range(len(spy))] == [D4, H8]

    def test_show_mushrooms_replaces_board(self) -> None:
        view = BoardView()
        view.show_mushrooms((A1, D4))
        view.show_mushrooms((H8,))

        assert view.text_at(A1) == ""
        assert view.text_at(H8) == MUSHROOM_GLYPH

    def test_mover_restores_collected_square(self) -> None:
        view = BoardView()
        view.show_mushrooms((D4, H8))
        view.show_mover(A1, "♘")
        view.mark_collected(D4)
        view.show_mover(D4, "♘")

        assert view.text_at(A1) == ""
        assert view.text_at(D4) == "♘"

        view.mark_collected(H8)
        view.show_mover(H8, "♘")
        assert view.text_at(D4) == SMILE_GLYPH

    def test_clear_removes_markers(self) -> None:
        view = BoardView()
        view.show_mushrooms((C3,))
        view.show_mover(A1, "♖")
        view.clear()

        assert all(view.text_at(sq) == "" for sq in range(64))

    def test_smaller_board(self) -> None:
        view = BoardView(board_size=4)
        spy = QSignalSpy(view.square_clicked)
        view.button_at(15).click()
        assert spy[0][0] == 15
