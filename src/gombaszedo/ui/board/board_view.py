"""BoardView — the 8×8 grid of clickable squares."""

from __future__ import annotations

from PyQt6.QtCore import QSize, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from gombaszedo.core.types import BOARD_SIZE, Square, make_square
from gombaszedo.ui.styles.theme import MUSHROOM_GLYPH, SMILE_GLYPH, BoardTheme


class BoardView(QWidget):
    """Square buttons laid out row-major; emits the clicked square index."""

    square_clicked = pyqtSignal(int)

    _TILE_SIZE = 64

    def __init__(
        self,
        theme: BoardTheme | None = None,
        board_size: int = BOARD_SIZE,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme or BoardTheme.default()
        self._board_size = board_size
        self._buttons: list[QPushButton] = []
        self._collected: set[Square] = set()
        self._mover: Square | None = None

        layout = QGridLayout(self)
        layout.setSpacing(0)
        layout.setContentsMargins(0, 0, 0, 0)

        font = QFont()
        font.setPointSize(24)
        for row in range(board_size):
            for col in range(board_size):
                sq = make_square(row, col, board_size)
                btn = QPushButton()
                btn.setFont(font)
                btn.setMinimumSize(QSize(self._TILE_SIZE, self._TILE_SIZE))
                btn.setSizePolicy(
                    QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
                )
                btn.clicked.connect(lambda _checked=False, s=sq: self._on_click(s))
                layout.addWidget(btn, row, col)
                self._buttons.append(btn)
        self._apply_theme()

    # ── Public API ───────────────────────────────────────────────────────

    def button_at(self, sq: Square) -> QPushButton:
        return self._buttons[sq]

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._apply_theme()

    def clear(self) -> None:
        """Remove every marker from the board."""
        self._collected.clear()
        self._mover = None
        for btn in self._buttons:
            btn.setText("")

    def show_mushrooms(self, squares: tuple[Square, ...]) -> None:
        self.clear()
        for sq in squares:
            self._buttons[sq].setText(MUSHROOM_GLYPH)

    def show_mover(self, sq: Square | None, symbol: str) -> None:
        """Draw the mover piece on *sq*, erasing its previous square."""
        old = self._mover
        if old is not None:
            self._buttons[old].setText(SMILE_GLYPH if old in self._collected else "")
        self._mover = sq
        if sq is not None:
            self._buttons[sq].setText(symbol)

    def mark_collected(self, sq: Square) -> None:
        self._collected.add(sq)
        self._buttons[sq].setText(SMILE_GLYPH)

    def text_at(self, sq: Square) -> str:
        return self._buttons[sq].text()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _on_click(self, sq: Square) -> None:
        self.square_clicked.emit(sq)

    def _apply_theme(self) -> None:
        border = self._theme.border.name()
        for sq, btn in enumerate(self._buttons):
            row, col = divmod(sq, self._board_size)
            color = self._theme.square_color(row, col).name()
            btn.setStyleSheet(
                f"QPushButton {{ background: {color}; border: 1px solid {border};"
                " border-radius: 0; padding: 0; }"
            )
