"""Visual theme constants and QSS styles for Gombaszedő."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

MUSHROOM_GLYPH = "🍄"
SMILE_GLYPH = "😊"
SAD_GLYPH = "😞"


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the hunting board."""

    light_square: QColor
    dark_square: QColor
    border: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(245, 245, 220),  # beige
            dark_square=QColor(139, 69, 19),  # saddle brown
            border=QColor(0, 0, 0),
        )

    @classmethod
    def forest(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            border=QColor(40, 60, 40),
        )

    def square_color(self, row: int, col: int) -> QColor:
        return self.light_square if (row + col) % 2 == 0 else self.dark_square


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Forest": BoardTheme.forest(),
}


APP_STYLE = """
QMainWindow, QDialog {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QComboBox, QSpinBox {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    padding: 4px 8px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
