"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QAction, QCloseEvent, QFont
from PyQt6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.types import Square
from gombaszedo.game.interfaces import ClickOutcome, HuntPhase
from gombaszedo.game.session import HuntSession
from gombaszedo.ui.board.board_view import BoardView
from gombaszedo.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from gombaszedo.ui.generation_session import GenerationSession
from gombaszedo.ui.i18n import t
from gombaszedo.ui.main_window_parts import settings as settings_part
from gombaszedo.ui.styles.theme import SAD_GLYPH, SMILE_GLYPH, THEMES

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for the mushroom hunt."""

    generation_request = pyqtSignal(object, int, int)

    _RESULT_DISPLAY_MS = 700

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setMinimumSize(560, 640)

        self._settings = settings or AppSettings()
        self._hunt = HuntSession()
        self._generation = GenerationSession(
            hunt=self._hunt,
            generation_request=self.generation_request,
            set_status=self._set_status,
            on_board_ready=self._on_board_ready,
            parent=self,
            max_attempts=self._settings.max_attempts,
            max_steps=self._settings.max_steps,
            seed=self._settings.seed,
        )
        self._result_timer = QTimer(self)
        self._result_timer.setSingleShot(True)
        self._result_timer.timeout.connect(self._clear_result)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._generation.setup()

        settings_part.apply_settings(self)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(10)

        top = QHBoxLayout()
        self._piece_label = QLabel()
        self._piece_combo = QComboBox()
        for rule in PieceRule:
            self._piece_combo.addItem("", rule.name)
        self._new_game_btn = QPushButton()
        top.addWidget(self._piece_label)
        top.addWidget(self._piece_combo)
        top.addStretch()
        top.addWidget(self._new_game_btn)
        root.addLayout(top)

        self._board_view = BoardView(THEMES.get(self._settings.board_theme))
        root.addWidget(self._board_view, stretch=1)

        bottom = QHBoxLayout()
        self._status_label = QLabel()
        self._result_label = QLabel()
        font = QFont()
        font.setPointSize(28)
        self._result_label.setFont(font)
        self._result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._result_label.setMinimumWidth(48)
        bottom.addWidget(self._status_label, stretch=1)
        bottom.addWidget(self._result_label)
        root.addLayout(bottom)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        self._game_menu = menu_bar.addMenu("")
        assert self._game_menu is not None

        self._new_game_action = QAction(self)
        self._new_game_action.setShortcut("Ctrl+N")
        self._settings_action = QAction(self)
        self._quit_action = QAction(self)
        self._quit_action.setShortcut("Ctrl+Q")

        self._game_menu.addAction(self._new_game_action)
        self._game_menu.addAction(self._settings_action)
        self._game_menu.addSeparator()
        self._game_menu.addAction(self._quit_action)

    def _connect_signals(self) -> None:
        self._new_game_btn.clicked.connect(self.start_new_game)
        self._new_game_action.triggered.connect(self.start_new_game)
        self._settings_action.triggered.connect(self._on_settings)
        self._quit_action.triggered.connect(self.close)
        self._piece_combo.currentIndexChanged.connect(self._on_piece_changed)
        self._board_view.square_clicked.connect(self._on_square_clicked)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._game_menu.setTitle(s.menu_game)
        self._new_game_action.setText(s.menu_new_game)
        self._settings_action.setText(s.menu_settings)
        self._quit_action.setText(s.menu_quit)
        self._piece_label.setText(s.piece_label)
        self._new_game_btn.setText(s.new_game)
        for i in range(self._piece_combo.count()):
            rule = PieceRule[self._piece_combo.itemData(i)]
            self._piece_combo.setItemText(i, f"{rule.symbol} {s.piece_name(rule.name)}")
        self._refresh_status()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def hunt(self) -> HuntSession:
        return self._hunt

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def select_piece(self, rule: PieceRule) -> None:
        self._piece_combo.setCurrentIndex(self._piece_combo.findData(rule.name))

    def start_new_game(self) -> None:
        """Clear the board and ask the worker for a fresh path."""
        self._clear_result()
        try:
            self._hunt.prepare(
                self._settings.piece_rule,
                self._settings.mushroom_count,
                with_mover=self._settings.show_mover,
            )
        except ValueError as exc:
            _LOGGER.warning("Cannot start a new game: %s", exc)
            self._set_status(t().status_generator_error.format(msg=exc))
            return
        self._board_view.clear()
        self._generation.request_board()

    # ── Hunt callbacks ───────────────────────────────────────────────────

    def _on_board_ready(self, ok: bool) -> None:
        if not ok:
            self._set_status(t().status_failed)
            return

        self._board_view.show_mushrooms(self._hunt.sequence)
        rule = self._hunt.rule
        if rule is not None and self._hunt.mover_square is not None:
            self._board_view.show_mover(self._hunt.mover_square, rule.symbol)
        self._refresh_status()

    def _on_square_clicked(self, sq: Square) -> None:
        outcome = self._hunt.click(sq)
        if not outcome.is_correct:
            self._show_result(False)
            return

        self._board_view.mark_collected(sq)
        rule = self._hunt.rule
        if rule is not None and self._hunt.mover_square is not None:
            self._board_view.show_mover(self._hunt.mover_square, rule.symbol)
        self._show_result(True)
        self._refresh_status()

        if outcome == ClickOutcome.COMPLETED:
            _LOGGER.info("Hunt completed with %s", rule)
            QMessageBox.information(self, t().won_title, t().won_message)

    def _on_piece_changed(self, index: int) -> None:
        name = self._piece_combo.itemData(index)
        if isinstance(name, str):
            self._settings.piece_rule = PieceRule[name]

    def _on_settings(self) -> None:
        settings_part.on_settings(self, settings_dialog_cls=SettingsDialog)

    def _apply_settings(self) -> None:
        settings_part.apply_settings(self)

    # ── Status helpers ───────────────────────────────────────────────────

    def _refresh_status(self) -> None:
        s = t()
        phase = self._hunt.phase
        if phase == HuntPhase.PLAYING:
            rule = self._hunt.rule
            if self._hunt.progress == 0 and rule is not None:
                self._set_status(s.status_start.format(piece=s.piece_name(rule.name)))
            else:
                self._set_status(
                    s.status_next.format(
                        index=self._hunt.progress + 1,
                        total=len(self._hunt.sequence),
                    )
                )
        elif phase == HuntPhase.WON:
            self._set_status(s.status_won)
        elif phase == HuntPhase.GENERATION_FAILED:
            self._set_status(s.status_failed)
        elif phase == HuntPhase.GENERATING:
            self._set_status(s.status_generating)
        else:
            self._set_status(s.status_ready)

    def _set_status(self, text: str) -> None:
        self._status_label.setText(text)

    def status_text(self) -> str:
        return self._status_label.text()

    def result_text(self) -> str:
        return self._result_label.text()

    def _show_result(self, correct: bool) -> None:
        self._result_label.setText(SMILE_GLYPH if correct else SAD_GLYPH)
        self._result_timer.start(self._RESULT_DISPLAY_MS)

    def _clear_result(self) -> None:
        self._result_timer.stop()
        self._result_label.setText("")

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._generation.shutdown()
        super().closeEvent(event)
