"""SettingsDialog — application-wide settings."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.path_generator import DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_STEPS
from gombaszedo.game.session import DEFAULT_MUSHROOM_COUNT, MAX_MUSHROOM_COUNT
from gombaszedo.ui.i18n import LANGUAGES, t
from gombaszedo.ui.styles.theme import THEMES

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    board_theme: str = "Classic"

    # Game
    piece_rule: PieceRule = PieceRule.ROOK
    mushroom_count: int = DEFAULT_MUSHROOM_COUNT
    show_mover: bool = False

    # Generator
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    max_steps: int = DEFAULT_MAX_STEPS
    seed: int | None = None  # None = seed from system entropy


# ── Dialog ───────────────────────────────────────────────────────────────────


class SettingsDialog(QDialog):
    """Edits an :class:`AppSettings` instance in place on accept."""

    _SEED_RANDOM = -1

    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._settings = settings
        s = t()
        self.setWindowTitle(s.settings_title)

        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        self._lang_combo.setCurrentIndex(
            max(0, self._lang_combo.findText(settings.language))
        )

        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(THEMES))
        self._theme_combo.setCurrentText(settings.board_theme)

        self._count_spin = QSpinBox()
        self._count_spin.setRange(1, MAX_MUSHROOM_COUNT)
        self._count_spin.setValue(settings.mushroom_count)

        self._mover_check = QCheckBox()
        self._mover_check.setChecked(settings.show_mover)

        self._attempts_spin = QSpinBox()
        self._attempts_spin.setRange(1, 10_000)
        self._attempts_spin.setValue(settings.max_attempts)

        self._steps_spin = QSpinBox()
        self._steps_spin.setRange(1, 1_000_000)
        self._steps_spin.setSingleStep(1000)
        self._steps_spin.setValue(settings.max_steps)

        self._seed_spin = QSpinBox()
        self._seed_spin.setRange(self._SEED_RANDOM, 2_147_483_647)
        self._seed_spin.setSpecialValueText(s.settings_seed_random)
        self._seed_spin.setValue(
            self._SEED_RANDOM if settings.seed is None else settings.seed
        )

        form = QFormLayout()
        form.setSpacing(12)
        form.addRow(s.settings_language, self._lang_combo)
        form.addRow(s.settings_board_theme, self._theme_combo)
        form.addRow(s.settings_mushrooms, self._count_spin)
        form.addRow(s.settings_mover, self._mover_check)
        form.addRow(s.settings_max_attempts, self._attempts_spin)
        form.addRow(s.settings_max_steps, self._steps_spin)
        form.addRow(s.settings_seed, self._seed_spin)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(buttons)

    def accept(self) -> None:
        self.apply(self._settings)
        super().accept()

    def apply(self, settings: AppSettings) -> None:
        settings.language = self._lang_combo.currentText()
        settings.board_theme = self._theme_combo.currentText()
        settings.mushroom_count = self._count_spin.value()
        settings.show_mover = self._mover_check.isChecked()
        settings.max_attempts = self._attempts_spin.value()
        settings.max_steps = self._steps_spin.value()
        seed = self._seed_spin.value()
        settings.seed = None if seed == self._SEED_RANDOM else seed
