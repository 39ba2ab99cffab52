"""MainWindow settings dialog and application helpers."""

from __future__ import annotations

from typing import Any

from gombaszedo.ui.i18n import set_language
from gombaszedo.ui.styles.theme import THEMES, BoardTheme


def on_settings(host: Any, *, settings_dialog_cls: type[Any]) -> None:
    dlg = settings_dialog_cls(host._settings, host)
    if dlg.exec():
        host._apply_settings()


def apply_settings(host: Any) -> None:
    s = host._settings

    # Language must come first so all retranslate calls use the new locale
    set_language(s.language)
    host.retranslate_ui()

    host._board_view.set_theme(THEMES.get(s.board_theme, BoardTheme.default()))
    host.select_piece(s.piece_rule)

    # Generator (applied to subsequent requests; doesn't interrupt the current one)
    host._generation.set_limits(s.max_attempts, s.max_steps)
    host._generation.set_seed(s.seed)
