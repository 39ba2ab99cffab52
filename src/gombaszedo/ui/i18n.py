"""Internationalisation strings for the Gombaszedő UI.

Usage::

    from gombaszedo.ui.i18n import t, set_language

    set_language("Hungarian")
    print(t().new_game)            # "Új játék"
    print(t().status_next.format(index=2, total=5))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_settings: str
    menu_quit: str
    new_game: str
    piece_label: str

    status_ready: str
    status_generating: str
    status_start: str  # "{piece}"
    status_next: str  # "{index} / {total}"
    status_won: str
    status_failed: str
    status_generator_error: str  # "{msg}"

    won_title: str
    won_message: str

    # Piece names, indexed by PieceRule name
    piece_rook: str
    piece_bishop: str
    piece_queen: str
    piece_knight: str

    # ── Settings dialog ──────────────────────────────────────────────────
    settings_title: str
    settings_language: str
    settings_board_theme: str
    settings_mushrooms: str
    settings_mover: str
    settings_max_attempts: str
    settings_max_steps: str
    settings_seed: str
    settings_seed_random: str

    def piece_name(self, rule_name: str) -> str:
        """Localised name for a :class:`PieceRule` member name."""
        return getattr(self, f"piece_{rule_name.lower()}", rule_name)


_EN = Strings(
    window_title="Mushroom Hunt",
    menu_game="&Game",
    menu_new_game="&New game",
    menu_settings="&Settings…",
    menu_quit="&Quit",
    new_game="New game",
    piece_label="Piece:",
    status_ready="Choose a piece and start a new game.",
    status_generating="Placing mushrooms…",
    status_start="Start: click mushroom 1 ({piece})",
    status_next="Next: {index} / {total}",
    status_won="Well done — all mushrooms collected!",
    status_failed="Could not place the mushrooms — try again.",
    status_generator_error="Generator error: {msg}",
    won_title="Victory",
    won_message="You won! Every mushroom has been collected.",
    piece_rook="Rook",
    piece_bishop="Bishop",
    piece_queen="Queen",
    piece_knight="Knight",
    settings_title="Settings",
    settings_language="Language:",
    settings_board_theme="Board theme:",
    settings_mushrooms="Mushrooms:",
    settings_mover="Show the piece on the board:",
    settings_max_attempts="Max attempts:",
    settings_max_steps="Max steps per attempt:",
    settings_seed="Random seed:",
    settings_seed_random="random",
)

_HU = Strings(
    window_title="Gombaszedés",
    menu_game="&Játék",
    menu_new_game="Ú&j játék",
    menu_settings="&Beállítások…",
    menu_quit="&Kilépés",
    new_game="Új játék",
    piece_label="Bábu:",
    status_ready="Válassz bábut, és kezdj új játékot.",
    status_generating="Gombák elhelyezése…",
    status_start="Kezdés: kattints a 1. gombára ({piece})",
    status_next="Következő: {index} / {total}",
    status_won="Gratulálok — minden gomba összeszedve!",
    status_failed="Nem sikerült elhelyezni — próbáld újra.",
    status_generator_error="Generátor hiba: {msg}",
    won_title="Győzelem",
    won_message="Megnyerted! Minden gomba összeszedve.",
    piece_rook="Bástya",
    piece_bishop="Futó",
    piece_queen="Vezér",
    piece_knight="Huszár",
    settings_title="Beállítások",
    settings_language="Nyelv:",
    settings_board_theme="Tábla témája:",
    settings_mushrooms="Gombák száma:",
    settings_mover="Bábu megjelenítése a táblán:",
    settings_max_attempts="Próbálkozások száma:",
    settings_max_steps="Lépéskorlát próbálkozásonként:",
    settings_seed="Véletlen mag:",
    settings_seed_random="véletlen",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Hungarian": _HU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
