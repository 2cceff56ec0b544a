"""Internationalisation strings for the Chess Neon UI.

Usage::

    from chessneon.ui.i18n import t, set_language

    set_language("Indonesian")
    print(t().btn_bot_on)          # "Main vs Bot (Hitam)"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    status_turn: str  # "Turn: {color}"
    status_bot_suffix: str
    status_winner: str  # "{color} wins! (no moves for {loser})"
    color_white: str
    color_black: str

    # ── Control panel ────────────────────────────────────────────────────
    btn_reset: str
    btn_bot_on: str
    btn_bot_off: str

    # ── Board ────────────────────────────────────────────────────────────
    square_label: str  # accessible name, "row {row}, column {col}"


_EN = Strings(
    window_title="Chess Neon",
    status_turn="Turn: {color}",
    status_bot_suffix=" (Bot)",
    status_winner="{color} wins! (no legal moves for {loser})",
    color_white="White",
    color_black="Black",
    btn_reset="Reset",
    btn_bot_on="Play vs Bot (Black)",
    btn_bot_off="Turn Bot Off",
    square_label="row {row}, column {col}",
)

_ID = Strings(
    window_title="Chess Neon",
    status_turn="Giliran: {color}",
    status_bot_suffix=" (Bot)",
    status_winner="{color} Menang! (tidak ada langkah {loser})",
    color_white="Putih",
    color_black="Hitam",
    btn_reset="Ulangi",
    btn_bot_on="Main vs Bot (Hitam)",
    btn_bot_off="Matikan Bot",
    square_label="baris {row}, kolom {col}",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Indonesian": _ID,
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
