"""Visual theme constants and QSS styles for Chess Neon."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def neon(cls) -> BoardTheme:
        return cls(
            light_square=QColor(38, 44, 74),
            dark_square=QColor(22, 25, 46),
            highlight_from=QColor(255, 0, 170),  # magenta
            highlight_to=QColor(0, 229, 255),  # cyan
            white_piece=QColor(240, 240, 255),
            black_piece=QColor(255, 214, 0),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(246, 246, 105),
            highlight_to=QColor(155, 199, 0),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Look up a preset; unknown names fall back to neon."""
        presets = {"Neon": cls.neon, "Classic": cls.classic}
        return presets.get(name, cls.neon)()


THEME_NAMES: list[str] = ["Neon", "Classic"]


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #0f1020;
}

QLabel {
    color: #e0e0ff;
    font-family: "Helvetica Neue", sans-serif;
    font-size: 15px;
}

QPushButton {
    background: #1d1f3a;
    color: #e0e0ff;
    border: 1px solid #3a3d7a;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #2a2d55;
}
QPushButton:pressed {
    background: #ff00aa;
}
"""
