"""BoardWidget: the 8x8 grid of clickable squares."""

from __future__ import annotations

from collections.abc import Collection

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from chessneon.core.board import Board
from chessneon.core.enums import Color
from chessneon.core.types import BOARD_SIZE, Square, make_square
from chessneon.ui.i18n import t
from chessneon.ui.styles.theme import BoardTheme


class BoardWidget(QWidget):
    """Draws pieces as Unicode glyphs on square buttons.

    Signals:
        square_clicked(Square): ``(row, col)`` of the pressed square.
    """

    square_clicked = pyqtSignal(object)

    TILE = 64  # px per square

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.neon()
        self._show_legal_moves = True
        self._board: Board | None = None
        self._selected: Square | None = None
        self._targets: frozenset[Square] = frozenset()
        self._buttons: dict[Square, QPushButton] = {}
        self._setup_ui()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(
        self,
        board: Board,
        selected: Square | None = None,
        targets: Collection[Square] = (),
    ) -> None:
        """Redraw pieces and highlights."""
        self._board = board
        self._selected = selected
        self._targets = frozenset(targets)
        self._refresh()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._refresh()

    def set_show_legal_moves(self, visible: bool) -> None:
        self._show_legal_moves = visible
        self._refresh()

    def button(self, sq: Square) -> QPushButton:
        return self._buttons[sq]

    def retranslate_ui(self) -> None:
        s = t()
        for (row, col), btn in self._buttons.items():
            btn.setAccessibleName(s.square_label.format(row=row + 1, col=col + 1))

    # ── Internal ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        font = QFont()
        font.setPointSize(self.TILE // 2)

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                sq = make_square(row, col)
                btn = QPushButton()
                btn.setFont(font)
                btn.setMinimumSize(self.TILE, self.TILE)
                btn.setSizePolicy(
                    QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
                )
                btn.clicked.connect(lambda _checked=False, s=sq: self.square_clicked.emit(s))
                layout.addWidget(btn, row, col)
                self._buttons[sq] = btn

        self.retranslate_ui()
        self._refresh()

    def _refresh(self) -> None:
        for sq, btn in self._buttons.items():
            piece = self._board[sq] if self._board is not None else None
            btn.setText(piece.symbol if piece else "")
            fg = self._theme.white_piece
            if piece is not None and piece.color == Color.BLACK:
                fg = self._theme.black_piece
            btn.setStyleSheet(
                "QPushButton {"
                f" background: {self._square_color(sq).name()};"
                f" color: {fg.name()};"
                " border: none; border-radius: 0; padding: 0;"
                " }"
            )

    def _square_color(self, sq: Square) -> QColor:
        if sq == self._selected:
            return self._theme.highlight_from
        if self._show_legal_moves and sq in self._targets:
            return self._theme.highlight_to
        row, col = sq
        if (row + col) % 2 == 0:
            return self._theme.light_square
        return self._theme.dark_square
