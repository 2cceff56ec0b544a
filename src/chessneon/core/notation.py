"""FEN-style text for boards.

Only the piece-placement and side-to-move fields carry meaning here.
Castling, en-passant and clock fields are accepted and ignored.
"""

from __future__ import annotations

from chessneon.core.board import Board
from chessneon.core.enums import Color
from chessneon.core.piece import Piece
from chessneon.core.types import BOARD_SIZE, make_square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
STARTING_FEN = f"{STARTING_PLACEMENT} w - - 0 1"


def board_from_placement(placement: str) -> Board:
    """Parse the FEN piece-placement field into a :class:`Board`."""
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board[make_square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        text = ""
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += piece.fen_char
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def parse_fen(fen: str) -> tuple[Board, Color]:
    """Parse placement and side to move; White moves when the side is omitted."""
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN: {fen!r}")
    board = board_from_placement(parts[0])
    if len(parts) == 1 or parts[1] == "w":
        return board, Color.WHITE
    if parts[1] == "b":
        return board, Color.BLACK
    raise ValueError(f"Invalid FEN side-to-move field: {parts[1]!r}")


def to_fen(board: Board, side_to_move: Color) -> str:
    return f"{board_to_placement(board)} {side_to_move.code} - - 0 1"
