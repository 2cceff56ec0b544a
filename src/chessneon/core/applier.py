"""Move application: the only place the board is mutated for a move."""

from __future__ import annotations

from chessneon.core.board import Board
from chessneon.core.enums import Color, PieceType
from chessneon.core.piece import Piece
from chessneon.core.types import Square


def apply_move(board: Board, from_sq: Square, to_sq: Square, color: Color) -> None:
    """Move the piece on *from_sq* to *to_sq*, overwriting any capture.

    A pawn landing on the farthest row becomes a queen of *color*.
    The move is not validated; callers take it from the legal set.
    """
    piece = board[from_sq]
    board[to_sq] = piece
    board[from_sq] = None
    if piece is not None and piece.piece_type == PieceType.PAWN:
        if to_sq[0] == piece.color.promotion_row:
            board[to_sq] = Piece.of(color, PieceType.QUEEN)
