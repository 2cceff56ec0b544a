"""Rule queries used by the game layer and any other collaborator.

These are thin functional wrappers over :class:`MoveGenerator`; none of
them raise for ordinary board states.
"""

from __future__ import annotations

from chessneon.core.applier import apply_move
from chessneon.core.board import Board
from chessneon.core.enums import Color, GameResult
from chessneon.core.move import Move
from chessneon.core.move_generator import MoveGenerator
from chessneon.core.types import Square

__all__ = [
    "all_legal_moves",
    "apply_move",
    "game_result",
    "has_legal_moves",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_moves",
]


def pseudo_legal_moves(board: Board, sq: Square) -> set[Square]:
    """Movement-rule destinations of the piece on *sq*, ignoring king safety."""
    return MoveGenerator(board).pseudo_legal_destinations(sq)


def legal_moves(board: Board, sq: Square) -> set[Square]:
    """Destinations of the piece on *sq* that keep its own king safe."""
    return MoveGenerator(board).legal_destinations(sq)


def all_legal_moves(board: Board, color: Color) -> list[Move]:
    """All legal ``(from, to)`` moves for *color*."""
    return MoveGenerator(board).legal_moves(color)


def has_legal_moves(board: Board, color: Color) -> bool:
    return MoveGenerator(board).has_legal_moves(color)


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    return MoveGenerator(board).is_square_attacked(sq, by_color)


def game_result(board: Board, side_to_move: Color) -> GameResult:
    """A side with no legal moves loses; checkmate and stalemate are not told apart."""
    if has_legal_moves(board, side_to_move):
        return GameResult.IN_PROGRESS
    if side_to_move == Color.WHITE:
        return GameResult.BLACK_WINS
    return GameResult.WHITE_WINS
