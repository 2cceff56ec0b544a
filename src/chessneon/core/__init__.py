"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessneon.core import Board, Color, legal_moves, apply_move, parse_square

    board = Board.initial()
    e2 = parse_square("e2")
    print(legal_moves(board, e2))         # {(5, 4), (4, 4)}
    apply_move(board, e2, parse_square("e4"), Color.WHITE)
"""

from chessneon.core.board import Board
from chessneon.core.enums import Color, GameResult, PieceType
from chessneon.core.move import Move
from chessneon.core.move_generator import MoveGenerator
from chessneon.core.notation import (
    STARTING_FEN,
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
    parse_fen,
    to_fen,
)
from chessneon.core.piece import Piece
from chessneon.core.rules import (
    all_legal_moves,
    apply_move,
    game_result,
    has_legal_moves,
    is_square_attacked,
    legal_moves,
    pseudo_legal_moves,
)
from chessneon.core.types import (
    Square,
    in_bounds,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    # Rules
    "all_legal_moves",
    "apply_move",
    "game_result",
    "has_legal_moves",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_moves",
    # Notation
    "STARTING_FEN",
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
    "parse_fen",
    "to_fen",
]
