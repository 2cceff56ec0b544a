"""Random opponent: a uniformly random pick from the full legal-move set."""

from __future__ import annotations

import logging
import random

from chessneon.core.applier import apply_move
from chessneon.core.board import Board
from chessneon.core.enums import Color
from chessneon.core.move import Move
from chessneon.core.rules import all_legal_moves

_LOGGER = logging.getLogger(__name__)


def choose_random_move(
    board: Board,
    color: Color,
    rng: random.Random | None = None,
) -> Move | None:
    """Return a random legal move for *color*, or ``None`` if it has none."""
    moves = all_legal_moves(board, color)
    if not moves:
        return None
    return (rng or random).choice(moves)


class RandomEngine:
    """Move selector with no evaluation at all.

    Args:
        seed: Seed for a private :class:`random.Random`; ignored when *rng*
            is given.
        rng: Random source to draw from.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def name(self) -> str:
        return "Random"

    def choose_move(self, board: Board, color: Color) -> Move | None:
        move = choose_random_move(board, color, self._rng)
        if move is None:
            _LOGGER.debug("No legal moves for %s", color)
        else:
            _LOGGER.debug("Random move for %s: %s", color, move)
        return move

    def play(self, board: Board, color: Color) -> Move | None:
        """Choose a move for *color* and apply it to *board* in place."""
        move = self.choose_move(board, color)
        if move is not None:
            apply_move(board, move.from_sq, move.to_sq, color)
        return move
