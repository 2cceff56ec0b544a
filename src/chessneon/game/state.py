"""Game state value with board, side to move, outcome and history."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessneon.core.board import Board
from chessneon.core.enums import Color, GameResult
from chessneon.core.move import Move
from chessneon.core.notation import parse_fen, to_fen
from chessneon.core.rules import all_legal_moves, apply_move, has_legal_moves, legal_moves
from chessneon.core.types import Square


class IllegalMoveError(ValueError):
    """Raised when a move outside the legal set is played on a GameState."""


@dataclass(frozen=True)
class GameState:
    """Snapshot of a game.

    Each transition returns a new value with its own board copy, so later
    moves never touch an earlier state's board. The board itself is a
    mutable object; callers must not modify it. The hash skips the board.
    Selection and other interface concerns are kept by the controller.
    """

    board: Board = field(default_factory=Board.initial, hash=False)
    side_to_move: Color = Color.WHITE
    winner: Color | None = None
    move_history: tuple[Move, ...] = ()

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> GameState:
        return cls()

    @classmethod
    def from_fen(cls, fen: str) -> GameState:
        board, side = parse_fen(fen)
        return cls(board=board, side_to_move=side)

    # ── Transitions ──────────────────────────────────────────────────────

    def play(self, move: Move) -> GameState:
        """Apply a legal move and hand the turn to the other side."""
        if self.is_game_over:
            raise IllegalMoveError(f"Game is over, cannot play {move}")
        if move.to_sq not in self.legal_moves_from(move.from_sq):
            raise IllegalMoveError(f"Illegal move for {self.side_to_move}: {move}")

        board = self.board.copy()
        apply_move(board, move.from_sq, move.to_sq, self.side_to_move)
        return replace(
            self,
            board=board,
            side_to_move=self.side_to_move.opposite,
            move_history=self.move_history + (move,),
        )

    def declare_no_moves(self) -> GameState:
        """End the game if the side to move is out of legal moves."""
        if self.is_game_over or has_legal_moves(self.board, self.side_to_move):
            return self
        return replace(self, winner=self.side_to_move.opposite)

    # ── Query helpers ────────────────────────────────────────────────────

    def legal_moves_from(self, sq: Square) -> set[Square]:
        """Legal destinations from *sq*; empty unless it holds a piece of the side to move."""
        piece = self.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return set()
        return legal_moves(self.board, sq)

    def legal_moves(self) -> list[Move]:
        return all_legal_moves(self.board, self.side_to_move)

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None

    @property
    def result(self) -> GameResult:
        if self.winner is None:
            return GameResult.IN_PROGRESS
        if self.winner == Color.WHITE:
            return GameResult.WHITE_WINS
        return GameResult.BLACK_WINS

    @property
    def ply_count(self) -> int:
        return len(self.move_history)

    @property
    def fen(self) -> str:
        return to_fen(self.board, self.side_to_move)
