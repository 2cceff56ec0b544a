"""Tests for the immutable GameState value."""

import pytest

from chessneon.core.board import Board
from chessneon.core.enums import Color, GameResult
from chessneon.core.move import Move
from chessneon.core.notation import STARTING_FEN
from chessneon.core.piece import Piece
from chessneon.core.types import E2, E4, E5, E7, G1, F3
from chessneon.game.state import GameState, IllegalMoveError

MATE_BLACK_TO_MOVE = "k7/1Q6/2K5/8/8/8/8/8 b - - 0 1"


class TestInitial:
    def test_defaults(self) -> None:
        state = GameState.initial()
        assert state.board == Board.initial()
        assert state.side_to_move == Color.WHITE
        assert state.winner is None
        assert state.move_history == ()
        assert state.result == GameResult.IN_PROGRESS
        assert not state.is_game_over

    def test_fen(self) -> None:
        assert GameState.initial().fen == STARTING_FEN

    def test_from_fen(self) -> None:
        state = GameState.from_fen(MATE_BLACK_TO_MOVE)
        assert state.side_to_move == Color.BLACK
        assert state.board[(0, 0)] is Piece.BLACK_KING

    def test_frozen(self) -> None:
        state = GameState.initial()
        with pytest.raises(AttributeError):
            state.side_to_move = Color.BLACK  # type: ignore[misc]


class TestPlay:
    def test_play_returns_new_state(self) -> None:
        start = GameState.initial()
        after = start.play(Move(E2, E4))
        assert after is not start
        assert after.side_to_move == Color.BLACK
        assert after.board[E4] is Piece.WHITE_PAWN
        assert after.move_history == (Move(E2, E4),)
        assert after.ply_count == 1

    def test_original_untouched(self) -> None:
        start = GameState.initial()
        start.play(Move(E2, E4))
        assert start.board == Board.initial()
        assert start.side_to_move == Color.WHITE

    def test_turns_alternate(self) -> None:
        state = GameState.initial().play(Move(E2, E4)).play(Move(E7, E5)).play(Move(G1, F3))
        assert state.side_to_move == Color.BLACK
        assert state.ply_count == 3

    def test_wrong_side_rejected(self) -> None:
        with pytest.raises(IllegalMoveError, match="Illegal move"):
            GameState.initial().play(Move(E7, E5))

    def test_illegal_destination_rejected(self) -> None:
        with pytest.raises(IllegalMoveError):
            GameState.initial().play(Move(E2, E5))

    def test_illegal_move_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            GameState.initial().play(Move((4, 4), (3, 4)))

    def test_promotion(self) -> None:
        state = GameState.from_fen("8/P7/7k/8/8/8/8/4K3 w")
        after = state.play(Move((1, 0), (0, 0)))
        assert after.board[(0, 0)] is Piece.WHITE_QUEEN


class TestNoMoves:
    def test_declare_no_moves(self) -> None:
        state = GameState.from_fen(MATE_BLACK_TO_MOVE).declare_no_moves()
        assert state.winner == Color.WHITE
        assert state.result == GameResult.WHITE_WINS
        assert state.is_game_over

    def test_declare_no_moves_with_moves_is_noop(self) -> None:
        state = GameState.initial()
        assert state.declare_no_moves() is state

    def test_play_after_game_over(self) -> None:
        state = GameState.from_fen("k7/8/1Q6/8/8/8/8/7K b").declare_no_moves()
        with pytest.raises(IllegalMoveError, match="Game is over"):
            state.play(Move((0, 0), (0, 1)))

    def test_black_wins(self) -> None:
        state = GameState.from_fen("K7/1q6/2k5/8/8/8/8/8 w").declare_no_moves()
        assert state.result == GameResult.BLACK_WINS


class TestQueries:
    def test_legal_moves_from_own_piece(self) -> None:
        assert GameState.initial().legal_moves_from(E2) == {(5, 4), E4}

    def test_legal_moves_from_opponent_piece(self) -> None:
        assert GameState.initial().legal_moves_from(E7) == set()

    def test_legal_moves_from_empty(self) -> None:
        assert GameState.initial().legal_moves_from(E4) == set()

    def test_legal_moves(self) -> None:
        assert len(GameState.initial().legal_moves()) == 20
        assert GameState.from_fen(MATE_BLACK_TO_MOVE).legal_moves() == []


class TestHashing:
    def test_state_is_hashable(self) -> None:
        state = GameState.initial()
        assert hash(state) == hash(GameState.initial())
        assert len({state, GameState.initial()}) == 1

    def test_hash_ignores_board(self) -> None:
        after = GameState.initial().play(Move(E2, E4))
        assert {after: "e4"}[after] == "e4"
