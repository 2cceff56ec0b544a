"""Tests for the random opponent."""

import random

from chessneon.core.board import Board
from chessneon.core.enums import Color
from chessneon.core.move import Move
from chessneon.core.notation import board_from_placement
from chessneon.core.rules import all_legal_moves
from chessneon.engine import DefaultEngine, IEngine, RandomEngine, choose_random_move


class TestChooseRandomMove:
    def test_returns_legal_move(self) -> None:
        board = Board.initial()
        move = choose_random_move(board, Color.WHITE, random.Random(1))
        assert move in all_legal_moves(board, Color.WHITE)

    def test_none_without_moves(self) -> None:
        board = board_from_placement("k7/1Q6/2K5/8/8/8/8/8")
        assert choose_random_move(board, Color.BLACK) is None

    def test_single_legal_move(self) -> None:
        # The b8 rook guards the b-file, leaving only Ka2.
        board = board_from_placement("kr6/8/8/8/8/8/8/K7")
        assert all_legal_moves(board, Color.WHITE) == [Move((7, 0), (6, 0))]
        for _ in range(10):
            assert choose_random_move(board, Color.WHITE) == Move((7, 0), (6, 0))

    def test_does_not_mutate_board(self) -> None:
        board = Board.initial()
        choose_random_move(board, Color.WHITE)
        assert board == Board.initial()

    def test_covers_every_move_eventually(self) -> None:
        board = Board.initial()
        rng = random.Random(7)
        seen = {choose_random_move(board, Color.WHITE, rng) for _ in range(2000)}
        assert seen == set(all_legal_moves(board, Color.WHITE))


class TestRandomEngine:
    def test_is_default_engine(self) -> None:
        assert DefaultEngine is RandomEngine
        engine: IEngine = DefaultEngine()
        assert engine.name == "Random"

    def test_name(self) -> None:
        assert RandomEngine().name == "Random"

    def test_seed_is_reproducible(self) -> None:
        board = Board.initial()
        first = [RandomEngine(seed=42).choose_move(board, Color.WHITE) for _ in range(3)]
        assert len(set(first)) == 1

    def test_explicit_rng(self) -> None:
        board = Board.initial()
        a = RandomEngine(rng=random.Random(3))
        b = RandomEngine(rng=random.Random(3))
        assert [a.choose_move(board, Color.BLACK) for _ in range(5)] == [
            b.choose_move(board, Color.BLACK) for _ in range(5)
        ]

    def test_play_applies_move(self) -> None:
        board = Board.initial()
        move = RandomEngine(seed=0).play(board, Color.WHITE)
        assert move is not None
        assert board[move.from_sq] is None
        assert board[move.to_sq] is not None
        assert board[move.to_sq].color == Color.WHITE

    def test_play_without_moves_leaves_board(self) -> None:
        board = board_from_placement("k7/8/1Q6/8/8/8/8/7K")
        before = board.copy()
        assert RandomEngine(seed=0).play(board, Color.BLACK) is None
        assert board == before
