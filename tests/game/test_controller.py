"""Tests for GameController: selection, turns and the bot flow."""

from __future__ import annotations

from chessneon.core.enums import Color, GameResult
from chessneon.core.move import Move
from chessneon.core.piece import Piece
from chessneon.core.types import D2, E2, E3, E4, E7, G1
from chessneon.engine import RandomEngine
from chessneon.game.controller import GameController
from chessneon.game.interfaces import GamePhase
from chessneon.game.player import AIPlayer, HumanPlayer
from chessneon.game.state import GameState

MATE_BLACK_TO_MOVE = "k7/1Q6/2K5/8/8/8/8/8 b - - 0 1"


def _controller(**kwargs: object) -> GameController:
    ctrl = GameController(engine=RandomEngine(seed=0), **kwargs)  # type: ignore[arg-type]
    ctrl.new_game(vs_bot=False)
    return ctrl


class TestSelection:
    def test_select_own_piece(self) -> None:
        ctrl = _controller()
        ctrl.click_square(E2)
        assert ctrl.selected == E2
        assert ctrl.targets == frozenset({E3, E4})

    def test_select_empty_clears(self) -> None:
        ctrl = _controller()
        ctrl.select_square(E2)
        ctrl.select_square(E4)
        assert ctrl.selected is None
        assert ctrl.targets == frozenset()

    def test_opponent_piece_ignored(self) -> None:
        ctrl = _controller()
        ctrl.click_square(E7)
        assert ctrl.selected is None

    def test_click_selected_again_keeps_selection(self) -> None:
        ctrl = _controller()
        ctrl.click_square(E2)
        ctrl.click_square(E2)
        assert ctrl.selected == E2

    def test_click_other_own_piece_reselects(self) -> None:
        ctrl = _controller()
        ctrl.click_square(E2)
        ctrl.click_square(D2)
        assert ctrl.selected == D2
        assert ctrl.state.side_to_move == Color.WHITE

    def test_click_non_target_does_not_move(self) -> None:
        ctrl = _controller()
        ctrl.click_square(G1)
        assert not ctrl.try_move((4, 6))
        assert ctrl.state == GameState.initial()

    def test_try_move_without_selection(self) -> None:
        assert not _controller().try_move(E4)


class TestMoves:
    def test_click_to_move(self) -> None:
        ctrl = _controller()
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        assert ctrl.state.board[E4] is Piece.WHITE_PAWN
        assert ctrl.state.side_to_move == Color.BLACK
        assert ctrl.selected is None
        assert ctrl.targets == frozenset()

    def test_hotseat_black_moves_by_click(self) -> None:
        ctrl = _controller()
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        ctrl.click_square(E7)
        assert ctrl.try_move((3, 4))
        assert ctrl.state.side_to_move == Color.WHITE

    def test_events_fire(self) -> None:
        ctrl = _controller()
        moves: list[Move] = []
        states: list[GameState] = []
        ctrl.events.on_move.append(lambda m, s: moves.append(m))
        ctrl.events.on_state_changed.append(states.append)
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        assert moves == [Move(E2, E4)]
        assert states[-1].side_to_move == Color.BLACK

    def test_new_game_resets(self) -> None:
        ctrl = _controller()
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        ctrl.new_game()
        assert ctrl.state == GameState.initial()
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_new_game_from_fen(self) -> None:
        ctrl = _controller()
        ctrl.new_game(fen="8/P7/7k/8/8/8/8/4K3 w")
        ctrl.click_square((1, 0))
        ctrl.click_square((0, 0))
        assert ctrl.state.board[(0, 0)] is Piece.WHITE_QUEEN


class TestBot:
    def test_players(self) -> None:
        ctrl = _controller()
        assert isinstance(ctrl.player(Color.WHITE), HumanPlayer)
        assert isinstance(ctrl.player(Color.BLACK), HumanPlayer)
        assert not ctrl.bot_enabled
        ctrl.set_bot_enabled(True)
        assert isinstance(ctrl.player(Color.BLACK), AIPlayer)
        assert ctrl.bot_enabled

    def test_toggle_bot(self) -> None:
        ctrl = _controller()
        assert ctrl.toggle_bot() is True
        assert ctrl.toggle_bot() is False

    def test_bot_answers_immediately_by_default(self) -> None:
        ctrl = _controller()
        ctrl.set_bot_enabled(True)
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.state.ply_count == 2
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        black_move = ctrl.state.move_history[-1]
        assert ctrl.state.board[black_move.to_sq].color == Color.BLACK

    def test_deferred_bot_request(self) -> None:
        requests: list[GameState] = []
        ctrl = _controller(on_bot_request=requests.append)
        ctrl.set_bot_enabled(True)
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        assert len(requests) == 1
        assert ctrl.phase == GamePhase.THINKING
        assert ctrl.state.side_to_move == Color.BLACK

        move = ctrl.play_bot_move()
        assert move is not None
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_clicks_ignored_while_bot_to_move(self) -> None:
        ctrl = _controller(on_bot_request=lambda state: None)
        ctrl.set_bot_enabled(True)
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        ctrl.click_square(E7)
        assert ctrl.selected is None

    def test_play_bot_move_on_human_turn(self) -> None:
        ctrl = _controller()
        ctrl.set_bot_enabled(True)
        assert ctrl.play_bot_move() is None
        assert ctrl.state == GameState.initial()

    def test_enabling_bot_on_black_turn_prompts_it(self) -> None:
        requests: list[GameState] = []
        ctrl = _controller(on_bot_request=requests.append)
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        ctrl.set_bot_enabled(True)
        assert len(requests) == 1
        assert ctrl.phase == GamePhase.THINKING

    def test_bot_without_moves_ends_game(self) -> None:
        ctrl = _controller()
        results: list[GameResult] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game(vs_bot=True, fen=MATE_BLACK_TO_MOVE)
        assert results == [GameResult.WHITE_WINS]
        assert ctrl.phase == GamePhase.GAME_OVER
        assert phases[-1] == GamePhase.GAME_OVER
        assert ctrl.state.winner == Color.WHITE

    def test_game_over_blocks_input(self) -> None:
        ctrl = _controller()
        ctrl.new_game(vs_bot=True, fen=MATE_BLACK_TO_MOVE)
        ctrl.click_square((2, 2))
        assert ctrl.selected is None
        assert ctrl.play_bot_move() is None


class _NoMoveEngine:
    """Engine stub that never finds a move."""

    @property
    def name(self) -> str:
        return "Silent"

    def choose_move(self, board: object, color: Color) -> Move | None:
        return None


class TestEngineWithoutAnswer:
    def test_game_continues_when_legal_moves_exist(self) -> None:
        ctrl = GameController(engine=_NoMoveEngine())  # type: ignore[arg-type]
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.new_game(vs_bot=True)
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        assert results == []
        assert not ctrl.state.is_game_over
        assert ctrl.phase != GamePhase.GAME_OVER
        assert ctrl.state.side_to_move == Color.BLACK
        assert len(ctrl.state.legal_moves()) == 20
