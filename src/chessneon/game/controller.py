"""GameController: the session that sits between the board UI and the rules.

Coordinates: Players, GameState, selection state.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessneon.core.enums import Color, GameResult
from chessneon.core.move import Move
from chessneon.core.types import Square
from chessneon.engine import IEngine
from chessneon.game.interfaces import GamePhase, IPlayer
from chessneon.game.player import AIPlayer, HumanPlayer
from chessneon.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[GameState], None]
MoveCallback = Callable[[Move, GameState], None]  # move, state after
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs one game at a time: selection, turn flips, the optional bot.

    White is always human. Black is human or, with the bot enabled, an
    :class:`AIPlayer`. The bot's move is requested through
    *on_bot_request*; without one the bot answers immediately.

    Thread-safety: all methods are meant for a single (UI) thread.
    """

    __slots__ = (
        "_state",
        "_players",
        "_phase",
        "_selected",
        "_targets",
        "_engine",
        "_on_bot_request",
        "events",
    )

    def __init__(
        self,
        engine: IEngine | None = None,
        on_bot_request: Callable[[GameState], None] | None = None,
    ) -> None:
        self._state = GameState.initial()
        self._engine = engine
        self._on_bot_request = on_bot_request
        self._players: dict[Color, IPlayer] = {
            Color.WHITE: HumanPlayer(Color.WHITE, "White"),
            Color.BLACK: HumanPlayer(Color.BLACK, "Black"),
        }
        self._phase = GamePhase.AWAITING_MOVE
        self._selected: Square | None = None
        self._targets: frozenset[Square] = frozenset()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def targets(self) -> frozenset[Square]:
        """Legal destinations of the selected piece."""
        return self._targets

    @property
    def bot_enabled(self) -> bool:
        return not self._players[Color.BLACK].is_human

    @property
    def current_player(self) -> IPlayer:
        return self._players[self._state.side_to_move]

    def player(self, color: Color) -> IPlayer:
        return self._players[color]

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self, vs_bot: bool | None = None, fen: str | None = None) -> None:
        """Start over from the initial position (or *fen*).

        *vs_bot* of ``None`` keeps the current bot setting.
        """
        if vs_bot is not None:
            self._players[Color.BLACK] = self._make_black(vs_bot)
        self._state = GameState.from_fen(fen) if fen else GameState.initial()
        self._clear_selection()
        _LOGGER.info("New game (bot %s)", "on" if self.bot_enabled else "off")
        self._emit_state()
        self._prompt_current_player()

    def set_bot_enabled(self, enabled: bool) -> None:
        if enabled == self.bot_enabled:
            return
        self._players[Color.BLACK] = self._make_black(enabled)
        _LOGGER.info("Bot %s", "enabled" if enabled else "disabled")
        if self._state.side_to_move == Color.BLACK:
            self._clear_selection()
        self._emit_state()
        self._prompt_current_player()

    def toggle_bot(self) -> bool:
        """Flip the bot setting and return the new value."""
        self.set_bot_enabled(not self.bot_enabled)
        return self.bot_enabled

    # ── Board interaction ────────────────────────────────────────────────

    def click_square(self, sq: Square) -> None:
        """Select a piece, or move the selected piece to *sq*."""
        if self._selected is not None and sq != self._selected:
            self.try_move(sq)
        else:
            self.select_square(sq)

    def select_square(self, sq: Square) -> None:
        if not self._accepts_human_input():
            return
        piece = self._state.board[sq]
        if piece is None:
            self._clear_selection()
            self._emit_state()
            return
        if piece.color != self._state.side_to_move:
            return
        self._selected = sq
        self._targets = frozenset(self._state.legal_moves_from(sq))
        self._emit_state()

    def try_move(self, to_sq: Square) -> bool:
        """Move the selected piece to *to_sq* if that is a legal target."""
        if self._selected is None or not self._accepts_human_input():
            return False
        if to_sq not in self._targets:
            piece = self._state.board[to_sq]
            if piece is not None and piece.color == self._state.side_to_move:
                self.select_square(to_sq)
            return False
        self._apply(Move(self._selected, to_sq))
        return True

    def play_bot_move(self) -> Move | None:
        """Let the bot move if it is the bot's turn; ``None`` otherwise."""
        cp = self.current_player
        if self._state.is_game_over or not isinstance(cp, AIPlayer):
            return None

        move = cp.choose_move(self._state)
        if move is None:
            self._state = self._state.declare_no_moves()
            if not self._state.is_game_over:
                _LOGGER.warning("%s returned no move although legal moves exist", cp.name)
                return None
            _LOGGER.info("%s has no legal moves: %s", cp.color, self._state.result.name)
            self._emit_state()
            self._emit_game_over(self._state.result)
            return None

        self._apply(move)
        return move

    # ── Internal helpers ─────────────────────────────────────────────────

    def _make_black(self, bot: bool) -> IPlayer:
        if not bot:
            return HumanPlayer(Color.BLACK, "Black")
        return AIPlayer(
            Color.BLACK,
            engine=self._engine,
            on_request_move=self._on_bot_request or self._request_bot_now,
        )

    def _request_bot_now(self, _state: GameState) -> None:
        self.play_bot_move()

    def _accepts_human_input(self) -> bool:
        return not self._state.is_game_over and self.current_player.is_human

    def _apply(self, move: Move) -> None:
        self._state = self._state.play(move)
        self._clear_selection()
        _LOGGER.debug("Played %s, %s to move", move, self._state.side_to_move)
        self._emit_move(move)
        self._emit_state()
        self._prompt_current_player()

    def _clear_selection(self) -> None:
        self._selected = None
        self._targets = frozenset()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        if self._state.is_game_over:
            return
        cp = self.current_player
        if cp.is_human:
            self._set_phase(GamePhase.AWAITING_MOVE)
        else:
            self._set_phase(GamePhase.THINKING)
            cp.request_move(self._state)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_state(self) -> None:
        for cb in self.events.on_state_changed:
            cb(self._state)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)
