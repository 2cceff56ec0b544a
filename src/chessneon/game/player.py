"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chessneon.core.enums import Color
from chessneon.engine import DefaultEngine, IEngine
from chessneon.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chessneon.core.move import Move
    from chessneon.game.state import GameState


class HumanPlayer(IPlayer):
    """A human participant; moves come from board clicks.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, state: GameState) -> None:
        pass  # Human moves arrive via controller.click_square()


class AIPlayer(IPlayer):
    """A bot participant backed by an :class:`IEngine`.

    ``request_move`` does not pick a move itself: it invokes
    *on_request_move*, which decides when the controller should call
    :meth:`choose_move` (the Qt shell defers it with a timer).

    Args:
        color: Side the bot plays.
        engine: Move selector, a fresh ``DefaultEngine`` when omitted.
        name: Display name, defaults to the engine name.
        on_request_move: ``(GameState) -> None``, called when it is the
            bot's turn.
    """

    __slots__ = ("_color", "_engine", "_name", "_on_request_move")

    def __init__(
        self,
        color: Color,
        engine: IEngine | None = None,
        name: str = "",
        on_request_move: Callable[[GameState], None] | None = None,
    ) -> None:
        self._color = color
        self._engine = engine if engine is not None else DefaultEngine()
        self._name = name or f"{self._engine.name} bot"
        self._on_request_move = on_request_move

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def engine(self) -> IEngine:
        return self._engine

    def request_move(self, state: GameState) -> None:
        if self._on_request_move is not None:
            self._on_request_move(state)

    def choose_move(self, state: GameState) -> Move | None:
        return self._engine.choose_move(state.board, self._color)
