"""Shared engine protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessneon.core.board import Board
    from chessneon.core.enums import Color
    from chessneon.core.move import Move


class IEngine(Protocol):
    """Protocol for move selectors used by the game layer."""

    @property
    def name(self) -> str: ...

    def choose_move(self, board: Board, color: Color) -> Move | None:
        """Pick a legal move for *color*, or ``None`` when none exists."""
        ...
