"""Game management layer: state value, players and the session controller.

Quick start::

    from chessneon.game import GameController

    ctrl = GameController()
    ctrl.new_game(vs_bot=True)
    ctrl.click_square((6, 4))   # select e2
    ctrl.click_square((4, 4))   # e2-e4, the bot answers for Black
"""

from chessneon.game.controller import GameController, GameEvents
from chessneon.game.interfaces import GamePhase, IPlayer
from chessneon.game.player import AIPlayer, HumanPlayer
from chessneon.game.state import GameState, IllegalMoveError

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "IllegalMoveError",
]
