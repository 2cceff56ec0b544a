"""Automated opponents."""

from chessneon.engine.random_engine import RandomEngine, choose_random_move
from chessneon.engine.search import IEngine

DefaultEngine: type[IEngine] = RandomEngine

__all__ = [
    "DefaultEngine",
    "IEngine",
    "RandomEngine",
    "choose_random_move",
]
