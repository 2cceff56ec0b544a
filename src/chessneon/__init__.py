"""Chess Neon, a small chess rules engine with a PyQt6 board."""

__version__ = "0.1.0"
