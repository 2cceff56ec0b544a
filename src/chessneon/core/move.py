"""Move value object (long-algebraic representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessneon.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable ``(from, to)`` pair.

    Carries no special-move flags: promotion is implied when a pawn
    reaches the farthest row and is always to a queen.
    """

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """Long-algebraic notation, e.g. ``e2e4``."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        if len(text) != 4:
            raise ValueError(f"Invalid move string: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))
