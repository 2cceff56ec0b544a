"""Piece value type: a closed set of the twelve (color, kind) combinations."""

from __future__ import annotations

from enum import Enum

from chessneon.core.enums import Color, PieceType

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


class Piece(Enum):
    """Immutable chess piece. Captures and promotions replace the member."""

    WHITE_PAWN = (Color.WHITE, PieceType.PAWN)
    WHITE_KNIGHT = (Color.WHITE, PieceType.KNIGHT)
    WHITE_BISHOP = (Color.WHITE, PieceType.BISHOP)
    WHITE_ROOK = (Color.WHITE, PieceType.ROOK)
    WHITE_QUEEN = (Color.WHITE, PieceType.QUEEN)
    WHITE_KING = (Color.WHITE, PieceType.KING)
    BLACK_PAWN = (Color.BLACK, PieceType.PAWN)
    BLACK_KNIGHT = (Color.BLACK, PieceType.KNIGHT)
    BLACK_BISHOP = (Color.BLACK, PieceType.BISHOP)
    BLACK_ROOK = (Color.BLACK, PieceType.ROOK)
    BLACK_QUEEN = (Color.BLACK, PieceType.QUEEN)
    BLACK_KING = (Color.BLACK, PieceType.KING)

    @property
    def color(self) -> Color:
        return self.value[0]

    @property
    def piece_type(self) -> PieceType:
        return self.value[1]

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def code(self) -> str:
        """Two-character tag, e.g. ``wP`` or ``bK``."""
        return self.color.code + self.piece_type.char

    @property
    def fen_char(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = self.piece_type.char
        return char if self.color is Color.WHITE else char.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[self.value]

    def __str__(self) -> str:
        return self.fen_char

    @classmethod
    def of(cls, color: Color, piece_type: PieceType) -> Piece:
        return cls((color, piece_type))

    @classmethod
    def from_code(cls, code: str) -> Piece:
        """Create piece from a two-character tag, e.g. 'bN' → black knight."""
        try:
            return _BY_CODE[code]
        except KeyError:
            raise ValueError(f"Invalid piece code: {code!r}") from None

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            return _BY_FEN_CHAR[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None


_BY_CODE: dict[str, Piece] = {p.code: p for p in Piece}
_BY_FEN_CHAR: dict[str, Piece] = {p.fen_char: p for p in Piece}
