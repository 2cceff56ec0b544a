"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from chessneon.core.enums import Color, PieceType
from chessneon.core.piece import Piece
from chessneon.core.types import BOARD_SIZE, Square, in_bounds, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by ``(row, col)``.

    No invariant on piece counts is enforced: a board without a king is
    a valid value. Boards compare by contents and are unhashable.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        if not in_bounds(row, col):
            raise IndexError(f"Square off board: {sq!r}")
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        if not in_bounds(row, col):
            raise IndexError(f"Square off board: {sq!r}")
        self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares of *color* in row-major order."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None and piece.color == color:
                    yield make_square(row, col), piece

    def find_king(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if it is missing."""
        king = Piece.of(color, PieceType.KING)
        for sq, piece in self.pieces(color):
            if piece is king:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, Black on rows 0-1, White on rows 6-7."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[make_square(0, col)] = Piece.of(Color.BLACK, pt)
            b[make_square(1, col)] = Piece.BLACK_PAWN
            b[make_square(6, col)] = Piece.WHITE_PAWN
            b[make_square(7, col)] = Piece.of(Color.WHITE, pt)
        return b

    @classmethod
    def from_codes(cls, rows: Sequence[Sequence[str | None]]) -> Board:
        """Build a board from a grid of two-character tags such as ``'wK'``."""
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board grid must be 8 rows of 8 cells")
        b = cls()
        for row, cells in enumerate(rows):
            for col, code in enumerate(cells):
                if code:
                    b._grid[row][col] = Piece.from_code(code)
        return b

    def to_codes(self) -> list[list[str | None]]:
        return [
            [piece.code if piece else None for piece in cells] for cells in self._grid
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            marks = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{BOARD_SIZE - row} {marks}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
