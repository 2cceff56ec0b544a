"""Pseudo-legal and legal move generation + attack detection."""

from __future__ import annotations

from chessneon.core.applier import apply_move
from chessneon.core.board import Board
from chessneon.core.enums import Color, PieceType
from chessneon.core.move import Move
from chessneon.core.types import Square, in_bounds, make_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


class MoveGenerator:
    """Generates moves for the pieces on a :class:`Board`.

    The generator never mutates the board it wraps; legality checks run
    on scratch copies.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_destinations(self, sq: Square) -> set[Square]:
        """Destinations allowed by the movement rule of the piece on *sq*.

        King safety is ignored. An empty square yields an empty set.
        """
        piece = self._board[sq]
        if piece is None:
            return set()

        color = piece.color
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            return self._gen_pawn(sq, color)
        if pt == PieceType.KNIGHT:
            return self._gen_offsets(sq, color, KNIGHT_OFFSETS)
        if pt == PieceType.KING:
            return self._gen_offsets(sq, color, KING_OFFSETS)
        return self._gen_sliding(sq, color, _SLIDER_DIRS[pt])

    def legal_destinations(self, sq: Square) -> set[Square]:
        """Pseudo-legal destinations that do not leave the mover's king attacked."""
        piece = self._board[sq]
        if piece is None:
            return set()

        color = piece.color
        opponent = color.opposite
        legal: set[Square] = set()
        for to_sq in self.pseudo_legal_destinations(sq):
            scratch = self._board.copy()
            apply_move(scratch, sq, to_sq, color)
            king_sq = scratch.find_king(color)
            # A missing king cannot be proven safe.
            if king_sq is None:
                continue
            if MoveGenerator(scratch).is_square_attacked(king_sq, opponent):
                continue
            legal.add(to_sq)
        return legal

    def legal_moves(self, color: Color) -> list[Move]:
        """Every legal move of *color*, grouped by origin in row-major order."""
        moves: list[Move] = []
        for from_sq, _piece in self._board.pieces(color):
            for to_sq in sorted(self.legal_destinations(from_sq)):
                moves.append(Move(from_sq, to_sq))
        return moves

    def has_legal_moves(self, color: Color) -> bool:
        return any(self.legal_destinations(sq) for sq, _piece in self._board.pieces(color))

    # -- Attack detection (public) -----------------------------------------

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* reachable by any piece of *by_color*?

        Pawns attack their two forward diagonals whether or not those
        squares are occupied, unlike pawn move generation.
        """
        row, col = sq
        for from_sq, piece in self._board.pieces(by_color):
            if piece.piece_type == PieceType.PAWN:
                if from_sq[0] + by_color.forward == row and abs(from_sq[1] - col) == 1:
                    return True
                continue
            if sq in self.pseudo_legal_destinations(from_sq):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color) -> set[Square]:
        board = self._board
        row, col = sq
        step = color.forward
        moves: set[Square] = set()

        one_row = row + step
        if in_bounds(one_row, col) and board.is_empty((one_row, col)):
            moves.add(make_square(one_row, col))
            two_row = row + 2 * step
            if row == color.pawn_start_row and board.is_empty((two_row, col)):
                moves.add(make_square(two_row, col))

        for cap_col in (col - 1, col + 1):
            if not in_bounds(one_row, cap_col):
                continue
            target = board[(one_row, cap_col)]
            if target is not None and target.color != color:
                moves.add(make_square(one_row, cap_col))
        return moves

    def _gen_offsets(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
    ) -> set[Square]:
        board = self._board
        row, col = sq
        moves: set[Square] = set()
        for dr, dc in offsets:
            to_row, to_col = row + dr, col + dc
            if not in_bounds(to_row, to_col):
                continue
            target = board[(to_row, to_col)]
            if target is None or target.color != color:
                moves.add(make_square(to_row, to_col))
        return moves

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
    ) -> set[Square]:
        board = self._board
        row, col = sq
        moves: set[Square] = set()
        for dr, dc in directions:
            to_row, to_col = row + dr, col + dc
            while in_bounds(to_row, to_col):
                target = board[(to_row, to_col)]
                if target is None:
                    moves.add(make_square(to_row, to_col))
                elif target.color != color:
                    moves.add(make_square(to_row, to_col))
                    break
                else:
                    break
                to_row += dr
                to_col += dc
        return moves
