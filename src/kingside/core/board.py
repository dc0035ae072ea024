"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from kingside.core.piece import NULL_PIECE, Piece
from kingside.core.types import SquareIndex, make_square


class Board:
    """Mutable 64-cell grid. Empty cells hold :data:`NULL_PIECE`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece] = [NULL_PIECE] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: SquareIndex) -> Piece:
        return self._squares[sq]

    def __setitem__(self, sq: SquareIndex, piece: Piece) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: SquareIndex) -> bool:
        return self._squares[sq].is_null

    # -- Query helpers ------------------------------------------------------

    def find(self, piece: Piece) -> list[SquareIndex]:
        """Indexes of every cell holding a piece equal to *piece*."""
        return [sq for sq, occupant in enumerate(self._squares) if occupant == piece]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [NULL_PIECE] * 64

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) or ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
