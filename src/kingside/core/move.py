"""Move value object (start square → end square)."""

from __future__ import annotations

from kingside.core.errors import InvalidMoveError
from kingside.core.square import Square


class Move:
    """Immutable pair of squares.

    The squares are copied on the way in and on the way out, so neither the
    caller's squares nor later mutation of a returned square can alter the
    move. The promotion choice is not part of a move; it is supplied to
    :meth:`PieceMover.play_move <kingside.core.piece_mover.PieceMover.play_move>`.
    """

    __slots__ = ("_start_square", "_end_square")

    def __init__(self, start_square: Square, end_square: Square) -> None:
        if not start_square or not end_square:
            raise InvalidMoveError("A move must have a start square and an end square")
        if not isinstance(start_square, Square) or not isinstance(end_square, Square):
            raise InvalidMoveError(
                f"Move squares must be Square objects: {start_square!r}, {end_square!r}"
            )
        self._start_square = start_square.clone()
        self._end_square = end_square.clone()

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse long-algebraic text such as 'e2e4'."""
        if len(text) != 4:
            raise InvalidMoveError(f"Invalid move text: {text!r}")
        return cls(Square(text[:2]), Square(text[2:]))

    @property
    def start_square(self) -> Square:
        return self._start_square.clone()

    @property
    def end_square(self) -> Square:
        return self._end_square.clone()

    # ── Display ──────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return (
            self._start_square == other._start_square
            and self._end_square == other._end_square
        )

    def __hash__(self) -> int:
        return hash((self._start_square.name, self._end_square.name))

    def __str__(self) -> str:
        return f"{self._start_square}{self._end_square}"

    def __repr__(self) -> str:
        return f"Move({self._start_square!r}, {self._end_square!r})"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
