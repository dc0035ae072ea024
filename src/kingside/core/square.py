"""Square — a mutable algebraic-notation coordinate.

A square always holds a valid name such as ``'e2'``. The name can be changed
later, directly or through the file/rank accessors, but never to an invalid
value::

    sq = Square("f1")
    sq.rank = "2"
    sq.add_file(-1)
    str(sq)  # 'e2'

Squares also know their spatial relationship to other squares (same file,
a knight-move away, ...). Since they are mutable, anything that holds a square
and hands it out should hand out :meth:`Square.clone` instead.
"""

from __future__ import annotations

from kingside.core.errors import InvalidSquareError
from kingside.core.types import (
    FILES,
    RANKS,
    SquareIndex,
    is_valid_square_name,
    parse_square,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Square:
    """Mutable square on an 8x8 board, identified by its algebraic name."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        if not name:
            raise InvalidSquareError("Square must have a name")
        if not is_valid_square_name(name):
            raise InvalidSquareError(f"Invalid square name: {name!r}")
        self._name = name

    # ── Name / file / rank ───────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, new_name: str) -> None:
        if not is_valid_square_name(new_name):
            raise InvalidSquareError(f"Invalid square name: {new_name!r}")
        self._name = new_name

    @property
    def file(self) -> str:
        """File letter, 'a'–'h'."""
        return self._name[0]

    @file.setter
    def file(self, new_file: str) -> None:
        self.name = f"{new_file}{self.rank}"

    @property
    def rank(self) -> str:
        """Rank digit as a string, '1'–'8'."""
        return self._name[1]

    @rank.setter
    def rank(self, new_rank: str) -> None:
        # '1' and 1 look alike in a name; only the string form is accepted.
        if isinstance(new_rank, (int, float)):
            raise TypeError("Rank must be a string, not a number")
        self.name = f"{self.file}{new_rank}"

    @property
    def index(self) -> SquareIndex:
        """Board index 0–63 (a1=0, h8=63)."""
        return parse_square(self._name)

    # ── Arithmetic ───────────────────────────────────────────────────────

    def add_file(self, i: int) -> None:
        """Shift the square *i* files (negative moves toward the a-file)."""
        _require_offset(i)
        position = FILES.index(self.file) + i
        new_file = FILES[position] if 0 <= position < len(FILES) else "?"
        self.name = f"{new_file}{self.rank}"

    def add_rank(self, i: int) -> None:
        """Shift the square *i* ranks (negative moves toward rank 1)."""
        _require_offset(i)
        self.name = f"{self.file}{int(self.rank) + i}"

    def diff_file(self, other: Square) -> int:
        """Signed file distance from this square to *other*."""
        return FILES.index(other.file) - FILES.index(self.file)

    def diff_rank(self, other: Square) -> int:
        """Signed rank distance from this square to *other*."""
        return RANKS.index(other.rank) - RANKS.index(self.rank)

    def step_to(self, target: Square) -> bool:
        """Advance one square along the line toward *target*.

        Example::

            sq = Square("a1")
            sq.step_to(Square("h8"))
            sq.name  # 'b2'

        Returns False (and leaves the square alone) unless *target* is a
        queen-move away.
        """
        if not self.is_queen_move(target):
            return False

        file_step = _sign(self.diff_file(target))
        rank_step = _sign(self.diff_rank(target))
        if file_step:
            self.add_file(file_step)
        if rank_step:
            self.add_rank(rank_step)
        return True

    # ── Geometry predicates (all false against the same square) ──────────

    def is_same_file(self, other: Square) -> bool:
        if self.equals(other):
            return False
        return self.file == other.file

    def is_same_rank(self, other: Square) -> bool:
        if self.equals(other):
            return False
        return self.rank == other.rank

    def is_bishop_move(self, other: Square) -> bool:
        if self.equals(other):
            return False
        return abs(self.diff_rank(other)) == abs(self.diff_file(other))

    def is_king_move(self, other: Square) -> bool:
        if self.equals(other):
            return False
        return abs(self.diff_rank(other)) < 2 and abs(self.diff_file(other)) < 2

    def is_knight_move(self, other: Square) -> bool:
        if self.equals(other):
            return False
        return {abs(self.diff_rank(other)), abs(self.diff_file(other))} == {1, 2}

    def is_rook_move(self, other: Square) -> bool:
        if self.equals(other):
            return False
        return self.is_same_rank(other) or self.is_same_file(other)

    def is_queen_move(self, other: Square) -> bool:
        if self.equals(other):
            return False
        return self.is_rook_move(other) or self.is_bishop_move(other)

    # ── Copying / comparison ─────────────────────────────────────────────

    def clone(self) -> Square:
        return Square(self._name)

    def equals(self, other: Square) -> bool:
        return self._name == other.name

    @staticmethod
    def get_all_squares() -> list[Square]:
        """All 64 squares, a1..a8, b1..b8, ..., h8."""
        return [Square(f"{file}{rank}") for file in FILES for rank in RANKS]

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return self.equals(other)

    # Mutable: equal squares must not be used as dict keys.
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Square({self._name!r})"


def _require_offset(i: object) -> None:
    if isinstance(i, bool) or not isinstance(i, int):
        raise TypeError(f"Square offset must be an integer, not {type(i).__name__}")
