"""Square-index type alias and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from typing import Final, TypeAlias

from kingside.core.errors import InvalidSquareError

SquareIndex: TypeAlias = int  # 0–63

FILES: Final = "abcdefgh"
RANKS: Final = "12345678"


def is_valid_square_name(name: object) -> bool:
    """Whether *name* is algebraic notation, e.g. 'e4' (lowercase only)."""
    return (
        isinstance(name, str)
        and len(name) == 2
        and name[0] in FILES
        and name[1] in RANKS
    )


def file_of(sq: SquareIndex) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: SquareIndex) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> SquareIndex:
    """Create square index from file (0–7) and rank (0–7)."""
    return rank * 8 + file


def square_name(sq: SquareIndex) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return FILES[file_of(sq)] + RANKS[rank_of(sq)]


def parse_square(name: str) -> SquareIndex:
    """Parse square name, e.g. 'e4' → 28."""
    if not is_valid_square_name(name):
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    return make_square(FILES.index(name[0]), RANKS.index(name[1]))


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < 64
