"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import Enum, IntFlag, auto


class Color(str, Enum):
    """Side color, valued by its FEN / piece-code letter."""

    WHITE = "w"
    BLACK = "b"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __str__(self) -> str:
        return self.value


class PieceType(str, Enum):
    """Piece tag, valued by its lowercase letter. ``NULL`` marks an empty cell."""

    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"
    NULL = ""

    def __str__(self) -> str:
        return self.value


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def kingside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_KINGSIDE if color is Color.WHITE else cls.BLACK_KINGSIDE

    @classmethod
    def queenside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_QUEENSIDE if color is Color.WHITE else cls.BLACK_QUEENSIDE

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color is Color.WHITE else cls.BLACK_BOTH
