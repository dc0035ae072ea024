"""Piece value object.

A closed tagged variant: one :class:`Piece` class whose ``piece_type`` tag is
one of pawn, knight, bishop, rook, queen, king, or ``NULL`` for an empty cell.
Behaviour is selected by matching the tag, never by subclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from kingside.core.enums import Color, PieceType
from kingside.core.errors import InvalidColorError

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

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

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# Two-character piece code ('wp', 'bk', ...) ↔ (Color, PieceType)
_CODE_MAP: dict[str, tuple[Color, PieceType]] = {
    f"{color.value}{ptype.value}": (color, ptype)
    for color, ptype in _CHAR_MAP.values()
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece (or an empty cell)."""

    color: Color | None
    piece_type: PieceType

    def __post_init__(self) -> None:
        ptype = PieceType(self.piece_type)
        if ptype is PieceType.NULL:
            if self.color is not None:
                raise InvalidColorError(
                    f"Null piece cannot have a color: {self.color!r}"
                )
            object.__setattr__(self, "piece_type", ptype)
            return
        try:
            color = Color(self.color)
        except ValueError:
            raise InvalidColorError(f"Invalid color: {self.color!r}") from None
        object.__setattr__(self, "color", color)
        object.__setattr__(self, "piece_type", ptype)

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def create(cls, code: str) -> Piece:
        """Piece from a code such as 'wp'; unknown codes give NULL_PIECE."""
        try:
            color, ptype = _CODE_MAP[code]
        except (KeyError, TypeError):
            return NULL_PIECE
        return cls(color, ptype)

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_null(self) -> bool:
        return self.piece_type is PieceType.NULL

    def is_white(self) -> bool:
        return self.color is Color.WHITE

    def is_black(self) -> bool:
        return self.color is Color.BLACK

    def is_color(self, color: Color | str) -> bool:
        return self.color is not None and self.color == color

    def equals(self, other: Piece) -> bool:
        return self == other

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def code(self) -> str:
        """Two-character code, e.g. 'wn'; empty for the null piece."""
        if self.color is None:
            return ""
        return f"{self.color.value}{self.piece_type.value}"

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black, '' = empty)."""
        if self.color is None:
            return ""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        if self.color is None:
            return ""
        return _UNICODE[(self.color, self.piece_type)]


NULL_PIECE: Final = Piece(None, PieceType.NULL)
