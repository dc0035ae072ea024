"""Position — complete board state (placement + side + castling + en passant)."""

from __future__ import annotations

import logging

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color
from kingside.core.notation.fen import (
    PLACEHOLDER_FULLMOVE,
    PLACEHOLDER_HALFMOVE,
    FenFields,
    format_fen,
    is_en_passant_name,
    parse_fen,
)
from kingside.core.piece import Piece
from kingside.core.square import Square
from kingside.core.types import is_valid_square_name, parse_square, square_name

_LOGGER = logging.getLogger(__name__)


class Position:
    """Full chess position built from, and exportable to, FEN.

    Example::

        pos = Position("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
        pos.set_piece("e4", "wp")
        pos.fen

    The typed fields are the source of truth; :attr:`fen` serialises them on
    every read. Move counters are not tracked, so the exported FEN always ends
    in ``0 1``.
    """

    __slots__ = ("board", "side_to_move", "castling", "_en_passant")

    def __init__(self, fen: str) -> None:
        self.board = Board()
        self.side_to_move = Color.WHITE
        self.castling = CastlingRights.NONE
        self._en_passant: str | None = None
        self.fen = fen

    # ── FEN boundary ─────────────────────────────────────────────────────

    @property
    def fen(self) -> str:
        return format_fen(
            FenFields(
                board=self.board,
                side_to_move=self.side_to_move,
                castling=self.castling,
                en_passant=self._en_passant,
                halfmove_clock=PLACEHOLDER_HALFMOVE,
                fullmove_number=PLACEHOLDER_FULLMOVE,
            )
        )

    @fen.setter
    def fen(self, fen: str) -> None:
        fields = parse_fen(fen)
        self.board = fields.board
        self.side_to_move = fields.side_to_move
        self.castling = fields.castling
        self._en_passant = fields.en_passant

    # ── Pieces ───────────────────────────────────────────────────────────

    def get_piece(self, square: Square | str) -> Piece | None:
        """Piece on *square* (NULL_PIECE if empty), or None if off the board."""
        name = square.name if isinstance(square, Square) else square
        if not is_valid_square_name(name):
            return None
        return self.board[parse_square(name)]

    def set_piece(self, square: Square | str, piece: Piece | str) -> None:
        """Put *piece* on *square*; both accept their string shorthand ('e4', 'wp')."""
        if isinstance(square, str):
            square = Square(square)
        if isinstance(piece, str):
            piece = Piece.create(piece)
        self.board[square.index] = piece

    def find_piece(self, piece: Piece) -> list[Square]:
        """All squares containing a piece equal to *piece*."""
        return [Square(square_name(sq)) for sq in self.board.find(piece)]

    # ── Side to move ─────────────────────────────────────────────────────

    def is_white_to_move(self) -> bool:
        return self.side_to_move is Color.WHITE

    def is_black_to_move(self) -> bool:
        return self.side_to_move is Color.BLACK

    @property
    def color_not_to_move(self) -> Color:
        return self.side_to_move.opposite

    def set_white_to_move(self) -> None:
        self.side_to_move = Color.WHITE

    def set_black_to_move(self) -> None:
        self.side_to_move = Color.BLACK

    # ── Castling rights ──────────────────────────────────────────────────

    def can_white_castle_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_KINGSIDE)

    def can_white_castle_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_QUEENSIDE)

    def can_black_castle_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_KINGSIDE)

    def can_black_castle_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_QUEENSIDE)

    def set_white_castle_kingside(self, can_castle: bool = True) -> None:
        self._set_castling_right(CastlingRights.WHITE_KINGSIDE, can_castle)

    def set_white_castle_queenside(self, can_castle: bool = True) -> None:
        self._set_castling_right(CastlingRights.WHITE_QUEENSIDE, can_castle)

    def set_black_castle_kingside(self, can_castle: bool = True) -> None:
        self._set_castling_right(CastlingRights.BLACK_KINGSIDE, can_castle)

    def set_black_castle_queenside(self, can_castle: bool = True) -> None:
        self._set_castling_right(CastlingRights.BLACK_QUEENSIDE, can_castle)

    def _set_castling_right(self, right: CastlingRights, enabled: bool) -> None:
        if enabled:
            self.castling |= right
        else:
            self.castling &= ~right

    # ── En passant ───────────────────────────────────────────────────────

    @property
    def en_passant_target(self) -> Square | None:
        if self._en_passant is None:
            return None
        return Square(self._en_passant)

    @en_passant_target.setter
    def en_passant_target(self, square: Square | str | None) -> None:
        name = square.name if isinstance(square, Square) else square
        if is_en_passant_name(name):
            self._en_passant = name
            return
        if name not in (None, "", "-"):
            _LOGGER.debug("Ignoring en-passant target %r; cleared instead", name)
        self._en_passant = None

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy of this position."""
        pos = Position.__new__(Position)
        pos.board = self.board.copy()
        pos.side_to_move = self.side_to_move
        pos.castling = self.castling
        pos._en_passant = self._en_passant
        return pos

    def __repr__(self) -> str:
        return f"Position({self.fen!r})\n{self.board!r}"
