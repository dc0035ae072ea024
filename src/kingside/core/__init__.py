"""Core domain layer — pure chess board state with zero external dependencies.

Quick start::

    from kingside.core import Move, PieceMover, Position, STARTING_FEN

    pos = Position(STARTING_FEN)
    PieceMover(pos).play_move(Move.from_uci("e2e4"))
    print(pos.fen)
"""

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.errors import (
    InvalidColorError,
    InvalidFenError,
    InvalidMoveError,
    InvalidSquareError,
    KingsideError,
)
from kingside.core.move import Move
from kingside.core.notation import STARTING_FEN, FenFields, format_fen, parse_fen
from kingside.core.piece import NULL_PIECE, Piece
from kingside.core.piece_mover import DEFAULT_PROMOTION, PieceMover
from kingside.core.position import Position
from kingside.core.square import Square
from kingside.core.types import (
    SquareIndex,
    file_of,
    is_valid_square_name,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Errors
    "KingsideError",
    "InvalidColorError",
    "InvalidFenError",
    "InvalidMoveError",
    "InvalidSquareError",
    # Types / helpers
    "SquareIndex",
    "file_of",
    "is_valid_square_name",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "NULL_PIECE",
    "Piece",
    "PieceMover",
    "DEFAULT_PROMOTION",
    "Position",
    "Square",
    # Notation
    "STARTING_FEN",
    "FenFields",
    "format_fen",
    "parse_fen",
]
