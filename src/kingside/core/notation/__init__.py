"""Notation package: FEN parsing and serialization."""

from kingside.core.notation.fen import (
    PLACEHOLDER_FULLMOVE,
    PLACEHOLDER_HALFMOVE,
    STARTING_FEN,
    format_fen,
    is_en_passant_name,
    parse_fen,
)
from kingside.core.notation.models import FenFields

__all__ = [
    "STARTING_FEN",
    "PLACEHOLDER_HALFMOVE",
    "PLACEHOLDER_FULLMOVE",
    "FenFields",
    "format_fen",
    "is_en_passant_name",
    "parse_fen",
]
