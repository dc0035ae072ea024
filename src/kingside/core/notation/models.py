"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color


@dataclass(slots=True)
class FenFields:
    """The six FEN fields, decoded into typed values."""

    board: Board
    side_to_move: Color
    castling: CastlingRights
    en_passant: str | None
    halfmove_clock: int
    fullmove_number: int
