"""Domain errors raised at construction and mutation boundaries."""

from __future__ import annotations


class KingsideError(Exception):
    """Base class for board-state domain errors."""


class InvalidSquareError(KingsideError, ValueError):
    """Raised when a square name is missing or not in algebraic notation."""


class InvalidColorError(KingsideError, ValueError):
    """Raised when a piece is given a color other than 'w' or 'b'."""


class InvalidMoveError(KingsideError, ValueError):
    """Raised when a move is built without two valid squares."""


class InvalidFenError(KingsideError, ValueError):
    """Raised when FEN text is truncated or malformed."""
