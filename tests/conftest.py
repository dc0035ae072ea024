"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from kingside.core.notation import STARTING_FEN
from kingside.core.piece_mover import PieceMover
from kingside.core.position import Position


@pytest.fixture
def start_position() -> Position:
    """Fresh standard starting position."""
    return Position(STARTING_FEN)


@pytest.fixture
def mover(start_position: Position) -> PieceMover:
    """PieceMover bound to the starting position."""
    return PieceMover(start_position)
