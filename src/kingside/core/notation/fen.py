"""FEN parsing and serialization.

Both functions are pure: they translate between FEN text and
:class:`~kingside.core.notation.models.FenFields` and hold no state.
"""

from __future__ import annotations

from typing import Final

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color
from kingside.core.errors import InvalidFenError
from kingside.core.notation.models import FenFields
from kingside.core.piece import Piece
from kingside.core.types import FILES, make_square

STARTING_FEN: Final = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Move counters are not tracked; Position exports these.
PLACEHOLDER_HALFMOVE: Final = 0
PLACEHOLDER_FULLMOVE: Final = 1

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

_EN_PASSANT_RANKS: Final = "36"


def is_en_passant_name(name: object) -> bool:
    """Whether *name* can be an en-passant target: file a-h, rank 3 or 6."""
    return (
        isinstance(name, str)
        and len(name) == 2
        and name[0] in FILES
        and name[1] in _EN_PASSANT_RANKS
    )


def parse_fen(fen: str) -> FenFields:
    """Parse a six-field FEN string into :class:`FenFields`."""
    if not isinstance(fen, str) or not fen:
        raise InvalidFenError(f"Must have a valid FEN string: {fen!r}")
    parts = fen.split()
    if len(parts) != 6:
        raise InvalidFenError(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    board = _parse_placement(placement, fen)

    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InvalidFenError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise InvalidFenError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    en_passant: str | None = None
    if ep_part != "-":
        if not is_en_passant_name(ep_part):
            raise InvalidFenError(f"Invalid FEN en-passant square: {ep_part!r}")
        en_passant = ep_part

    for counter in (halfmove_part, fullmove_part):
        if not (counter.isascii() and counter.isdigit()):
            raise InvalidFenError(f"Invalid FEN move counter: {counter!r}")

    return FenFields(
        board=board,
        side_to_move=side,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=int(halfmove_part),
        fullmove_number=int(fullmove_part),
    )


def format_fen(fields: FenFields) -> str:
    """Serialise :class:`FenFields` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = fields.board[make_square(file, rank)]
            if piece.is_null:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = str(fields.side_to_move)

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if fields.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = fields.en_passant or "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{fields.halfmove_clock} {fields.fullmove_number}"
    )


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidFenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise InvalidFenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise InvalidFenError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[make_square(file, rank)] = Piece.from_char(ch)
                except ValueError:
                    raise InvalidFenError(
                        f"Invalid FEN piece character {ch!r}: {fen!r}"
                    ) from None
                file += 1
            if file > 8:
                raise InvalidFenError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise InvalidFenError(f"Invalid FEN rank width: {fen!r}")
    return board
