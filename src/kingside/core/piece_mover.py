"""PieceMover — applies moves to a Position with all of their side effects."""

from __future__ import annotations

import logging
from typing import Final

from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.move import Move
from kingside.core.piece import NULL_PIECE, Piece
from kingside.core.position import Position
from kingside.core.square import Square

_LOGGER = logging.getLogger(__name__)

DEFAULT_PROMOTION: Final = PieceType.QUEEN

_PROMOTION_HINTS: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}

_ROOK_HOME_SQUARES: Final = frozenset({"a1", "h1", "a8", "h8"})


class PieceMover:
    """Move-application engine bound to a single :class:`Position`.

    The position is held by reference and mutated in place. No legality
    checking is done: the caller is trusted to supply a move whose start
    square holds the piece being moved.
    """

    __slots__ = ("_position",)

    def __init__(self, position: Position) -> None:
        self._position = position

    @property
    def position(self) -> Position:
        return self._position

    def play_move(self, move: Move, promotion: PieceType | str | None = None) -> None:
        """Play *move*, promoting a pawn that reaches the last rank.

        *promotion* is one of Q/R/B/N (any case) or the matching
        :class:`PieceType`; ``None`` means queen. Any other value leaves the
        pawn unpromoted on the back rank.
        """
        position = self._position
        start = move.start_square
        end = move.end_square

        piece = position.get_piece(start)
        captured = position.get_piece(end)
        _LOGGER.debug(
            "Playing %s (%s, captures %s)", move, piece.code, captured.code or "-"
        )

        position.set_piece(end, piece)
        position.set_piece(start, NULL_PIECE)
        position.en_passant_target = None

        if piece.piece_type == PieceType.PAWN:
            self._after_pawn_move(piece, start, end, captured, promotion)
        elif piece.piece_type == PieceType.KING:
            self._after_king_move(piece, start, end)
        elif piece.piece_type == PieceType.ROOK:
            self._revoke_rook_corner(piece.color, start)

        if captured.piece_type == PieceType.ROOK:
            self._revoke_rook_corner(captured.color, end)

        if position.is_white_to_move():
            position.set_black_to_move()
        else:
            position.set_white_to_move()

    # ── Pawn side effects ────────────────────────────────────────────────

    def _after_pawn_move(
        self,
        pawn: Piece,
        start: Square,
        end: Square,
        captured: Piece,
        promotion: PieceType | str | None,
    ) -> None:
        rank_diff = start.diff_rank(end)

        if abs(rank_diff) == 2:
            target = start.clone()
            target.add_rank(rank_diff // 2)
            self._position.en_passant_target = target

        if end.rank in ("1", "8"):
            self._promote(pawn, end, promotion)

        if start.diff_file(end) != 0 and captured.is_null:
            victim = end.clone()
            victim.add_rank(-1 if rank_diff > 0 else 1)
            self._position.set_piece(victim, NULL_PIECE)

    def _promote(
        self, pawn: Piece, square: Square, hint: PieceType | str | None
    ) -> None:
        piece_type = _promotion_type(hint)
        if piece_type is None:
            _LOGGER.warning(
                "Unknown promotion piece %r; pawn on %s is not promoted", hint, square
            )
            return
        self._position.set_piece(square, Piece(pawn.color, piece_type))

    # ── King / rook side effects ─────────────────────────────────────────

    def _after_king_move(self, king: Piece, start: Square, end: Square) -> None:
        self._position.castling &= ~CastlingRights.both(king.color)

        if start.file != "e":
            return
        if end.file == "g":
            self._relocate_rook(f"h{start.rank}", f"f{start.rank}")
        elif end.file == "c":
            self._relocate_rook(f"a{start.rank}", f"d{start.rank}")

    def _relocate_rook(self, rook_from: str, rook_to: str) -> None:
        _LOGGER.debug("Castling: rook %s -> %s", rook_from, rook_to)
        rook = self._position.get_piece(rook_from)
        self._position.set_piece(rook_to, rook)
        self._position.set_piece(rook_from, NULL_PIECE)

    def _revoke_rook_corner(self, color: Color, square: Square) -> None:
        if square.name not in _ROOK_HOME_SQUARES:
            return
        if square.file == "h":
            right = CastlingRights.kingside(color)
        else:
            right = CastlingRights.queenside(color)
        self._position.castling &= ~right


def _promotion_type(hint: PieceType | str | None) -> PieceType | None:
    if hint is None:
        return DEFAULT_PROMOTION
    if isinstance(hint, PieceType):
        return hint if hint in _PROMOTION_HINTS.values() else None
    if isinstance(hint, str):
        if not hint:
            return DEFAULT_PROMOTION
        return _PROMOTION_HINTS.get(hint.lower())
    return None
