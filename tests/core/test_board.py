"""Tests for Board."""

from kingside.core.board import Board
from kingside.core.enums import Color, PieceType
from kingside.core.notation import STARTING_FEN, parse_fen
from kingside.core.piece import NULL_PIECE, Piece
from kingside.core.types import parse_square

E1 = parse_square("e1")
E2 = parse_square("e2")
E4 = parse_square("e4")


class TestBoardOperations:
    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert all(board[sq] is NULL_PIECE for sq in range(64))
        assert all(board.is_empty(sq) for sq in range(64))

    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert not board.is_empty(E4)
        assert board.is_empty(E2)

    def test_find(self) -> None:
        board = parse_fen(STARTING_FEN).board
        assert board.find(Piece(Color.BLACK, PieceType.KNIGHT)) == [
            parse_square("b8"),
            parse_square("g8"),
        ]
        assert len(board.find(Piece(Color.WHITE, PieceType.PAWN))) == 8

    def test_copy_independence(self) -> None:
        board = parse_fen(STARTING_FEN).board
        copy = board.copy()
        assert board == copy
        copy[E1] = NULL_PIECE
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_clear(self) -> None:
        board = parse_fen(STARTING_FEN).board
        board.clear()
        assert all(board[sq].is_null for sq in range(64))

    def test_repr_not_empty(self) -> None:
        text = repr(parse_fen(STARTING_FEN).board)
        assert "K" in text
        assert "8 r n b q k b n r" in text
        assert "a b c d e f g h" in text
