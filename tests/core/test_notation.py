"""Tests for FEN parsing and serialisation."""

import pytest

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.errors import InvalidFenError
from kingside.core.notation import (
    PLACEHOLDER_FULLMOVE,
    PLACEHOLDER_HALFMOVE,
    STARTING_FEN,
    FenFields,
    format_fen,
    is_en_passant_name,
    parse_fen,
)
from kingside.core.piece import Piece
from kingside.core.position import Position
from kingside.core.types import parse_square


class TestFenParsing:
    def test_starting_side(self) -> None:
        assert parse_fen(STARTING_FEN).side_to_move is Color.WHITE

    def test_starting_castling(self) -> None:
        assert parse_fen(STARTING_FEN).castling == CastlingRights.ALL

    def test_starting_en_passant(self) -> None:
        assert parse_fen(STARTING_FEN).en_passant is None

    def test_counters_are_parsed(self) -> None:
        fields = parse_fen("8/8/8/8/8/8/8/8 b - - 12 40")
        assert fields.halfmove_clock == 12
        assert fields.fullmove_number == 40

    def test_starting_kings(self) -> None:
        board = parse_fen(STARTING_FEN).board
        assert board[parse_square("e1")] == Piece(Color.WHITE, PieceType.KING)
        assert board[parse_square("e8")] == Piece(Color.BLACK, PieceType.KING)

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert parse_fen(fen).en_passant == "e3"

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        assert parse_fen(fen).castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_invalid_fen_raises(self) -> None:
        with pytest.raises(InvalidFenError):
            parse_fen("invalid")

    def test_invalid_fen_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_fen("")

    def test_invalid_side_to_move_raises(self) -> None:
        with pytest.raises(InvalidFenError, match="side-to-move"):
            parse_fen("8/8/8/8/8/8/8/8 x - - 0 1")

    def test_uppercase_side_to_move_raises(self) -> None:
        with pytest.raises(InvalidFenError, match="side-to-move"):
            parse_fen("8/8/8/8/8/8/8/8 W - - 0 1")

    def test_invalid_board_rank_count_raises(self) -> None:
        with pytest.raises(InvalidFenError, match="8 ranks"):
            parse_fen("8/8/8/8/8/8/8 w - - 0 1")

    @pytest.mark.parametrize(
        "placement",
        ["9/8/8/8/8/8/8/8", "7/8/8/8/8/8/8/8", "ppppppppp/8/8/8/8/8/8/8", "0/8/8/8/8/8/8/8"],
    )
    def test_invalid_board_rank_width_raises(self, placement: str) -> None:
        with pytest.raises(InvalidFenError, match="Invalid FEN"):
            parse_fen(f"{placement} w - - 0 1")

    def test_invalid_piece_letter_raises(self) -> None:
        with pytest.raises(InvalidFenError, match="piece character"):
            parse_fen("7x/8/8/8/8/8/8/8 w - - 0 1")

    @pytest.mark.parametrize("castling", ["Kx", "KK", "-K", "kqKQQ", "A"])
    def test_invalid_castling_field_raises(self, castling: str) -> None:
        with pytest.raises(InvalidFenError, match="castling"):
            parse_fen(f"8/8/8/8/8/8/8/8 w {castling} - 0 1")

    @pytest.mark.parametrize("ep", ["e4", "i3", "e", "e33", "E3", "--"])
    def test_invalid_en_passant_raises(self, ep: str) -> None:
        with pytest.raises(InvalidFenError, match="en-passant"):
            parse_fen(f"8/8/8/8/8/8/8/8 w - {ep} 0 1")

    @pytest.mark.parametrize("counters", ["x 1", "0 y", "-1 1", "0 1.5"])
    def test_invalid_counters_raise(self, counters: str) -> None:
        with pytest.raises(InvalidFenError, match="move counter"):
            parse_fen(f"8/8/8/8/8/8/8/8 w - - {counters}")

    def test_extra_field_raises(self) -> None:
        with pytest.raises(InvalidFenError, match="6 fields"):
            parse_fen(f"{STARTING_FEN} extra")


class TestFenSerialisation:
    def test_format_fields(self) -> None:
        board = Board()
        board[parse_square("e1")] = Piece.create("wk")
        board[parse_square("e8")] = Piece.create("bk")
        fields = FenFields(
            board=board,
            side_to_move=Color.BLACK,
            castling=CastlingRights.BLACK_BOTH,
            en_passant="d3",
            halfmove_clock=3,
            fullmove_number=9,
        )
        assert format_fen(fields) == "4k3/8/8/8/8/8/8/4K3 b kq d3 3 9"

    def test_castling_order_is_normalised(self) -> None:
        fields = parse_fen("8/8/8/8/8/8/8/8 w qkQK - 0 1")
        assert format_fen(fields) == "8/8/8/8/8/8/8/8 w KQkq - 0 1"

    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/8/4k3/8/8/4K3/8/8 w - - 0 1",
            "rnbqkbnr/ppp1pppp/8/3p4/8/8/PPPPPPPP/RNBQKBNR w Kq d6 0 1",
            "7k/8/8/8/8/8/8/K7 b - - 0 1",
        ],
    )
    def test_position_roundtrip(self, fen: str) -> None:
        assert Position(fen).fen == fen

    def test_position_counters_normalise(self) -> None:
        pos = Position("8/8/8/8/8/8/8/8 b Qk c6 17 52")
        assert pos.fen == (
            f"8/8/8/8/8/8/8/8 b Qk c6 {PLACEHOLDER_HALFMOVE} {PLACEHOLDER_FULLMOVE}"
        )
        assert pos.fen.endswith(" 0 1")


class TestEnPassantName:
    @pytest.mark.parametrize("name", ["a3", "h3", "a6", "h6", "e3", "d6"])
    def test_valid(self, name: str) -> None:
        assert is_en_passant_name(name)

    @pytest.mark.parametrize("name", ["a1", "e4", "e5", "i3", "", None, "-", "e3 "])
    def test_invalid(self, name: object) -> None:
        assert not is_en_passant_name(name)
