"""Tests for Board, Piece and square helpers."""

import pytest

from tierchess.core.board import Board
from tierchess.core.enums import Color, PieceType
from tierchess.core.piece import Piece
from tierchess.core.types import (
    A1,
    E1,
    E8,
    H8,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)


class TestSquares:
    def test_name_round_trip_for_every_square(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    def test_coordinates(self) -> None:
        sq = parse_square("e4")
        assert (file_of(sq), rank_of(sq)) == (4, 3)
        assert make_square(4, 3) == sq

    def test_corners(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"

    @pytest.mark.parametrize("text", ["", "e", "i1", "a9", "a0", "e44", "E4"])
    def test_invalid_names_rejected(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_square(text)


class TestPiece:
    def test_value_equality(self) -> None:
        assert Piece(Color.WHITE, PieceType.ROOK) == Piece(Color.WHITE, PieceType.ROOK)
        assert Piece(Color.WHITE, PieceType.ROOK) != Piece(Color.BLACK, PieceType.ROOK)

    def test_fen_chars(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"
        assert str(Piece(Color.WHITE, PieceType.PAWN)) == "P"

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.WHITE, PieceType.PAWN).symbol == "♙"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"

    def test_merge_only_same_color_and_kind_with_tier(self) -> None:
        rook = Piece(Color.WHITE, PieceType.ROOK)
        assert rook.can_merge_with(Piece(Color.WHITE, PieceType.ROOK))
        assert not rook.can_merge_with(Piece(Color.BLACK, PieceType.ROOK))
        assert not rook.can_merge_with(Piece(Color.WHITE, PieceType.BISHOP))

        queen = Piece(Color.WHITE, PieceType.QUEEN)
        king = Piece(Color.BLACK, PieceType.KING)
        assert not queen.can_merge_with(queen)
        assert not king.can_merge_with(king)

    def test_tiers(self) -> None:
        assert PieceType.PAWN.next_tier == PieceType.KNIGHT
        assert PieceType.KNIGHT.next_tier == PieceType.BISHOP
        assert PieceType.BISHOP.next_tier == PieceType.ROOK
        assert PieceType.ROOK.next_tier == PieceType.QUEEN
        assert PieceType.QUEEN.next_tier is None
        assert PieceType.KING.next_tier is None


class TestBoard:
    def test_initial_layout(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16
        assert len(board.pieces(Color.BLACK, PieceType.PAWN)) == 8

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert Board().king_square(Color.BLACK) is None

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[E1] = None
        assert board[E1] is not None
        assert board != clone

    def test_equality_is_by_value(self) -> None:
        assert Board.initial() == Board.initial()
        assert hash(Board.initial()) == hash(Board.initial())

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board([None] * 10)

    def test_repr_draws_grid(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert text.splitlines()[-1] == "  a b c d e f g h"
