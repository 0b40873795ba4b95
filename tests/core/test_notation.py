"""Tests for FEN parsing and serialization."""

import pytest

from tierchess.core.enums import CastlingRights, Color
from tierchess.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from tierchess.core.position import INITIAL_POSITION
from tierchess.core.types import parse_square


class TestFen:
    def test_starting_fen_matches_initial_position(self) -> None:
        assert position_from_fen(STARTING_FEN) == INITIAL_POSITION
        assert position_to_fen(INITIAL_POSITION) == STARTING_FEN

    @pytest.mark.parametrize(
        "fen",
        [
            "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w Kq - 3 10",
            "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2",
            "8/8/4k3/8/8/4K3/8/8 b - - 99 70",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_fields(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w Kq d6 7 12")
        assert pos.side_to_move == Color.WHITE
        assert pos.castling == CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        assert pos.en_passant == parse_square("d6")
        assert pos.halfmove_clock == 7
        assert pos.fullmove_number == 12

    def test_clocks_optional(self) -> None:
        pos = position_from_fen("8/8/4k3/8/8/4K3/8/8 w - -")
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/8 w - - 0 1",
            "8/8/4k3/8/8/4K3/8/9 w - - 0 1",
            "8/8/4k3/8/8/4K3/8/7 w - - 0 1",
            "8/8/4k3/8/8/4K3/8/8 x - - 0 1",
            "8/8/4k3/8/8/4K3/8/8 w KK - 0 1",
            "8/8/4k3/8/8/4K3/8/8 w - e4 0 1",
            "8/8/4k3/8/8/4K3/8/8 w - - -1 1",
            "8/8/4k3/8/8/4K3/8/8 w - - 0 0",
            "8/8/4k3/8/8/4K3/8/8 w - - zero 1",
        ],
    )
    def test_invalid_fen_rejected(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)
