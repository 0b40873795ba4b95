"""Tests for attack detection."""

from tierchess.core.attacks import is_in_check, is_square_attacked, king_square
from tierchess.core.board import Board
from tierchess.core.enums import Color
from tierchess.core.notation import STARTING_FEN, position_from_fen
from tierchess.core.position import Position
from tierchess.core.types import (
    A8,
    D1,
    D3,
    D6,
    E1,
    E3,
    E4,
    E6,
    F3,
    F6,
    H1,
    parse_square,
)


class TestPieceAttacks:
    def test_starting_position(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert is_square_attacked(pos, E3, Color.WHITE)
        assert is_square_attacked(pos, F3, Color.WHITE)
        assert not is_square_attacked(pos, E4, Color.WHITE)
        assert is_square_attacked(pos, E6, Color.BLACK)

    def test_rook_ray_stops_at_blocker(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        assert is_square_attacked(pos, A8, Color.WHITE)
        assert is_square_attacked(pos, D1, Color.WHITE)
        assert not is_square_attacked(pos, H1, Color.WHITE)

    def test_white_pawn_attacks_diagonally_only(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4P3/4K3 w - - 0 1")
        assert is_square_attacked(pos, D3, Color.WHITE)
        assert is_square_attacked(pos, F3, Color.WHITE)
        assert not is_square_attacked(pos, E3, Color.WHITE)

    def test_black_pawn_attacks_downwards(self) -> None:
        pos = position_from_fen("4k3/4p3/8/8/8/8/8/4K3 b - - 0 1")
        assert is_square_attacked(pos, D6, Color.BLACK)
        assert is_square_attacked(pos, F6, Color.BLACK)
        assert not is_square_attacked(pos, E6, Color.BLACK)

    def test_knight_jumps_over_pieces(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert is_square_attacked(pos, parse_square("c3"), Color.WHITE)
        assert is_square_attacked(pos, parse_square("f6"), Color.BLACK)

    def test_bishop_diagonal(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/2B1K3 w - - 0 1")
        assert is_square_attacked(pos, parse_square("h6"), Color.WHITE)
        assert not is_square_attacked(pos, parse_square("c5"), Color.WHITE)


class TestCheck:
    def test_not_in_check_at_start(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert not is_in_check(pos, Color.WHITE)
        assert not is_in_check(pos, Color.BLACK)

    def test_rook_gives_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4R1K1 b - - 0 1")
        assert is_in_check(pos, Color.BLACK)
        assert not is_in_check(pos, Color.WHITE)

    def test_missing_king_is_never_in_check(self) -> None:
        pos = Position(board=Board())
        assert king_square(pos, Color.WHITE) is None
        assert not is_in_check(pos, Color.WHITE)

    def test_king_square(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert king_square(pos, Color.WHITE) == E1
