"""Position: complete game state snapshot (board + metadata)."""

from __future__ import annotations

from dataclasses import dataclass, field

from tierchess.core.board import Board
from tierchess.core.enums import CastlingRights, Color
from tierchess.core.piece import Piece
from tierchess.core.types import Square

PositionKey = tuple[tuple[Piece | None, ...], Color, CastlingRights, Square | None]


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Positions are values. The transition function in
    :mod:`tierchess.core.transition` builds a new one for every move and never
    touches the board of an existing one.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if self.halfmove_clock < 0:
            raise ValueError(f"Half-move clock must be >= 0, got {self.halfmove_clock}")
        if self.fullmove_number < 1:
            raise ValueError(
                f"Full-move number must be >= 1, got {self.fullmove_number}"
            )

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, white to move, all rights intact."""
        return cls()

    def has_castling(self, right: CastlingRights) -> bool:
        return bool(self.castling & right)

    def key(self) -> PositionKey:
        """Identity used for repetition: placement, side, rights, en passant."""
        return (self.board.placement(), self.side_to_move, self.castling, self.en_passant)

    def copy(self) -> Position:
        """Independent copy with its own board."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )


INITIAL_POSITION = Position.initial()
