"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank step a pawn of this color advances by."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def next_tier(self) -> PieceType | None:
        """Kind produced when two friendly pieces of this kind merge.

        Queens and kings have no tier and can never land on a friendly square.
        """
        return _NEXT_TIER.get(self)


_NEXT_TIER: dict[PieceType, PieceType] = {
    PieceType.PAWN: PieceType.KNIGHT,
    PieceType.KNIGHT: PieceType.BISHOP,
    PieceType.BISHOP: PieceType.ROOK,
    PieceType.ROOK: PieceType.QUEEN,
}


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class GameStatus(IntEnum):
    """Classification of a position."""

    ONGOING = 0
    CHECKMATE = 1
    STALEMATE = 2
    FIFTY_MOVE_DRAW = 3
    THREEFOLD_REPETITION = 4
    INSUFFICIENT_MATERIAL = 5

    @property
    def is_draw(self) -> bool:
        return self not in (GameStatus.ONGOING, GameStatus.CHECKMATE)
