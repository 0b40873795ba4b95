"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from tierchess.core.enums import Color, PieceType
from tierchess.core.piece import Piece
from tierchess.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64-square grid of optional pieces.

    A board is filled in while a :class:`~tierchess.core.position.Position`
    is being built and treated as read-only afterwards. No piece identity is
    kept: two boards are equal when the same values sit on the same squares.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: list[Piece | None] | None = None) -> None:
        if squares is not None and len(squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")
        self._squares: list[Piece | None] = (
            list(squares) if squares is not None else [None] * 64
        )

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs, a1 first."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def king_square(self, color: Color) -> Square | None:
        """The king square for *color*, or ``None`` when it has no king."""
        kings = self.pieces(color, PieceType.KING)
        return kings[0] if kings else None

    def placement(self) -> tuple[Piece | None, ...]:
        """Hashable snapshot of the grid."""
        return tuple(self._squares)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        return Board(self._squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting array."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self.placement())

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
