"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from tierchess.core.enums import Color, PieceType

_KIND_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_CHAR_KINDS: dict[str, PieceType] = {v: k for k, v in _KIND_CHARS.items()}

# White symbols start at U+2654 in king..pawn order, black ones six later.
_UNICODE_ORDER: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (color, kind) pair compared by value."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = _KIND_CHARS[self.piece_type]
        return char.upper() if self.color == Color.WHITE else char

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        ptype = _CHAR_KINDS.get(char.lower()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        offset = _UNICODE_ORDER.index(self.piece_type)
        if self.color == Color.BLACK:
            offset += 6
        return chr(0x2654 + offset)

    def can_merge_with(self, other: Piece) -> bool:
        """Whether this piece may land on *other* as a self-capture."""
        return (
            other.color == self.color
            and other.piece_type == self.piece_type
            and self.piece_type.next_tier is not None
        )
