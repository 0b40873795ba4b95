"""Move value object (from/to pair, UCI-style text)."""

from __future__ import annotations

from dataclasses import dataclass

from tierchess.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A single move. Promotion is always resolved to a queen."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``"e2e4"``; a trailing promotion letter is accepted and ignored."""
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_square(text[0:2]), parse_square(text[2:4]))
