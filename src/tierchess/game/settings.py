"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass

from tierchess.core.enums import Color
from tierchess.engine.search import MAX_SEARCH_DEPTH, SearchLimits


@dataclass
class GameSettings:
    """User-adjustable settings for a human-versus-computer game."""

    # Players
    computer_color: Color = Color.BLACK

    # Engine
    search_depth: int = 2
    seed: int | None = None  # fixed seed makes tie-breaks reproducible

    # Presentation
    move_delay_ms: int = 400  # pause before the computer's reply is applied

    @property
    def human_color(self) -> Color:
        return self.computer_color.opposite

    def validate(self) -> None:
        if not (1 <= self.search_depth <= MAX_SEARCH_DEPTH):
            raise ValueError(
                f"search_depth must be in 1..{MAX_SEARCH_DEPTH}, got {self.search_depth}"
            )
        if self.move_delay_ms < 0:
            raise ValueError(f"move_delay_ms must be >= 0, got {self.move_delay_ms}")

    def search_limits(self) -> SearchLimits:
        return SearchLimits(max_depth=self.search_depth)
