"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tierchess.core.move import Move
    from tierchess.core.position import Position

DEFAULT_SEARCH_DEPTH = 2
MAX_SEARCH_DEPTH = 3


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation.

    Search is plain recursion, so ``max_depth`` is capped well below the
    interpreter's recursion limit.
    """

    max_depth: int = DEFAULT_SEARCH_DEPTH

    def __post_init__(self) -> None:
        if not (1 <= self.max_depth <= MAX_SEARCH_DEPTH):
            raise ValueError(
                f"Search depth must be in 1..{MAX_SEARCH_DEPTH}, got {self.max_depth}"
            )


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int
    candidates: tuple[Move, ...] = field(default=())


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(
        self,
        position: Position,
        limits: SearchLimits | None = None,
    ) -> SearchResult: ...
