"""Abstract interfaces for the game layer.

The UI depends on :class:`IGameController`, not on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tierchess.core.move import Move
    from tierchess.core.position import Position
    from tierchess.core.rules import GameResult
    from tierchess.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a human-versus-computer game."""

    AWAITING_HUMAN = auto()
    AWAITING_COMPUTER = auto()  # reply is due, possibly after a delay
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @property
    @abstractmethod
    def position(self) -> Position:
        """The current position."""

    @property
    @abstractmethod
    def result(self) -> GameResult:
        """Classification of the current position."""

    @abstractmethod
    def new_game(self, position: Position | None = None) -> None:
        """Start over from *position* (default: the initial position)."""

    @abstractmethod
    def legal_moves(self, sq: Square) -> set[Square]:
        """Destinations the human may pick for the piece on *sq*."""

    @abstractmethod
    def submit_human_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Submit a human move. Returns True if legal and applied."""

    @abstractmethod
    def play_computer_move(self) -> Move | None:
        """Search and apply the computer's reply, if one is due."""

    @abstractmethod
    def undo(self) -> bool:
        """Undo back to the human's previous turn. Returns True on success."""
