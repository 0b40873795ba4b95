"""GameController owns the current position of a human-versus-computer game.

Coordinates: MoveGenerator, transition function, Rules, engine, HistoryStack.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tierchess.core.enums import Color
from tierchess.core.move import Move
from tierchess.core.move_generator import apply_human_move, legal_moves
from tierchess.core.notation import position_to_fen
from tierchess.core.position import Position
from tierchess.core.rules import GameResult, Rules
from tierchess.core.transition import apply_move
from tierchess.core.types import Square, square_name
from tierchess.engine.minimax import MinimaxEngine
from tierchess.engine.search import IEngine
from tierchess.game.history import HistoryStack
from tierchess.game.interfaces import GamePhase, IGameController
from tierchess.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Position], None]  # move, position after it
IllegalMoveCallback = Callable[[Square, Square], None]  # from, to
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_illegal_move: list[IllegalMoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Single owner of the mutable "current position" slot.

    Thread-safety: every method runs on one thread (the main/UI thread). The
    computer's reply is computed synchronously in :meth:`play_computer_move`;
    any presentation delay before that call belongs to the caller (see
    :class:`~tierchess.game.scheduler.ComputerMoveScheduler`).
    """

    __slots__ = (
        "_settings",
        "_engine",
        "_position",
        "_history",
        "_result",
        "_phase",
        "events",
    )

    def __init__(
        self,
        settings: GameSettings | None = None,
        engine: IEngine | None = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._settings.validate()
        self._engine: IEngine = engine or MinimaxEngine(
            self._settings.search_limits(), seed=self._settings.seed
        )
        self._position = Position.initial()
        self._history = HistoryStack()
        self._result = Rules.classify(self._position)
        self._phase = self._phase_for_position()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def position(self) -> Position:
        return self._position

    @property
    def history(self) -> HistoryStack:
        return self._history

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self._result.is_over

    @property
    def awaiting_computer_move(self) -> bool:
        return self._phase == GamePhase.AWAITING_COMPUTER

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, position: Position | None = None) -> None:
        self._position = position if position is not None else Position.initial()
        self._history.clear()
        _LOGGER.info("New game from %s", position_to_fen(self._position))
        self._refresh()

    def legal_moves(self, sq: Square) -> set[Square]:
        if self._phase != GamePhase.AWAITING_HUMAN:
            return set()
        return legal_moves(self._position, sq)

    def submit_human_move(self, from_sq: Square, to_sq: Square) -> bool:
        if self._phase != GamePhase.AWAITING_HUMAN:
            _LOGGER.info(
                "Move %s%s rejected: not the human's turn (%s)",
                square_name(from_sq),
                square_name(to_sq),
                self._phase.name,
            )
            self._emit_illegal_move(from_sq, to_sq)
            return False

        next_position = apply_human_move(self._position, from_sq, to_sq)
        if next_position is None:
            _LOGGER.info(
                "Illegal move %s%s in %s",
                square_name(from_sq),
                square_name(to_sq),
                position_to_fen(self._position),
            )
            self._emit_illegal_move(from_sq, to_sq)
            return False

        self._commit(Move(from_sq, to_sq), next_position)
        return True

    def play_computer_move(self) -> Move | None:
        if self._phase != GamePhase.AWAITING_COMPUTER:
            return None

        search = self._engine.search(self._position)
        move = search.best_move
        if move is None:
            _LOGGER.warning(
                "Engine found no move in %s", position_to_fen(self._position)
            )
            return None

        _LOGGER.debug("Computer plays %s (score %d)", move, search.score)
        self._commit(move, apply_move(self._position, move.from_sq, move.to_sq))
        return move

    def undo(self) -> bool:
        previous = self._history.pop()
        if previous is None:
            return False
        self._position = previous

        # Also take back the human move that the computer was replying to.
        if (
            self._position.side_to_move == self._settings.computer_color
            and self._history
        ):
            previous = self._history.pop()
            assert previous is not None
            self._position = previous

        _LOGGER.debug("Undo to %s", position_to_fen(self._position))
        self._refresh()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, move: Move, next_position: Position) -> None:
        self._history.push(self._position)
        self._position = next_position
        self._result = Rules.classify(next_position, self._history)

        for cb in self.events.on_move:
            cb(move, next_position)

        if self._result.is_over:
            _LOGGER.info("Game over: %s", self._result.status.name)
            for cb in self.events.on_game_over:
                cb(self._result)

        self._set_phase(self._phase_for_position())

    def _refresh(self) -> None:
        self._result = Rules.classify(self._position, self._history)
        self._set_phase(self._phase_for_position())

    def _phase_for_position(self) -> GamePhase:
        if self._result.is_over:
            return GamePhase.GAME_OVER
        if self._position.side_to_move == self._settings.computer_color:
            return GamePhase.AWAITING_COMPUTER
        return GamePhase.AWAITING_HUMAN

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_illegal_move(self, from_sq: Square, to_sq: Square) -> None:
        for cb in self.events.on_illegal_move:
            cb(from_sq, to_sq)
