"""Deferred application of the computer's reply on the Qt event loop."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from tierchess.game.controller import GameController
from tierchess.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


class ComputerMoveScheduler(QObject):
    """Plays the computer's move a short while after it becomes due.

    The delay lets a human observer see their own move land before the reply
    appears. The engine itself has no notion of time: on timeout the scheduler
    simply calls :meth:`GameController.play_computer_move`.
    """

    move_played = pyqtSignal(object)  # Move

    def __init__(
        self,
        controller: GameController,
        *,
        delay_ms: int | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._delay_ms = (
            controller.settings.move_delay_ms if delay_ms is None else delay_ms
        )
        if self._delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {self._delay_ms}")

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._apply_delayed_move)
        self._is_attached = False

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    def attach(self) -> None:
        """Follow the controller's phase changes automatically."""
        if self._is_attached:
            return
        self._controller.events.on_phase_changed.append(self._on_phase_changed)
        self._is_attached = True
        self.schedule()

    def schedule(self) -> bool:
        """Start the delay if the computer is due to move."""
        if not self._controller.awaiting_computer_move:
            return False
        _LOGGER.debug("Computer move scheduled in %d ms", self._delay_ms)
        self._timer.start(self._delay_ms)
        return True

    def cancel(self) -> None:
        """Drop a pending reply (undo, new game, shutdown)."""
        if self._timer.isActive():
            _LOGGER.debug("Pending computer move cancelled")
        self._timer.stop()

    def _on_phase_changed(self, phase: GamePhase) -> None:
        if phase == GamePhase.AWAITING_COMPUTER:
            self.schedule()
        else:
            self.cancel()

    def _apply_delayed_move(self) -> None:
        move = self._controller.play_computer_move()
        if move is not None:
            self.move_played.emit(move)
