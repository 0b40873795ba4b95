"""Game management layer: controller, history, settings, move scheduling.

Quick start::

    from tierchess.game import GameController, GameSettings

    ctrl = GameController(GameSettings(seed=7))
    ctrl.submit_human_move(parse_square("e2"), parse_square("e4"))
    ctrl.play_computer_move()
"""

from tierchess.game.controller import GameController, GameEvents
from tierchess.game.history import HistoryStack
from tierchess.game.interfaces import GamePhase, IGameController
from tierchess.game.settings import GameSettings

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "HistoryStack",
]
