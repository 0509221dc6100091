"""Game management layer: controller, settings, state machine.

Quick start::

    from chatur.game import GameController, GameSettings

    ctrl = GameController()
    ctrl.new_game(GameSettings(allow_undo=False))
    ctrl.submit_move(ctrl.legal_moves((6, 1))[0])

The PyQt6 adapter lives in :mod:`chatur.game.qt_bridge` and is imported
separately.
"""

from chatur.game.controller import GameController, GameEvents
from chatur.game.interfaces import GamePhase, GameSettings, IGameController
from chatur.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "GameSettings",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
