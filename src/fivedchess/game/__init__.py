"""Game management layer - move selection, controller, Qt bridge.

Quick start::

    from fivedchess.game import GameController

    ctrl = GameController("small")
    board = ctrl.game.get_moveable_boards()[0]
    ctrl.select_board(board)
"""

from fivedchess.game.controller import GameController, GameEvents
from fivedchess.game.interfaces import IGameController, MovePhase
from fivedchess.game.selection import MoveSelection

__all__ = [
    # Interfaces
    "IGameController",
    "MovePhase",
    # Concrete
    "GameController",
    "GameEvents",
    "MoveSelection",
]
