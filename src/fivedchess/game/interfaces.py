"""Abstract interfaces for the game layer.

A renderer depends on these, not on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fivedchess.core.board import Board
    from fivedchess.core.move import Move
    from fivedchess.core.types import Position2D
    from fivedchess.core.variants import Variant


# ── Move selection FSM states ────────────────────────────────────────────────


class MovePhase(IntEnum):
    """Steps a player goes through to compose one move."""

    SELECT_FROM_BOARD = auto()
    SELECT_FROM_POSITION = auto()
    SELECT_TO_BOARD = auto()
    SELECT_TO_POSITION = auto()
    MOVE_READY = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, variant: Variant | str = "standard") -> None:
        """Set up a new game."""

    @abstractmethod
    def select_board(self, board: Board) -> bool:
        """Feed a board click. Returns True if accepted."""

    @abstractmethod
    def select_position(self, pos: Position2D) -> bool:
        """Feed a square click. Returns True if accepted."""

    @abstractmethod
    def make_move(self, move: Move) -> bool:
        """Apply a move. Returns True if legal and applied."""

    @abstractmethod
    def submit_turn(self) -> bool:
        """Close the current turn. Returns True on success."""

    @abstractmethod
    def undo(self) -> bool:
        """Undo the last move of the current turn. Returns True on success."""
