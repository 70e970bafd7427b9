"""GameController: the central orchestrator of a five-dimensional chess game.

Coordinates: Game, MoveSelection.
Emits events via simple callbacks so the renderer / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from fivedchess.core.board import Board
from fivedchess.core.enums import Color, GameResult
from fivedchess.core.game import Game
from fivedchess.core.move import ForkRecord, Move
from fivedchess.core.types import Position2D
from fivedchess.core.variants import STANDARD, Variant, get_variant
from fivedchess.game.interfaces import IGameController, MovePhase
from fivedchess.game.selection import MoveSelection

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, ForkRecord], None]
TurnCallback = Callable[[Color, int], None]  # side to move, present half-turn
UndoCallback = Callable[[Move], None]
GameOverCallback = Callable[[GameResult], None]
SelectionCallback = Callable[[MovePhase], None]
InvalidSelectionCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_submitted: list[TurnCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_invalid_selection: list[InvalidSelectionCallback] = field(
        default_factory=list
    )


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates user input, drives the :class:`Game`, notifies listeners.

    Rejected input never raises: every public mutator returns ``False`` and
    the engine is left untouched.  Once a king has been captured every
    mutator is rejected.
    """

    __slots__ = ("_game", "_selection", "events")

    def __init__(self, variant: Variant | str = STANDARD) -> None:
        self._game = self._build_game(variant)
        self._selection = MoveSelection(self._game)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def selection(self) -> MoveSelection:
        return self._selection

    @property
    def winner(self) -> Color | None:
        return self._game.winner

    @property
    def is_game_over(self) -> bool:
        return self._game.is_game_over

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, variant: Variant | str = "standard") -> None:
        self._game = self._build_game(variant)
        self._selection = MoveSelection(self._game)
        self._emit_selection()

    def select_board(self, board: Board) -> bool:
        if self.is_game_over or not self._selection.select_board(board):
            self._emit_invalid_selection()
            return False
        self._emit_selection()
        return True

    def select_position(self, pos: Position2D) -> bool:
        if self.is_game_over or not self._selection.select_position(pos):
            self._emit_invalid_selection()
            return False
        self._emit_selection()

        move = self._selection.build_move()
        if move is not None:
            self._selection.reset()
            self.make_move(move)
            self._emit_selection()
        return True

    def cancel_selection(self) -> None:
        self._selection.reset()
        self._emit_selection()

    def make_move(self, move: Move) -> bool:
        if self.is_game_over:
            return False
        if not self._is_legal(move):
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        record = self._game.make_move(move)
        self._emit_move(move, record)

        if self.is_game_over:
            self._emit_game_over(self._game.result)
        return True

    def submit_turn(self) -> bool:
        if self.is_game_over or not self._game.undoable():
            return False
        self._game.submit_turn()
        self._selection.reset()
        self._emit_turn_submitted()
        return True

    def undo(self) -> bool:
        if self.is_game_over or not self._game.undoable():
            return False
        move = self._game.undo()
        self._selection.reset()
        for cb in self.events.on_undo:
            cb(move)
        self._emit_selection()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    @staticmethod
    def _build_game(variant: Variant | str) -> Game:
        if isinstance(variant, str):
            variant = get_variant(variant)
        return Game.from_variant(variant)

    def _is_legal(self, move: Move) -> bool:
        src = move.from_
        if not self._game.can_make_move_from_board(src.board):
            return False
        if not src.pos.in_bounds(self._game.dim):
            return False
        piece = src.board.get_piece(src.pos)
        if piece is None or piece.color != self._game.current_color:
            return False
        return move.to in self._game.get_moveable_positions(src)

    def _emit_move(self, move: Move, record: ForkRecord) -> None:
        for cb in self.events.on_move:
            cb(move, record)

    def _emit_turn_submitted(self) -> None:
        for cb in self.events.on_turn_submitted:
            cb(self._game.current_color, self._game.present_half_turn)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._selection.phase)

    def _emit_invalid_selection(self) -> None:
        for cb in self.events.on_invalid_selection:
            cb()
