"""Qt bridge exposing controller events as signals to a renderer."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from fivedchess.core.board import Board
from fivedchess.core.enums import Color, GameResult
from fivedchess.core.move import ForkRecord, Move
from fivedchess.core.types import Position2D
from fivedchess.game.controller import GameController
from fivedchess.game.interfaces import MovePhase


class GameBridge(QObject):
    """Thread-affine adapter between a :class:`GameController` and Qt views."""

    move_made = pyqtSignal(object, object)
    turn_submitted = pyqtSignal(int, int)
    move_undone = pyqtSignal(object)
    game_over = pyqtSignal(int)
    selection_changed = pyqtSignal(int)
    invalid_selection = pyqtSignal()

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self._controller = controller if controller is not None else GameController()
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_turn_submitted.append(self._on_turn_submitted)
        events.on_undo.append(self._on_undo)
        events.on_game_over.append(self._on_game_over)
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_invalid_selection.append(self.invalid_selection.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(object)
    def select_board(self, board_obj: object) -> None:
        if not isinstance(board_obj, Board):
            self.invalid_selection.emit()
            return
        self._controller.select_board(board_obj)

    @pyqtSlot(int, int)
    def select_position(self, x: int, y: int) -> None:
        self._controller.select_position(Position2D(x, y))

    @pyqtSlot()
    def submit_turn(self) -> None:
        self._controller.submit_turn()

    @pyqtSlot()
    def undo(self) -> None:
        self._controller.undo()

    @pyqtSlot(str)
    def new_game(self, variant_name: str) -> None:
        self._controller.new_game(variant_name)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, move: Move, record: ForkRecord) -> None:
        self.move_made.emit(move, record)

    def _on_turn_submitted(self, color: Color, present_half_turn: int) -> None:
        self.turn_submitted.emit(int(color), present_half_turn)

    def _on_undo(self, move: Move) -> None:
        self.move_undone.emit(move)

    def _on_game_over(self, result: GameResult) -> None:
        self.game_over.emit(int(result))

    def _on_selection_changed(self, phase: MovePhase) -> None:
        self.selection_changed.emit(int(phase))
