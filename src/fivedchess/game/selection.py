"""MoveSelection: turns board/square clicks into a :class:`Move`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fivedchess.core.move import Move, SelectedPosition
from fivedchess.game.interfaces import MovePhase

if TYPE_CHECKING:
    from fivedchess.core.board import Board
    from fivedchess.core.game import Game
    from fivedchess.core.types import Position2D


class MoveSelection:
    """Finite-state machine for composing one move.

    Every selection is validated against the game's legality queries, so a
    completed selection always yields a move that :meth:`Game.make_move`
    accepts.
    """

    __slots__ = (
        "_game",
        "_phase",
        "_from_board",
        "_from_pos",
        "_to_board",
        "_to_pos",
        "_destinations",
    )

    def __init__(self, game: Game) -> None:
        self._game = game
        self._phase = MovePhase.SELECT_FROM_BOARD
        self._from_board: Board | None = None
        self._from_pos: Position2D | None = None
        self._to_board: Board | None = None
        self._to_pos: Position2D | None = None
        self._destinations: list[SelectedPosition] = []

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def phase(self) -> MovePhase:
        return self._phase

    @property
    def from_board(self) -> Board | None:
        return self._from_board

    @property
    def from_position(self) -> Position2D | None:
        return self._from_pos

    @property
    def target_board(self) -> Board | None:
        return self._to_board

    @property
    def target_position(self) -> Position2D | None:
        return self._to_pos

    @property
    def destinations(self) -> tuple[SelectedPosition, ...]:
        """Destinations of the selected piece (empty before one is chosen)."""
        return tuple(self._destinations)

    # ── Transitions ──────────────────────────────────────────────────────

    def reset(self) -> None:
        self._phase = MovePhase.SELECT_FROM_BOARD
        self._from_board = None
        self._from_pos = None
        self._to_board = None
        self._to_pos = None
        self._destinations = []

    def select_board(self, board: Board) -> bool:
        if self._phase == MovePhase.SELECT_FROM_BOARD:
            if not self._game.can_make_move_from_board(board):
                return False
            self._from_board = board
            self._phase = MovePhase.SELECT_FROM_POSITION
            return True

        if self._phase == MovePhase.SELECT_TO_BOARD:
            if not any(d.board is board for d in self._destinations):
                return False
            self._to_board = board
            self._phase = MovePhase.SELECT_TO_POSITION
            return True

        return False

    def select_position(self, pos: Position2D) -> bool:
        if self._phase == MovePhase.SELECT_FROM_POSITION:
            assert self._from_board is not None
            if not pos.in_bounds(self._game.dim):
                return False
            piece = self._from_board.get_piece(pos)
            if piece is None or piece.color != self._game.current_color:
                return False
            destinations = self._game.get_moveable_positions(
                SelectedPosition(self._from_board, pos)
            )
            if not destinations:
                return False
            self._from_pos = pos
            self._destinations = destinations
            self._phase = MovePhase.SELECT_TO_BOARD
            return True

        if self._phase == MovePhase.SELECT_TO_POSITION:
            assert self._to_board is not None
            if pos not in self.highlighted_positions(self._to_board):
                return False
            self._to_pos = pos
            self._phase = MovePhase.MOVE_READY
            return True

        return False

    # ── Queries ──────────────────────────────────────────────────────────

    def highlighted_positions(self, board: Board) -> list[Position2D]:
        """Destination squares of the selected piece on *board*."""
        return [d.pos for d in self._destinations if d.board is board]

    def build_move(self) -> Move | None:
        """The composed move, or ``None`` until the selection is complete."""
        if self._phase != MovePhase.MOVE_READY:
            return None
        assert self._from_board is not None and self._from_pos is not None
        assert self._to_board is not None and self._to_pos is not None
        return Move(
            SelectedPosition(self._from_board, self._from_pos),
            SelectedPosition(self._to_board, self._to_pos),
        )
