"""Game - the rules engine over a growing set of timelines.

The engine owns every :class:`TimeLine` (indexed by ID) and the *present*
half-turn marker.  Moves never mutate a board in place: the source board is
forked forward on its own timeline, and the piece lands on a fork of the
destination board, branching a new timeline when the destination lies in
the past of its timeline.
"""

from __future__ import annotations

import logging

from fivedchess.core.board import Board
from fivedchess.core.enums import Color, GameResult, PieceType
from fivedchess.core.errors import ContractViolation
from fivedchess.core.move import ForkRecord, Move, PendingTurn, SelectedPosition
from fivedchess.core.move_generator import MoveGenerator
from fivedchess.core.piece import Piece
from fivedchess.core.timeline import TimeLine
from fivedchess.core.variants import GameRule, Variant, get_variant

_LOGGER = logging.getLogger(__name__)


class Game:
    """Five-dimensional chess game state and rules.

    Args:
        board: Initial board; becomes half-turn 0 of root timeline 0.
        rule: Rule switches, defaults to :class:`GameRule` defaults.
    """

    __slots__ = (
        "_dim",
        "_rule",
        "_timelines",
        "_present_half_turn",
        "_current_color",
        "_pending",
        "_winner",
    )

    def __init__(self, board: Board, rule: GameRule | None = None) -> None:
        if board.half_turn != 0 or board.timeline_id != 0:
            raise ContractViolation(
                "Initial board must sit at half-turn 0 of timeline 0, got "
                f"half-turn {board.half_turn} of timeline {board.timeline_id}"
            )
        root = TimeLine(0)
        root.push_back(board)

        self._dim = board.dim
        self._rule = rule if rule is not None else GameRule()
        self._timelines: list[TimeLine] = [root]
        self._present_half_turn = 0
        self._current_color = Color.WHITE
        self._pending = PendingTurn()
        self._winner: Color | None = None

    @classmethod
    def from_variant(cls, variant: Variant) -> Game:
        return cls(variant.build_board(), variant.rule)

    @classmethod
    def from_variant_name(cls, name: str) -> Game:
        return cls.from_variant(get_variant(name))

    # ── Scalar state ─────────────────────────────────────────────────────

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def rule(self) -> GameRule:
        return self._rule

    @property
    def present_half_turn(self) -> int:
        return self._present_half_turn

    @property
    def present_full_turn(self) -> int:
        return self._present_half_turn // 2

    @property
    def current_color(self) -> Color:
        return self._current_color

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def result(self) -> GameResult:
        if self._winner is None:
            return GameResult.IN_PROGRESS
        return GameResult.won_by(self._winner)

    @property
    def is_game_over(self) -> bool:
        return self._winner is not None

    @property
    def pending_turn(self) -> PendingTurn:
        return self._pending

    @property
    def current_turn_moves(self) -> tuple[Move, ...]:
        return self._pending.moves

    # ── Timeline / board queries ─────────────────────────────────────────

    def get_timelines(self) -> tuple[TimeLine, ...]:
        return tuple(self._timelines)

    def timeline_count(self) -> int:
        return len(self._timelines)

    def get_timeline(self, timeline_id: int) -> TimeLine:
        if not 0 <= timeline_id < len(self._timelines):
            raise ContractViolation(f"No timeline with ID {timeline_id}")
        return self._timelines[timeline_id]

    def board_exists(self, timeline_id: int, half_turn: int) -> bool:
        if not 0 <= timeline_id < len(self._timelines):
            return False
        return self._timelines[timeline_id].contains_half_turn(half_turn)

    def get_board(self, timeline_id: int, half_turn: int) -> Board:
        return self.get_timeline(timeline_id).get_board_by_half_turn(half_turn)

    def get_predecessor(self, board: Board) -> Board | None:
        """Board that *board* was forked from, possibly on a parent timeline."""
        if board.previous is None:
            return None
        return self.get_board(*board.previous)

    def latest_full_turn(self) -> int:
        """Furthest full turn reached by any timeline head."""
        return max(tl.full_turn for tl in self._timelines)

    # ── Legality queries ─────────────────────────────────────────────────

    def get_moveable_boards(self) -> list[Board]:
        """Heads of the timelines that sit exactly at the present."""
        return [
            tl.back()
            for tl in self._timelines
            if tl.half_turn == self._present_half_turn
        ]

    def can_make_move_from_board(self, board: Board) -> bool:
        if not 0 <= board.timeline_id < len(self._timelines):
            return False
        timeline = self._timelines[board.timeline_id]
        return timeline.back() is board and board.half_turn == self._present_half_turn

    def get_moveable_positions(self, selected: SelectedPosition) -> list[SelectedPosition]:
        """Every destination for the piece on *selected*; empty if none."""
        return MoveGenerator(self).generate(selected)

    # ── Mutation ─────────────────────────────────────────────────────────

    def make_move(self, move: Move) -> ForkRecord:
        """Apply *move*, forking boards (and possibly a timeline).

        Only preconditions are checked; destination legality is the
        caller's job (see :meth:`get_moveable_positions`).
        """
        src, dst = move.from_, move.to
        piece = self._check_move_preconditions(move)

        captured = dst.board.get_piece(dst.pos)
        decides_game = (
            captured is not None
            and captured.piece_type == PieceType.KING
            and captured.color != piece.color
        )

        src_timeline = self._timelines[src.board.timeline_id]
        src_fork = src.board.create_fork(src_timeline.id)
        src_fork.place_piece(src.pos, None)

        if move.is_same_board:
            src_fork.place_piece(dst.pos, piece)
            src_timeline.push_back(src_fork)
            record = ForkRecord(
                move=move,
                timeline_ids=(src_timeline.id,),
                half_turn=src_fork.half_turn,
                decided_game=decides_game,
            )
        else:
            dst_timeline = self._timelines[dst.board.timeline_id]
            created: int | None = None
            if dst_timeline.back() is dst.board:
                target_timeline = dst_timeline
            else:
                target_timeline = dst_timeline.create_fork(
                    len(self._timelines), dst.board.half_turn
                )
                created = target_timeline.id

            dst_fork = dst.board.create_fork(target_timeline.id)
            dst_fork.place_piece(dst.pos, piece)

            src_timeline.push_back(src_fork)
            if created is not None:
                self._timelines.append(target_timeline)
                _LOGGER.debug(
                    "Timeline %d branched from timeline %d at half-turn %d",
                    created,
                    dst_timeline.id,
                    dst.board.half_turn,
                )
            target_timeline.push_back(dst_fork)
            record = ForkRecord(
                move=move,
                timeline_ids=(src_timeline.id, target_timeline.id),
                half_turn=dst_fork.half_turn,
                created_timeline=created,
                decided_game=decides_game,
            )

        self._pending.push(record)
        _LOGGER.debug("Applied %s %s: %s", piece.color, piece.name, move)

        if decides_game:
            self._winner = piece.color
            _LOGGER.info("%s captured a king, game won", piece.color)
        return record

    def submit_turn(self) -> None:
        """Close the current turn and hand over to the other side."""
        if not self._pending:
            raise ContractViolation("Cannot submit a turn without moves")
        touched = sorted(self._pending.touched_timelines)
        self._present_half_turn = self._pending.next_present()
        self._current_color = self._current_color.opposite
        self._pending.clear()
        _LOGGER.debug(
            "Turn submitted on timelines %s, present is now half-turn %d (%s to move)",
            touched,
            self._present_half_turn,
            self._current_color,
        )

    def undoable(self) -> bool:
        return bool(self._pending)

    def undo(self) -> Move:
        """Revert the most recent move of the unsubmitted turn."""
        if not self._pending:
            raise ContractViolation("No move of the current turn to undo")
        record = self._pending.pop()

        for timeline_id in reversed(record.timeline_ids):
            timeline = self._timelines[timeline_id]
            timeline.pop_back()
            if len(timeline) == 0:
                # Only a branch created by this very move can end up empty,
                # and it is always the newest timeline.
                if timeline_id != record.created_timeline or (
                    timeline_id != len(self._timelines) - 1
                ):
                    raise ContractViolation(
                        f"Undo emptied timeline {timeline_id} it did not create"
                    )
                self._timelines.pop()
                _LOGGER.debug("Removed timeline %d", timeline_id)

        if record.decided_game:
            self._winner = None
        _LOGGER.debug("Undid %s", record.move)
        return record.move

    # ── Internal helpers ─────────────────────────────────────────────────

    def _check_move_preconditions(self, move: Move) -> Piece:
        """Raise on a broken precondition, otherwise return the moving piece."""
        src, dst = move.from_, move.to
        if not self.can_make_move_from_board(src.board):
            raise ContractViolation(f"Cannot move from board of {src}")
        piece = src.board.get_piece(src.pos)
        if piece is None:
            raise ContractViolation(f"No piece on {src}")
        if piece.color != self._current_color:
            raise ContractViolation(
                f"{piece.name} on {src} is {piece.color}, "
                f"but it is {self._current_color}'s turn"
            )
        if not self.board_exists(dst.board.timeline_id, dst.board.half_turn) or (
            self.get_board(dst.board.timeline_id, dst.board.half_turn) is not dst.board
        ):
            raise ContractViolation(f"Destination board of {dst} is not in this game")
        if not dst.pos.in_bounds(self._dim):
            raise ContractViolation(f"Destination square {dst} is off the board")
        occupant = dst.board.get_piece(dst.pos)
        if occupant is not None and occupant.color == piece.color:
            raise ContractViolation(f"Cannot capture own piece on {dst}")
        return piece
