"""Tests for GameController: the orchestrator."""

import pytest

from fivedchess.core.enums import Color, GameResult
from fivedchess.core.move import Move, SelectedPosition
from fivedchess.core.types import Position2D
from fivedchess.core.variants import Variant
from fivedchess.game.controller import GameController
from fivedchess.game.interfaces import MovePhase

# Kings face each other on a 3x3 board; white captures on the first move.
DUEL = Variant("duel", 3, "3/1k1/1K1")


def _head(ctrl: GameController, timeline_id: int = 0):
    return ctrl.game.get_timeline(timeline_id).back()


def _click_move(
    ctrl: GameController, frm: tuple[int, int], to: tuple[int, int]
) -> bool:
    """Drive a same-board move through the selection clicks."""
    head = _head(ctrl)
    return (
        ctrl.select_board(head)
        and ctrl.select_position(Position2D(*frm))
        and ctrl.select_board(head)
        and ctrl.select_position(Position2D(*to))
    )


class TestNewGame:
    def test_default_is_standard(self) -> None:
        ctrl = GameController()
        assert ctrl.game.dim == 8
        assert ctrl.selection.phase == MovePhase.SELECT_FROM_BOARD
        assert ctrl.winner is None

    def test_variant_by_name(self) -> None:
        ctrl = GameController("kings_and_pawns")
        assert ctrl.game.dim == 5
        assert not ctrl.game.rule.pawn_can_make_two_move_on_first_turn

    def test_new_game_replaces_state(self) -> None:
        ctrl = GameController("kings_and_pawns")
        _click_move(ctrl, (0, 1), (0, 2))
        phases: list[MovePhase] = []
        ctrl.events.on_selection_changed.append(phases.append)
        ctrl.new_game("small")
        assert ctrl.game.dim == 5
        assert not ctrl.game.undoable()
        assert phases == [MovePhase.SELECT_FROM_BOARD]

    def test_unknown_variant(self) -> None:
        ctrl = GameController()
        with pytest.raises(ValueError):
            ctrl.new_game("hexagonal")


class TestSelectionClicks:
    def test_clicks_make_move(self) -> None:
        ctrl = GameController("kings_and_pawns")
        moves: list[Move] = []
        ctrl.events.on_move.append(lambda m, rec: moves.append(m))
        assert _click_move(ctrl, (0, 1), (0, 2))
        assert len(moves) == 1
        assert moves[0].to.pos == Position2D(0, 2)
        assert ctrl.selection.phase == MovePhase.SELECT_FROM_BOARD
        assert ctrl.game.undoable()

    def test_selection_events_follow_phases(self) -> None:
        ctrl = GameController("kings_and_pawns")
        phases: list[MovePhase] = []
        ctrl.events.on_selection_changed.append(phases.append)
        _click_move(ctrl, (0, 1), (0, 2))
        assert phases == [
            MovePhase.SELECT_FROM_POSITION,
            MovePhase.SELECT_TO_BOARD,
            MovePhase.SELECT_TO_POSITION,
            MovePhase.MOVE_READY,
            MovePhase.SELECT_FROM_BOARD,
        ]

    def test_invalid_click_event(self) -> None:
        ctrl = GameController("kings_and_pawns")
        invalid: list[bool] = []
        ctrl.events.on_invalid_selection.append(lambda: invalid.append(True))
        ctrl.select_board(_head(ctrl))
        assert not ctrl.select_position(Position2D(0, 3))
        assert invalid == [True]
        assert ctrl.selection.phase == MovePhase.SELECT_FROM_POSITION

    def test_cancel_selection(self) -> None:
        ctrl = GameController("kings_and_pawns")
        ctrl.select_board(_head(ctrl))
        ctrl.cancel_selection()
        assert ctrl.selection.phase == MovePhase.SELECT_FROM_BOARD


class TestMakeMove:
    def test_illegal_destination_rejected(self) -> None:
        ctrl = GameController("kings_and_pawns")
        head = _head(ctrl)
        move = Move(
            SelectedPosition(head, Position2D(0, 1)),
            SelectedPosition(head, Position2D(0, 3)),
        )
        assert not ctrl.make_move(move)
        assert not ctrl.game.undoable()

    def test_wrong_side_rejected(self) -> None:
        ctrl = GameController("kings_and_pawns")
        head = _head(ctrl)
        move = Move(
            SelectedPosition(head, Position2D(0, 3)),
            SelectedPosition(head, Position2D(0, 2)),
        )
        assert not ctrl.make_move(move)

    def test_empty_square_rejected(self) -> None:
        ctrl = GameController("kings_and_pawns")
        head = _head(ctrl)
        move = Move(
            SelectedPosition(head, Position2D(0, 2)),
            SelectedPosition(head, Position2D(0, 3)),
        )
        assert not ctrl.make_move(move)


class TestSubmitAndUndo:
    def test_submit_requires_a_move(self) -> None:
        ctrl = GameController("kings_and_pawns")
        assert not ctrl.submit_turn()

    def test_submit_event(self) -> None:
        ctrl = GameController("kings_and_pawns")
        turns: list[tuple[Color, int]] = []
        ctrl.events.on_turn_submitted.append(lambda c, h: turns.append((c, h)))
        _click_move(ctrl, (0, 1), (0, 2))
        assert ctrl.submit_turn()
        assert turns == [(Color.BLACK, 1)]
        assert not ctrl.game.undoable()

    def test_undo_event(self) -> None:
        ctrl = GameController("kings_and_pawns")
        undone: list[Move] = []
        ctrl.events.on_undo.append(undone.append)
        _click_move(ctrl, (0, 1), (0, 2))
        assert ctrl.undo()
        assert len(undone) == 1
        assert undone[0].from_.pos == Position2D(0, 1)
        assert ctrl.game.get_timeline(0).size() == 1

    def test_undo_without_moves(self) -> None:
        ctrl = GameController("kings_and_pawns")
        assert not ctrl.undo()

    def test_black_replies(self) -> None:
        ctrl = GameController("kings_and_pawns")
        _click_move(ctrl, (0, 1), (0, 2))
        ctrl.submit_turn()
        assert _click_move(ctrl, (4, 3), (4, 2))
        assert ctrl.submit_turn()
        assert ctrl.game.present_half_turn == 2
        assert ctrl.game.current_color == Color.WHITE


class TestGameOver:
    def test_king_capture_ends_game(self) -> None:
        ctrl = GameController(DUEL)
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)
        assert _click_move(ctrl, (1, 0), (1, 1))
        assert results == [GameResult.WHITE_WINS]
        assert ctrl.is_game_over
        assert ctrl.winner == Color.WHITE

    def test_everything_rejected_after_win(self) -> None:
        ctrl = GameController(DUEL)
        _click_move(ctrl, (1, 0), (1, 1))
        assert not ctrl.submit_turn()
        assert not ctrl.undo()
        assert not ctrl.select_board(_head(ctrl))

    def test_new_game_after_win(self) -> None:
        ctrl = GameController(DUEL)
        _click_move(ctrl, (1, 0), (1, 1))
        ctrl.new_game(DUEL)
        assert not ctrl.is_game_over
