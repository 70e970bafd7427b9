"""Tests for Board, TimeLine and the small value types."""

import pytest

from fivedchess.core.board import Board
from fivedchess.core.enums import Color, PieceType
from fivedchess.core.errors import ContractViolation
from fivedchess.core.piece import Piece
from fivedchess.core.timeline import ROOT_FORK, TimeLine
from fivedchess.core.types import Position2D, parse_square, square_name
from fivedchess.core.variants import STANDARD

E2 = Position2D(4, 1)
E4 = Position2D(4, 3)


class TestBoardOperations:
    def test_place_and_get(self) -> None:
        board = Board(8)
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board.place_piece(E4, piece)
        assert board.get_piece(E4) == piece
        assert board.is_empty(E2)

    @pytest.mark.parametrize("pos", [Position2D(-1, 0), Position2D(0, 8), Position2D(8, 3)])
    def test_out_of_range_raises(self, pos: Position2D) -> None:
        board = Board(8)
        with pytest.raises(ContractViolation):
            board.get_piece(pos)
        with pytest.raises(ContractViolation):
            board.place_piece(pos, Piece(Color.BLACK, PieceType.KING))

    def test_non_positive_dim_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board(0)

    def test_occupied_lists_every_piece(self) -> None:
        board = STANDARD.build_board()
        occupied = dict(board.occupied())
        assert len(occupied) == 32
        assert occupied[Position2D(4, 0)] == Piece(Color.WHITE, PieceType.KING)
        assert occupied[Position2D(3, 7)] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_full_turn_from_half_turn(self) -> None:
        assert Board(8, half_turn=5).full_turn == 2
        assert Board(8, half_turn=4).full_turn == 2

    def test_repr_not_empty(self) -> None:
        text = repr(STANDARD.build_board())
        assert "K" in text
        assert "a b c d e f g h" in text


class TestBoardFork:
    def test_fork_advances_half_turn(self) -> None:
        board = STANDARD.build_board()
        fork = board.create_fork(3)
        assert fork.half_turn == board.half_turn + 1
        assert fork.timeline_id == 3
        assert fork.previous == (board.timeline_id, board.half_turn)
        assert board.previous is None

    def test_fork_copies_content(self) -> None:
        board = STANDARD.build_board()
        fork = board.create_fork(0)
        assert fork.same_layout(board)
        assert dict(fork.occupied()) == dict(board.occupied())

    def test_fork_is_independent(self) -> None:
        board = STANDARD.build_board()
        fork = board.create_fork(0)
        fork.place_piece(E2, None)
        assert not fork.same_layout(board)
        assert board.get_piece(E2) == Piece(Color.WHITE, PieceType.PAWN)


class TestTimeLine:
    def _timeline_with(self, count: int) -> TimeLine:
        timeline = TimeLine(0)
        board = Board(8)
        timeline.push_back(board)
        for _ in range(count - 1):
            board = board.create_fork(0)
            timeline.push_back(board)
        return timeline

    def test_root_defaults(self) -> None:
        timeline = TimeLine(0)
        assert timeline.fork_at == ROOT_FORK
        assert timeline.parent_id is None
        assert timeline.is_root
        assert timeline.size() == 0

    def test_back_of_empty_raises(self) -> None:
        with pytest.raises(ContractViolation):
            TimeLine(0).back()

    def test_index_law(self) -> None:
        timeline = self._timeline_with(4)
        for half_turn in range(4):
            board = timeline.get_board_by_half_turn(half_turn)
            assert board is timeline.history[half_turn - timeline.fork_at - 1]
            assert board.half_turn == half_turn
        assert timeline.back().half_turn == 3
        assert timeline.half_turn == 3
        assert timeline.full_turn == 1

    @pytest.mark.parametrize("half_turn", [-1, 4, 10])
    def test_index_out_of_range_raises(self, half_turn: int) -> None:
        timeline = self._timeline_with(4)
        assert not timeline.contains_half_turn(half_turn)
        with pytest.raises(ContractViolation):
            timeline.get_board_by_half_turn(half_turn)

    def test_push_wrong_half_turn_rejected(self) -> None:
        timeline = self._timeline_with(2)
        with pytest.raises(ContractViolation, match="expects half-turn 2"):
            timeline.push_back(Board(8, half_turn=5))

    def test_push_foreign_board_rejected(self) -> None:
        timeline = self._timeline_with(1)
        with pytest.raises(ContractViolation):
            timeline.push_back(timeline.back().create_fork(7))

    def test_fork_of_timeline(self) -> None:
        parent = self._timeline_with(3)
        child = parent.create_fork(1, 1)
        assert child.id == 1
        assert child.fork_at == 1
        assert child.parent_id == 0
        assert child.size() == 0
        child.push_back(parent.get_board_by_half_turn(1).create_fork(1))
        assert child.get_board_by_half_turn(2).half_turn == 2
        assert not child.contains_half_turn(1)
        with pytest.raises(ContractViolation):
            child.get_board_by_half_turn(1)

    def test_fork_at_missing_half_turn_rejected(self) -> None:
        parent = self._timeline_with(2)
        with pytest.raises(ContractViolation):
            parent.create_fork(1, 5)

    def test_pop_back(self) -> None:
        timeline = self._timeline_with(2)
        head = timeline.back()
        assert timeline.pop_back() is head
        assert timeline.size() == 1


class TestPieceAndSquares:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_display(self) -> None:
        knight = Piece(Color.BLACK, PieceType.KNIGHT)
        assert knight.name == "Knight"
        assert knight.symbol == "♞"
        assert str(knight) == "n"
        assert PieceType.KING.symbol == "K"

    def test_square_names(self) -> None:
        assert square_name(Position2D(0, 0)) == "a1"
        assert square_name(Position2D(7, 7)) == "h8"
        assert parse_square("e4") == E4
        assert parse_square("c5", dim=5) == Position2D(2, 4)

    @pytest.mark.parametrize("name", ["", "z1", "e9", "e0", "f1x"])
    def test_invalid_square_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_square_outside_small_board(self) -> None:
        with pytest.raises(ValueError):
            parse_square("e6", dim=5)

    def test_color_helpers(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.WHITE.forward == 1
        assert Color.BLACK.forward == -1
        assert str(Color.BLACK) == "black"
