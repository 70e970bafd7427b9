"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from fivedchess.core.board import Board
from fivedchess.core.game import Game
from fivedchess.core.piece import Piece
from fivedchess.core.types import Position2D
from fivedchess.core.variants import GameRule

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


def _make_board(pieces: dict[tuple[int, int], str], dim: int = 8) -> Board:
    """Half-turn 0 board with layout characters at the given squares."""
    board = Board(dim)
    for (x, y), char in pieces.items():
        board.place_piece(Position2D(x, y), Piece.from_char(char))
    return board


def _make_game(
    pieces: dict[tuple[int, int], str],
    dim: int = 8,
    *,
    two_step: bool = True,
) -> Game:
    """Game starting from a sparse custom board."""
    rule = GameRule(pawn_can_make_two_move_on_first_turn=two_step)
    return Game(_make_board(pieces, dim), rule)


@pytest.fixture
def make_board() -> Callable[..., Board]:
    return _make_board


@pytest.fixture
def make_game() -> Callable[..., Game]:
    return _make_game
