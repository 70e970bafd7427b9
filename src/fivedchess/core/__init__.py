"""Core domain layer - five-dimensional chess rules with zero external dependencies.

Quick start::

    from fivedchess.core import Game, Move, Position2D, SelectedPosition

    game = Game.from_variant_name("standard")
    board = game.get_moveable_boards()[0]
    pawn = SelectedPosition(board, Position2D(4, 1))
    for target in game.get_moveable_positions(pawn):
        print(target)
"""

from fivedchess.core.board import Board
from fivedchess.core.enums import Color, GameResult, PieceType
from fivedchess.core.errors import ContractViolation
from fivedchess.core.game import Game
from fivedchess.core.move import ForkRecord, Move, PendingTurn, SelectedPosition
from fivedchess.core.move_generator import MoveGenerator
from fivedchess.core.piece import Piece
from fivedchess.core.timeline import ROOT_FORK, TimeLine
from fivedchess.core.types import Position2D, Vec4, parse_square, square_name
from fivedchess.core.variants import (
    VARIANTS,
    GameRule,
    Variant,
    board_from_layout,
    board_to_layout,
    get_variant,
)

__all__ = [
    # Enums / errors
    "Color",
    "ContractViolation",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Position2D",
    "Vec4",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "ForkRecord",
    "Game",
    "Move",
    "MoveGenerator",
    "PendingTurn",
    "Piece",
    "ROOT_FORK",
    "SelectedPosition",
    "TimeLine",
    # Variants
    "VARIANTS",
    "GameRule",
    "Variant",
    "board_from_layout",
    "board_to_layout",
    "get_variant",
]
