"""Destination generation across the (file, rank, turn, timeline) space.

Every non-pawn piece works on :class:`Vec4` coordinates ``(x, y, z, w)``
where ``z`` is the board's full turn and ``w`` its timeline ID.  A
coordinate resolves to the board at half-turn ``2 * z + parity`` on
timeline ``w``, ``parity`` being the value of the side to move.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations, count, product
from typing import TYPE_CHECKING

from fivedchess.core.enums import Color, PieceType
from fivedchess.core.errors import ContractViolation
from fivedchess.core.move import SelectedPosition
from fivedchess.core.types import Position2D, Vec4

if TYPE_CHECKING:
    from fivedchess.core.game import Game

_X, _Y, _Z, _W = range(4)


def _unit(*axis_signs: tuple[int, int]) -> Vec4:
    coords = [0, 0, 0, 0]
    for axis, sign in axis_signs:
        coords[axis] = sign
    return Vec4(*coords)


# -- Direction tables ---------------------------------------------------------

# No z+ slide: a rook cannot travel into a board that has not been played.
ROOK_DIRS: tuple[Vec4, ...] = (
    _unit((_X, 1)),
    _unit((_X, -1)),
    _unit((_Y, 1)),
    _unit((_Y, -1)),
    _unit((_Z, -1)),
    _unit((_W, -1)),
    _unit((_W, 1)),
)

BISHOP_DIRS: tuple[Vec4, ...] = tuple(
    _unit((a, sa), (b, sb))
    for a, b in combinations(range(4), 2)
    for sa, sb in product((1, -1), repeat=2)
)

KNIGHT_OFFSETS: tuple[Vec4, ...] = tuple(
    _unit((a, 2 * sa), (b, sb))
    for a, b in product(range(4), repeat=2)
    if a != b
    for sa, sb in product((1, -1), repeat=2)
)

QUEEN_DIRS: tuple[Vec4, ...] = tuple(
    Vec4(*d) for d in product((-1, 0, 1), repeat=4) if any(d)
)

# Kings only step into the past or present in z.
KING_OFFSETS: tuple[Vec4, ...] = tuple(
    Vec4(dx, dy, dz, dw)
    for dx, dy, dz, dw in product((-1, 0, 1), (-1, 0, 1), (-1, 0), (-1, 0, 1))
    if (dx, dy, dz, dw) != (0, 0, 0, 0)
)


def _is_time_diagonal(direction: Vec4) -> bool:
    return direction.x == 0 and direction.y == 0 and direction.z != 0 and direction.w != 0


class MoveGenerator:
    """Generates destinations for a piece of the side to move in *game*."""

    __slots__ = ("_game", "_color", "_dim")

    def __init__(self, game: Game) -> None:
        self._game = game
        self._color = game.current_color
        self._dim = game.dim

    # -- Public API -------------------------------------------------------------

    def generate(self, selected: SelectedPosition) -> list[SelectedPosition]:
        """All destinations for the piece on *selected*.

        Raises :class:`ContractViolation` for an empty square or a piece of
        the side not to move.
        """
        piece = selected.board.get_piece(selected.pos)
        if piece is None:
            raise ContractViolation(f"No piece on {selected}")
        if piece.color != self._color:
            raise ContractViolation(
                f"{piece.name} on {selected} is {piece.color}, "
                f"but it is {self._color}'s turn"
            )

        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            return self._gen_pawn(selected)
        if ptype == PieceType.KNIGHT:
            return self._gen_steps(selected, KNIGHT_OFFSETS)
        if ptype == PieceType.BISHOP:
            return self._gen_bishop(selected)
        if ptype == PieceType.ROOK:
            return self._gen_sliding(selected, ROOK_DIRS)
        if ptype == PieceType.QUEEN:
            return self._gen_queen(selected)
        return self._gen_steps(selected, KING_OFFSETS)

    def resolve(self, coord: Vec4) -> SelectedPosition | None:
        """Square addressed by *coord*, or ``None`` if it does not exist."""
        if not (0 <= coord.x < self._dim and 0 <= coord.y < self._dim):
            return None
        if coord.z < 0:
            return None
        half_turn = 2 * coord.z + int(self._color)
        if not self._game.board_exists(coord.w, half_turn):
            return None
        board = self._game.get_board(coord.w, half_turn)
        return SelectedPosition(board, Position2D(coord.x, coord.y))

    # -- Piece-specific generators (private) ----------------------------------

    def _gen_pawn(self, selected: SelectedPosition) -> list[SelectedPosition]:
        board = selected.board
        x, y = selected.pos.x, selected.pos.y
        forward = self._color.forward
        moves: list[SelectedPosition] = []

        one_step = Position2D(x, y + forward)
        if one_step.in_bounds(self._dim) and board.is_empty(one_step):
            moves.append(SelectedPosition(board, one_step))
            start_rank = 1 if self._color == Color.WHITE else self._dim - 2
            if y == start_rank and self._game.rule.pawn_can_make_two_move_on_first_turn:
                two_step = Position2D(x, y + 2 * forward)
                if two_step.in_bounds(self._dim) and board.is_empty(two_step):
                    moves.append(SelectedPosition(board, two_step))

        for dx in (-1, 1):
            cap = Position2D(x + dx, y + forward)
            if not cap.in_bounds(self._dim):
                continue
            target = board.get_piece(cap)
            if target is not None and target.color != self._color:
                moves.append(SelectedPosition(board, cap))
        return moves

    def _gen_steps(
        self, selected: SelectedPosition, offsets: Iterable[Vec4]
    ) -> list[SelectedPosition]:
        origin = selected.to_vec4()
        moves: list[SelectedPosition] = []
        for offset in offsets:
            target = self.resolve(origin.shifted(offset))
            if target is None:
                continue
            occupant = target.board.get_piece(target.pos)
            if occupant is None or occupant.color != self._color:
                moves.append(target)
        return moves

    def _gen_sliding(
        self,
        selected: SelectedPosition,
        directions: Iterable[Vec4],
        max_steps: dict[Vec4, int] | None = None,
    ) -> list[SelectedPosition]:
        origin = selected.to_vec4()
        moves: list[SelectedPosition] = []
        for direction in directions:
            limit = None if max_steps is None else max_steps.get(direction)
            steps = count(1) if limit is None else range(1, limit + 1)
            for step in steps:
                target = self.resolve(origin.shifted(direction, step))
                if target is None:
                    break
                occupant = target.board.get_piece(target.pos)
                if occupant is None:
                    moves.append(target)
                    continue
                if occupant.color != self._color:
                    moves.append(target)
                break
        return moves

    def _gen_bishop(self, selected: SelectedPosition) -> list[SelectedPosition]:
        # House rule: the pure turn/timeline diagonal is capped at the board's
        # full turn number.
        cap = selected.board.full_turn
        limits = {d: cap for d in BISHOP_DIRS if _is_time_diagonal(d)}
        return self._gen_sliding(selected, BISHOP_DIRS, limits)

    def _gen_queen(self, selected: SelectedPosition) -> list[SelectedPosition]:
        origin = selected.to_vec4()
        limits = {d: self._queen_limit(origin, d) for d in QUEEN_DIRS}
        return self._gen_sliding(selected, QUEEN_DIRS, limits)

    def _queen_limit(self, origin: Vec4, direction: Vec4) -> int:
        """Per-mask slide cap: board size, past turns or timelines available."""
        caps: list[int] = []
        if direction.x or direction.y:
            caps.append(self._dim - 1)
        if direction.z < 0:
            caps.append(origin.z)
        elif direction.z > 0:
            caps.append(self._game.latest_full_turn() - origin.z)
        if direction.w < 0:
            caps.append(origin.w)
        elif direction.w > 0:
            caps.append(self._game.timeline_count() - 1 - origin.w)
        return max(0, min(caps))
