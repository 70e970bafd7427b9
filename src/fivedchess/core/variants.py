"""Variant presets: board size, starting layout and rule switches.

Layouts use FEN-style piece placement: ranks separated by ``/`` from the
top rank down, uppercase for white, lowercase for black and digits for
runs of empty squares.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fivedchess.core.board import Board
from fivedchess.core.piece import Piece
from fivedchess.core.types import Position2D


@dataclass(frozen=True, slots=True)
class GameRule:
    """Per-variant rule switches."""

    pawn_can_make_two_move_on_first_turn: bool = True


@dataclass(frozen=True, slots=True)
class Variant:
    """A named starting setup."""

    name: str
    dim: int
    layout: str
    rule: GameRule = field(default_factory=GameRule)
    description: str = ""

    def build_board(self) -> Board:
        return board_from_layout(self.layout, self.dim)


def board_from_layout(layout: str, dim: int) -> Board:
    """Parse a placement string into a half-turn 0 :class:`Board`."""
    ranks = layout.split("/")
    if len(ranks) != dim:
        raise ValueError(f"Invalid layout (must contain {dim} ranks): {layout!r}")
    board = Board(dim)
    for rank_idx, rank_text in enumerate(ranks):
        rank = dim - 1 - rank_idx
        file = 0
        digits = ""
        for ch in rank_text + " ":
            if ch.isdigit():
                digits += ch
                continue
            if digits:
                step = int(digits)
                if step < 1:
                    raise ValueError(f"Invalid layout run {digits!r}: {layout!r}")
                file += step
                digits = ""
            if ch == " ":
                break
            if file >= dim:
                raise ValueError(f"Invalid layout rank width: {layout!r}")
            board.place_piece(Position2D(file, rank), Piece.from_char(ch))
            file += 1
        if file != dim:
            raise ValueError(f"Invalid layout rank width: {layout!r}")
    return board


def board_to_layout(board: Board) -> str:
    """Inverse of :func:`board_from_layout`."""
    dim = board.dim
    ranks: list[str] = []
    for rank in range(dim - 1, -1, -1):
        text = ""
        empty = 0
        for file in range(dim):
            piece = board.get_piece(Position2D(file, rank))
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)


_NO_DOUBLE_STEP = GameRule(pawn_can_make_two_move_on_first_turn=False)

STANDARD = Variant(
    name="standard",
    dim=8,
    layout="rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",
    description="Classical 8x8 setup.",
)

SMALL = Variant(
    name="small",
    dim=5,
    layout="rnbqk/ppppp/5/PPPPP/RNBQK",
    rule=_NO_DOUBLE_STEP,
    description="Reduced 5x5 board with one of each officer.",
)

VERY_SMALL = Variant(
    name="very_small",
    dim=4,
    layout="nbqk/4/4/KQBN",
    rule=_NO_DOUBLE_STEP,
    description="Open 4x4 board without pawns.",
)

KINGS_AND_PAWNS = Variant(
    name="kings_and_pawns",
    dim=5,
    layout="2k2/ppppp/5/PPPPP/2K2",
    rule=_NO_DOUBLE_STEP,
    description="Tutorial: pawn movement and king capture.",
)

ROOKS_TUTORIAL = Variant(
    name="rooks_tutorial",
    dim=5,
    layout="r3k/5/5/5/K3R",
    rule=_NO_DOUBLE_STEP,
    description="Tutorial: sliding through time and across timelines.",
)

VARIANTS: dict[str, Variant] = {
    v.name: v for v in (STANDARD, SMALL, VERY_SMALL, KINGS_AND_PAWNS, ROOKS_TUTORIAL)
}


def get_variant(name: str) -> Variant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown variant {name!r}; expected one of {sorted(VARIANTS)}"
        ) from None
