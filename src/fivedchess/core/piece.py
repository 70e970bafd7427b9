"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from fivedchess.core.enums import Color, PieceType

# Glyphs ordered by PieceType value: pawn, knight, bishop, rook, queen, king.
_GLYPHS = {Color.WHITE: "♙♘♗♖♕♔", Color.BLACK: "♟♞♝♜♛♚"}


def _layout_char(color: Color, piece_type: PieceType) -> str:
    letter = piece_type.symbol
    return letter if color is Color.WHITE else letter.lower()


_FROM_CHAR: dict[str, tuple[Color, PieceType]] = {
    _layout_char(color, ptype): (color, ptype) for color in Color for ptype in PieceType
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece of one color and kind.

    Pieces carry no per-instance state, so a forked board shares the same
    value with its predecessor instead of cloning it.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Layout character: upper case for white, lower case for black."""
        return _layout_char(self.color, self.piece_type)

    @classmethod
    def from_char(cls, char: str) -> Piece:
        if char not in _FROM_CHAR:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(*_FROM_CHAR[char])

    @property
    def name(self) -> str:
        return self.piece_type.display_name

    @property
    def symbol(self) -> str:
        return _GLYPHS[self.color][self.piece_type - 1]
