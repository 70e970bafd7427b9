"""Core enumerations for the five-dimensional chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. The value doubles as the half-turn parity of that side."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction pawns of this color advance in."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Closed set of piece kinds."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        """Single upper-case letter, e.g. ``N`` for a knight."""
        return _SYMBOLS[self]


_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


class GameResult(IntEnum):
    """Outcome of a game. Only king capture ends a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2

    @classmethod
    def won_by(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color is Color.WHITE else cls.BLACK_WINS
