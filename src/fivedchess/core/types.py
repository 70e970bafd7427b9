"""Coordinate value types and helpers.

A square on a single board is a :class:`Position2D` ``(x, y)`` where ``x`` is
the file and ``y`` the rank, both 0-indexed.  Move generation works on
:class:`Vec4` coordinates ``(x, y, z, w)``: ``z`` is the full turn of the
board and ``w`` the timeline ID.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

_FILES = "abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True, slots=True)
class Position2D:
    """Immutable square coordinate on one board."""

    x: int
    y: int

    def in_bounds(self, dim: int) -> bool:
        return 0 <= self.x < dim and 0 <= self.y < dim

    def __str__(self) -> str:
        return square_name(self)


class Vec4(NamedTuple):
    """4D coordinate/offset: file, rank, full turn, timeline."""

    x: int
    y: int
    z: int
    w: int

    def shifted(self, delta: Vec4, steps: int = 1) -> Vec4:
        """Coordinate reached after *steps* applications of *delta*."""
        return Vec4(
            self.x + delta.x * steps,
            self.y + delta.y * steps,
            self.z + delta.z * steps,
            self.w + delta.w * steps,
        )


def square_name(pos: Position2D) -> str:
    """Human-readable name, e.g. ``Position2D(4, 1)`` → ``'e2'``."""
    return f"{_FILES[pos.x]}{pos.y + 1}"


def parse_square(name: str, dim: int = 8) -> Position2D:
    """Parse a square name for a *dim* × *dim* board, e.g. ``'e4'``."""
    if len(name) < 2 or name[0] not in _FILES[:dim] or not name[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    pos = Position2D(_FILES.index(name[0]), int(name[1:]) - 1)
    if not pos.in_bounds(dim):
        raise ValueError(f"Square {name!r} outside a {dim}x{dim} board")
    return pos
