"""Board - piece placement for one point in time on one timeline."""

from __future__ import annotations

from collections.abc import Iterator

from fivedchess.core.errors import ContractViolation
from fivedchess.core.piece import Piece
from fivedchess.core.types import Position2D, square_name


class Board:
    """Square grid of optional pieces at a fixed half-turn of a timeline.

    Boards refer to their timeline and predecessor by plain integers only
    (the predecessor as a ``(timeline_id, half_turn)`` address);
    ownership lies with the :class:`~fivedchess.core.timeline.TimeLine`
    holding them.  Once pushed onto a timeline a board is never mutated:
    moves always go through :meth:`create_fork`.
    """

    __slots__ = ("_dim", "_squares", "_half_turn", "_timeline_id", "_previous")

    def __init__(
        self,
        dim: int,
        half_turn: int = 0,
        timeline_id: int = 0,
        previous: tuple[int, int] | None = None,
    ) -> None:
        if dim < 1:
            raise ValueError(f"Board dimension must be positive, got {dim}")
        self._dim = dim
        self._squares: list[Piece | None] = [None] * (dim * dim)
        self._half_turn = half_turn
        self._timeline_id = timeline_id
        self._previous = previous

    # -- Properties -----------------------------------------------------------

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def half_turn(self) -> int:
        return self._half_turn

    @property
    def full_turn(self) -> int:
        return self._half_turn // 2

    @property
    def timeline_id(self) -> int:
        return self._timeline_id

    @property
    def previous(self) -> tuple[int, int] | None:
        """``(timeline_id, half_turn)`` of the board this one was forked from.

        ``None`` for a setup board.  The first board of a branched timeline
        points into its parent timeline.
        """
        return self._previous

    # -- Element access -------------------------------------------------------

    def _index(self, pos: Position2D) -> int:
        if not pos.in_bounds(self._dim):
            raise ContractViolation(
                f"Square ({pos.x}, {pos.y}) outside a {self._dim}x{self._dim} board"
            )
        return pos.y * self._dim + pos.x

    def place_piece(self, pos: Position2D, piece: Piece | None) -> None:
        self._squares[self._index(pos)] = piece

    def get_piece(self, pos: Position2D) -> Piece | None:
        return self._squares[self._index(pos)]

    def is_empty(self, pos: Position2D) -> bool:
        return self.get_piece(pos) is None

    def occupied(self) -> Iterator[tuple[Position2D, Piece]]:
        """Yield ``(square, piece)`` for every occupied square."""
        dim = self._dim
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield Position2D(idx % dim, idx // dim), piece

    # -- Forking ----------------------------------------------------------------

    def create_fork(self, timeline_id: int) -> Board:
        """Copy of this board one half-turn ahead, attached to *timeline_id*."""
        fork = Board(
            self._dim,
            half_turn=self._half_turn + 1,
            timeline_id=timeline_id,
            previous=(self._timeline_id, self._half_turn),
        )
        fork._squares = self._squares.copy()
        return fork

    # -- Dunder helpers ---------------------------------------------------------

    def same_layout(self, other: Board) -> bool:
        """Whether both boards hold the same pieces on the same squares."""
        return self._dim == other._dim and self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = [f"Board(T{self._timeline_id}, half-turn {self._half_turn})"]
        for rank in range(self._dim - 1, -1, -1):
            row = []
            for file in range(self._dim):
                p = self._squares[rank * self._dim + file]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        files = " ".join(square_name(Position2D(f, 0))[0] for f in range(self._dim))
        rows.append(f"  {files}")
        return "\n".join(rows)
