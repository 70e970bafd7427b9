"""Move value objects and the pending-turn record used for undo."""

from __future__ import annotations

from dataclasses import dataclass, field

from fivedchess.core.board import Board
from fivedchess.core.types import Position2D, Vec4, square_name


@dataclass(frozen=True, slots=True)
class SelectedPosition:
    """A specific square on a specific board."""

    board: Board
    pos: Position2D

    def to_vec4(self) -> Vec4:
        return Vec4(self.pos.x, self.pos.y, self.board.full_turn, self.board.timeline_id)

    def __str__(self) -> str:
        side = "w" if self.board.half_turn % 2 == 0 else "b"
        return (
            f"(T{self.board.timeline_id}){self.board.full_turn + 1}{side}:"
            f"{square_name(self.pos)}"
        )


@dataclass(frozen=True, slots=True)
class Move:
    """A piece travelling from one selected square to another."""

    from_: SelectedPosition
    to: SelectedPosition

    @property
    def is_same_board(self) -> bool:
        return self.from_.board is self.to.board

    def __str__(self) -> str:
        return f"{self.from_} -> {self.to}"


@dataclass(frozen=True, slots=True)
class ForkRecord:
    """What a single applied move changed, in creation order.

    ``timeline_ids`` lists every timeline that received a new head board;
    ``created_timeline`` is set when the move branched a new timeline and
    ``decided_game`` when it captured the enemy king.
    """

    move: Move
    timeline_ids: tuple[int, ...]
    half_turn: int
    created_timeline: int | None = None
    decided_game: bool = False


@dataclass
class PendingTurn:
    """Moves applied since the last submitted turn."""

    records: list[ForkRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(r.move for r in self.records)

    @property
    def touched_timelines(self) -> frozenset[int]:
        return frozenset(tid for r in self.records for tid in r.timeline_ids)

    def push(self, record: ForkRecord) -> None:
        self.records.append(record)

    def pop(self) -> ForkRecord:
        return self.records.pop()

    def next_present(self) -> int:
        """Slowest half-turn reached by any timeline touched this turn."""
        return min(r.half_turn for r in self.records)

    def clear(self) -> None:
        self.records.clear()
