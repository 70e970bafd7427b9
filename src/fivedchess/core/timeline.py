"""TimeLine - append-only history of boards."""

from __future__ import annotations

from fivedchess.core.board import Board
from fivedchess.core.errors import ContractViolation

#: ``fork_at`` of a root timeline; its first board sits at half-turn 0.
ROOT_FORK = -1


class TimeLine:
    """Ordered sequence of boards sharing a timeline ID.

    ``history[i].half_turn == fork_at + 1 + i`` holds for every index.  The
    parent is stored as an ID and is only used for ancestry queries.
    """

    __slots__ = ("_id", "_fork_at", "_parent_id", "_history")

    def __init__(
        self,
        timeline_id: int,
        fork_at: int = ROOT_FORK,
        parent_id: int | None = None,
    ) -> None:
        self._id = timeline_id
        self._fork_at = fork_at
        self._parent_id = parent_id
        self._history: list[Board] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def fork_at(self) -> int:
        return self._fork_at

    @property
    def parent_id(self) -> int | None:
        return self._parent_id

    @property
    def is_root(self) -> bool:
        return self._parent_id is None

    @property
    def history(self) -> tuple[Board, ...]:
        return tuple(self._history)

    def size(self) -> int:
        return len(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def back(self) -> Board:
        """Most recently played board."""
        if not self._history:
            raise ContractViolation(f"Timeline {self._id} has no boards")
        return self._history[-1]

    @property
    def half_turn(self) -> int:
        """Half-turn of the head board."""
        return self.back().half_turn

    @property
    def full_turn(self) -> int:
        return self.back().full_turn

    # -- Mutation ---------------------------------------------------------------

    def push_back(self, board: Board) -> None:
        expected = self._fork_at + 1 + len(self._history)
        if board.half_turn != expected:
            raise ContractViolation(
                f"Timeline {self._id} expects half-turn {expected}, "
                f"got {board.half_turn}"
            )
        if board.timeline_id != self._id:
            raise ContractViolation(
                f"Board belongs to timeline {board.timeline_id}, not {self._id}"
            )
        self._history.append(board)

    def pop_back(self) -> Board:
        if not self._history:
            raise ContractViolation(f"Timeline {self._id} has no boards to pop")
        return self._history.pop()

    def create_fork(self, new_id: int, fork_at_half_turn: int) -> TimeLine:
        """New, empty timeline branching from this one after *fork_at_half_turn*.

        The caller pushes the first board.
        """
        if not self.contains_half_turn(fork_at_half_turn):
            raise ContractViolation(
                f"Timeline {self._id} has no board at half-turn {fork_at_half_turn}"
            )
        return TimeLine(new_id, fork_at=fork_at_half_turn, parent_id=self._id)

    # -- Lookup -----------------------------------------------------------------

    def contains_half_turn(self, half_turn: int) -> bool:
        return 0 <= half_turn - self._fork_at - 1 < len(self._history)

    def get_board_by_half_turn(self, half_turn: int) -> Board:
        index = half_turn - self._fork_at - 1
        if not 0 <= index < len(self._history):
            raise ContractViolation(
                f"Timeline {self._id} has no board at half-turn {half_turn} "
                f"(covers {self._fork_at + 1}..{self._fork_at + len(self._history)})"
            )
        return self._history[index]

    def __repr__(self) -> str:
        return (
            f"TimeLine(id={self._id}, fork_at={self._fork_at}, "
            f"parent={self._parent_id}, size={len(self._history)})"
        )
