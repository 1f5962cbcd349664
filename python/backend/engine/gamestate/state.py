"""Search-tree nodes and the arena that owns them for one run."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board, Direction
from backend.models.strategy import Strategy


@dataclass(frozen=True, slots=True)
class State:
    """A board plus the path metadata that led to it.

    ``parent`` is an index into the run's ``StateArena``, ``None`` for the
    root. ``moved_tile`` doubles as the step cost; ``path_cost`` is the
    cumulative cost from the root, fixed when the state is created.
    """

    board: Board
    strategy: Strategy
    depth: int = 0
    action: Direction | None = None
    moved_tile: int = 0
    path_cost: int = 0
    parent: int | None = None

    @classmethod
    def root(cls, board: Board, strategy: Strategy) -> State:
        return cls(board=board, strategy=strategy)

    def child(
        self, parent_id: int, action: Direction, board: Board, moved_tile: int
    ) -> State:
        return State(
            board=board,
            strategy=self.strategy,
            depth=self.depth + 1,
            action=action,
            moved_tile=moved_tile,
            path_cost=self.path_cost + moved_tile,
            parent=parent_id,
        )

    @property
    def is_root(self) -> bool:
        return self.parent is None


class StateArena:
    """Owns every expanded state of a run; parent links index into it."""

    def __init__(self) -> None:
        self._nodes: list[State] = []

    def add(self, state: State) -> int:
        self._nodes.append(state)
        return len(self._nodes) - 1

    def __getitem__(self, index: int) -> State:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    # -- path reconstruction --------------------------------------------------

    def lineage(self, state: State) -> list[State]:
        """Return the chain of states from the root down to *state*."""
        chain = [state]
        while chain[-1].parent is not None:
            chain.append(self._nodes[chain[-1].parent])
        chain.reverse()
        return chain

    def path_cost(self, state: State) -> int:
        """Sum ``moved_tile`` over the parent chain, ignoring the cached total."""
        return sum(s.moved_tile for s in self.lineage(state))
