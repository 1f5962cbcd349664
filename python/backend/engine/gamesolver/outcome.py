"""Results reported by a search run."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board, Direction
from backend.models.strategy import Strategy


@dataclass(frozen=True)
class Step:
    action: Direction
    board: Board
    step_cost: int
    cumulative_cost: int


@dataclass(frozen=True)
class Solved:
    strategy: Strategy
    steps: tuple[Step, ...]
    total_cost: int
    nodes_expanded: int
    max_frontier_size: int
    elapsed: float = 0.0

    @property
    def moves(self) -> list[Direction]:
        return [s.action for s in self.steps]

    @property
    def depth(self) -> int:
        return len(self.steps)


@dataclass(frozen=True)
class Exhausted:
    """The frontier emptied: the goal is unreachable from the start board."""

    strategy: Strategy
    nodes_expanded: int
    max_frontier_size: int
    elapsed: float = 0.0


@dataclass(frozen=True)
class Cancelled:
    """The run hit its time limit or was stopped by the caller."""

    strategy: Strategy
    nodes_expanded: int
    max_frontier_size: int
    elapsed: float = 0.0


Outcome = Solved | Exhausted | Cancelled
