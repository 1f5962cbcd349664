"""Per-strategy cost evaluation: heuristics plus path cost.

Both heuristics skip the blank. With tile-weighted moves (moving tile *k*
costs *k* >= 1) a single move changes either count by at most one, so both
are admissible and consistent, and every misplaced tile contributes at least
one to the Manhattan sum.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import Callable

from backend.engine.gamestate.state import State
from backend.models.board import Board
from backend.models.errors import StrategyMismatch
from backend.models.strategy import Strategy

Heuristic = Callable[[Board, Board], int]


class Discipline(StrEnum):
    FIFO = "fifo"
    LIFO = "lifo"
    HEAP = "heap"


# -- heuristics ---------------------------------------------------------------


def misplaced_tiles(board: Board, goal: Board) -> int:
    """Count non-blank tiles that are not where *goal* has them."""
    return sum(1 for v, g in zip(board.tiles, goal.tiles) if v != 0 and v != g)


@lru_cache(maxsize=8)
def _goal_positions(goal: Board) -> dict[int, tuple[int, int]]:
    return {v: divmod(i, goal.size) for i, v in enumerate(goal.tiles)}


def manhattan_sum(board: Board, goal: Board) -> int:
    """Sum of row + column distances of every non-blank tile to its goal cell."""
    where = _goal_positions(goal)
    size = board.size
    total = 0
    for i, v in enumerate(board.tiles):
        if v == 0:
            continue
        r, c = divmod(i, size)
        gr, gc = where[v]
        total += abs(r - gr) + abs(c - gc)
    return total


def path_cost(state: State) -> int:
    return state.path_cost


# -- cost model ---------------------------------------------------------------


@dataclass(frozen=True)
class CostModel:
    """Cost function and comparator for one strategy, fixed for a whole run."""

    strategy: Strategy
    discipline: Discipline
    goal: Board
    heuristic: Heuristic | None = None
    include_path_cost: bool = False

    @classmethod
    def for_strategy(cls, strategy: Strategy, goal: Board) -> CostModel:
        discipline, heuristic, include_path_cost = _TABLE[strategy]
        return cls(
            strategy=strategy,
            discipline=discipline,
            goal=goal,
            heuristic=heuristic,
            include_path_cost=include_path_cost,
        )

    @property
    def ranked(self) -> bool:
        """True if states are ordered by cost rather than insertion order."""
        return self.discipline is Discipline.HEAP

    def check(self, state: State) -> None:
        if state.strategy is not self.strategy:
            raise StrategyMismatch(
                f"State tagged {state.strategy.value!r} used with a "
                f"{self.strategy.value!r} cost model."
            )

    def cost(self, state: State) -> int:
        self.check(state)
        if not self.ranked:
            raise ValueError(f"{self.strategy.label} does not rank states by cost.")
        total = state.path_cost if self.include_path_cost else 0
        if self.heuristic is not None:
            total += self.heuristic(state.board, self.goal)
        return total

    def less(self, a: State, b: State) -> bool:
        """Strict "a is better than b" under this strategy."""
        return self.cost(a) < self.cost(b)


_TABLE: dict[Strategy, tuple[Discipline, Heuristic | None, bool]] = {
    Strategy.BREADTH_FIRST: (Discipline.FIFO, None, False),
    Strategy.DEPTH_FIRST: (Discipline.LIFO, None, False),
    Strategy.UNIFORM_COST: (Discipline.HEAP, None, True),
    Strategy.GREEDY_BEST_FIRST: (Discipline.HEAP, misplaced_tiles, False),
    Strategy.ASTAR_MISPLACED: (Discipline.HEAP, misplaced_tiles, True),
    Strategy.ASTAR_MANHATTAN: (Discipline.HEAP, manhattan_sum, True),
}
