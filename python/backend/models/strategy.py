"""Search strategies the solver can run."""

from __future__ import annotations

from enum import StrEnum


class Strategy(StrEnum):
    BREADTH_FIRST = "bfs"
    DEPTH_FIRST = "dfs"
    UNIFORM_COST = "ucs"
    GREEDY_BEST_FIRST = "greedy"
    ASTAR_MISPLACED = "astar-misplaced"
    ASTAR_MANHATTAN = "astar-manhattan"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def informed(self) -> bool:
        return self in (
            Strategy.GREEDY_BEST_FIRST,
            Strategy.ASTAR_MISPLACED,
            Strategy.ASTAR_MANHATTAN,
        )


_LABELS: dict[Strategy, str] = {
    Strategy.BREADTH_FIRST: "Breadth-first",
    Strategy.DEPTH_FIRST: "Depth-first",
    Strategy.UNIFORM_COST: "Uniform-cost",
    Strategy.GREEDY_BEST_FIRST: "Greedy best-first",
    Strategy.ASTAR_MISPLACED: "A* (misplaced tiles)",
    Strategy.ASTAR_MANHATTAN: "A* (Manhattan)",
}
