"""Search driver: pops, goal-tests, expands and admits until done."""

from __future__ import annotations

import logging
import time
from enum import StrEnum
from typing import Callable, Sequence

from backend.engine.gameactions.actions import successors
from backend.engine.gamecost.cost import CostModel
from backend.engine.gamefrontier.frontier import Frontier, make_frontier
from backend.engine.gamesolver.outcome import (
    Cancelled,
    Exhausted,
    Outcome,
    Solved,
    Step,
)
from backend.engine.gamestate.state import State, StateArena
from backend.models.board import Board
from backend.models.config import SolverConfig
from backend.models.errors import InvalidBoard
from backend.models.strategy import Strategy

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"


class SearchEngine:
    """One search run over the puzzle graph for a single strategy.

    The engine owns the frontier, the arena of expanded states and the set
    of expanded boards. Construction validates the start board; ``run``
    drives the loop to a terminal outcome.
    """

    def __init__(
        self,
        board: Board | Sequence[int],
        strategy: Strategy,
        config: SolverConfig | None = None,
    ) -> None:
        self.config = config or SolverConfig()
        if isinstance(board, Board):
            board.validate()
        else:
            board = Board.from_flat(board, size=self.config.goal.size)
        if board.size != self.config.goal.size:
            raise InvalidBoard(
                f"Board is {board.size}×{board.size} but the goal is "
                f"{self.config.goal.size}×{self.config.goal.size}."
            )
        self.board = board
        self.strategy = Strategy(strategy)
        self.model = CostModel.for_strategy(self.strategy, self.config.goal)
        self.frontier: Frontier = make_frontier(self.model)
        self.arena = StateArena()
        self.expanded: set[tuple[int, ...]] = set()
        self.status = SearchStatus.RUNNING
        self.outcome: Outcome | None = None
        self.frontier.push(State.root(board, self.strategy))

    @property
    def nodes_expanded(self) -> int:
        return len(self.expanded)

    # -- driver ---------------------------------------------------------------

    def run(self, should_stop: Callable[[], bool] | None = None) -> Outcome:
        """Search until solved, exhausted, or stopped.

        *should_stop* is polled once per iteration alongside the configured
        time limit.
        """
        if self.outcome is not None:
            return self.outcome

        start = time.monotonic()
        deadline = self.config.deadline(start)
        goal = self.config.goal.tiles
        logger.info("Searching %s with %s", self.board, self.strategy.label)

        while True:
            if (deadline is not None and time.monotonic() >= deadline) or (
                should_stop is not None and should_stop()
            ):
                return self._finish(
                    SearchStatus.CANCELLED,
                    Cancelled(
                        strategy=self.strategy,
                        nodes_expanded=self.nodes_expanded,
                        max_frontier_size=self.frontier.max_size,
                        elapsed=time.monotonic() - start,
                    ),
                )

            if self.frontier.is_empty():
                return self._finish(
                    SearchStatus.EXHAUSTED,
                    Exhausted(
                        strategy=self.strategy,
                        nodes_expanded=self.nodes_expanded,
                        max_frontier_size=self.frontier.max_size,
                        elapsed=time.monotonic() - start,
                    ),
                )

            state = self.frontier.pop_best()
            self.expanded.add(state.board.tiles)
            node = self.arena.add(state)

            if state.board.tiles == goal:
                return self._finish(
                    SearchStatus.SOLVED, self._report(state, time.monotonic() - start)
                )

            logger.debug(
                "Expanding %s (depth %d, cost %d)",
                state.board,
                state.depth,
                state.path_cost,
            )
            for candidate in successors(state, node):
                self._admit(candidate)

    def _admit(self, candidate: State) -> bool:
        if candidate.board.tiles in self.expanded:
            return False
        return self.frontier.offer(candidate)

    def _finish(self, status: SearchStatus, outcome: Outcome) -> Outcome:
        self.status = status
        self.outcome = outcome
        logger.info(
            "%s finished %s after expanding %d nodes (max frontier %d)",
            self.strategy.label,
            status.value,
            outcome.nodes_expanded,
            outcome.max_frontier_size,
        )
        return outcome

    def _report(self, final: State, elapsed: float) -> Solved:
        steps = tuple(
            Step(
                action=s.action,
                board=s.board,
                step_cost=s.moved_tile,
                cumulative_cost=s.path_cost,
            )
            for s in self.arena.lineage(final)
            if s.action is not None
        )
        return Solved(
            strategy=self.strategy,
            steps=steps,
            total_cost=final.path_cost,
            nodes_expanded=self.nodes_expanded,
            max_frontier_size=self.frontier.max_size,
            elapsed=elapsed,
        )
