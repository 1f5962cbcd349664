"""Eight puzzle solver."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from backend.engine.gamesolver.engine import SearchEngine
from backend.engine.gamesolver.outcome import Outcome, Solved
from backend.models.board import Board, Direction
from backend.models.config import SolverConfig
from backend.models.strategy import Strategy

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = Strategy.ASTAR_MANHATTAN


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(
        board: Board | Sequence[int],
        strategy: Strategy = DEFAULT_STRATEGY,
        config: SolverConfig | None = None,
    ) -> Outcome:
        """Run one search and return its outcome."""
        return SearchEngine(board, strategy, config).run()

    @staticmethod
    def solve(
        board: Board | Sequence[int],
        strategy: Strategy = DEFAULT_STRATEGY,
        config: SolverConfig | None = None,
    ) -> list[Direction]:
        """Return a move sequence that solves *board*, or ``[]`` if none was found."""
        outcome = Solver.search(board, strategy, config)
        if isinstance(outcome, Solved):
            return outcome.moves
        return []

    @staticmethod
    def hint(
        board: Board | Sequence[int],
        strategy: Strategy = DEFAULT_STRATEGY,
        config: SolverConfig | None = None,
    ) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board, strategy, config)
        return moves[0] if moves else None

    @staticmethod
    def compare(
        board: Board | Sequence[int],
        strategies: Iterable[Strategy] = tuple(Strategy),
        config: SolverConfig | None = None,
    ) -> dict[Strategy, Outcome]:
        """Run every strategy on the same board, in the given order."""
        results: dict[Strategy, Outcome] = {}
        for strategy in strategies:
            results[strategy] = Solver.search(board, strategy, config)
            logger.info("%s: %s", strategy.label, type(results[strategy]).__name__)
        return results
