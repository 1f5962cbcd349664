from backend.engine.gamesolver.engine import SearchEngine, SearchStatus
from backend.engine.gamesolver.outcome import Cancelled, Exhausted, Outcome, Solved, Step
from backend.engine.gamesolver.solver import DEFAULT_STRATEGY, Solver

__all__ = [
    "Cancelled",
    "DEFAULT_STRATEGY",
    "Exhausted",
    "Outcome",
    "SearchEngine",
    "SearchStatus",
    "Solved",
    "Solver",
    "Step",
]
