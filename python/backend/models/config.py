"""Solver configuration passed explicitly into the engine."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import GOAL, Board


@dataclass(frozen=True)
class SolverConfig:
    """Goal board and wall-clock budget for one search run.

    ``time_limit`` is in seconds; ``None`` means the search runs until it
    solves the board or exhausts the reachable states.
    """

    goal: Board = GOAL
    time_limit: float | None = None

    def __post_init__(self) -> None:
        self.goal.validate()
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}.")

    def deadline(self, start: float) -> float | None:
        """Absolute ``time.monotonic()`` deadline for a run started at *start*."""
        if self.time_limit is None:
            return None
        return start + self.time_limit
