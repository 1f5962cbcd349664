"""Exceptions raised by the solver core."""

from __future__ import annotations


class SolverError(Exception):
    """Base class for solver errors."""


class InvalidBoard(SolverError, ValueError):
    """The board is not a permutation of the tile set with exactly one blank."""


class StrategyMismatch(SolverError, AssertionError):
    """Two states from different strategies were compared.

    This is a programming defect: every state in one search run carries the
    same strategy.
    """
