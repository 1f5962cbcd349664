from backend.models.board import DIRECTIONS, GOAL, Board, Direction, equal_board
from backend.models.config import SolverConfig
from backend.models.errors import InvalidBoard, SolverError, StrategyMismatch
from backend.models.strategy import Strategy

__all__ = [
    "Board",
    "DIRECTIONS",
    "Direction",
    "GOAL",
    "InvalidBoard",
    "SolverConfig",
    "SolverError",
    "Strategy",
    "StrategyMismatch",
    "equal_board",
]
