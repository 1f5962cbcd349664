"""Replays blank moves on a board and checks the goal."""

from __future__ import annotations

from typing import Iterable

from backend.models.board import GOAL, Board, Direction


class GamePlay:
    """Applies moves one at a time, tracking move count and tile cost."""

    def __init__(self, board: Board, goal: Board = GOAL) -> None:
        board.validate()
        self.board = board
        self.goal = goal
        self.moves: int = 0
        self.cost: int = 0

    @classmethod
    def from_board(cls, board: Board, goal: Board = GOAL) -> "GamePlay":
        return cls(board, goal)

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Move the blank one cell in *direction*.

        E.g. ``Direction.UP`` swaps the blank with the tile above it.
        Returns True if the move was valid.
        """
        blank = self.board.blank_index()
        if self.board.neighbor(blank, direction) is None:
            return False
        self.board, moved = self.board.apply_move(blank, direction)
        self.moves += 1
        self.cost += moved
        return True

    def replay(self, moves: Iterable[Direction]) -> bool:
        """Apply every move in order; stops and returns False on the first invalid one."""
        return all(self.move(direction) for direction in moves)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_goal(self.goal)
