"""Preset and generated puzzle boards."""

from __future__ import annotations

import random
from enum import StrEnum

from backend.models.board import GOAL, Board


class Preset(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


PRESETS: dict[Preset, Board] = {
    Preset.EASY: Board(tiles=(1, 3, 4, 8, 6, 2, 7, 0, 5)),
    Preset.MEDIUM: Board(tiles=(2, 8, 1, 0, 4, 3, 7, 6, 5)),
    Preset.HARD: Board(tiles=(5, 6, 7, 4, 0, 8, 3, 2, 1)),
}


class GameGenerator:
    """Creates puzzles from presets or by scrambling the goal."""

    @staticmethod
    def preset(name: Preset | str) -> Board:
        return PRESETS[Preset(name)]

    @staticmethod
    def solved(goal: Board = GOAL) -> Board:
        """Return the goal-state board."""
        return goal

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random | None = None) -> Board:
        """Apply *moves* random blank moves, never undoing the previous one.

        The result is always reachable from *board*.
        """
        rng = rng or random.Random()
        prev: int | None = None

        for _ in range(moves):
            blank = board.blank_index()
            neighbors = GameGenerator._get_neighbors(board, blank)
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            target = rng.choice(neighbors)
            board = GameGenerator._swap(board, blank, target)
            prev = blank
        return board

    @staticmethod
    def generate(moves: int = 20, seed: int | None = None, goal: Board = GOAL) -> Board:
        """Return a random *solvable* board at most *moves* moves from *goal*."""
        rng = random.Random(seed)
        board = GameGenerator.scramble(goal, moves, rng)

        # Ensure the board is not already solved
        while moves > 0 and board.is_goal(goal):
            board = GameGenerator.scramble(goal, moves, rng)

        return board

    @staticmethod
    def unsolvable(board: Board) -> Board:
        """Swap the first two non-blank tiles, flipping the permutation parity."""
        i, j = [k for k, v in enumerate(board.tiles) if v != 0][:2]
        return GameGenerator._swap(board, i, j)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(board: Board, blank: int) -> list[int]:
        br, bc = divmod(blank, board.size)
        neighbors: list[int] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if 0 <= nr < board.size and 0 <= nc < board.size:
                neighbors.append(nr * board.size + nc)
        return neighbors

    @staticmethod
    def _swap(board: Board, i: int, j: int) -> Board:
        tiles = list(board.tiles)
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return Board(tiles=tuple(tiles), size=board.size)
