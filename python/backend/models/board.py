"""Board model for the eight puzzle."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable

from backend.models.errors import InvalidBoard


class Direction(StrEnum):
    """Direction the *blank* moves in."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

# Expansion order for successor generation.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)


@dataclass(frozen=True)
class Board:
    """Immutable puzzle configuration.

    Tiles are stored as a flat row-major tuple of ints. 0 represents the
    blank space.
    """

    tiles: tuple[int, ...]
    size: int = 3

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int], size: int | None = None) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 8, 0, 4, 7, 6, 5])
        """
        tiles = tuple(flat)
        if size is None:
            size = math.isqrt(len(tiles))
        board = cls(tiles=tiles, size=size)
        board.validate()
        return board

    @classmethod
    def parse(cls, text: str, size: int | None = None) -> Board:
        """Parse ``"1,3,4,8,6,2,7,0,5"``, ``"1 3 4 ..."`` or ``"134862705"``."""
        text = text.strip()
        if not text:
            raise InvalidBoard("Empty board.")
        if re.fullmatch(r"\d+", text) and len(text) > 1:
            parts = list(text)
        else:
            parts = [p for p in re.split(r"[\s,;]+", text) if p]
        try:
            values = [int(p) for p in parts]
        except ValueError:
            raise InvalidBoard(f"Board contains non-integer values: {text!r}") from None
        return cls.from_flat(values, size=size)

    def validate(self) -> None:
        """Raise ``InvalidBoard`` unless the tiles are a permutation of 0..n-1."""
        n = self.size * self.size
        if self.size < 2:
            raise InvalidBoard(f"Board edge must be at least 2, got {self.size}.")
        if len(self.tiles) != n:
            raise InvalidBoard(
                f"Expected {n} tiles for a {self.size}×{self.size} board, "
                f"got {len(self.tiles)}."
            )
        blanks = self.tiles.count(0)
        if blanks != 1:
            raise InvalidBoard(f"Board must contain exactly one blank, found {blanks}.")
        if sorted(self.tiles) != list(range(n)):
            raise InvalidBoard(
                f"Tiles must be a permutation of 0..{n - 1}, got {list(self.tiles)}."
            )

    # -- queries --------------------------------------------------------------

    def blank_index(self) -> int:
        for i, v in enumerate(self.tiles):
            if v == 0:
                return i
        raise InvalidBoard(f"Board has no blank: {list(self.tiles)}.")

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index(), self.size)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def rows(self) -> list[list[int]]:
        s = self.size
        return [list(self.tiles[r * s : (r + 1) * s]) for r in range(s)]

    def is_goal(self, goal: Board) -> bool:
        return self.tiles == goal.tiles

    def is_tile_correct(self, row: int, col: int, goal: Board) -> bool:
        """Check if a specific tile sits where *goal* has it."""
        i = row * self.size + col
        return self.tiles[i] == goal.tiles[i]

    # -- moves ----------------------------------------------------------------

    def neighbor(self, blank: int, direction: Direction) -> int | None:
        """Index the blank would move to, or ``None`` if that leaves the grid."""
        row, col = divmod(blank, self.size)
        dr, dc = direction.offset
        nr, nc = row + dr, col + dc
        if 0 <= nr < self.size and 0 <= nc < self.size:
            return nr * self.size + nc
        return None

    def apply_move(self, blank: int, direction: Direction) -> tuple[Board, int]:
        """Swap the blank at *blank* with its neighbor in *direction*.

        Returns the new board and the id of the tile that moved.
        """
        target = self.neighbor(blank, direction)
        if target is None:
            raise ValueError(f"Blank at {blank} cannot move {direction.value}.")
        tiles = list(self.tiles)
        moved = tiles[target]
        tiles[blank], tiles[target] = moved, 0
        return Board(tiles=tuple(tiles), size=self.size), moved

    def __str__(self) -> str:
        return " / ".join(" ".join(str(v) for v in row) for row in self.rows())


def equal_board(a: Board, b: Board) -> bool:
    """Tile-content equality, ignoring everything else."""
    return a.tiles == b.tiles


GOAL = Board(tiles=(1, 2, 3, 8, 0, 4, 7, 6, 5))
