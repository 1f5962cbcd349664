"""Board model: validation, parsing, queries and moves."""

from __future__ import annotations

import dataclasses

import pytest

from backend.models.board import GOAL, Board, Direction, equal_board
from backend.models.errors import InvalidBoard

ONE_MOVE = [1, 2, 3, 8, 4, 0, 7, 6, 5]


# -- construction -------------------------------------------------------------


def test_from_flat_infers_size() -> None:
    board = Board.from_flat([1, 2, 3, 8, 0, 4, 7, 6, 5])
    assert board.size == 3
    assert board == GOAL


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 8, 0, 4, 7, 6],
        [1, 2, 3, 8, 0, 4, 7, 6, 5, 9],
        [1, 2, 3, 8, 9, 4, 7, 6, 5],
        [0, 2, 3, 8, 0, 4, 7, 6, 5],
        [1, 1, 3, 8, 0, 4, 7, 6, 5],
        [1, 2, 3, 8, 0, 4, 7, 6, -5],
    ],
    ids=["short", "long", "no-blank", "two-blanks", "duplicate", "out-of-range"],
)
def test_from_flat_rejects_malformed_boards(flat: list[int]) -> None:
    with pytest.raises(InvalidBoard):
        Board.from_flat(flat, size=3)


def test_invalid_board_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Board.from_flat([1, 2, 3])


@pytest.mark.parametrize(
    "text",
    ["1,2,3,8,0,4,7,6,5", "1 2 3 8 0 4 7 6 5", "123804765", " 1, 2, 3; 8 0 4 7 6 5 "],
)
def test_parse_accepts_common_formats(text: str) -> None:
    assert Board.parse(text) == GOAL


@pytest.mark.parametrize("text", ["", "1,2,x,8,0,4,7,6,5", "12345"])
def test_parse_rejects_garbage(text: str) -> None:
    with pytest.raises(InvalidBoard):
        Board.parse(text)


def test_board_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        GOAL.tiles = (0,) * 9  # type: ignore[misc]


# -- queries ------------------------------------------------------------------


def test_blank_index_and_position() -> None:
    board = Board.from_flat(ONE_MOVE)
    assert board.blank_index() == 5
    assert board.blank_pos == (1, 2)
    assert GOAL.blank_index() == 4


def test_blank_index_fails_without_blank() -> None:
    board = Board(tiles=(1, 2, 3, 4, 5, 6, 7, 8, 9))
    with pytest.raises(InvalidBoard):
        board.blank_index()


def test_goal_and_equality_ignore_identity() -> None:
    copy = Board.from_flat(list(GOAL.tiles))
    assert copy is not GOAL
    assert copy.is_goal(GOAL)
    assert equal_board(copy, GOAL)
    assert not Board.from_flat(ONE_MOVE).is_goal(GOAL)


def test_rows_and_tiles() -> None:
    assert GOAL.rows() == [[1, 2, 3], [8, 0, 4], [7, 6, 5]]
    assert GOAL.get_tile(2, 1) == 6
    assert GOAL.is_tile_correct(0, 0, GOAL)
    assert not Board.from_flat(ONE_MOVE).is_tile_correct(1, 1, GOAL)
    assert str(GOAL) == "1 2 3 / 8 0 4 / 7 6 5"


# -- moves --------------------------------------------------------------------


@pytest.mark.parametrize(
    "direction, expected, moved",
    [
        (Direction.UP, (1, 0, 3, 8, 2, 4, 7, 6, 5), 2),
        (Direction.RIGHT, (1, 2, 3, 8, 4, 0, 7, 6, 5), 4),
        (Direction.DOWN, (1, 2, 3, 8, 6, 4, 7, 0, 5), 6),
        (Direction.LEFT, (1, 2, 3, 0, 8, 4, 7, 6, 5), 8),
    ],
)
def test_apply_move_swaps_blank_with_neighbor(
    direction: Direction, expected: tuple[int, ...], moved: int
) -> None:
    board, tile = GOAL.apply_move(GOAL.blank_index(), direction)
    assert board.tiles == expected
    assert tile == moved
    # the original is untouched
    assert GOAL.tiles == (1, 2, 3, 8, 0, 4, 7, 6, 5)


def test_apply_move_refuses_to_leave_the_grid() -> None:
    corner = Board.from_flat([0, 1, 2, 3, 4, 5, 6, 7, 8])
    assert corner.neighbor(0, Direction.UP) is None
    assert corner.neighbor(0, Direction.LEFT) is None
    with pytest.raises(ValueError):
        corner.apply_move(0, Direction.UP)


def test_neighbor_does_not_wrap_rows() -> None:
    board = Board.from_flat([1, 2, 0, 3, 4, 5, 6, 7, 8])
    assert board.neighbor(2, Direction.RIGHT) is None
    assert board.neighbor(2, Direction.DOWN) == 5
