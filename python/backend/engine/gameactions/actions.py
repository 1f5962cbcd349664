"""Legal blank moves and successor generation."""

from __future__ import annotations

from backend.engine.gamestate.state import State
from backend.models.board import DIRECTIONS, Board, Direction


def legal_directions(board: Board) -> list[Direction]:
    """Directions the blank can move without leaving the grid."""
    row, col = board.blank_pos
    edge = board.size
    legal: list[Direction] = []
    for direction in DIRECTIONS:
        dr, dc = direction.offset
        if 0 <= row + dr < edge and 0 <= col + dc < edge:
            legal.append(direction)
    return legal


def successors(state: State, parent_id: int) -> list[State]:
    """One child per legal blank move, in up/right/down/left order.

    *parent_id* is the arena index under which *state* was expanded.
    """
    board = state.board
    blank = board.blank_index()
    children: list[State] = []
    for direction in legal_directions(board):
        new_board, moved = board.apply_move(blank, direction)
        children.append(state.child(parent_id, direction, new_board, moved))
    return children
