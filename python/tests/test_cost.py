"""Heuristics and the per-strategy cost model."""

from __future__ import annotations

import itertools
import random

import pytest

from backend.engine.gamecost import (
    CostModel,
    Discipline,
    manhattan_sum,
    misplaced_tiles,
    path_cost,
)
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solved, Solver
from backend.engine.gamestate import State
from backend.models.board import GOAL, Board
from backend.models.errors import StrategyMismatch
from backend.models.strategy import Strategy

ONE_MOVE = Board.from_flat([1, 2, 3, 8, 4, 0, 7, 6, 5])
EASY = Board.from_flat([1, 3, 4, 8, 6, 2, 7, 0, 5])


# -- helpers ------------------------------------------------------------------


def _sample_boards(count: int, seed: int = 3) -> list[Board]:
    """Deterministic mix of lexicographic and shuffled permutations."""
    rng = random.Random(seed)
    boards = [Board(tiles=p) for p in itertools.islice(itertools.permutations(range(9)), count)]
    for _ in range(count):
        tiles = list(range(9))
        rng.shuffle(tiles)
        boards.append(Board(tiles=tuple(tiles)))
    return boards


# -- heuristics ---------------------------------------------------------------


def test_heuristics_are_zero_at_goal() -> None:
    assert misplaced_tiles(GOAL, GOAL) == 0
    assert manhattan_sum(GOAL, GOAL) == 0


def test_heuristics_one_move_from_goal() -> None:
    assert misplaced_tiles(ONE_MOVE, GOAL) == 1
    assert manhattan_sum(ONE_MOVE, GOAL) == 1


def test_heuristics_on_easy_board() -> None:
    # tiles 3, 4, 6 and 2 are out of place; 2 is two cells away
    assert misplaced_tiles(EASY, GOAL) == 4
    assert manhattan_sum(EASY, GOAL) == 5


def test_manhattan_dominates_misplaced() -> None:
    for board in _sample_boards(2000):
        assert manhattan_sum(board, GOAL) >= misplaced_tiles(board, GOAL), board


@pytest.mark.parametrize("seed", range(6))
def test_heuristics_never_overestimate(seed: int) -> None:
    board = GameGenerator.generate(8, seed=seed)
    outcome = Solver.search(board, Strategy.UNIFORM_COST)
    assert isinstance(outcome, Solved)
    assert misplaced_tiles(board, GOAL) <= outcome.total_cost
    assert manhattan_sum(board, GOAL) <= outcome.total_cost


# -- cost model ---------------------------------------------------------------


@pytest.mark.parametrize(
    "strategy, discipline",
    [
        (Strategy.BREADTH_FIRST, Discipline.FIFO),
        (Strategy.DEPTH_FIRST, Discipline.LIFO),
        (Strategy.UNIFORM_COST, Discipline.HEAP),
        (Strategy.GREEDY_BEST_FIRST, Discipline.HEAP),
        (Strategy.ASTAR_MISPLACED, Discipline.HEAP),
        (Strategy.ASTAR_MANHATTAN, Discipline.HEAP),
    ],
)
def test_discipline_per_strategy(strategy: Strategy, discipline: Discipline) -> None:
    model = CostModel.for_strategy(strategy, GOAL)
    assert model.discipline is discipline
    assert model.ranked is (discipline is Discipline.HEAP)


@pytest.mark.parametrize(
    "strategy, expected",
    [
        (Strategy.UNIFORM_COST, 10),
        (Strategy.GREEDY_BEST_FIRST, 4),
        (Strategy.ASTAR_MISPLACED, 14),
        (Strategy.ASTAR_MANHATTAN, 15),
    ],
)
def test_cost_table(strategy: Strategy, expected: int) -> None:
    state = State(board=EASY, strategy=strategy, depth=3, path_cost=10)
    model = CostModel.for_strategy(strategy, GOAL)
    assert model.cost(state) == expected
    assert path_cost(state) == 10


@pytest.mark.parametrize("strategy", [Strategy.BREADTH_FIRST, Strategy.DEPTH_FIRST])
def test_insertion_ordered_strategies_have_no_cost(strategy: Strategy) -> None:
    model = CostModel.for_strategy(strategy, GOAL)
    with pytest.raises(ValueError):
        model.cost(State.root(EASY, strategy))


def test_comparing_across_strategies_is_a_defect() -> None:
    model = CostModel.for_strategy(Strategy.UNIFORM_COST, GOAL)
    ours = State.root(EASY, Strategy.UNIFORM_COST)
    theirs = State.root(EASY, Strategy.ASTAR_MANHATTAN)
    with pytest.raises(StrategyMismatch):
        model.less(ours, theirs)
    with pytest.raises(AssertionError):
        model.cost(theirs)


def test_less_orders_by_cost() -> None:
    model = CostModel.for_strategy(Strategy.ASTAR_MANHATTAN, GOAL)
    near = State(board=ONE_MOVE, strategy=Strategy.ASTAR_MANHATTAN, path_cost=2)
    far = State(board=EASY, strategy=Strategy.ASTAR_MANHATTAN, path_cost=2)
    assert model.less(near, far)
    assert not model.less(far, near)
    assert not model.less(near, near)


def test_cost_model_uses_its_own_goal() -> None:
    standard = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0])
    model = CostModel.for_strategy(Strategy.GREEDY_BEST_FIRST, standard)
    assert model.cost(State.root(standard, Strategy.GREEDY_BEST_FIRST)) == 0
    assert model.cost(State.root(GOAL, Strategy.GREEDY_BEST_FIRST)) > 0
