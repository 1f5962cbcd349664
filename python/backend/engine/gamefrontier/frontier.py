"""Frontier containers: FIFO / LIFO queues and an indexed binary min-heap.

The frontier is also where duplicate boards are resolved. Queue disciplines
keep the first copy of a board they see; the heap admits every candidate and
then evicts dominated duplicates so at most one live entry per board remains.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator

from backend.engine.gamecost.cost import CostModel, Discipline
from backend.engine.gamestate.state import State
from backend.models.board import Board

logger = logging.getLogger(__name__)

Key = tuple[int, ...]


class Frontier:
    """Shared bookkeeping for every discipline."""

    def __init__(self, model: CostModel) -> None:
        self.model = model
        self.max_size: int = 0

    # -- interface ------------------------------------------------------------

    def push(self, state: State) -> None:
        raise NotImplementedError

    def pop_best(self) -> State:
        raise NotImplementedError

    def offer(self, state: State) -> bool:
        """Push *state* under the duplicate policy; True if it stays live."""
        raise NotImplementedError

    def contains(self, board: Board) -> bool:
        raise NotImplementedError

    def all_matching(self, board: Board) -> list[State]:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __iter__(self) -> Iterator[State]:
        raise NotImplementedError

    # -- shared ---------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def _track_size(self) -> None:
        if len(self) > self.max_size:
            self.max_size = len(self)


class QueueFrontier(Frontier):
    """Insertion-ordered frontier: FIFO for breadth-first, LIFO for depth-first."""

    def __init__(self, model: CostModel) -> None:
        super().__init__(model)
        if model.discipline is Discipline.HEAP:
            raise ValueError(f"{model.strategy.label} needs a HeapFrontier.")
        self.lifo = model.discipline is Discipline.LIFO
        self._items: deque[State] = deque()
        self._counts: dict[Key, int] = {}

    def push(self, state: State) -> None:
        self.model.check(state)
        self._items.append(state)
        key = state.board.tiles
        self._counts[key] = self._counts.get(key, 0) + 1
        self._track_size()

    def pop_best(self) -> State:
        if not self._items:
            raise IndexError("pop from an empty frontier")
        state = self._items.pop() if self.lifo else self._items.popleft()
        key = state.board.tiles
        left = self._counts[key] - 1
        if left:
            self._counts[key] = left
        else:
            del self._counts[key]
        return state

    def offer(self, state: State) -> bool:
        if self.contains(state.board):
            return False
        self.push(state)
        return True

    def contains(self, board: Board) -> bool:
        return board.tiles in self._counts

    def all_matching(self, board: Board) -> list[State]:
        if not self.contains(board):
            return []
        return [s for s in self._items if s.board.tiles == board.tiles]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[State]:
        return iter(self._items)


class HeapFrontier(Frontier):
    """Array-backed binary min-heap keyed by the strategy's cost.

    Parent of slot ``i`` is ``(i - 1) // 2``; its children are ``2i + 1`` and
    ``2i + 2``. Each entry is ``(cost, arrival, state)``; the arrival number
    only breaks cost ties when reconciling duplicates. A board → slots index
    is kept current on every swap so duplicate lookups avoid a full scan.
    """

    def __init__(self, model: CostModel) -> None:
        super().__init__(model)
        if not model.ranked:
            raise ValueError(f"{model.strategy.label} does not use a HeapFrontier.")
        self._heap: list[tuple[int, int, State]] = []
        self._slots: dict[Key, set[int]] = {}
        self._arrivals = 0

    # -- heap operations ------------------------------------------------------

    def push(self, state: State) -> None:
        cost = self.model.cost(state)
        self._arrivals += 1
        self._heap.append((cost, self._arrivals, state))
        i = len(self._heap) - 1
        self._slots.setdefault(state.board.tiles, set()).add(i)
        self._swim(i)
        self._track_size()

    def pop_best(self) -> State:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return self._remove(0)

    def peek(self) -> State:
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][2]

    def delete_at(self, index: int) -> State:
        if not 0 <= index < len(self._heap):
            raise IndexError(f"heap index {index} out of range")
        return self._remove(index)

    def cost_at(self, index: int) -> int:
        return self._heap[index][0]

    def _remove(self, index: int) -> State:
        last = len(self._heap) - 1
        if index != last:
            self._swap(index, last)
        _, _, state = self._heap.pop()
        key = state.board.tiles
        slots = self._slots[key]
        slots.discard(last)
        if not slots:
            del self._slots[key]
        if index < len(self._heap):
            parent = (index - 1) // 2
            if index > 0 and self._heap[index][0] < self._heap[parent][0]:
                self._swim(index)
            else:
                self._sink(index)
        return state

    def _swim(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if heap[i][0] < heap[parent][0]:
                self._swap(i, parent)
                i = parent
            else:
                break

    def _sink(self, i: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            child = 2 * i + 1
            if child >= n:
                break
            right = child + 1
            # equal costs stay with the left child
            if right < n and heap[right][0] < heap[child][0]:
                child = right
            if heap[child][0] < heap[i][0]:
                self._swap(i, child)
                i = child
            else:
                break

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        a = heap[i][2].board.tiles
        b = heap[j][2].board.tiles
        self._slots[a].discard(i)
        self._slots[b].discard(j)
        self._slots[a].add(j)
        self._slots[b].add(i)
        heap[i], heap[j] = heap[j], heap[i]

    # -- duplicates -----------------------------------------------------------

    def offer(self, state: State) -> bool:
        self.push(state)
        evicted = self.reconcile(state.board)
        return not any(e is state for e in evicted)

    def reconcile(self, board: Board) -> list[State]:
        """Evict every entry for *board* except the cheapest one.

        On equal cost the earliest admitted entry is kept.
        """
        key = board.tiles
        slots = self._slots.get(key)
        if not slots or len(slots) < 2:
            return []
        keeper = min((self._heap[i] for i in slots), key=lambda e: (e[0], e[1]))[2]
        evicted: list[State] = []
        while len(self._slots[key]) > 1:
            index = next(i for i in self._slots[key] if self._heap[i][2] is not keeper)
            cost = self._heap[index][0]
            evicted.append(self._remove(index))
            logger.debug("Evicted duplicate %s at cost %d", board, cost)
        return evicted

    def contains(self, board: Board) -> bool:
        return board.tiles in self._slots

    def all_matching(self, board: Board) -> list[State]:
        return [self._heap[i][2] for i in sorted(self._slots.get(board.tiles, ()))]

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[State]:
        return (entry[2] for entry in self._heap)


def make_frontier(model: CostModel) -> Frontier:
    """Pick the container that matches the strategy's discipline."""
    if model.ranked:
        return HeapFrontier(model)
    return QueueFrontier(model)
