"""Informed search over sliding-puzzle states."""

from __future__ import annotations

import heapq
import itertools
import math
import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

from npuzzle.metrics import HeuristicType, compute_heuristic
from npuzzle.node import Node

__all__ = ["SearchAlgorithm", "AStar", "IDAStar"]

State = tuple[int, ...]

# Row and column steps of the blank, in the order neighbours are generated.
_MOVES = ((0, 1), (1, 0), (0, -1), (-1, 0))
_FOUND = -1.0


class SearchAlgorithm(ABC):
    """Common state of a search: heuristic, counters and a stop flag."""

    def __init__(
        self,
        heuristic: HeuristicType = HeuristicType.MANHATTAN,
        stop_event: Optional[threading.Event] = None,
    ) -> None:
        self.heuristic = heuristic
        self.stop_event = stop_event if stop_event is not None else threading.Event()
        self.states_tested = 0
        self.max_states_in_memory = 0

    @abstractmethod
    def solve(self, initial_state: Sequence[int], goal: Sequence[int]) -> list[State]:
        """Return the states from the initial one to the goal, or [] if none."""

    def request_stop(self) -> None:
        """Ask a running search to give up as soon as it can."""
        self.stop_event.set()

    @property
    def stop_requested(self) -> bool:
        """Whether the search has been asked to stop."""
        return self.stop_event.is_set()

    def compute_heuristic(self, current: Sequence[int], goal: Sequence[int]) -> float:
        """Evaluate this search's heuristic for a state."""
        return compute_heuristic(self.heuristic, current, goal)

    def expand_neighbors(
        self, node: Node, goal: Sequence[int], with_parent: bool
    ) -> list[Node]:
        """Nodes reachable by sliding one tile into the blank."""
        state = node.state
        size = math.isqrt(len(state))
        blank = state.index(0)
        row, col = divmod(blank, size)
        neighbors = []
        for drow, dcol in _MOVES:
            new_row, new_col = row + drow, col + dcol
            if not (0 <= new_row < size and 0 <= new_col < size):
                continue
            target = new_row * size + new_col
            tiles = list(state)
            tiles[blank], tiles[target] = tiles[target], tiles[blank]
            new_state = tuple(tiles)
            neighbors.append(
                Node(
                    new_state,
                    node.g_cost + 1,
                    self.compute_heuristic(new_state, goal),
                    node if with_parent else None,
                )
            )
        return neighbors

    def _record_memory(self, states_in_memory: int) -> None:
        self.max_states_in_memory = max(self.max_states_in_memory, states_in_memory)


class AStar(SearchAlgorithm):
    """Best-first search on path cost plus heuristic estimate."""

    def solve(self, initial_state: Sequence[int], goal: Sequence[int]) -> list[State]:
        self.states_tested = 0
        goal = tuple(goal)
        start = tuple(initial_state)
        order = itertools.count()

        start_node = Node(start, 0.0, self.compute_heuristic(start, goal))
        # Among equal f-costs the most recently queued node comes out first.
        open_heap = [(start_node.f_cost, -next(order), start_node)]
        best_g: dict[State, float] = {start: 0.0}
        closed: set[State] = set()

        while open_heap:
            if self.stop_requested:
                return []
            self._record_memory(len(open_heap) + len(closed))
            _, _, current = heapq.heappop(open_heap)
            self.states_tested += 1

            if current.state in closed:
                continue
            closed.add(current.state)

            if current.state == goal:
                return current.path()

            for neighbor in self.expand_neighbors(current, goal, True):
                if self.stop_requested:
                    return []
                if neighbor.state in closed:
                    continue
                known = best_g.get(neighbor.state)
                if known is None or neighbor.g_cost < known:
                    heapq.heappush(open_heap, (neighbor.f_cost, -next(order), neighbor))
                    best_g[neighbor.state] = neighbor.g_cost
        return []


class IDAStar(SearchAlgorithm):
    """Iterative deepening on the f-cost bound, keeping only the current path."""

    def solve(self, initial_state: Sequence[int], goal: Sequence[int]) -> list[State]:
        self.states_tested = 0
        goal = tuple(goal)
        path = [tuple(initial_state)]
        on_path = {path[0]}
        bound = self.compute_heuristic(path[0], goal)

        while True:
            if self.stop_requested:
                return []
            result = self._search(path, on_path, 0.0, bound, goal)
            if result == _FOUND:
                return path
            if math.isinf(result):
                return []
            bound = result

    def _search(
        self,
        path: list[State],
        on_path: set[State],
        g: float,
        bound: float,
        goal: State,
    ) -> float:
        if self.stop_requested:
            return math.inf

        self._record_memory(len(path))
        state = path[-1]
        f = g + self.compute_heuristic(state, goal)
        if f > bound:
            return f
        if state == goal:
            return _FOUND
        self.states_tested += 1

        lowest = math.inf
        neighbors = self.expand_neighbors(Node(state, g, 0.0), goal, False)
        neighbors.sort(key=lambda neighbor: neighbor.h_cost)

        for neighbor in neighbors:
            if self.stop_requested:
                return math.inf
            if neighbor.state in on_path:
                continue
            path.append(neighbor.state)
            on_path.add(neighbor.state)
            result = self._search(path, on_path, g + 1, bound, goal)
            if result == _FOUND:
                return _FOUND
            lowest = min(lowest, result)
            path.pop()
            on_path.discard(neighbor.state)
        return lowest