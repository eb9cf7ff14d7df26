"""Running a search on a puzzle, in the foreground or on a worker thread."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from npuzzle.metrics import HeuristicType, select_heuristic
from npuzzle.puzzle_parser import snail_order
from npuzzle.search import AStar, IDAStar, SearchAlgorithm

__all__ = ["SolveResult", "Solver", "generate_goal", "choose_algorithm"]


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a search; an empty path means no solution or a stop."""

    path: list[tuple[int, ...]]
    elapsed_ms: int
    states_tested: int
    max_states_in_memory: int

    @property
    def solved(self) -> bool:
        return bool(self.path)

    @property
    def moves(self) -> int:
        return max(len(self.path) - 1, 0)


def generate_goal(size: int) -> tuple[int, ...]:
    """The goal layout: tiles 1.. along a clockwise spiral, blank last."""
    cells = size * size
    return tuple((step + 1) % cells for step in snail_order(size))


def choose_algorithm(size: int) -> SearchAlgorithm:
    """A* for boards smaller than 5, IDA* from 5 up."""
    return AStar() if size < 5 else IDAStar()


def _resolve_heuristic(heuristic: Union[HeuristicType, str]) -> HeuristicType:
    if isinstance(heuristic, HeuristicType):
        return heuristic
    return select_heuristic(heuristic)


class Solver:
    """Solves puzzles with a search algorithm that can be stopped."""

    def __init__(self, algorithm: Optional[SearchAlgorithm] = None) -> None:
        self._stop_event = threading.Event()
        self._algorithm: Optional[SearchAlgorithm] = None
        self._thread: Optional[threading.Thread] = None
        self.result: Optional[SolveResult] = None
        self.algorithm = algorithm

    @property
    def algorithm(self) -> Optional[SearchAlgorithm]:
        return self._algorithm

    @algorithm.setter
    def algorithm(self, algorithm: Optional[SearchAlgorithm]) -> None:
        self._algorithm = algorithm
        if algorithm is not None:
            algorithm.stop_event = self._stop_event

    def solve(
        self,
        puzzle: Sequence[int],
        size: int,
        heuristic: Union[HeuristicType, str] = HeuristicType.MANHATTAN,
    ) -> SolveResult:
        """Solve the puzzle on the calling thread."""
        self._stop_event.clear()
        return self._run(puzzle, size, heuristic)

    def start(
        self,
        puzzle: Sequence[int],
        size: int,
        heuristic: Union[HeuristicType, str] = HeuristicType.MANHATTAN,
        callback: Optional[Callable[[SolveResult], None]] = None,
    ) -> None:
        """Solve the puzzle on a worker thread, passing the result to callback."""
        if self.is_running():
            raise RuntimeError("a search is already running")
        self._stop_event.clear()

        def work() -> None:
            result = self._run(puzzle, size, heuristic)
            if callback is not None:
                callback(result)

        self._thread = threading.Thread(target=work, name="npuzzle-solver", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the running search to give up."""
        self._stop_event.set()
        if self._algorithm is not None:
            self._algorithm.request_stop()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait for the worker thread; True once no search is running."""
        if self._thread is not None:
            self._thread.join(timeout)
        return not self.is_running()

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(
        self,
        puzzle: Sequence[int],
        size: int,
        heuristic: Union[HeuristicType, str],
    ) -> SolveResult:
        if self._algorithm is None:
            self.algorithm = choose_algorithm(size)
        algorithm = self._algorithm
        algorithm.stop_event = self._stop_event
        goal = generate_goal(size)

        started = time.perf_counter()
        algorithm.heuristic = _resolve_heuristic(heuristic)
        path = algorithm.solve(puzzle, goal)
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        result = SolveResult(
            path=path,
            elapsed_ms=elapsed_ms,
            states_tested=algorithm.states_tested,
            max_states_in_memory=algorithm.max_states_in_memory,
        )
        self.result = result
        return result