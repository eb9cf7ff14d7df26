"""Heuristic distances between puzzle states."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum
from itertools import combinations

__all__ = [
    "HeuristicType",
    "select_heuristic",
    "manhattan_distance",
    "hamming_distance",
    "manhattan_plus_lc",
    "compute_heuristic",
]


class HeuristicType(Enum):
    """The heuristics a search can be guided by."""

    MANHATTAN = "Manhattan Distance"
    HAMMING = "Hamming Distance"
    MANHATTAN_PLUS_LC = "Manhattan Plus LC"


def select_heuristic(name: str) -> HeuristicType:
    """Return the heuristic with the given display name; Manhattan if unknown."""
    try:
        return HeuristicType(name)
    except ValueError:
        return HeuristicType.MANHATTAN


def _goal_positions(goal: Sequence[int]) -> dict[int, int]:
    return {value: index for index, value in enumerate(goal)}


def _side(state: Sequence[int]) -> int:
    return math.isqrt(len(state))


def manhattan_distance(current: Sequence[int], goal: Sequence[int]) -> float:
    """Sum of the grid distances of every tile from its goal cell."""
    size = _side(current)
    positions = _goal_positions(goal)
    total = 0
    for index, value in enumerate(current):
        if value == 0:
            continue
        target = positions.get(value, 0)
        total += abs(index // size - target // size) + abs(index % size - target % size)
    return float(total)


def hamming_distance(current: Sequence[int], goal: Sequence[int]) -> float:
    """Number of tiles, the blank excepted, that are not on their goal cell."""
    return float(sum(1 for have, want in zip(current, goal) if have != 0 and have != want))


def _inversions(sequence: Sequence[int]) -> int:
    return sum(1 for first, second in combinations(sequence, 2) if first > second)


def manhattan_plus_lc(current: Sequence[int], goal: Sequence[int]) -> float:
    """Manhattan distance plus two moves for every linear conflict."""
    size = _side(current)
    positions = _goal_positions(goal)
    conflicts = 0

    for row in range(size):
        cells = current[row * size:(row + 1) * size]
        goal_columns = [
            positions.get(value, 0) % size
            for value in cells
            if value != 0 and positions.get(value, 0) // size == row
        ]
        conflicts += 2 * _inversions(goal_columns)

    for col in range(size):
        cells = current[col::size]
        goal_rows = [
            positions.get(value, 0) // size
            for value in cells
            if value != 0 and positions.get(value, 0) % size == col
        ]
        conflicts += 2 * _inversions(goal_rows)

    return manhattan_distance(current, goal) + conflicts


_HEURISTICS = {
    HeuristicType.MANHATTAN: manhattan_distance,
    HeuristicType.HAMMING: hamming_distance,
    HeuristicType.MANHATTAN_PLUS_LC: manhattan_plus_lc,
}


def compute_heuristic(
    heuristic: HeuristicType, current: Sequence[int], goal: Sequence[int]
) -> float:
    """Evaluate the chosen heuristic for a state against the goal."""
    return _HEURISTICS[heuristic](current, goal)