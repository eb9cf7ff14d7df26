import pytest

from npuzzle.metrics import (
    HeuristicType,
    compute_heuristic,
    hamming_distance,
    manhattan_distance,
    manhattan_plus_lc,
    select_heuristic,
)

SNAIL_GOAL = (1, 2, 3, 8, 0, 4, 7, 6, 5)
ROW_GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)

STATES = [
    (1, 2, 3, 0, 8, 4, 7, 6, 5),
    (8, 1, 3, 2, 0, 4, 7, 6, 5),
    (0, 8, 7, 6, 5, 4, 3, 2, 1),
    (5, 4, 3, 2, 1, 0, 8, 7, 6),
    (3, 2, 1, 6, 5, 4, 0, 8, 7),
]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Manhattan Distance", HeuristicType.MANHATTAN),
        ("Hamming Distance", HeuristicType.HAMMING),
        ("Manhattan Plus LC", HeuristicType.MANHATTAN_PLUS_LC),
        ("Something else", HeuristicType.MANHATTAN),
        ("", HeuristicType.MANHATTAN),
    ],
)
def test_select_heuristic(name, expected):
    assert select_heuristic(name) is expected


@pytest.mark.parametrize("func", [manhattan_distance, hamming_distance, manhattan_plus_lc])
def test_goal_has_zero_distance(func):
    assert func(SNAIL_GOAL, SNAIL_GOAL) == 0.0


def test_single_blank_move_costs_one():
    moved = (1, 2, 3, 0, 8, 4, 7, 6, 5)
    assert manhattan_distance(moved, SNAIL_GOAL) == 1.0
    assert hamming_distance(moved, SNAIL_GOAL) == 1.0


def test_blank_is_ignored():
    # Only the blank differs in position meaning: swapping blank with a tile
    # moves one tile, so hamming counts exactly the tiles off their cell.
    moved = (1, 2, 3, 0, 8, 4, 7, 6, 5)
    assert hamming_distance(moved, SNAIL_GOAL) == manhattan_distance(moved, SNAIL_GOAL)


def test_row_linear_conflict_adds_two():
    current = (2, 1, 3, 4, 5, 6, 7, 8, 0)
    assert manhattan_plus_lc(current, ROW_GOAL) - manhattan_distance(current, ROW_GOAL) == 2.0


def test_column_conflict_matches_transposed_row_conflict():
    row_state = (2, 1, 3, 4, 5, 6, 7, 8, 0)
    transpose = lambda s: tuple(s[c * 3 + r] for r in range(3) for c in range(3))
    col_state = transpose(row_state)
    col_goal = transpose(ROW_GOAL)
    assert manhattan_plus_lc(col_state, col_goal) == manhattan_plus_lc(row_state, ROW_GOAL)


@pytest.mark.parametrize("state", STATES)
def test_heuristic_ordering(state):
    hamming = hamming_distance(state, SNAIL_GOAL)
    manhattan = manhattan_distance(state, SNAIL_GOAL)
    with_conflicts = manhattan_plus_lc(state, SNAIL_GOAL)
    assert hamming <= manhattan <= with_conflicts
    assert (with_conflicts - manhattan) % 2 == 0


@pytest.mark.parametrize("state", STATES)
def test_distances_are_symmetric_for_manhattan(state):
    assert manhattan_distance(state, SNAIL_GOAL) >= 0
    assert hamming_distance(state, SNAIL_GOAL) <= len(state) - 1


@pytest.mark.parametrize(
    "heuristic, func",
    [
        (HeuristicType.MANHATTAN, manhattan_distance),
        (HeuristicType.HAMMING, hamming_distance),
        (HeuristicType.MANHATTAN_PLUS_LC, manhattan_plus_lc),
    ],
)
@pytest.mark.parametrize("state", STATES)
def test_compute_heuristic_dispatches(heuristic, func, state):
    assert compute_heuristic(heuristic, state, SNAIL_GOAL) == func(state, SNAIL_GOAL)


def test_accepts_lists():
    assert manhattan_distance(list(STATES[1]), list(SNAIL_GOAL)) == manhattan_distance(
        STATES[1], SNAIL_GOAL
    )