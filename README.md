# npuzzle

Solve sliding-tile puzzles (8-puzzle, 15-puzzle and larger) with A* or IDA*,
using Manhattan distance, Hamming distance or Manhattan distance plus linear
conflicts as the heuristic.

The goal layout is the "snail" arrangement: tiles run clockwise in a spiral
from the top-left corner, and the empty cell ends where the spiral ends. For
a 3x3 board the goal is:

```
1 2 3
8 0 4
7 6 5
```

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Puzzle files

A puzzle file gives the board size on its first meaningful line, followed by
one line per row. Blank lines are ignored and anything after `#` is a comment.
`0` marks the empty cell, and the tiles must be exactly the numbers
`0` to `size*size - 1`.

```
# This puzzle is solvable
3
0 2 3
1 4 5
8 7 6
```

Files that do not follow this format are rejected, as are puzzles that cannot
reach the snail goal.

## Command line

```
npuzzle [FILE] [-a {A*,IDA*}] [-H HEURISTIC] [-p]
npuzzle --help
```

- `FILE`: the puzzle file; omitted or `-` reads standard input.
- `-a`, `--algorithm`: `A*` or `IDA*`. When omitted, A* is used for boards
  smaller than 5 and IDA* from 5 up.
- `-H`, `--heuristic`: `"Manhattan Distance"` (the default),
  `"Hamming Distance"` or `"Manhattan Plus LC"`.
- `-p`, `--path`: print every board from the initial state to the goal,
  numbered `Step 0`, `Step 1`, ...; without it only the final board is shown.

After the board(s) the command prints the time taken (as `Xm Ys Zms`), the
number of moves, the number of states tested ("complexity in time") and the
largest number of states held in memory at once ("complexity in size").

The exit status is 0 on success and 1 when the file cannot be read
("Unable to open the selected file."), the puzzle is malformed ("Invalid
puzzle format."), it is unsolvable ("The puzzle is unsolvable.") or the
search ended without a solution. Pressing Ctrl-C during a search stops it and
reports "The process has been stopped.".

## Library use

```python
from npuzzle.puzzle_parser import parse_puzzle
from npuzzle.solver import Solver

with open("puzzle.txt", encoding="utf-8") as handle:
    puzzle = parse_puzzle(handle.read())   # PuzzleFormatError / UnsolvablePuzzleError

result = Solver().solve(puzzle.tiles, puzzle.size, "Manhattan Plus LC")
print(result.moves, result.states_tested, result.max_states_in_memory)
```

Building blocks:

- `npuzzle.puzzle_parser`: `parse_puzzle` returns a `Puzzle` (`size`,
  `tiles`); `PuzzleFormatError` is raised for malformed text and its subclass
  `UnsolvablePuzzleError` (carrying the `puzzle`) for unsolvable boards. Also
  `snail_order`, `is_valid_puzzle` and `is_solvable`.
- `npuzzle.metrics`: `HeuristicType`, `select_heuristic` (accepts
  `"Manhattan Distance"`, `"Hamming Distance"` and `"Manhattan Plus LC"`,
  falling back to Manhattan for any other name), `manhattan_distance`,
  `hamming_distance`, `manhattan_plus_lc` and `compute_heuristic`.
- `npuzzle.node`: `Node`, a frozen state with `g_cost`, `h_cost`, `parent`,
  the `f_cost` property and `path()`; nodes compare by state alone.
- `npuzzle.search`: `AStar` and `IDAStar`, both derived from
  `SearchAlgorithm`, which takes a `heuristic` and an optional
  `threading.Event` as stop flag. `solve(initial_state, goal)` returns the list
  of states to the goal, or an empty list when there is none or after
  `request_stop()`. `states_tested` and `max_states_in_memory` are updated as
  the search runs.
- `npuzzle.solver`: `generate_goal(size)` builds the snail goal,
  `choose_algorithm(size)` picks A* below size 5 and IDA* from size 5 up, and
  `Solver` runs a search directly with `solve`, or on a worker thread with
  `start` (optionally calling a callback with the result), `stop`, `wait` and
  `is_running`. Each run produces a `SolveResult` with `path`, `elapsed_ms`,
  `states_tested`, `max_states_in_memory`, and the `solved` and `moves`
  properties; the latest one is kept in `Solver.result`.
- `npuzzle.cli`: `main`, plus `format_elapsed_time` and `format_board`.

A* finds shortest solutions but keeps every visited state in memory; IDA*
uses memory proportional to the solution length at the cost of revisiting
states, which suits larger boards.

## What it does not do

The package does not generate puzzles: boards must be supplied as text in
the format above. It has no graphical interface and no interactive
step-through of a solution; the command line prints the result once, and
`--path` prints the whole sequence of boards.