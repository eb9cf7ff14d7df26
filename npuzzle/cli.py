"""Command line front end: read a puzzle, solve it and show the result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from npuzzle.metrics import HeuristicType, select_heuristic
from npuzzle.puzzle_parser import Puzzle, UnsolvablePuzzleError, PuzzleFormatError, parse_puzzle
from npuzzle.search import AStar, IDAStar, SearchAlgorithm
from npuzzle.solver import SolveResult, Solver

__all__ = ["format_elapsed_time", "format_board", "main"]

_ALGORITHMS = {"A*": AStar, "IDA*": IDAStar}


def format_elapsed_time(elapsed_ms: int) -> str:
    """Render a duration in milliseconds as minutes, seconds and milliseconds."""
    seconds, ms = divmod(elapsed_ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes}m {seconds}s {ms}ms"


def format_board(tiles: Sequence[int], size: int) -> str:
    """Lay the tiles out as a grid of rows; the blank is left empty."""
    if size <= 0 or len(tiles) != size * size:
        raise ValueError(f"expected {size * size} tiles for a board of size {size}")
    width = len(str(size * size - 1))
    lines = []
    for row in range(size):
        cells = tiles[row * size:(row + 1) * size]
        text = " ".join(
            (" " * width) if value == 0 else str(value).rjust(width) for value in cells
        )
        lines.append(text.rstrip())
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="npuzzle", description="Solve an N-puzzle read from a file or standard input."
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="puzzle file to read; '-' or nothing reads standard input",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(_ALGORITHMS),
        default=None,
        help="search algorithm; chosen from the board size when omitted",
    )
    parser.add_argument(
        "-H",
        "--heuristic",
        choices=[heuristic.value for heuristic in HeuristicType],
        default=HeuristicType.MANHATTAN.value,
        help="heuristic guiding the search",
    )
    parser.add_argument(
        "-p",
        "--path",
        action="store_true",
        help="print every state from the initial one to the goal",
    )
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _run_solver(solver: Solver, puzzle: Puzzle, heuristic: HeuristicType) -> Optional[SolveResult]:
    solver.start(puzzle.tiles, puzzle.size, heuristic)
    try:
        while not solver.wait(0.1):
            pass
    except KeyboardInterrupt:
        solver.stop()
        solver.wait()
    return solver.result


def _print_result(result: SolveResult, puzzle: Puzzle, show_path: bool) -> None:
    if show_path:
        for step, state in enumerate(result.path):
            print(f"Step {step}:")
            print(format_board(state, puzzle.size))
            print()
    else:
        print(format_board(result.path[-1], puzzle.size))
        print()
    print(f"Time to process: {format_elapsed_time(result.elapsed_ms)}")
    print(f"Number of moves: {result.moves}")
    print(f"Complexity in time: {result.states_tested}")
    print(f"Complexity in size: {result.max_states_in_memory}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, solve the puzzle and print the outcome; return the exit status."""
    args = _build_parser().parse_args(argv)

    try:
        text = _read_input(args.file)
    except (OSError, UnicodeDecodeError):
        print("Unable to open the selected file.", file=sys.stderr)
        return 1

    try:
        puzzle = parse_puzzle(text)
    except UnsolvablePuzzleError:
        print("The puzzle is unsolvable.", file=sys.stderr)
        return 1
    except PuzzleFormatError:
        print("Invalid puzzle format.", file=sys.stderr)
        return 1

    algorithm: Optional[SearchAlgorithm] = None
    if args.algorithm is not None:
        algorithm = _ALGORITHMS[args.algorithm]()
    solver = Solver(algorithm)
    result = _run_solver(solver, puzzle, select_heuristic(args.heuristic))

    if result is None or not result.path or len(result.path[-1]) != puzzle.size * puzzle.size:
        print("The process has been stopped.", file=sys.stderr)
        return 1

    _print_result(result, puzzle, args.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())