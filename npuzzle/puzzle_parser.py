"""Reading puzzle descriptions and checking their solvability."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import combinations

__all__ = [
    "PuzzleFormatError",
    "UnsolvablePuzzleError",
    "Puzzle",
    "parse_puzzle",
    "snail_order",
    "is_valid_puzzle",
    "is_solvable",
]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_LINE_BREAK = re.compile(r"\r?\n")
_FIELD_SEPARATOR = re.compile(r"[ \t]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class PuzzleFormatError(ValueError):
    """The text does not describe a valid puzzle."""


@dataclass(frozen=True)
class Puzzle:
    """A square sliding puzzle; 0 stands for the blank."""

    size: int
    tiles: tuple[int, ...]


class UnsolvablePuzzleError(PuzzleFormatError):
    """The puzzle is well formed but cannot reach the goal."""

    def __init__(self, puzzle: Puzzle) -> None:
        super().__init__("the puzzle is unsolvable")
        self.puzzle = puzzle


def _to_int(text: str) -> int:
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        raise PuzzleFormatError(f"not an integer: {text!r}")
    value = int(stripped)
    if not _INT_MIN <= value <= _INT_MAX:
        raise PuzzleFormatError(f"integer out of range: {text!r}")
    return value


def _read_size(lines: Iterator[str]) -> int:
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            size = _to_int(line)
            if size <= 0:
                raise PuzzleFormatError(f"puzzle size must be positive, got {size}")
            return size
    raise PuzzleFormatError("missing puzzle size")


def _read_rows(lines: Iterator[str], size: int) -> list[int]:
    values: list[int] = []
    row_count = 0
    for line in lines:
        if row_count >= size:
            break
        content = line.split("#", 1)[0].strip()
        if not content:
            continue
        parts = [part for part in _FIELD_SEPARATOR.split(content) if part]
        if len(parts) != size:
            raise PuzzleFormatError(
                f"row {row_count + 1} has {len(parts)} values, expected {size}"
            )
        values.extend(_to_int(part) for part in parts)
        row_count += 1
    if row_count != size:
        raise PuzzleFormatError(f"expected {size} rows, found {row_count}")
    return values


def parse_puzzle(text: str) -> Puzzle:
    """Parse a puzzle description.

    Raises PuzzleFormatError for malformed input and UnsolvablePuzzleError
    for a well-formed puzzle that cannot be solved.
    """
    lines = iter(_LINE_BREAK.split(text))
    size = _read_size(lines)
    values = _read_rows(lines, size)
    if not is_valid_puzzle(values, size):
        raise PuzzleFormatError("tiles must be the numbers 0 to size*size-1, each once")
    puzzle = Puzzle(size, tuple(values))
    if not is_solvable(puzzle.tiles, size):
        raise UnsolvablePuzzleError(puzzle)
    return puzzle


def snail_order(size: int) -> list[int]:
    """Step number of each cell along a clockwise spiral from the top-left."""
    directions = ((1, 0), (0, 1), (-1, 0), (0, -1))
    order = [0] * (size * size)
    visited: set[tuple[int, int]] = set()
    x = y = direction = 0
    for step in range(size * size):
        order[y * size + x] = step
        visited.add((x, y))
        dx, dy = directions[direction]
        nx, ny = x + dx, y + dy
        if not (0 <= nx < size and 0 <= ny < size) or (nx, ny) in visited:
            direction = (direction + 1) % 4
        dx, dy = directions[direction]
        x += dx
        y += dy
    return order


def is_valid_puzzle(values: Sequence[int], size: int) -> bool:
    """Whether the values are exactly 0 .. size*size-1, each appearing once."""
    count = size * size
    return len(values) == count and set(values) == set(range(count))


def is_solvable(tiles: Sequence[int], size: int) -> bool:
    """Parity test of the tiles against the spiral arrangement."""
    step_to_position = {step: position for position, step in enumerate(snail_order(size))}
    blank = step_to_position.get(0, 0)
    remapped = [step_to_position.get(value, 0) for value in tiles]
    empty_index = blank if 0 in tiles else 0

    others = [value for value in remapped if value != blank]
    inversions = sum(1 for first, second in combinations(others, 2) if first > second)
    even = inversions % 2 == 0

    if size % 2 == 1:
        return even
    empty_row_from_bottom = size - empty_index // size
    return even if empty_row_from_bottom % 2 == 1 else not even