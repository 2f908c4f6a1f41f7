"""Day 4: word search for XMAS and crossed MAS shapes."""

from __future__ import annotations

from collections.abc import Sequence

from .day1 import _lines

_DIRECTIONS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
_DIAGONALS = tuple((dx, dy) for dx in (-1, 1) for dy in (-1, 1))

Grid = Sequence[Sequence[str]]


def parse_grid(text: str) -> list[list[str]]:
    """Turn each line of text into a row of characters."""
    return [list(line) for line in _lines(text)]


def _cell(grid: Grid, x: int, y: int) -> str | None:
    if x < 0 or y < 0 or y >= len(grid):
        return None
    row = grid[y]
    return row[x] if x < len(row) else None


def _matches(grid: Grid, word: str, x: int, y: int, dx: int, dy: int) -> bool:
    """True if word is spelled from (x, y) stepping by (dx, dy)."""
    return all(
        _cell(grid, x + step * dx, y + step * dy) == char
        for step, char in enumerate(word)
    )


def _positions(grid: Grid):
    for y, row in enumerate(grid):
        for x in range(len(row)):
            yield x, y


def count_xmas(text: str) -> int:
    """Number of times XMAS appears in any of the eight directions."""
    grid = parse_grid(text)
    return sum(
        _matches(grid, "XMAS", x, y, dx, dy)
        for x, y in _positions(grid)
        for dx, dy in _DIRECTIONS
    )


def count_x_mas(text: str) -> int:
    """Number of cells at the centre of two diagonal MAS words forming an X."""
    grid = parse_grid(text)
    return sum(
        1
        for x, y in _positions(grid)
        if sum(_matches(grid, "MAS", x - dx, y - dy, dx, dy) for dx, dy in _DIAGONALS) == 2
    )