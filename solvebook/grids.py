"""Number grids: adjacent products and lattice path counting."""

from functools import cache
from itertools import accumulate
from math import prod
from typing import NamedTuple

_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


class LineProduct(NamedTuple):
    """The product of a straight run of grid values and the values themselves."""

    product: int
    values: tuple[int, ...]


def parse_grid(text: str) -> list[list[int]]:
    """Parse whitespace-separated integers, one grid row per non-blank line."""
    rows = [[int(token) for token in line.split()] for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("grid is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows differ in length")
    return rows


def largest_line_product(grid: list[list[int]], length: int = 4) -> LineProduct:
    """Return the greatest product of length adjacent values in any direction."""
    if length < 1:
        raise ValueError(f"line length must be positive, got {length}")
    height = len(grid)
    width = len(grid[0]) if grid else 0

    def lines():
        for row, cells in enumerate(grid):
            for column, _ in enumerate(cells):
                for d_row, d_col in _DIRECTIONS:
                    end_row = row + d_row * (length - 1)
                    end_col = column + d_col * (length - 1)
                    if 0 <= end_row < height and 0 <= end_col < width:
                        values = tuple(
                            grid[row + d_row * step][column + d_col * step]
                            for step in range(length)
                        )
                        yield LineProduct(prod(values), values)

    best = max(lines(), key=lambda line: line.product, default=None)
    if best is None:
        raise ValueError(f"no line of length {length} fits in a {height}x{width} grid")
    return best


def lattice_paths(n: int = 20) -> int:
    """Count right/down paths through an n x n grid by dynamic programming."""
    if n < 0:
        raise ValueError(f"grid size must be non-negative, got {n}")
    row = [1] * (n + 1)
    for _ in range(n):
        row = list(accumulate(row))
    return row[-1]


def lattice_paths_recursive(n: int = 20) -> int:
    """Count right/down paths through an n x n grid by memoised search."""
    if n < 0:
        raise ValueError(f"grid size must be non-negative, got {n}")

    @cache
    def walk(row: int, column: int) -> int:
        if row == n or column == n:
            return 1
        return walk(row + 1, column) + walk(row, column + 1)

    return walk(0, 0)