from math import comb, prod

import pytest

from solvebook.grids import (
    lattice_paths,
    lattice_paths_recursive,
    largest_line_product,
    parse_grid,
)


def _grid_text(rows):
    return "\n".join(" ".join(f"{v:02d}" for v in row) for row in rows)


def test_parse_grid_round_trip():
    rows = [[8, 2, 22], [49, 49, 99], [81, 49, 31]]
    assert parse_grid("\n" + _grid_text(rows) + "\n    ") == rows


def test_parse_grid_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_grid("1 2 3\n4 5")


def test_parse_grid_rejects_empty_text():
    with pytest.raises(ValueError):
        parse_grid("  \n ")


def _ones(size):
    return [[1] * size for _ in range(size)]


def test_horizontal_line_found():
    grid = _ones(6)
    grid[2][1:5] = [9, 9, 9, 9]
    result = largest_line_product(grid, 4)
    assert result.product == 9**4
    assert result.values == (9, 9, 9, 9)


def test_vertical_line_found():
    grid = _ones(6)
    for row in range(1, 5):
        grid[row][3] = 7
    assert largest_line_product(grid, 4).product == 7**4


def test_diagonal_line_found():
    grid = _ones(6)
    for step in range(4):
        grid[1 + step][1 + step] = 5
    assert largest_line_product(grid, 4).product == 5**4


def test_anti_diagonal_line_found():
    grid = _ones(6)
    for step in range(4):
        grid[step][5 - step] = 6
    assert largest_line_product(grid, 4).values == (6, 6, 6, 6)


def test_product_matches_values():
    grid = [[(r * 7 + c * 3) % 10 for c in range(5)] for r in range(5)]
    result = largest_line_product(grid, 3)
    assert result.product == prod(result.values)
    assert len(result.values) == 3


def test_line_longer_than_grid_raises():
    with pytest.raises(ValueError):
        largest_line_product(_ones(3), 4)


def test_non_positive_length_raises():
    with pytest.raises(ValueError):
        largest_line_product(_ones(3), 0)


@pytest.mark.parametrize("n", range(0, 12))
def test_lattice_paths_matches_binomial(n):
    assert lattice_paths(n) == comb(2 * n, n)


@pytest.mark.parametrize("n", [0, 1, 2, 5, 20])
def test_recursive_agrees_with_dynamic(n):
    assert lattice_paths_recursive(n) == lattice_paths(n)


def test_lattice_paths_rejects_negative():
    with pytest.raises(ValueError):
        lattice_paths(-1)
    with pytest.raises(ValueError):
        lattice_paths_recursive(-1)