"""Tests for grid flood fill helpers."""

import numpy as np

from blobqr.engine.matrix import matrix_from_rows
from blobqr.utils.morphology import connected_components_grid, flood_fill, touches_border


def test_flood_fill_marks_visited():
    grid = matrix_from_rows([
        "##.",
        ".#.",
        "..#",
    ])
    visited = np.zeros(grid.shape, dtype=bool)
    cells = flood_fill(grid, 0, 0, visited)
    assert sorted(cells) == [(0, 0), (0, 1), (1, 1)]
    assert cells[0] == (0, 0)
    assert visited.sum() == 3
    assert not visited[2, 2]


def test_components_row_major():
    grid = matrix_from_rows([
        ".#.#",
        ".#..",
        "#..#",
    ])
    comps = connected_components_grid(grid)
    assert [c[0] for c in comps] == [(0, 1), (0, 3), (2, 0), (2, 3)]


def test_large_region_does_not_recurse():
    grid = np.ones((300, 300), dtype=bool)
    comps = connected_components_grid(grid)
    assert len(comps) == 1
    assert len(comps[0]) == 300 * 300


def test_touches_border():
    assert touches_border([(0, 2)], 5, 5)
    assert touches_border([(2, 4)], 5, 5)
    assert not touches_border([(2, 2), (1, 3)], 5, 5)
