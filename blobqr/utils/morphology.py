"""Grid flood fill and connected-component labeling (4-connected)."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

Cell = tuple[int, int]

# Von Neumann neighborhood: up, down, left, right
NEIGHBORS_4: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def flood_fill(
    grid: NDArray[np.bool_],
    start_r: int,
    start_c: int,
    visited: NDArray[np.bool_],
) -> list[Cell]:
    """Stack-based flood fill over True cells of ``grid``, marking ``visited``.

    Returns the reached cells in visit order. ``visited`` is the caller's arena
    and is updated in place; it must have the same shape as ``grid``.
    """
    rows, cols = grid.shape
    stack = [(start_r, start_c)]
    visited[start_r, start_c] = True
    cells: list[Cell] = []

    while stack:
        r, c = stack.pop()
        cells.append((r, c))
        for dr, dc in NEIGHBORS_4:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and grid[nr, nc] and not visited[nr, nc]:
                visited[nr, nc] = True
                stack.append((nr, nc))

    return cells


def connected_components_grid(grid: NDArray[np.bool_]) -> list[list[Cell]]:
    """Partition the True cells of ``grid`` into 4-connected components.

    Components are returned in row-major order of their first cell.
    """
    rows, cols = grid.shape
    visited = np.zeros((rows, cols), dtype=bool)
    components: list[list[Cell]] = []

    for r in range(rows):
        for c in range(cols):
            if grid[r, c] and not visited[r, c]:
                components.append(flood_fill(grid, r, c, visited))

    return components


def touches_border(cells: list[Cell], rows: int, cols: int) -> bool:
    """True if any cell lies on the outer ring of a rows×cols grid."""
    return any(r == 0 or c == 0 or r == rows - 1 or c == cols - 1 for r, c in cells)
