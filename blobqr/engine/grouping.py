"""Component grouper — maximal 4-connected groups of dark modules."""

from __future__ import annotations

import logging

from blobqr.engine.matrix import Matrix
from blobqr.utils.morphology import Cell, connected_components_grid

logger = logging.getLogger(__name__)

Group = list[Cell]


def group_modules(matrix: Matrix) -> list[Group]:
    """Group dark modules; every dark cell lands in exactly one group.

    Groups come out in the order their row-major-earliest cell is found,
    which only decides the z-order of the rendered paths.
    """
    groups = connected_components_grid(matrix)
    logger.debug("Grouped %d dark modules into %d groups", int(matrix.sum()), len(groups))
    return groups


def bounding_box(group: Group) -> tuple[int, int, int, int]:
    """Inclusive (min_row, min_col, max_row, max_col) of a group."""
    rows = [r for r, _ in group]
    cols = [c for _, c in group]
    return min(rows), min(cols), max(rows), max(cols)
