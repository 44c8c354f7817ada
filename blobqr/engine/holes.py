"""Hole detector — enclosed light regions inside a dark group.

Works in the group's bounding box grown by one module and clamped to the
matrix. Light components touching the edge of that box are part of the open
background; the rest are holes, cut from the group's path with even-odd fill.
"""

from __future__ import annotations

import logging

from blobqr.engine.config import DEFAULT_CONFIG, RenderConfig
from blobqr.engine.grouping import Group, bounding_box
from blobqr.engine.matrix import Matrix
from blobqr.engine.smoothing import round_polygon
from blobqr.utils.contour import trace_contour
from blobqr.utils.morphology import Cell, connected_components_grid, touches_border

logger = logging.getLogger(__name__)


def expanded_box(group: Group, matrix: Matrix) -> tuple[int, int, int, int]:
    """Group bounding box plus one module per side, clamped to the matrix."""
    rows, cols = matrix.shape
    min_r, min_c, max_r, max_c = bounding_box(group)
    return (
        max(min_r - 1, 0),
        max(min_c - 1, 0),
        min(max_r + 1, rows - 1),
        min(max_c + 1, cols - 1),
    )


def find_hole_regions(group: Group, matrix: Matrix) -> list[list[Cell]]:
    """Light regions enclosed within the group's expanded box, in matrix coordinates."""
    if not group:
        return []

    r0, c0, r1, c1 = expanded_box(group, matrix)
    light = ~matrix[r0 : r1 + 1, c0 : c1 + 1]
    height, width = light.shape

    regions: list[list[Cell]] = []
    for cells in connected_components_grid(light):
        if touches_border(cells, height, width):
            continue
        regions.append([(r + r0, c + c0) for r, c in cells])

    return regions


def hole_paths(group: Group, matrix: Matrix, config: RenderConfig = DEFAULT_CONFIG) -> list[str]:
    """Smoothed sub-paths for each hole, traced like the group's own outline."""
    paths: list[str] = []
    for region in find_hole_regions(group, matrix):
        points = trace_contour(region, config.module_size)
        path = round_polygon(points, config.smoothing_radius, config.min_inset, config.epsilon)
        if path:
            paths.append(path)

    if paths:
        logger.debug("Group of %d cells has %d holes", len(group), len(paths))
    return paths
