"""Blob style — merged, rounded outlines per group of dark modules.

Paint order:
  1. One even-odd path per group: smoothed outline plus its hole sub-paths
  2. A light square over every light module, so no background area is
     left covered where a blob path overreaches
  3. The three finder ornaments, over whatever the symbol has there
"""

from __future__ import annotations

import logging

from blobqr.engine.config import RenderConfig
from blobqr.engine.finder import finder_ornaments
from blobqr.engine.grouping import Group, group_modules
from blobqr.engine.holes import hole_paths
from blobqr.engine.matrix import Matrix
from blobqr.engine.registry import renderer
from blobqr.engine.smoothing import round_polygon
from blobqr.svg.serializer import Element, rect
from blobqr.utils.contour import trace_contour

logger = logging.getLogger(__name__)


def group_path(group: Group, matrix: Matrix, config: RenderConfig) -> str:
    """Outline of ``group`` followed by its holes; "" if nothing drawable."""
    outline = trace_contour(group, config.module_size)
    outer = round_polygon(outline, config.smoothing_radius, config.min_inset, config.epsilon)
    parts = [outer, *hole_paths(group, matrix, config)]
    return " ".join(p for p in parts if p)


@renderer("blob", description="Merged rounded blobs with stylized finder patterns")
def render_blob(matrix: Matrix, color: str, config: RenderConfig) -> list[Element]:
    m = config.module_size
    elements: list[Element] = []

    for group in group_modules(matrix):
        d = group_path(group, matrix, config)
        if not d:
            continue
        elements.append({"tag": "path", "d": d, "fill": color, "fill-rule": "evenodd"})

    rows, cols = matrix.shape
    elements.extend(
        rect(col * m, row * m, m, m, config.background)
        for row in range(rows)
        for col in range(cols)
        if not matrix[row, col]
    )

    elements.extend(finder_ornaments(rows, color, config))
    logger.debug("Blob render: %d elements for %dx%d matrix", len(elements), rows, cols)
    return elements
