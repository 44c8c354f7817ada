"""Classic style — one square per dark module."""

from __future__ import annotations

from blobqr.engine.config import RenderConfig
from blobqr.engine.matrix import Matrix
from blobqr.engine.registry import renderer
from blobqr.svg.serializer import Element, rect


@renderer("classic", description="One filled square per dark module")
def render_classic(matrix: Matrix, color: str, config: RenderConfig) -> list[Element]:
    m = config.module_size
    rows, cols = matrix.shape
    return [
        rect(col * m, row * m, m, m, color)
        for row in range(rows)
        for col in range(cols)
        if matrix[row, col]
    ]
