"""Image composer — background plus style elements into one SVG document."""

from __future__ import annotations

from blobqr.engine.config import DEFAULT_CONFIG, RenderConfig
from blobqr.engine.matrix import Matrix
from blobqr.engine.registry import StyleRegistry, get_registry
from blobqr.svg.serializer import background_rect, serialize_svg


def canvas_size(matrix: Matrix, config: RenderConfig = DEFAULT_CONFIG) -> int:
    return matrix.shape[0] * config.module_size


def compose(
    matrix: Matrix,
    style: str,
    color: str,
    config: RenderConfig = DEFAULT_CONFIG,
    registry: StyleRegistry | None = None,
) -> str:
    """Render ``matrix`` in ``style``; ``color`` is interpolated as-is."""
    spec = (registry or get_registry()).get(style)
    size = canvas_size(matrix, config)

    elements = [background_rect(size, size, config.background)]
    elements.extend(spec.fn(matrix, color, config))
    return serialize_svg(elements, size, size)
