"""Finder ornaments — stylized corner markers drawn over the symbol."""

from __future__ import annotations

from blobqr.engine.config import DEFAULT_CONFIG, RenderConfig
from blobqr.svg.serializer import Element, fmt, rect


def finder_pattern(
    x: float,
    y: float,
    module_size: float,
    finder_size: int,
    color: str,
    background: str = "#FFFFFF",
    corner_radius: float | None = None,
) -> Element:
    """Three concentric rounded squares: outer filled, middle light, center filled."""
    if corner_radius is None:
        corner_radius = module_size * 0.2
    rx = fmt(corner_radius)

    outer_size = finder_size * module_size
    inner_size = outer_size - 2 * module_size
    center_size = inner_size - 2 * module_size

    return {
        "tag": "g",
        "class": "finder",
        "children": [
            rect(x, y, outer_size, outer_size, color, rx=rx, ry=rx),
            rect(x + module_size, y + module_size, inner_size, inner_size, background, rx=rx, ry=rx),
            rect(
                x + 2 * module_size,
                y + 2 * module_size,
                center_size,
                center_size,
                color,
                rx=rx,
                ry=rx,
            ),
        ],
    }


def finder_positions(module_count: int, config: RenderConfig = DEFAULT_CONFIG) -> list[tuple[int, int]]:
    """Top-left, top-right and bottom-left origins in pixels, inside the quiet zone."""
    size = module_count * config.module_size
    near = config.border * config.module_size
    far = size - (config.border + config.finder_size) * config.module_size
    return [(near, near), (far, near), (near, far)]


def finder_ornaments(module_count: int, color: str, config: RenderConfig = DEFAULT_CONFIG) -> list[Element]:
    return [
        finder_pattern(
            x,
            y,
            config.module_size,
            config.finder_size,
            color,
            background=config.background,
            corner_radius=config.finder_corner_radius,
        )
        for x, y in finder_positions(module_count, config)
    ]
