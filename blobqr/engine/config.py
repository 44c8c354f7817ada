"""Render configuration — controls geometry of the generated image."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Explicit per-generation render settings. Never shared as module state."""

    # Pixel size of one module (cell)
    module_size: int = 30

    # Corner rounding: radius = module_size * smoothing_ratio
    smoothing_ratio: float = 0.3
    min_inset: float = 1.0
    epsilon: float = 1e-4  # below this an edge counts as zero-length

    # Finder ornaments
    finder_size: int = 7  # modules per side
    finder_corner_ratio: float = 0.2

    background: str = "#FFFFFF"
    error_correction: str = "M"
    border: int = 0  # quiet zone in modules

    @property
    def smoothing_radius(self) -> float:
        return self.module_size * self.smoothing_ratio

    @property
    def finder_corner_radius(self) -> float:
        return self.module_size * self.finder_corner_ratio


DEFAULT_CONFIG = RenderConfig()
