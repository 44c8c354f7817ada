"""Generation entry point — text → matrix → styled SVG string."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from blobqr.engine.composer import compose
from blobqr.engine.config import DEFAULT_CONFIG, RenderConfig
from blobqr.engine.matrix import build_matrix

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    svg: str
    style: str
    module_count: int
    elapsed_ms: float = 0.0


def run_generation(
    text: str,
    style: str,
    color: str,
    config: RenderConfig | None = None,
) -> GenerationResult:
    """Run one independent generation. Encoder errors propagate unchanged."""
    config = config or DEFAULT_CONFIG
    start = time.perf_counter()

    matrix = build_matrix(text, config)
    svg = compose(matrix, style, color, config)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Generated %s QR (%d modules) in %.1fms",
        style,
        matrix.shape[0],
        elapsed,
    )
    return GenerationResult(svg=svg, style=style, module_count=matrix.shape[0], elapsed_ms=round(elapsed, 1))


def generate(
    text: str,
    style: str,
    color: str,
    config: RenderConfig | None = None,
) -> str:
    return run_generation(text, style, color, config).svg
