"""blobqr rendering engine."""

from blobqr.engine.registry import renderer, get_registry
from blobqr.engine.config import RenderConfig, DEFAULT_CONFIG

# Import style modules so @renderer decorators fire
import blobqr.engine.classic  # noqa: F401
import blobqr.engine.blob  # noqa: F401

from blobqr.engine.composer import compose
from blobqr.engine.pipeline import generate

__all__ = [
    "renderer",
    "get_registry",
    "RenderConfig",
    "DEFAULT_CONFIG",
    "compose",
    "generate",
]
