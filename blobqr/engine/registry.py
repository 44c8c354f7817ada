"""Style registry — every render style is a function registered via decorator.

Usage:
    @renderer("classic", description="One square per dark module")
    def render_classic(matrix: Matrix, color: str, config: RenderConfig) -> list[Element]:
        ...

Adding a style = one module with the decorator, imported by ``blobqr.engine``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from blobqr.engine.config import RenderConfig
    from blobqr.engine.matrix import Matrix
    from blobqr.svg.serializer import Element

logger = logging.getLogger(__name__)

RenderFn = Callable[["Matrix", str, "RenderConfig"], "list[Element]"]


@dataclass
class StyleSpec:
    name: str
    fn: RenderFn
    description: str = ""


class StyleRegistry:
    """Registry of render styles keyed by name."""

    def __init__(self) -> None:
        self._styles: dict[str, StyleSpec] = {}

    def register(self, spec: StyleSpec) -> None:
        if spec.name in self._styles:
            raise ValueError(f"Duplicate style: {spec.name}")
        self._styles[spec.name] = spec
        logger.debug("Registered style %s", spec.name)

    def get(self, name: str) -> StyleSpec:
        try:
            return self._styles[name]
        except KeyError:
            raise ValueError(f"Unknown QR style: {name!r}") from None

    def names(self) -> list[str]:
        return sorted(self._styles)

    @property
    def count(self) -> int:
        return len(self._styles)


# Module-level singleton
_registry = StyleRegistry()


def get_registry() -> StyleRegistry:
    return _registry


def renderer(name: str, *, description: str = ""):
    """Decorator to register a style render function."""

    def decorator(fn: RenderFn) -> RenderFn:
        _registry.register(StyleSpec(name=name, fn=fn, description=description))
        return fn

    return decorator
