"""Contour extraction — boundary segments of a cell set, walked tip-to-tail."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from blobqr.utils.morphology import Cell

logger = logging.getLogger(__name__)

# Pixel-space point (x, y)
Point = tuple[int, int]


@dataclass(frozen=True)
class Segment:
    """Directed unit edge between an inside cell and an outside cell."""

    start: Point
    end: Point


def boundary_segments(cells: Iterable[Cell], module_size: int) -> list[Segment]:
    """Edges of ``cells`` not shared with another cell of the same set.

    Each cell contributes its top, right, bottom and left edges (in that order)
    when the neighbor across the edge is outside the set. Edges run clockwise
    in screen coordinates.
    """
    cells = list(cells)
    cell_set = set(cells)
    m = module_size
    segments: list[Segment] = []

    for row, col in cells:
        x, y = col * m, row * m
        if (row - 1, col) not in cell_set:
            segments.append(Segment((x, y), (x + m, y)))
        if (row, col + 1) not in cell_set:
            segments.append(Segment((x + m, y), (x + m, y + m)))
        if (row + 1, col) not in cell_set:
            segments.append(Segment((x + m, y + m), (x, y + m)))
        if (row, col - 1) not in cell_set:
            segments.append(Segment((x, y + m), (x, y)))

    return segments


def index_by_start(segments: list[Segment]) -> dict[Point, list[int]]:
    """Map each start point to segment indices, in insertion order."""
    index: dict[Point, list[int]] = {}
    for i, seg in enumerate(segments):
        index.setdefault(seg.start, []).append(i)
    return index


def trace_contour(cells: Iterable[Cell], module_size: int) -> list[Point]:
    """Ordered boundary polyline of a cell set, in pixel coordinates.

    Starts from the first boundary segment and keeps taking the first unused
    segment that begins where the previous one ended. The result includes the
    closing point (equal to the first) when the loop closes.

    Only one boundary loop is followed. A region whose boundary has several
    loops (a ring of cells around a hole) yields just the loop containing the
    first segment; a walk that dead-ends returns the partial contour.
    """
    segments = boundary_segments(cells, module_size)
    if not segments:
        return []

    index = index_by_start(segments)
    first = segments[0]
    points: list[Point] = [first.start, first.end]
    used = {0}
    current = first.end

    walked = 0
    while walked < len(segments):
        nxt = next((i for i in index.get(current, ()) if i not in used), None)
        if nxt is None:
            break
        used.add(nxt)
        current = segments[nxt].end
        points.append(current)
        walked += 1

    if points[-1] != points[0]:
        logger.warning(
            "Contour walk dead-ended after %d/%d segments; returning partial contour",
            len(used),
            len(segments),
        )
    elif len(used) < len(segments):
        logger.debug("Contour left %d segments on untraced loops", len(segments) - len(used))

    return points
