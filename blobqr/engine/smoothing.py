"""Corner smoother — closed polyline to a rounded SVG path (blob effect).

Every vertex is replaced by two inset points, one on each adjacent edge,
joined by a quadratic curve whose control point is the original vertex.
Insets stay within [min_inset, radius] and never pass an edge's midpoint.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from blobqr.svg.serializer import fmt

_MIN_POINTS = 3


def _inset_radii(
    lengths: NDArray[np.float64],
    radius: float,
    min_inset: float,
    epsilon: float,
) -> NDArray[np.float64]:
    bounded = np.maximum(min_inset, np.minimum(radius, lengths / 2))
    return np.where(lengths > epsilon, bounded, radius)


def is_degenerate(points: NDArray[np.float64], epsilon: float = 1e-4) -> bool:
    """Fewer than 3 points, or all points on one line (zero area)."""
    if len(points) < _MIN_POINTS:
        return True
    return int(np.linalg.matrix_rank(points - points[0], tol=epsilon)) < 2


def round_polygon(
    points: Sequence[tuple[float, float]],
    radius: float,
    min_inset: float = 1.0,
    epsilon: float = 1e-4,
) -> str:
    """Smoothed closed path data for ``points``; "" for degenerate input."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if is_degenerate(pts, epsilon):
        return ""

    prev_pts = np.roll(pts, 1, axis=0)
    next_pts = np.roll(pts, -1, axis=0)
    v_in = pts - prev_pts
    v_out = next_pts - pts
    len_in = np.linalg.norm(v_in, axis=1)
    len_out = np.linalg.norm(v_out, axis=1)

    r_in = _inset_radii(len_in, radius, min_inset, epsilon)
    r_out = _inset_radii(len_out, radius, min_inset, epsilon)

    # Zero-length edges keep the vertex itself as the inset point
    safe_in = np.where(len_in > epsilon, len_in, 1.0)[:, None]
    safe_out = np.where(len_out > epsilon, len_out, 1.0)[:, None]
    has_in = (len_in > epsilon)[:, None]
    has_out = (len_out > epsilon)[:, None]
    before = np.where(has_in, pts - v_in / safe_in * r_in[:, None], pts)
    after = np.where(has_out, pts + v_out / safe_out * r_out[:, None], pts)

    parts = [f"M{fmt(before[0, 0])},{fmt(before[0, 1])}"]
    for (bx, by), (cx, cy), (ax, ay) in zip(before, pts, after):
        parts.append(f"L{fmt(bx)},{fmt(by)}")
        parts.append(f"Q{fmt(cx)},{fmt(cy)} {fmt(ax)},{fmt(ay)}")
    parts.append("Z")
    return " ".join(parts)
