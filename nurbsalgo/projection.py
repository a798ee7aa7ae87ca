"""Orthogonal and stereographic projections of points."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .validation import is_almost_equal, is_greater_than, is_less_than

XYZ = tuple[float, float, float]


def _tuple(v: np.ndarray) -> XYZ:
    return (float(v[0]), float(v[1]), float(v[2]))


def point_to_ray(origin: Sequence[float], vector: Sequence[float], point: Sequence[float]) -> XYZ:
    """Project point onto the ray through origin with the (unit) direction vector."""
    o = np.asarray(origin, dtype=float)
    v = np.asarray(vector, dtype=float)
    param = float((np.asarray(point, dtype=float) - o) @ v)
    return _tuple(o + param * v)


def point_to_line(start: Sequence[float], end: Sequence[float], point: Sequence[float]) -> XYZ | None:
    """Project point onto the segment start-end.

    Returns None when the segment is degenerate or the foot of the
    perpendicular falls outside it.
    """
    s = np.asarray(start, dtype=float)
    e = np.asarray(end, dtype=float)
    length = float(np.linalg.norm(e - s))
    if is_almost_equal(length, 0.0):
        return None
    param = float((np.asarray(point, dtype=float) - s) @ (e - s)) / (length * length)
    if is_greater_than(param, 1.0) or is_less_than(param, 0.0):
        return None
    param = max(0.0, min(1.0, param))
    return _tuple(s + param * (e - s))


def stereographic(point_on_sphere: Sequence[float], radius: float) -> XYZ:
    """Stereographic projection of a sphere point onto the plane z = 0."""
    x, y, z = (float(c) for c in point_on_sphere)
    alpha = -2 * radius / (z - 2 * radius)
    return (alpha * x, alpha * y, 0.0)