"""Intersections between rays, and between lines and planes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .validation import DOUBLE_EPSILON, is_almost_equal

XYZ = tuple[float, float, float]


class CurveCurveIntersection(Enum):
    """How two rays relate to each other."""

    INTERSECTING = "intersecting"
    PARALLEL = "parallel"
    COINCIDENT = "coincident"
    SKEW = "skew"


class LinePlaneIntersection(Enum):
    """How a line relates to a plane."""

    INTERSECTING = "intersecting"
    PARALLEL = "parallel"
    ON = "on"


@dataclass(frozen=True)
class RayIntersection:
    """Result of intersecting two rays.

    param0 and param1 are the ray parameters of the closest points; they are
    zero for parallel or coincident rays. point is set only when the rays meet.
    """

    kind: CurveCurveIntersection
    param0: float = 0.0
    param1: float = 0.0
    point: XYZ | None = None


def _vec(p: Sequence[float]) -> np.ndarray:
    return np.asarray(p, dtype=float)


def _is_zero(v: np.ndarray) -> bool:
    return bool(np.all(np.abs(v) <= DOUBLE_EPSILON))


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    return v / length if length > 0.0 else v


def _tuple(v: np.ndarray) -> XYZ:
    return (float(v[0]), float(v[1]), float(v[2]))


def compute_rays(
    point0: Sequence[float],
    vector0: Sequence[float],
    point1: Sequence[float],
    vector1: Sequence[float],
) -> RayIntersection:
    """Intersect the rays point0 + s * vector0 and point1 + t * vector1."""
    p0, v0, p1, v1 = _vec(point0), _vec(vector0), _vec(point1), _vec(vector1)
    if _is_zero(v0):
        raise ValueError("vector0 must not be a zero vector.")
    if _is_zero(v1):
        raise ValueError("vector1 must not be a zero vector.")

    cross = np.cross(v0, v1)
    diff = p1 - p0
    if _is_zero(cross):
        if _is_zero(np.cross(diff, v1)):
            return RayIntersection(CurveCurveIntersection.COINCIDENT)
        return RayIntersection(CurveCurveIntersection.PARALLEL)

    square_length = float(cross @ cross)
    param0 = float(np.cross(diff, v1) @ cross) / square_length
    param1 = float(np.cross(diff, v0) @ cross) / square_length

    ray_p0 = p0 + v0 * param0
    ray_p1 = p1 + v1 * param1
    if bool(np.all(np.abs(ray_p0 - ray_p1) <= DOUBLE_EPSILON)):
        return RayIntersection(CurveCurveIntersection.INTERSECTING, param0, param1, _tuple(ray_p0))
    return RayIntersection(CurveCurveIntersection.SKEW, param0, param1)


def line_plane(
    normal: Sequence[float],
    point_on_plane: Sequence[float],
    point_on_line: Sequence[float],
    direction: Sequence[float],
) -> tuple[LinePlaneIntersection, XYZ | None]:
    """Intersect a line with a plane; the point is returned only when they cross."""
    plane_normal = _normalize(_vec(normal))
    line_dir = _vec(direction)
    line_dir_normal = _normalize(line_dir)
    line_point = _vec(point_on_line)
    p2l = line_point - _vec(point_on_plane)

    dot = float(_normalize(p2l) @ plane_normal)
    if is_almost_equal(dot, 0.0):
        return LinePlaneIntersection.ON, None

    cosine = max(-1.0, min(1.0, float(plane_normal @ line_dir_normal)))
    if is_almost_equal(math.acos(cosine), math.pi / 2):
        return LinePlaneIntersection.PARALLEL, None

    d = -float(p2l @ plane_normal) / float(line_dir @ plane_normal)
    return LinePlaneIntersection.INTERSECTING, _tuple(d * line_dir_normal + line_point)