"""Rational quadratic Bezier arcs and their middle control points."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .interpolation import rational_quadratic_weight
from .intersection import CurveCurveIntersection, compute_rays
from .validation import DOUBLE_EPSILON, check_range, is_greater_than, is_less_than

XYZ = tuple[float, float, float]
XYZW = tuple[float, float, float, float]


def _vec(p: Sequence[float]) -> np.ndarray:
    return np.asarray(p, dtype=float)


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    return v / length if length > 0.0 else v


def _almost_equal(a: np.ndarray, b: np.ndarray) -> bool:
    return bool(np.all(np.abs(a - b) <= DOUBLE_EPSILON))


def _weighted(point: np.ndarray, weight: float) -> XYZW:
    x, y, z = (float(c) * weight for c in point)
    return (x, y, z, float(weight))


def point_on_quadratic_arc(
    start: Sequence[float], middle: Sequence[float], end: Sequence[float], t: float
) -> XYZ:
    """Point at t on a rational quadratic arc of homogeneous (wx, wy, wz, w) points.

    All three points are dehomogenized with the weight of the start point.
    """
    check_range("t", t, 0.0, 1.0)
    s, m, e = _vec(start), _vec(middle), _vec(end)
    w0, w1, w2 = s[3], m[3], e[3]
    p0, p1, p2 = s[:3] / w0, m[:3] / w0, e[:3] / w0

    b0 = (1 - t) * (1 - t)
    b1 = 2 * t * (1 - t)
    b2 = t * t
    point = (b0 * w0 * p0 + b1 * w1 * p1 + b2 * w2 * p2) / (b0 * w0 + b1 * w1 + b2 * w2)
    return (float(point[0]), float(point[1]), float(point[2]))


def quadratic_middle_control_points(
    start_point: Sequence[float],
    start_tangent: Sequence[float],
    end_point: Sequence[float],
    end_tangent: Sequence[float],
) -> list[XYZW] | None:
    """Interior control points of a rational quadratic blend between two end conditions.

    Returns one or three homogeneous points (x*w, y*w, z*w, w), or None when
    no weight can be found.
    """
    s, e = _vec(start_point), _vec(end_point)
    st, et = _vec(start_tangent), _vec(end_tangent)
    chord = _normalize(e - s)
    nst, net = _normalize(st), _normalize(et)

    if (_almost_equal(nst, chord) or _almost_equal(nst, -chord)) and (
        _almost_equal(nst, net) or _almost_equal(nst, -net)
    ):
        return [_weighted((s + e) / 2, 1.0)]

    rays = compute_rays(s, nst, e, net)
    intersecting = rays.kind is CurveCurveIntersection.INTERSECTING
    if intersecting:
        r = _vec(rays.point)
        if _almost_equal(s, r) or _almost_equal(e, r):
            r = 0.5 * (s + e)
            weight = rational_quadratic_weight(s, r, e)
            return None if weight is None else [_weighted(r, weight)]
        if is_greater_than(rays.param0, 0.0) and is_less_than(rays.param1, 0.0):
            weight = rational_quadratic_weight(s, r, e)
            return None if weight is None else [_weighted(r, weight)]

    se = e - s
    se_n = _normalize(se)
    if _almost_equal(se_n, st) and _almost_equal(se_n, et):
        r = 0.5 * (s + e)
        weight = rational_quadratic_weight(s, r, e)
        return None if weight is None else [_weighted(r, weight)]

    se_len = float(np.linalg.norm(se))
    if not intersecting:
        gamma1 = gamma2 = 0.5 * se_len
    else:
        r = _vec(rays.point)
        sr = r - s
        er = r - e
        theta0 = float(sr @ se) / (float(np.linalg.norm(sr)) * se_len)
        theta1 = float(er @ se) / (float(np.linalg.norm(er)) * se_len)
        alpha = 2.0 / 3.0
        gamma1 = 0.5 * se_len / (1.0 + alpha * theta1 + (1 - alpha) * theta0)
        gamma2 = 0.5 * se_len / (1.0 + alpha * theta0 + (1 - alpha) * theta1)

    r1 = s + gamma1 * st
    r2 = e - gamma2 * et
    qk = (gamma1 * r2 + gamma2 * r1) / (gamma1 + gamma2)

    weight1 = rational_quadratic_weight(s, r1, qk)
    if weight1 is None:
        return None
    weight2 = rational_quadratic_weight(qk, r2, e)
    if weight2 is None:
        return None
    return [_weighted(r1, weight1), _weighted(qk, 1.0), _weighted(r2, weight2)]