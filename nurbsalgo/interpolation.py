"""Parameterizations, knot vectors, weights and tangents for interpolation."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from .intersection import CurveCurveIntersection, compute_rays
from .validation import DOUBLE_EPSILON, is_almost_equal

XYZ = tuple[float, float, float]


def _vec(p: Sequence[float]) -> np.ndarray:
    return np.asarray(p, dtype=float)


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    return v / length if length > 0.0 else v


def _almost_equal(a: np.ndarray, b: np.ndarray) -> bool:
    return bool(np.all(np.abs(a - b) <= DOUBLE_EPSILON))


def _tuple(v: np.ndarray) -> XYZ:
    return (float(v[0]), float(v[1]), float(v[2]))


def _distances(points: Sequence[Sequence[float]]) -> list[float]:
    pts = [_vec(p) for p in points]
    return [float(np.linalg.norm(b - a)) for a, b in zip(pts, pts[1:])]


def _cumulative_params(steps: list[float], count: int) -> list[float]:
    total = sum(steps)
    params = [0.0] * count
    params[-1] = 1.0
    for i in range(1, count - 1):
        params[i] = params[i - 1] + steps[i - 1] / total
    return params


def total_chord_length(points: Sequence[Sequence[float]]) -> float:
    """Sum of distances between consecutive points."""
    return sum(_distances(points))


def chord_parameterization(points: Sequence[Sequence[float]]) -> list[float]:
    """Chord-length parameters in [0, 1], one for each point."""
    return _cumulative_params(_distances(points), len(points))


def centripetal_length(points: Sequence[Sequence[float]]) -> float:
    """Sum of square roots of distances between consecutive points."""
    return sum(math.sqrt(d) for d in _distances(points))


def centripetal_parameterization(points: Sequence[Sequence[float]]) -> list[float]:
    """Centripetal parameters in [0, 1], one for each point."""
    return _cumulative_params([math.sqrt(d) for d in _distances(points)], len(points))


def average_knot_vector(degree: int, params: Sequence[float]) -> list[float]:
    """Clamped knot vector by averaging the parameters."""
    n = len(params) - 1
    m = n + degree + 1
    knots = [0.0] * (m + 1)
    for i in range(m - degree, m + 1):
        knots[i] = 1.0
    for j in range(1, n - degree + 1):
        knots[j + degree] = sum(params[j : j + degree]) / degree
    return knots


def compute_knot_vector(
    degree: int, points_count: int, control_points_count: int, params: Sequence[float]
) -> list[float]:
    """Clamped knot vector for least-squares approximation with fewer control points."""
    m = points_count - 1
    n = control_points_count - 1
    nn = n + degree + 2
    knots = [0.0] * nn
    d = (m + 1) / (n - degree + 1)
    for j in range(1, n - degree + 1):
        i = math.floor(j * d)
        alpha = j * d - i
        knots[degree + j] = (1.0 - alpha) * params[i - 1] + alpha * params[i]
    for i in range(nn):
        if i <= degree:
            knots[i] = 0.0
        elif i >= nn - 1 - degree:
            knots[i] = 1.0
    return knots


def rational_quadratic_weight(
    start: Sequence[float], middle: Sequence[float], end: Sequence[float]
) -> float | None:
    """Weight of the middle control point of a rational quadratic segment.

    Returns None when the construction rays do not meet.
    """
    s, mid, e = _vec(start), _vec(middle), _vec(end)
    sm = mid - s
    em = mid - e
    se = e - s

    sm_n, em_n = _normalize(sm), _normalize(em)
    if _almost_equal(sm_n, em_n) or _almost_equal(sm_n, -em_n):
        return 1.0

    sm_len = float(np.linalg.norm(sm))
    em_len = float(np.linalg.norm(em))
    se_len = float(np.linalg.norm(se))
    if is_almost_equal(sm_len, em_len):
        return float(sm @ se) / (sm_len * se_len)

    m = 0.5 * (s + e)
    mr = mid - m
    mr_n = _normalize(mr)

    frac = 1.0 / (sm_len / se_len + 1.0)
    sd = e + frac * em - s
    first = compute_rays(s, _normalize(sd), m, mr_n)
    if first.kind is not CurveCurveIntersection.INTERSECTING:
        return None

    frac = 1.0 / (em_len / se_len + 1.0)
    ed = s + frac * sm - e
    second = compute_rays(e, _normalize(ed), m, mr_n)
    if second.kind is not CurveCurveIntersection.INTERSECTING:
        return None

    point = 0.5 * (_vec(first.point) + _vec(second.point))
    ratio = float(np.linalg.norm(point - m)) / float(np.linalg.norm(mr))
    return ratio / (1.0 - ratio)


def surface_mesh_parameterization(
    points: Sequence[Sequence[Sequence[float]]],
) -> tuple[list[float], list[float]] | None:
    """Averaged chord-length parameters (u, v) for a grid of points.

    Returns None when every row or every column is degenerate.
    """
    grid = [[_vec(p) for p in row] for row in points]
    n = len(grid)
    m = len(grid[0])

    params_u = [0.0] * n
    num = m
    for col in range(m):
        steps = [float(np.linalg.norm(grid[k][col] - grid[k - 1][col])) for k in range(1, n)]
        total = sum(steps)
        if is_almost_equal(total, 0.0):
            num -= 1
            continue
        d = 0.0
        for k, step in enumerate(steps, start=1):
            d += step
            params_u[k] += d / total
    if num == 0:
        return None
    for k in range(1, n - 1):
        params_u[k] /= num
    params_u[n - 1] = 1.0

    params_v = [0.0] * m
    num = n
    for row in grid:
        steps = [float(np.linalg.norm(b - a)) for a, b in zip(row, row[1:])]
        total = sum(steps)
        if is_almost_equal(total, 0.0):
            num -= 1
            continue
        d = 0.0
        for l, step in enumerate(steps, start=1):
            d += step
            params_v[l] += d / total
    if num == 0:
        return None
    for l in range(1, m - 1):
        params_v[l] /= num
    params_v[m - 1] = 1.0

    return params_u, params_v


def _tangent(qk_1: np.ndarray, qk: np.ndarray, qk1: np.ndarray, qk2: np.ndarray) -> np.ndarray:
    left = float(np.linalg.norm(np.cross(qk_1, qk)))
    right = float(np.linalg.norm(np.cross(qk1, qk2)))
    denominator = left + right
    ak = 0.5 if denominator == 0.0 else left / denominator
    return _normalize((1 - ak) * qk + ak * qk1)


def compute_tangents(points: Sequence[Sequence[float]]) -> list[XYZ]:
    """Unit tangents at each point by the five-point local method.

    At least five points are needed.
    """
    if len(points) < 5:
        raise ValueError("At least five points are needed to compute tangents.")
    pts = [_vec(p) for p in points]
    n = len(pts) - 1
    # q[k] = P[k] - P[k-1]; q[0] is a placeholder.
    q = [np.zeros(3)] + [b - a for a, b in zip(pts, pts[1:])]

    tangents = [np.zeros(3)] * (n + 1)
    for k in range(2, n - 1):
        tangents[k] = _tangent(q[k - 1], q[k], q[k + 1], q[k + 2])

    q0 = 2 * q[1] - q[2]
    q_1 = 2 * q0 - q[1]
    qn1 = 2 * q[n] - q[n - 1]
    qn2 = 2 * qn1 - q[n]

    tangents[0] = _tangent(q_1, q0, q[1], q[2])
    tangents[1] = _tangent(q0, q[1], q[2], q[3])
    tangents[n - 1] = _tangent(q[n - 2], q[n - 1], q[n], qn1)
    tangents[n] = _tangent(q[n - 1], q[n], qn1, qn2)
    return [_tuple(t) for t in tangents]


def chord_tangents(points: Sequence[Sequence[float]]) -> list[XYZ]:
    """Unit tangents from chord-length weighted differences (Bessel-like)."""
    pts = [_vec(p) for p in points]
    size = len(pts)
    params = chord_parameterization(points)
    delta = [0.0] + [b - a for a, b in zip(params, params[1:])]
    qq = [np.zeros(3)] + [b - a for a, b in zip(pts, pts[1:])]

    tangents = [np.zeros(3) for _ in range(size)]
    for i in range(1, size - 1):
        a = delta[i] / (delta[i] + delta[i + 1])
        tangents[i] = _normalize((1 - a) * qq[i] + a * qq[i + 1])

    tangents[0] = _normalize(2 * qq[1] / delta[1] - tangents[1])
    tangents[-1] = _normalize(2 * qq[-1] / delta[-1] - tangents[-2])
    return [_tuple(t) for t in tangents]