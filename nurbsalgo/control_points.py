"""Conversions and linear combinations of (weighted) control point grids."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

XYZ = tuple[float, float, float]
XYZW = tuple[float, float, float, float]


def _to_xyz(point: Sequence[float]) -> XYZ:
    wx, wy, wz, w = point
    return (wx / w, wy / w, wz / w)


def to_xyz(weighted_points: Sequence[Sequence[float]]) -> list[XYZ]:
    """Cartesian points from homogeneous (wx, wy, wz, w) points."""
    return [_to_xyz(p) for p in weighted_points]


def to_xyz_grid(points: Sequence[Sequence[Sequence[float]]]) -> list[list[XYZ]]:
    """Cartesian grid from a grid of homogeneous points."""
    return [[_to_xyz(p) for p in row] for row in points]


def to_xyzw_grid(points: Sequence[Sequence[Sequence[float]]]) -> list[list[XYZW]]:
    """Homogeneous grid with unit weights from a grid of Cartesian points."""
    return [[(float(x), float(y), float(z), 1.0) for x, y, z in row] for row in points]


def _as_grid(array: np.ndarray) -> list[list[XYZW]]:
    return [[tuple(float(c) for c in point) for point in row] for row in array]


def multiply(
    points: Sequence[Sequence[Sequence[float]]], coefficients: Sequence[Sequence[float]]
) -> list[list[XYZW]]:
    """Product of an m x n homogeneous point grid with an n x p coefficient matrix."""
    pts = np.asarray(points, dtype=float)
    coef = np.asarray(coefficients, dtype=float)
    return _as_grid(np.einsum("ikc,kj->ijc", pts, coef))


def multiply_left(
    coefficients: Sequence[Sequence[float]], points: Sequence[Sequence[Sequence[float]]]
) -> list[list[XYZW]]:
    """Product of an m x n coefficient matrix with an n x p homogeneous point grid."""
    coef = np.asarray(coefficients, dtype=float)
    pts = np.asarray(points, dtype=float)
    return _as_grid(np.einsum("ik,kjc->ijc", coef, pts))