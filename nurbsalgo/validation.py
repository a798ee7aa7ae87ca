"""Tolerant float comparisons and validity checks for curve and surface data."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

DOUBLE_EPSILON = 1e-6
DISTANCE_EPSILON = 1e-4
NURBS_MAX_DEGREE = 7


class OutOfRangeError(ValueError):
    """Raised when a value lies outside its permitted closed interval."""


def is_almost_equal(a: float, b: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    """Return True when a and b differ by no more than tolerance."""
    return abs(a - b) <= tolerance


def is_greater_than(a: float, b: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    """Return True when a exceeds b by more than tolerance."""
    return a - b > tolerance


def is_less_than(a: float, b: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    """Return True when a is below b by more than tolerance."""
    return a - b < -tolerance


def is_greater_or_equal(a: float, b: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    """Return True when a is greater than b or within tolerance of it."""
    return a - b >= -tolerance


def is_less_or_equal(a: float, b: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    """Return True when a is less than b or within tolerance of it."""
    return a - b <= tolerance


def check_range(name: str, value: float, low: float, high: float) -> None:
    """Raise OutOfRangeError unless low <= value <= high."""
    if not low <= value <= high:
        raise OutOfRangeError(f"{name}={value!r} is outside [{low!r}, {high!r}]")


def is_valid_bezier(degree: int, control_points_count: int) -> bool:
    """A Bezier curve of the given degree has degree + 1 control points."""
    return control_points_count == degree + 1


def is_valid_knot_vector(knot_vector: Sequence[float]) -> bool:
    """A knot vector must be a nondecreasing sequence."""
    return all(a <= b for a, b in zip(knot_vector, knot_vector[1:]))


def is_valid_bspline(degree: int, knot_vector_count: int, control_points_count: int) -> bool:
    """Check the relation m = n + p + 1 between knots, control points and degree."""
    return knot_vector_count - 1 == (control_points_count - 1) + degree + 1


def is_valid_nurbs(degree: int, knot_vector_count: int, weighted_control_points_count: int) -> bool:
    """Check the relation m = n + p + 1 for a rational curve."""
    return knot_vector_count - 1 == (weighted_control_points_count - 1) + degree + 1


def is_valid_degree_reduction(degree: int) -> bool:
    """Only curves of degree two or more can have their degree reduced."""
    return degree > 1


def compute_curve_modify_tolerance(control_points: Iterable[Sequence[float]]) -> float:
    """Tolerance for curve modification from homogeneous (wx, wy, wz, w) control points."""
    min_weight = 1.0
    max_distance = 0.0
    for wx, wy, wz, w in control_points:
        min_weight = min(min_weight, w)
        max_distance = max(max_distance, math.sqrt((wx / w) ** 2 + (wy / w) ** 2 + (wz / w) ** 2))
    return DISTANCE_EPSILON * min_weight / (1 + abs(max_distance))