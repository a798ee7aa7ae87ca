import pytest

from nurbsalgo.validation import (
    DISTANCE_EPSILON,
    DOUBLE_EPSILON,
    OutOfRangeError,
    check_range,
    compute_curve_modify_tolerance,
    is_almost_equal,
    is_greater_or_equal,
    is_greater_than,
    is_less_or_equal,
    is_less_than,
    is_valid_bezier,
    is_valid_bspline,
    is_valid_degree_reduction,
    is_valid_knot_vector,
    is_valid_nurbs,
)


def test_compare():
    a = -10.0
    assert not is_almost_equal(a, 0.0)
    assert is_less_or_equal(a, DOUBLE_EPSILON)
    assert is_almost_equal(a, a + DOUBLE_EPSILON)
    assert is_greater_or_equal(a, a + DOUBLE_EPSILON)
    assert is_less_or_equal(a, a + DOUBLE_EPSILON)
    assert is_greater_than(a, -20)
    assert is_less_than(a, 0)


def test_strict_comparisons_ignore_tiny_differences():
    assert not is_greater_than(1.0 + DOUBLE_EPSILON / 10, 1.0)
    assert not is_less_than(1.0 - DOUBLE_EPSILON / 10, 1.0)


def test_check_range_accepts_bounds():
    check_range("t", 0.0, 0.0, 1.0)
    check_range("t", 1.0, 0.0, 1.0)
    with pytest.raises(OutOfRangeError):
        check_range("t", 1.5, 0.0, 1.0)


def test_check_range_is_value_error():
    with pytest.raises(ValueError):
        check_range("t", -2, 0.0, 1.0)


def test_bezier_count():
    assert is_valid_bezier(2, 3)
    assert not is_valid_bezier(4, 3)


def test_knot_vector_order():
    assert is_valid_knot_vector([0, 0, 0, 1, 1, 1])
    assert not is_valid_knot_vector([0, 0, 1, 2, 1, 0])


def test_bspline_and_nurbs_counts():
    kv = [0, 0, 0, 1, 2, 3, 4, 4, 5, 5, 5]
    assert is_valid_bspline(2, len(kv), 8)
    assert not is_valid_bspline(2, len(kv), 7)
    kv2 = [0, 0, 0, 1, 2, 3, 3, 3]
    assert is_valid_nurbs(2, len(kv2), 5)
    assert not is_valid_nurbs(3, len(kv2), 5)


def test_degree_reduction():
    assert is_valid_degree_reduction(2)
    assert not is_valid_degree_reduction(1)


def test_modify_tolerance_at_origin_equals_distance_epsilon():
    points = [(0, 0, 0, 1), (0, 0, 0, 2)]
    assert compute_curve_modify_tolerance(points) == pytest.approx(DISTANCE_EPSILON)


def test_modify_tolerance_shrinks_with_distance_and_weight():
    near = compute_curve_modify_tolerance([(1, 0, 0, 1)])
    far = compute_curve_modify_tolerance([(10, 0, 0, 1)])
    light = compute_curve_modify_tolerance([(0.5, 0, 0, 0.5)])
    assert far < near
    assert light < near