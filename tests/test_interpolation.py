import math

import numpy as np
import pytest

from nurbsalgo.interpolation import (
    average_knot_vector,
    centripetal_length,
    centripetal_parameterization,
    chord_parameterization,
    chord_tangents,
    compute_knot_vector,
    compute_tangents,
    rational_quadratic_weight,
    surface_mesh_parameterization,
    total_chord_length,
)

LINE = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (3.0, 0.0, 0.0)]
CURVE = [(0, 0, 0), (1, 1, 0), (3, 2, 0), (4, 1, 0), (5, -1, 0)]


def _arc_points(count):
    return [(math.cos(k * math.pi / 8), math.sin(k * math.pi / 8), 0.0) for k in range(count)]


def test_total_chord_length_collinear():
    assert total_chord_length(LINE) == pytest.approx(3.0)


def test_chord_parameterization_collinear():
    assert chord_parameterization(LINE) == pytest.approx([0.0, 1.0 / 3.0, 1.0])


def test_chord_parameterization_steps_match_distances():
    params = chord_parameterization(CURVE)
    total = total_chord_length(CURVE)
    assert params[0] == 0.0 and params[-1] == 1.0
    for i in range(1, len(CURVE)):
        step = float(np.linalg.norm(np.subtract(CURVE[i], CURVE[i - 1])))
        assert params[i] - params[i - 1] == pytest.approx(step / total)


def test_centripetal_equals_chord_for_equal_spacing():
    points = _arc_points(6)
    assert centripetal_parameterization(points) == pytest.approx(chord_parameterization(points))


def test_centripetal_length_bounds():
    params = centripetal_parameterization(CURVE)
    assert params == sorted(params)
    assert params[0] == 0.0 and params[-1] == 1.0
    assert centripetal_length(CURVE) > 0.0


def test_average_knot_vector():
    knots = average_knot_vector(3, [0.0, 0.25, 0.5, 0.75, 1.0])
    assert knots == pytest.approx([0, 0, 0, 0, 0.5, 1, 1, 1, 1])


def test_compute_knot_vector_clamped_and_sorted():
    knots = compute_knot_vector(2, 5, 4, [0.0, 0.25, 0.5, 0.75, 1.0])
    assert len(knots) == 4 + 2 + 1
    assert knots[:3] == [0.0, 0.0, 0.0]
    assert knots[-3:] == [1.0, 1.0, 1.0]
    assert knots == sorted(knots)
    assert 0.0 < knots[3] < 1.0


def test_weight_quarter_circle():
    weight = rational_quadratic_weight((1, 0, 0), (1, 1, 0), (0, 1, 0))
    assert weight == pytest.approx(math.sqrt(2) / 2)


def test_weight_collinear_middle():
    assert rational_quadratic_weight((0, 0, 0), (1, 0, 0), (2, 0, 0)) == 1.0


def test_weight_unequal_legs_positive():
    weight = rational_quadratic_weight((0, 0, 0), (1, 1, 0), (1, 0, 0))
    assert weight is not None and weight > 0.0


def test_surface_mesh_parameterization_regular_grid():
    grid = [[(float(i), float(j), 0.0) for j in range(4)] for i in range(3)]
    result = surface_mesh_parameterization(grid)
    params_u, params_v = result
    assert len(params_u) == 3 and len(params_v) == 4
    assert params_u == pytest.approx(chord_parameterization([row[0] for row in grid]))
    assert params_v == pytest.approx(chord_parameterization(grid[0]))


def test_surface_mesh_parameterization_degenerate():
    grid = [[(1.0, 1.0, 1.0)] * 3 for _ in range(3)]
    assert surface_mesh_parameterization(grid) is None


def test_compute_tangents_requires_five_points():
    with pytest.raises(ValueError):
        compute_tangents(CURVE[:4])


def test_compute_tangents_on_circle():
    points = _arc_points(8)
    tangents = compute_tangents(points)
    assert len(tangents) == len(points)
    for t in tangents:
        assert float(np.linalg.norm(t)) == pytest.approx(1.0)
    for k in range(2, len(points) - 2):
        assert float(np.dot(tangents[k], points[k])) == pytest.approx(0.0, abs=1e-9)
        assert float(np.cross(points[k], tangents[k])[2]) > 0.0


def test_chord_tangents_on_line():
    for t in chord_tangents(LINE):
        assert t == pytest.approx((1.0, 0.0, 0.0))


def test_chord_tangents_unit_length():
    for t in chord_tangents(CURVE):
        assert float(np.linalg.norm(t)) == pytest.approx(1.0)