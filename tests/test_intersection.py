import numpy as np
import pytest

from nurbsalgo.intersection import (
    CurveCurveIntersection,
    LinePlaneIntersection,
    compute_rays,
    line_plane,
)


def test_rays_intersecting_point_lies_on_both_rays():
    p0, v0 = (0.0, 0.0, 0.0), (1.0, 0.0, 0.0)
    p1, v1 = (1.0, -1.0, 0.0), (0.0, 1.0, 0.0)
    result = compute_rays(p0, v0, p1, v1)
    assert result.kind is CurveCurveIntersection.INTERSECTING
    on0 = np.asarray(p0) + result.param0 * np.asarray(v0)
    on1 = np.asarray(p1) + result.param1 * np.asarray(v1)
    assert np.allclose(result.point, on0)
    assert np.allclose(result.point, on1)


def test_rays_quarter_circle_corner_params():
    result = compute_rays((1, 0, 0), (0, 1, 0), (0, 1, 0), (-1, 0, 0))
    assert result.kind is CurveCurveIntersection.INTERSECTING
    assert result.param0 > 0
    assert result.param1 < 0


def test_rays_parallel():
    result = compute_rays((0, 0, 0), (1, 0, 0), (0, 1, 0), (2, 0, 0))
    assert result.kind is CurveCurveIntersection.PARALLEL
    assert result.point is None


def test_rays_coincident():
    result = compute_rays((0, 0, 0), (1, 0, 0), (5, 0, 0), (-1, 0, 0))
    assert result.kind is CurveCurveIntersection.COINCIDENT


def test_rays_skew():
    result = compute_rays((0, 0, 0), (1, 0, 0), (0, 0, 1), (0, 1, 0))
    assert result.kind is CurveCurveIntersection.SKEW
    assert result.point is None


@pytest.mark.parametrize(
    "vector0, vector1",
    [((0, 0, 0), (1, 0, 0)), ((1, 0, 0), (0, 0, 0))],
)
def test_rays_zero_vector_rejected(vector0, vector1):
    with pytest.raises(ValueError):
        compute_rays((0, 0, 0), vector0, (1, 1, 0), vector1)


def test_line_plane_intersecting_point_on_plane_and_line():
    normal = (0.0, 0.0, 1.0)
    origin = (0.0, 0.0, 0.0)
    line_point = (1.0, 2.0, 5.0)
    direction = (0.0, 0.0, -1.0)
    kind, point = line_plane(normal, origin, line_point, direction)
    assert kind is LinePlaneIntersection.INTERSECTING
    p = np.asarray(point)
    assert abs(float((p - np.asarray(origin)) @ np.asarray(normal))) < 1e-9
    assert np.allclose(np.cross(p - np.asarray(line_point), direction), 0.0)


def test_line_plane_parallel():
    kind, point = line_plane((0, 0, 1), (0, 0, 0), (0, 0, 5), (1, 0, 0))
    assert kind is LinePlaneIntersection.PARALLEL
    assert point is None


def test_line_plane_line_point_on_plane():
    kind, point = line_plane((0, 0, 1), (0, 0, 0), (1, 0, 0), (0, 1, 1))
    assert kind is LinePlaneIntersection.ON
    assert point is None