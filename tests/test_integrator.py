import math

import pytest

from nurbsalgo.integrator import clenshaw_curtis, gauss_legendre, simpson, simpson_2d


def _series(size=65):
    return [1.0 / (i + 1) for i in range(size)]


def test_simpson_constant_gives_interval_length():
    assert simpson(lambda t: 1.0, 2.0, 5.5) == pytest.approx(5.5 - 2.0)


def test_simpson_exact_for_quadratic():
    a, b = -1.0, 3.0
    assert simpson(lambda t: 3 * t * t, a, b) == pytest.approx(b**3 - a**3)


def test_simpson_uses_three_samples():
    calls = []

    def f(t):
        calls.append(t)
        return t

    result = simpson(f, 0.0, 2.0)
    assert result == pytest.approx(2.0)
    assert calls == [0.0, 1.0, 2.0]


def test_simpson_and_gauss_agree_on_cubic():
    f = lambda t: t**3 - 2 * t + 1
    assert simpson(f, -2.0, 3.0) == pytest.approx(gauss_legendre(f, -2.0, 3.0))


def test_simpson_2d_constant_gives_area():
    assert simpson_2d(lambda u, v: 1.0, 0.0, 2.0, 1.0, 4.0) == pytest.approx(2.0 * 3.0)


def test_simpson_2d_separable_product():
    f = lambda u: u * u + 1
    g = lambda v: 2 * v - 3
    expected = simpson(f, 0.5, 1.5) * simpson(g, -1.0, 2.0)
    assert simpson_2d(lambda u, v: f(u) * g(v), 0.5, 1.5, -1.0, 2.0) == pytest.approx(expected)


def test_gauss_legendre_constant():
    assert gauss_legendre(lambda t: 1.0, -1.0, 1.0) == pytest.approx(2.0)


def test_gauss_legendre_sine():
    assert gauss_legendre(math.sin, 0.0, math.pi) == pytest.approx(2.0, abs=1e-12)


def test_gauss_legendre_exponential():
    assert gauss_legendre(math.exp, 0.0, 1.0) == pytest.approx(math.e - 1.0, abs=1e-12)


def test_gauss_legendre_reversed_interval_negates():
    f = lambda t: t * t + math.cos(t)
    assert gauss_legendre(f, 2.0, 0.0) == pytest.approx(-gauss_legendre(f, 0.0, 2.0))


def test_clenshaw_curtis_zero_function():
    assert clenshaw_curtis(lambda t: 0.0, 0.0, 1.0, _series(), 1e-10) == 0.0


def test_clenshaw_curtis_is_linear_in_function():
    f = lambda t: math.sin(3 * t) + t
    single = clenshaw_curtis(f, 0.0, 2.0, _series(), 1e-10)
    double = clenshaw_curtis(lambda t: 2 * f(t), 0.0, 2.0, _series(), 1e-10)
    assert double == pytest.approx(2 * single)


def test_clenshaw_curtis_leaves_series_untouched():
    series = _series()
    before = list(series)
    clenshaw_curtis(math.cos, 0.0, 1.0, series, 1e-10)
    assert series == before


def test_clenshaw_curtis_rejects_short_series():
    with pytest.raises(ValueError):
        clenshaw_curtis(math.cos, 0.0, 1.0, [0.5] * 5, 1e-10)