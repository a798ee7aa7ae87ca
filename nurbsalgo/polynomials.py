"""Bernstein polynomials, B-spline basis functions and related evaluations."""

from __future__ import annotations

from collections.abc import Sequence

from .validation import (
    NURBS_MAX_DEGREE,
    check_range,
    is_almost_equal,
    is_greater_or_equal,
    is_less_or_equal,
    is_less_than,
    is_valid_bezier,
    is_valid_knot_vector,
)


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def _check_knots(knot_vector: Sequence[float], name: str, value: float) -> None:
    _require(len(knot_vector) > 0, "Knot vector must not be empty.")
    _require(is_valid_knot_vector(knot_vector), "Knot vector must be nondecreasing.")
    check_range(name, value, knot_vector[0], knot_vector[-1])


def _check_span_degree(span_index: int, degree: int) -> None:
    _require(span_index >= 0, "Span index must be greater than or equal to zero.")
    _require(
        0 <= degree <= NURBS_MAX_DEGREE,
        "Degree must be between zero and the maximum degree.",
    )


def horner(degree: int, coefficients: Sequence[float], t: float) -> float:
    """Evaluate a power-basis polynomial at t."""
    _require(degree > 0, "Degree must be greater than zero.")
    _require(is_valid_bezier(degree, len(coefficients)), "Coefficients size must equal degree plus one.")
    result = coefficients[degree]
    for c in reversed(coefficients[:degree]):
        result = result * t + c
    return result


def bernstein(index: int, degree: int, t: float) -> float:
    """Value of the Bernstein polynomial B(index, degree) at t."""
    if index < 0 or index > degree:
        return 0.0
    if index == 0 or index == degree:
        return 1.0
    _require(degree >= 0, "Degree must be greater than or equal to zero.")
    check_range("t", t, 0.0, 1.0)

    temp = [0.0] * (degree + 1)
    temp[degree - index] = 1.0
    t1 = 1.0 - t
    for k in range(index, degree + 1):
        for j in range(degree, k - 1, -1):
            temp[j] = t1 * temp[j] + t * temp[j - 1]
    return temp[degree]


def all_bernstein(degree: int, t: float) -> list[float]:
    """All Bernstein polynomials of the given degree at t."""
    _require(degree > 0, "Degree must be greater than zero.")
    check_range("t", t, 0.0, 1.0)

    values = [0.0] * (degree + 1)
    values[0] = 1.0
    t1 = 1.0 - t
    for j in range(1, degree + 1):
        saved = 0.0
        for k in range(j):
            temp = values[k]
            values[k] = saved + t1 * temp
            saved = t * temp
        values[j] = saved
    return values


def horner_2d(
    degree_u: int,
    degree_v: int,
    coefficients: Sequence[Sequence[float]],
    u: float,
    v: float,
) -> float:
    """Evaluate a bivariate power-basis polynomial at (u, v)."""
    _require(degree_u > 0, "DegreeU must be greater than zero.")
    _require(degree_v > 0, "DegreeV must be greater than zero.")
    _require(len(coefficients) > 0, "Coefficients must not be empty.")
    _require(is_valid_bezier(degree_u, len(coefficients)), "Coefficient rows must equal degreeU plus one.")
    _require(is_valid_bezier(degree_v, len(coefficients[0])), "Coefficient columns must equal degreeV plus one.")
    check_range("u", u, 0.0, 1.0)
    check_range("v", v, 0.0, 1.0)

    row_values = [horner(degree_v, row, v) for row in coefficients[: degree_u + 1]]
    return horner(degree_u, row_values, u)


def knot_multiplicity(knot_vector: Sequence[float], knot: float) -> int:
    """Number of knots almost equal to knot."""
    _check_knots(knot_vector, "knot", knot)
    return sum(1 for k in knot_vector if is_almost_equal(knot, k))


def knot_span_index(degree: int, knot_vector: Sequence[float], t: float) -> int:
    """Index of the knot span containing t."""
    _require(degree >= 0, "Degree must be greater than or equal to zero.")
    _check_knots(knot_vector, "t", t)

    n = len(knot_vector) - degree - 2
    if is_greater_or_equal(t, knot_vector[n + 1]):
        return n
    if is_less_or_equal(t, knot_vector[degree]):
        return degree

    low, high = degree, n + 1
    mid = (low + high) // 2
    while t < knot_vector[mid] or t >= knot_vector[mid + 1]:
        if t < knot_vector[mid]:
            high = mid
        else:
            low = mid
        mid = (low + high) // 2
    return mid


def basis_functions(span_index: int, degree: int, knot_vector: Sequence[float], t: float) -> list[float]:
    """The degree + 1 nonvanishing basis functions on the span at t."""
    _check_span_degree(span_index, degree)
    _check_knots(knot_vector, "t", t)

    basis = [0.0] * (degree + 1)
    basis[0] = 1.0
    left = [0.0] * (degree + 1)
    right = [0.0] * (degree + 1)
    for j in range(1, degree + 1):
        left[j] = t - knot_vector[span_index + 1 - j]
        right[j] = knot_vector[span_index + j] - t
        saved = 0.0
        for r in range(j):
            temp = basis[r] / (right[r + 1] + left[j - r])
            basis[r] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        basis[j] = saved
    return basis


def basis_functions_derivatives(
    span_index: int,
    degree: int,
    derivative: int,
    knot_vector: Sequence[float],
    t: float,
) -> list[list[float]]:
    """Nonvanishing basis functions and their derivatives up to the given order.

    Row k holds the k-th derivatives of the degree + 1 functions.
    """
    _check_span_degree(span_index, degree)
    _require(derivative <= degree, "Derivative must not be greater than degree.")
    _check_knots(knot_vector, "t", t)

    p = degree
    ndu = [[0.0] * (p + 1) for _ in range(p + 1)]
    ndu[0][0] = 1.0
    left = [0.0] * (p + 1)
    right = [0.0] * (p + 1)

    for j in range(1, p + 1):
        left[j] = t - knot_vector[span_index + 1 - j]
        right[j] = knot_vector[span_index + j] - t
        saved = 0.0
        for r in range(j):
            ndu[j][r] = right[r + 1] + left[j - r]
            temp = ndu[r][j - 1] / ndu[j][r]
            ndu[r][j] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        ndu[j][j] = saved

    ders = [[0.0] * (p + 1) for _ in range(derivative + 1)]
    ders[0] = [ndu[j][p] for j in range(p + 1)]

    a = [[0.0] * (p + 1) for _ in range(2)]
    for r in range(p + 1):
        s1, s2 = 0, 1
        a[0][0] = 1.0
        for k in range(1, derivative + 1):
            d = 0.0
            rk = r - k
            pk = p - k
            if r >= k:
                a[s2][0] = a[s1][0] / ndu[pk + 1][rk]
                d = a[s2][0] * ndu[rk][pk]
            j1 = 1 if rk >= -1 else -rk
            j2 = k - 1 if r - 1 <= pk else p - r
            for j in range(j1, j2 + 1):
                a[s2][j] = (a[s1][j] - a[s1][j - 1]) / ndu[pk + 1][rk + j]
                d += a[s2][j] * ndu[rk + j][pk]
            if r <= pk:
                a[s2][k] = -a[s1][k - 1] / ndu[pk + 1][r]
                d += a[s2][k] * ndu[r][pk]
            ders[k][r] = d
            s1, s2 = s2, s1

    factor = p
    for k in range(1, derivative + 1):
        ders[k] = [value * factor for value in ders[k]]
        factor *= p - k
    return ders


def basis_functions_first_derivative(
    span_index: int, degree: int, knot_vector: Sequence[float], t: float
) -> list[list[float]]:
    """Nonvanishing basis functions (row 0) and their first derivatives (row 1)."""
    _check_span_degree(span_index, degree)
    _require(degree >= 1, "Derivative must not be greater than degree.")
    return basis_functions_derivatives(span_index, degree, 1, knot_vector, t)


def one_basis_function(span_index: int, degree: int, knot_vector: Sequence[float], t: float) -> float:
    """Value of the single basis function N(span_index, degree) at t."""
    _require(span_index >= 0, "Span index must be greater than or equal to zero.")
    _require(degree > 0, "Degree must be greater than zero.")
    _check_knots(knot_vector, "t", t)

    U = knot_vector
    i = span_index
    m = len(U) - 1
    if (i == 0 and is_almost_equal(t, U[0])) or (i == m - degree - 1 and is_almost_equal(t, U[m])):
        return 1.0
    if is_less_than(t, U[i]) or is_greater_or_equal(t, U[i + degree + 1]):
        return 0.0

    N = [
        1.0 if is_greater_or_equal(t, U[i + j]) and is_less_than(t, U[i + j + 1]) else 0.0
        for j in range(degree + 1)
    ]
    for k in range(1, degree + 1):
        saved = 0.0
        if not is_almost_equal(N[0], 0.0):
            saved = ((t - U[i]) * N[0]) / (U[i + k] - U[i])
        for j in range(degree - k + 1):
            knot_left = U[i + j + 1]
            knot_right = U[i + j + k + 1]
            if is_almost_equal(N[j + 1], 0.0):
                N[j] = saved
                saved = 0.0
            else:
                temp = N[j + 1] / (knot_right - knot_left)
                N[j] = saved + (knot_right - t) * temp
                saved = (t - knot_left) * temp
    return N[0]


def one_basis_function_derivatives(
    span_index: int,
    degree: int,
    derivative: int,
    knot_vector: Sequence[float],
    t: float,
) -> list[float]:
    """Derivatives 0..derivative of the single basis function N(span_index, degree) at t."""
    _require(span_index >= 0, "Span index must be greater than or equal to zero.")
    _require(degree > 0, "Degree must be greater than zero.")
    _require(derivative <= degree, "Derivative must not be greater than degree.")
    _check_knots(knot_vector, "t", t)

    U = knot_vector
    i = span_index
    ders = [0.0] * (derivative + 1)
    if is_less_than(t, U[i]) or is_greater_or_equal(t, U[i + degree + 1]):
        return ders

    N = [[0.0] * (degree + 1) for _ in range(degree + 1)]
    for j in range(degree + 1):
        if is_greater_or_equal(t, U[i + j]) and is_less_than(t, U[i + j + 1]):
            N[j][0] = 1.0
    for k in range(1, degree + 1):
        saved = 0.0
        if not is_almost_equal(N[0][k - 1], 0.0):
            saved = ((t - U[i]) * N[0][k - 1]) / (U[i + k] - U[i])
        for j in range(degree - k + 1):
            knot_left = U[i + j + 1]
            knot_right = U[i + j + k + 1]
            if is_almost_equal(N[j + 1][k - 1], 0.0):
                N[j][k] = saved
                saved = 0.0
            else:
                temp = N[j + 1][k - 1] / (knot_right - knot_left)
                N[j][k] = saved + (knot_right - t) * temp
                saved = (t - knot_left) * temp

    ders[0] = N[0][degree]
    for k in range(1, derivative + 1):
        ND = [N[j][degree - k] for j in range(k + 1)]
        for jj in range(1, k + 1):
            order = degree - k + jj
            saved = 0.0 if is_almost_equal(ND[0], 0.0) else ND[0] / (U[i + order] - U[i])
            for j in range(k - jj + 1):
                knot_left = U[i + j + 1]
                knot_right = U[i + j + order + 1]
                if is_almost_equal(ND[j + 1], 0.0):
                    ND[j] = order * saved
                    saved = 0.0
                else:
                    temp = ND[j + 1] / (knot_right - knot_left)
                    ND[j] = order * (saved - temp)
                    saved = temp
        ders[k] = ND[0]
    return ders


def all_basis_functions(
    span_index: int, degree: int, knot_vector: Sequence[float], knot: float
) -> list[list[float]]:
    """Nonvanishing basis functions of every degree 0..degree; column i holds degree i."""
    _check_span_degree(span_index, degree)
    _check_knots(knot_vector, "knot", knot)

    result = [[0.0] * (degree + 1) for _ in range(degree + 1)]
    for i in range(degree + 1):
        for j, value in enumerate(basis_functions(span_index, i, knot_vector, knot)):
            result[j][i] = value
    return result


def bezier_to_power_matrix(degree: int) -> list[list[float]]:
    """Matrix converting Bezier control points to power-basis coefficients."""
    from math import comb

    matrix = [[0.0] * (degree + 1) for _ in range(degree + 1)]
    matrix[0][0] = matrix[degree][degree] = 1.0
    matrix[degree][0] = -1.0 if degree % 2 == 0 else 1.0

    sign = -1.0
    for i in range(1, degree):
        matrix[i][i] = float(comb(degree, i))
        matrix[i][0] = matrix[degree][degree - 1] = sign * matrix[i][i]
        sign = -sign

    k1 = (degree + 1) // 2
    pk = degree - 1
    for k in range(1, k1):
        sign = -1.0
        for j in range(k + 1, pk + 1):
            value = sign * comb(degree, k) * comb(degree - k, j - k)
            matrix[j][k] = matrix[pk][degree - j] = value
            sign = -sign
        pk -= 1
    return matrix


def power_to_bezier_matrix(degree: int, matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Inverse of the matrix built by bezier_to_power_matrix."""
    inverse = [[0.0] * (degree + 1) for _ in range(degree + 1)]
    for i in range(degree + 1):
        inverse[i][0] = inverse[degree][i] = 1.0
        inverse[i][i] = 1.0 / matrix[i][i]

    k1 = (degree + 1) // 2
    pk = degree - 1
    for k in range(1, k1):
        for j in range(k + 1, pk):
            d = -sum(matrix[j][i] * inverse[i][k] for i in range(k, j))
            inverse[j][k] = d / inverse[j][j]
            inverse[pk][degree - j] = inverse[j][k]
        pk -= 1
    return inverse