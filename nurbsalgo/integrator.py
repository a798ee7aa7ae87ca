"""Numerical quadrature rules used for arc lengths and surface areas."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

GAUSS_LEGENDRE_ABSCISSAE: tuple[float, ...] = (
    -0.0640568928626056260850430826247450385909,
    0.0640568928626056260850430826247450385909,
    -0.1911188674736163091586398207570696318404,
    0.1911188674736163091586398207570696318404,
    -0.3150426796961633743867932913198102407864,
    0.3150426796961633743867932913198102407864,
    -0.4337935076260451384870842319133497124524,
    0.4337935076260451384870842319133497124524,
    -0.5454214713888395356583756172183723700107,
    0.5454214713888395356583756172183723700107,
    -0.6480936519369755692524957869107476266696,
    0.6480936519369755692524957869107476266696,
    -0.7401241915785543642438281030999784255232,
    0.7401241915785543642438281030999784255232,
    -0.8200019859739029219539498726697452080761,
    0.8200019859739029219539498726697452080761,
    -0.8864155270044010342131543419821967550873,
    0.8864155270044010342131543419821967550873,
    -0.9382745520027327585236490017087214496548,
    0.9382745520027327585236490017087214496548,
    -0.9747285559713094981983919930081690617411,
    0.9747285559713094981983919930081690617411,
    -0.9951872199970213601799974097007368118745,
    0.9951872199970213601799974097007368118745,
)

GAUSS_LEGENDRE_WEIGHTS: tuple[float, ...] = (
    0.1279381953467521569740561652246953718517,
    0.1279381953467521569740561652246953718517,
    0.1258374563468282961213753825111836887264,
    0.1258374563468282961213753825111836887264,
    0.121670472927803391204463153476262425607,
    0.121670472927803391204463153476262425607,
    0.1155056680537256013533444839067835598622,
    0.1155056680537256013533444839067835598622,
    0.1074442701159656347825773424466062227946,
    0.1074442701159656347825773424466062227946,
    0.0976186521041138882698806644642471544279,
    0.0976186521041138882698806644642471544279,
    0.086190161531953275917185202983742667185,
    0.086190161531953275917185202983742667185,
    0.0733464814110803057340336152531165181193,
    0.0733464814110803057340336152531165181193,
    0.0592985849154367807463677585001085845412,
    0.0592985849154367807463677585001085845412,
    0.0442774388174198061686027482113382288593,
    0.0442774388174198061686027482113382288593,
    0.0285313886289336631813078159518782864491,
    0.0285313886289336631813078159518782864491,
    0.0123412297999871995468056670700372915759,
    0.0123412297999871995468056670700372915759,
)

Function1D = Callable[[float], float]
Function2D = Callable[[float, float], float]


def simpson(function: Function1D, start: float, end: float) -> float:
    """Simpson's rule on [start, end] from three samples."""
    st = function(start)
    mt = function((start + end) / 2.0)
    et = function(end)
    return ((end - start) / 6.0) * (st + 4 * mt + et)


def simpson_2d(
    function: Function2D, u_start: float, u_end: float, v_start: float, v_end: float
) -> float:
    """Tensor-product Simpson's rule over a rectangle from nine samples."""
    du = u_end - u_start
    dv = v_end - v_start
    u_mid = u_start + 0.5 * du
    v_mid = v_start + 0.5 * dv
    weights = ((u_start, 1.0), (u_mid, 4.0), (u_end, 1.0))
    v_weights = ((v_start, 1.0), (v_mid, 4.0), (v_end, 1.0))
    total = sum(wu * wv * function(u, v) for u, wu in weights for v, wv in v_weights)
    return total * du * dv / 36.0


def gauss_legendre(function: Function1D, start: float, end: float) -> float:
    """24-point Gauss-Legendre quadrature on [start, end]."""
    half = 0.5 * (end - start)
    mid = 0.5 * (end + start)
    total = sum(
        w * function(mid + half * x)
        for x, w in zip(GAUSS_LEGENDRE_ABSCISSAE, GAUSS_LEGENDRE_WEIGHTS)
    )
    return half * total


def clenshaw_curtis(
    function: Function1D,
    start: float,
    end: float,
    series: Sequence[float],
    epsilon: float,
) -> float:
    """Adaptive Clenshaw-Curtis quadrature driven by a precomputed Chebyshev weight table.

    The table is copied; the caller's sequence is left unchanged.
    """
    w = list(series)
    if len(w) < 10:
        raise ValueError("Series must hold at least ten entries.")
    lenw = len(w) - 1
    esf = 10.0
    ba = 0.5 * (end - start)
    ss = 2 * w[lenw]
    x = ba * w[lenw]
    w[0] = 0.5 * function(start)
    w[3] = 0.5 * function(end)
    w[2] = function(start + x)
    w[4] = function(end - x)
    w[1] = function(start + ba)
    eref = 0.5 * sum(abs(value) for value in w[:5])
    w[0] += w[3]
    w[2] += w[4]
    ir = w[0] + w[1] + w[2]
    integration = w[0] * w[lenw - 1] + w[1] * w[lenw - 2] + w[2] * w[lenw - 3]
    erefh = eref * math.sqrt(epsilon)
    eref *= epsilon
    hh = 0.25
    l = 2
    k = lenw - 5
    while True:
        iback = integration
        irback = ir
        x = ba * w[k + 1]
        y = 0.0
        integration = w[0] * w[k]
        for j in range(1, l + 1):
            x += y
            y += ss * (ba - x)
            fx = function(start + x) + function(end - x)
            ir += fx
            integration += w[j] * w[k - j] + fx * w[k - j - l]
            w[j + l] = fx
        ss = 2 * w[k + 1]
        err = esf * l * abs(integration - iback)
        hh *= 0.25
        errir = hh * abs(ir - 2 * irback)
        l *= 2
        k -= l + 2
        if not ((err > erefh or errir > eref) and k > 4 * l):
            break
    return integration * (end - start)