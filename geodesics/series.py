"""
Series expansions for geodesics on an ellipsoid of revolution.

Distances, longitudes, reduced lengths and areas along a geodesic are expressed as
trigonometric series in the arc length sigma on the auxiliary sphere, whose
coefficients are polynomials in the third flattening n (or in the expansion parameter
eps, which is of the same order). All series are truncated at SERIES_ORDER.

Every polynomial is evaluated with Horner's method and every trigonometric series with
Clenshaw summation, i.e. from the highest order term down, so that the spherical limit
(n -> 0) reduces cleanly to the leading terms.
"""

__all__ = [
    'a1m1', 'a2m1', 'a3', 'a3_coefficients', 'c1', 'c1p', 'c2', 'c3', 'c3_coefficients',
    'c4', 'c4_coefficients', 'expansion_parameter', 'geographic_latitude', 'polyval',
    'reduced_latitude', 'sin_cos_series'
]

import math
from typing import List, Sequence, Tuple

from geodesics._const import SERIES_ORDER, TINY
from geodesics.utils.functions import atan2d, norm, sincosd, sq


# Numerators and denominators of the series coefficients, grouped per coefficient as
# [highest order term, ..., constant term, denominator]
_A1M1_COEFFS = [1, 4, 64, 0, 256]
_C1_COEFFS = [
    -1, 6, -16, 32,
    -9, 64, -128, 2048,
    9, -16, 768,
    3, -5, 512,
    -7, 1280,
    -7, 2048,
]
_C1P_COEFFS = [
    205, -432, 768, 1536,
    4005, -4736, 3840, 12288,
    -225, 116, 384,
    -7173, 2695, 7680,
    3467, 7680,
    38081, 61440,
]
_A2M1_COEFFS = [-11, -28, -192, 0, 256]
_C2_COEFFS = [
    1, 2, 16, 32,
    35, 64, 384, 2048,
    15, 80, 768,
    7, 35, 512,
    63, 1280,
    77, 2048,
]
_A3_COEFFS = [
    -3, 128,
    -2, -3, 64,
    -1, -3, -1, 16,
    3, -1, -2, 8,
    1, -1, 2,
    1, 1,
]
_C3_COEFFS = [
    3, 128,
    2, 5, 128,
    -1, 3, 3, 64,
    -1, 0, 1, 8,
    -1, 1, 4,
    5, 256,
    1, 3, 128,
    -3, -2, 3, 64,
    1, -3, 2, 32,
    7, 512,
    -10, 9, 384,
    5, -9, 5, 192,
    7, 512,
    -14, 7, 512,
    21, 2560,
]
_C4_COEFFS = [
    97, 15015,
    1088, 156, 45045,
    -224, -4784, 1573, 45045,
    -10656, 14144, -4576, -858, 45045,
    64, 624, -4576, 6864, -3003, 15015,
    100, 208, 572, 3432, -12012, 30030, 45045,
    1, 9009,
    -2944, 468, 135135,
    5792, 1040, -1287, 135135,
    5952, -11648, 9152, -2574, 135135,
    -64, -624, 4576, -6864, 3003, 135135,
    8, 10725,
    1856, -936, 225225,
    -8448, 4992, -1144, 225225,
    -1440, 4160, -4576, 1716, 225225,
    -136, 63063,
    1024, -208, 105105,
    3584, -3328, 1144, 315315,
    -128, 135135,
    -2560, 832, 405405,
    128, 99099,
]


def polyval(order: int, coeffs: Sequence[float], start: int, x: float) -> float:
    """
    Evaluates a polynomial with Horner's method.

    Args:
        order:
            The order of the polynomial; a negative order evaluates to zero

        coeffs:
            The coefficient list, highest power first

        start:
            The index within coeffs of the highest power coefficient

        x:
            The value at which to evaluate the polynomial

    Returns:
        (float) coeffs[start] * x^order + ... + coeffs[start + order]
    """
    y = float(0 if order < 0 else coeffs[start])
    while order > 0:
        order -= 1
        start += 1
        y = y * x + coeffs[start]

    return y


def sin_cos_series(sinp: bool, sinx: float, cosx: float, c: Sequence[float]) -> float:
    """
    Clenshaw summation of a trigonometric series.

    With sinp, evaluates sum(c[k] * sin(2 k x), k = 1 .. n) (c[0] is unused); otherwise
    evaluates sum(c[k] * cos((2 k + 1) x), k = 0 .. n - 1).

    Args:
        sinp:
            Whether to sum the sine series (True) or the cosine series (False)

        sinx:
            sin(x)

        cosx:
            cos(x)

        c:
            The series coefficients

    Returns:
        (float) the value of the series
    """
    k = len(c)
    n = k - (1 if sinp else 0)
    ar = 2 * (cosx - sinx) * (cosx + sinx)  # 2 * cos(2 x)
    y1 = 0.0
    if n & 1:
        k -= 1
        y0 = c[k]
    else:
        y0 = 0.0

    n = n // 2
    while n:
        n -= 1
        # Unrolled so that y0 and y1 swap roles instead of values
        k -= 1
        y1 = ar * y0 - y1 + c[k]
        k -= 1
        y0 = ar * y1 - y0 + c[k]

    return 2 * sinx * cosx * y0 if sinp else cosx * (y0 - y1)


def reduced_latitude(lat: float, f1: float) -> Tuple[float, float]:
    """
    Maps a geographic latitude onto the auxiliary sphere.

    Args:
        lat:
            The geographic latitude, in degrees

        f1:
            One minus the flattening of the ellipsoid

    Returns:
        (sin(beta), cos(beta)) of the reduced latitude beta, with cos(beta) kept away
        from zero so that the poles behave as points a tiny distance off the pole
    """
    sbet, cbet = sincosd(lat)
    sbet, cbet = norm(f1 * sbet, cbet)
    return sbet, max(TINY, cbet)


def geographic_latitude(sbet: float, cbet: float, f1: float) -> float:
    """Inverse of reduced_latitude, returning the geographic latitude in degrees"""
    return atan2d(sbet, f1 * cbet)


def expansion_parameter(k2: float) -> float:
    """
    The small parameter eps of the distance series, given k2 = ep2 * cos(alpha0)^2.

    Equivalent to (sqrt(1 + k2) - 1) / (sqrt(1 + k2) + 1) without the cancellation.
    """
    return k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)


def a1m1(eps: float) -> float:
    """The distance scale factor A1, minus one"""
    m = SERIES_ORDER // 2
    t = polyval(m, _A1M1_COEFFS, 0, sq(eps)) / _A1M1_COEFFS[m + 1]
    return (t + eps) / (1 - eps)


def a2m1(eps: float) -> float:
    """The reduced length scale factor A2, minus one"""
    m = SERIES_ORDER // 2
    t = polyval(m, _A2M1_COEFFS, 0, sq(eps)) / _A2M1_COEFFS[m + 1]
    return (t - eps) / (1 + eps)


def _eps_series(eps: float, coeffs: Sequence[int]) -> List[float]:
    """
    Evaluates the coefficients of a sine series whose l-th coefficient is eps^l times an
    even polynomial in eps. Index 0 of the result is unused.
    """
    eps2 = sq(eps)
    out = [0.0] * (SERIES_ORDER + 1)
    d = eps
    o = 0
    for l in range(1, SERIES_ORDER + 1):
        m = (SERIES_ORDER - l) // 2
        out[l] = d * polyval(m, coeffs, o, eps2) / coeffs[o + m + 1]
        o += m + 2
        d *= eps

    return out


def c1(eps: float) -> List[float]:
    """Coefficients of the series giving distance in terms of sigma"""
    return _eps_series(eps, _C1_COEFFS)


def c1p(eps: float) -> List[float]:
    """Coefficients of the reverted series giving sigma in terms of distance"""
    return _eps_series(eps, _C1P_COEFFS)


def c2(eps: float) -> List[float]:
    """Coefficients of the series for the reduced length"""
    return _eps_series(eps, _C2_COEFFS)


def a3_coefficients(n: float) -> List[float]:
    """
    Expands the coefficients of A3 (the longitude scale factor) in powers of eps, given
    the third flattening. Computed once per ellipsoid.
    """
    out = []
    o = 0
    for j in range(SERIES_ORDER - 1, -1, -1):
        m = min(SERIES_ORDER - j - 1, j)
        out.append(polyval(m, _A3_COEFFS, o, n) / _A3_COEFFS[o + m + 1])
        o += m + 2

    return out


def c3_coefficients(n: float) -> List[float]:
    """
    Expands the coefficients of the longitude series C3 in powers of eps, given the
    third flattening. Computed once per ellipsoid.
    """
    out = []
    o = 0
    for l in range(1, SERIES_ORDER):
        for j in range(SERIES_ORDER - 1, l - 1, -1):
            m = min(SERIES_ORDER - j - 1, j)
            out.append(polyval(m, _C3_COEFFS, o, n) / _C3_COEFFS[o + m + 1])
            o += m + 2

    return out


def c4_coefficients(n: float) -> List[float]:
    """
    Expands the coefficients of the area series C4 in powers of eps, given the third
    flattening. Computed once per ellipsoid.
    """
    out = []
    o = 0
    for l in range(SERIES_ORDER):
        for j in range(SERIES_ORDER - 1, l - 1, -1):
            m = SERIES_ORDER - j - 1
            out.append(polyval(m, _C4_COEFFS, o, n) / _C4_COEFFS[o + m + 1])
            o += m + 2

    return out


def a3(table: Sequence[float], eps: float) -> float:
    """Evaluates A3 from its per-ellipsoid table"""
    return polyval(SERIES_ORDER - 1, table, 0, eps)


def c3(table: Sequence[float], eps: float) -> List[float]:
    """Evaluates the longitude series coefficients; index 0 is unused"""
    out = [0.0] * SERIES_ORDER
    mult = 1.0
    o = 0
    for l in range(1, SERIES_ORDER):
        m = SERIES_ORDER - l - 1
        mult *= eps
        out[l] = mult * polyval(m, table, o, eps)
        o += m + 1

    return out


def c4(table: Sequence[float], eps: float) -> List[float]:
    """Evaluates the area series coefficients"""
    out = [0.0] * SERIES_ORDER
    mult = 1.0
    o = 0
    for l in range(SERIES_ORDER):
        m = SERIES_ORDER - l - 1
        out[l] = mult * polyval(m, table, o, eps)
        o += m + 1
        mult *= eps

    return out
