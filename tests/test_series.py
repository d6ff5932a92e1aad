import math

import pytest
from pytest import approx

from geodesics import series
from geodesics._const import TINY, WGS84_F
from geodesics.utils.functions import sincosd


def test_polyval():
    assert series.polyval(2, [1, 2, 3], 0, 2.) == 11.
    assert series.polyval(1, [9, 1, 2, 3], 1, 2.) == 4.
    assert series.polyval(0, [5], 0, 100.) == 5.
    assert series.polyval(-1, [5], 0, 100.) == 0.


def test_sin_cos_series():
    x = 0.3
    s, c = math.sin(x), math.cos(x)

    assert series.sin_cos_series(True, s, c, [0., 1.]) == approx(math.sin(2 * x), abs=1e-15)
    assert series.sin_cos_series(True, s, c, [0., 0.5, 0.25]) == approx(
        0.5 * math.sin(2 * x) + 0.25 * math.sin(4 * x), abs=1e-15
    )
    assert series.sin_cos_series(False, s, c, [1.]) == approx(math.cos(x), abs=1e-15)
    assert series.sin_cos_series(False, s, c, [0., 1.]) == approx(math.cos(3 * x), abs=1e-15)
    assert series.sin_cos_series(False, s, c, [0.5, 0.25, 0.125]) == approx(
        0.5 * math.cos(x) + 0.25 * math.cos(3 * x) + 0.125 * math.cos(5 * x), abs=1e-15
    )


def test_reduced_latitude():
    sbet, cbet = series.reduced_latitude(45., 1.)
    assert sbet == approx(math.sqrt(0.5), abs=1e-15)
    assert cbet == approx(math.sqrt(0.5), abs=1e-15)

    # Poles are kept a tiny distance away from the pole
    sbet, cbet = series.reduced_latitude(90., 1 - WGS84_F)
    assert sbet == 1.
    assert cbet == TINY

    # Reduced latitudes are closer to the equator than geographic ones
    sbet, cbet = series.reduced_latitude(45., 1 - WGS84_F)
    assert math.degrees(math.atan2(sbet, cbet)) < 45.


@pytest.mark.parametrize('lat', [-89.5, -45., -1e-3, 0., 10., 60., 89.99])
def test_geographic_latitude(lat):
    f1 = 1 - WGS84_F
    sbet, cbet = series.reduced_latitude(lat, f1)
    assert series.geographic_latitude(sbet, cbet, f1) == approx(lat, abs=1e-12)


def test_expansion_parameter():
    assert series.expansion_parameter(0.) == 0.
    k2 = 0.0067
    expected = (math.sqrt(1 + k2) - 1) / (math.sqrt(1 + k2) + 1)
    assert series.expansion_parameter(k2) == approx(expected, rel=1e-14)


def test_sphere_limit():
    assert series.a1m1(0.) == 0.
    assert series.a2m1(0.) == 0.
    for coeffs in (series.c1(0.), series.c1p(0.), series.c2(0.)):
        assert len(coeffs) == 7
        assert all(x == 0 for x in coeffs)

    assert series.a3(series.a3_coefficients(0.), 0.) == 1.
    assert all(x == 0 for x in series.c3(series.c3_coefficients(0.), 0.))

    c4 = series.c4(series.c4_coefficients(0.), 0.)
    assert c4[0] == approx(2 / 3)
    assert all(x == 0 for x in c4[1:])


def test_table_sizes():
    n = WGS84_F / (2 - WGS84_F)
    assert len(series.a3_coefficients(n)) == 6
    assert len(series.c3_coefficients(n)) == 15
    assert len(series.c4_coefficients(n)) == 21
    assert len(series.c3(series.c3_coefficients(n), 0.001)) == 6
    assert len(series.c4(series.c4_coefficients(n), 0.001)) == 6


def test_distance_series_reversion():
    # sigma -> tau -> sigma recovers sigma to the order of the expansion
    eps = 0.01
    c1, c1p = series.c1(eps), series.c1p(eps)
    for sig in (0.1, 0.7, 2.0, -1.3):
        tau = sig + series.sin_cos_series(True, math.sin(sig), math.cos(sig), c1)
        recovered = tau + series.sin_cos_series(True, math.sin(tau), math.cos(tau), c1p)
        assert recovered == approx(sig, abs=1e-12)


def test_meridian_scale():
    # For a meridian eps equals the third flattening, and A1 gives the quarter meridian
    f = WGS84_F
    n = f / (2 - f)
    ep2 = f * (2 - f) / (1 - f) ** 2
    assert series.expansion_parameter(ep2) == approx(n, rel=1e-14)

    b = 6378137 * (1 - f)
    assert b * (1 + series.a1m1(n)) * math.pi / 2 == approx(10001965.729, abs=1e-3)


def test_reduced_latitude_equator():
    sbet, cbet = series.reduced_latitude(0., 1 - WGS84_F)
    assert (sbet, cbet) == sincosd(0.)
