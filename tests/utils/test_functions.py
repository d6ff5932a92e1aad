import math

from pytest import approx

from geodesics.utils.functions import (
    ang_diff, ang_normalize, ang_round, atan2d, invert_azimuth, lat_fix, norm,
    normalize_azimuth, normalize_longitude, round_half_up, sincosd, two_sum
)


def test_ang_normalize():
    assert ang_normalize(0.) == 0.
    assert ang_normalize(180.) == 180.
    assert ang_normalize(-180.) == 180.
    assert ang_normalize(540.) == 180.
    assert ang_normalize(190.) == -170.
    assert ang_normalize(-190.) == 170.
    assert math.isnan(ang_normalize(math.inf))
    assert math.isnan(ang_normalize(math.nan))


def test_normalize_longitude():
    assert normalize_longitude(180.) == -180.
    assert normalize_longitude(-180.) == -180.
    assert normalize_longitude(190.) == -170.
    assert normalize_longitude(539.) == 179.
    assert normalize_longitude(-361.) == -1.
    assert math.isnan(normalize_longitude(-math.inf))


def test_normalize_azimuth():
    assert normalize_azimuth(0.) == 0.
    assert normalize_azimuth(-10.) == 350.
    assert normalize_azimuth(360.) == 0.
    assert normalize_azimuth(725.) == 5.
    assert normalize_azimuth(-1e-20) == 0.
    assert math.isnan(normalize_azimuth(math.nan))
    assert math.isnan(normalize_azimuth(math.inf))


def test_invert_azimuth():
    assert invert_azimuth(0.) == 180.
    assert invert_azimuth(180.) == 0.
    assert invert_azimuth(270.) == 90.
    assert invert_azimuth(350.) == 170.
    assert invert_azimuth(-90.) == 90.
    assert math.isnan(invert_azimuth(math.nan))


def test_lat_fix():
    assert lat_fix(90.) == 90.
    assert lat_fix(-45.) == -45.
    assert math.isnan(lat_fix(90.5))
    assert math.isnan(lat_fix(-91.))


def test_two_sum():
    assert two_sum(1., 1e-20) == (1., 1e-20)
    assert two_sum(2., 3.) == (5., 0.)

    s, t = two_sum(0.1, 0.2)
    assert s == 0.1 + 0.2
    assert t != 0.


def test_ang_diff():
    assert ang_diff(170., -170.) == (20., 0.)
    assert ang_diff(-170., 170.) == (-20., 0.)
    assert ang_diff(0., 180.) == (180., 0.)
    assert ang_diff(0., -180.)[0] == -180.
    assert ang_diff(20., 380.)[0] == 0.
    assert math.isnan(ang_diff(0., math.inf)[0])


def test_ang_round():
    assert ang_round(30.) == 30.
    assert ang_round(1e-20) == 0.
    assert math.copysign(1, ang_round(-0.)) == -1
    assert ang_round(-1e-20) == 0.


def test_sincosd():
    assert sincosd(0.) == (0., 1.)
    assert sincosd(90.) == (1., 0.)
    assert sincosd(-90.) == (-1., 0.)
    assert sincosd(180.) == (0., -1.)
    assert sincosd(450.) == (1., 0.)
    assert math.copysign(1, sincosd(-0.)[0]) == -1

    s, c = sincosd(30.)
    assert s == approx(0.5, abs=1e-15)
    assert c == approx(math.sqrt(3) / 2, abs=1e-15)

    s, c = sincosd(math.inf)
    assert math.isnan(s) and math.isnan(c)


def test_atan2d():
    assert atan2d(0., 1.) == 0.
    assert atan2d(1., 0.) == 90.
    assert atan2d(-1., 0.) == -90.
    assert atan2d(0., -1.) == 180.
    assert atan2d(-0., -1.) == -180.
    assert atan2d(1., 1.) == approx(45., abs=1e-14)
    assert atan2d(-1., -1.) == approx(-135., abs=1e-14)


def test_norm():
    assert norm(3., 4.) == approx((0.6, 0.8))
    x, y = norm(0., 0.)
    assert math.isnan(x) and math.isnan(y)


def test_round_half_up():
    assert round_half_up(2.5, 0) == 3.
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(1.23456, 3) == 1.235
