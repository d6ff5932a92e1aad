import re

import pytest

from geodesics import Point


def test_point_init():
    p = Point(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = Point('1.0', '0.0')
    assert p.latitude == 1.
    assert p.longitude == 0.

    # Longitudes are kept as given
    assert Point(0., 190.).longitude == 190.

    with pytest.raises(AttributeError):
        p.latitude = 2.


def test_point_invalid_latitude(caplog):
    p = Point(91., 0.)
    assert p.latitude == 91.
    assert 'Latitudes outside [-90, 90]' in caplog.text

    Point(-95., 0.)
    assert len(re.findall('Latitudes outside', caplog.text)) == 1


def test_point_eq():
    assert Point(0., 0.) == Point(0., 0.)
    assert Point(0., 0.) != Point(1., 0.)
    assert Point(0., 190.) == Point(0., -170.)
    assert Point(0., 180.) == Point(0., -180.)
    assert Point(0., 0.) != (0., 0.)


def test_point_hash():
    points = [
        Point(0., 0.),
        Point(0., 360.),
        Point(1., 1.)
    ]
    assert len(set(points)) == 2
    assert Point(0., -360.) in set(points)


def test_point_repr():
    assert repr(Point(1., 0.)) == '<Point(1.0, 0.0)>'


def test_point_normalized():
    assert Point(10., 190.).normalized().longitude == -170.
    assert Point(10., 180.).normalized().longitude == -180.
    assert Point(10., 20.).normalized().longitude == 20.


def test_point_antipode():
    assert Point(10., 20.).antipode().to_float() == (-10., -160.)
    assert Point(-90., 0.).antipode().to_float() == (90., -180.)


def test_point_dms():
    p = Point.from_dms((1, 30, 0., 'N'), (2, 15, 0., 'W'))
    assert p == Point(1.5, -2.25)
    assert p.to_dms() == ((1, 30, 0., 'N'), (2, 15, 0., 'W'))

    assert Point(-0.5, 370.).to_dms() == ((0, 30, 0., 'S'), (10, 0, 0., 'E'))


def test_point_to_float():
    assert Point(1., 0.).to_float() == (1., 0.)
    assert Point(1., 0.).to_float(reverse=True) == (0., 1.)
