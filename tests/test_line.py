import math

import numpy as np
import pytest
from pytest import approx

from geodesics import WGS84, GeodesicLine, Point
from tests.functions import assert_points_equal


@pytest.mark.parametrize('s12', [-1e6, 0., 1e3, 5e6, 1.5e7, 3e7])
def test_position_matches_direct(s12):
    line = WGS84.line(40.639722, -73.778889, 53.)
    assert line.position(s12) == approx(WGS84.direct(40.639722, -73.778889, 53., s12), abs=1e-12)


def test_position_unroll():
    line = WGS84.line(40., -75., -10.)
    _, lon2, _ = line.position(2e7, unroll=True)
    assert lon2 == approx(-254., abs=1)

    _, lon2, _ = line.position(2e7)
    assert lon2 == approx(105., abs=1)


def test_line_init():
    line = GeodesicLine(WGS84, 10., 380., -90.)
    assert line.lat1 == 10.
    assert line.lon1 == 380.
    assert line.azi1 == 270.
    assert math.isnan(line.distance)
    assert line.coefficients.salp1 == -1.

    with pytest.raises(AttributeError):
        line.lat1 = 0.


def test_line_repr():
    assert repr(GeodesicLine(WGS84, 10., 20., 30.)) == '<GeodesicLine(10.0, 20.0, azimuth 30.0)>'


def test_solution_and_arc_position():
    line = WGS84.line(40.639722, -73.778889, 53.)
    solution = line.solution(5e6)
    assert solution == WGS84.direct_solution(40.639722, -73.778889, 53., 5e6)

    arc = line.arc_position(solution.arc)
    assert arc.distance == approx(5e6, abs=1e-6)
    assert arc.lat2 == approx(solution.lat2, abs=1e-10)
    assert arc.lon2 == approx(solution.lon2, abs=1e-10)


def test_waypoints():
    line = WGS84.line(0., 0., 45.)
    distances = [0., 1e5, 2e5]
    rows = line.waypoints(distances)
    assert rows.shape == (3, 3)
    for row, s12 in zip(rows, distances):
        assert tuple(row) == approx(line.position(s12), abs=1e-12)

    assert line.waypoints(np.array([1e5])).shape == (1, 3)
    assert line.waypoints([]).shape == (0, 3)


def test_inverse_line():
    line = WGS84.inverse_line(40.6, -73.8, 49.01666667, 2.55)
    s12, azi1, _ = WGS84.inverse(40.6, -73.8, 49.01666667, 2.55)
    assert line.distance == s12
    assert line.azi1 == approx(azi1, abs=1e-12)

    lat2, lon2, _ = line.position(line.distance)
    assert lat2 == approx(49.01666667, abs=1e-8)
    assert lon2 == approx(2.55, abs=1e-8)


def test_interpolate():
    p1, p2 = Point(40.6, -73.8), Point(49.01666667, 2.55)
    line = WGS84.inverse_line(p1.latitude, p1.longitude, p2.latitude, p2.longitude)
    points = line.interpolate(5)
    assert len(points) == 5
    assert points[0] == p1
    assert_points_equal(points[-1], p2)

    # Evenly spaced along the geodesic
    for i, point in enumerate(points):
        assert WGS84.measure(p1, point) == approx(line.distance * i / 4, abs=1e-6)

    assert len(line.interpolate(2)) == 2


def test_interpolate_errors():
    with pytest.raises(ValueError):
        WGS84.line(0., 0., 45.).interpolate(5)

    with pytest.raises(ValueError):
        WGS84.inverse_line(0., 0., 1., 1.).interpolate(1)
