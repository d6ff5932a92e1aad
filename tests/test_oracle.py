"""Checks against GeodTest verification data"""
import os

import numpy as np
import pytest
from pytest import approx

from geodesics import WGS84
from geodesics.batch import direct_batch, inverse_batch
from tests.functions import DATA_DIR, angle_difference, assert_angles_equal, load_geodtest

SAMPLE = load_geodtest(DATA_DIR / 'geodtest-sample.dat')

# Maximum deltas allowed against the verification data
DELTA_AZIMUTH = 1e-2  # degrees
DELTA_DISTANCE = 1e-7  # meters
DELTA_POSITION = 1e-8  # degrees


@pytest.mark.parametrize('row', SAMPLE.tolist())
def test_sample_direct(row):
    lat1, lon1, azi1, lat2, lon2, azi2, s12, a12, m12, area = row
    solution = WGS84.direct_solution(lat1, lon1, azi1, s12)
    assert solution.lat2 == approx(lat2, abs=DELTA_POSITION)
    assert_angles_equal(solution.lon2, lon2, abs_tol=DELTA_POSITION)
    assert_angles_equal(solution.azi2, azi2, abs_tol=1e-8)
    assert solution.arc == approx(a12, abs=1e-10)
    assert solution.reduced_length == approx(m12, abs=1e-6)
    assert solution.area == approx(area, abs=1.)


@pytest.mark.parametrize('row', SAMPLE.tolist())
def test_sample_inverse(row):
    lat1, lon1, azi1, lat2, lon2, azi2, s12, a12, m12, area = row
    solution = WGS84.inverse_solution(lat1, lon1, lat2, lon2)
    assert solution.distance == approx(s12, abs=DELTA_DISTANCE)
    assert_angles_equal(solution.azi1, azi1, abs_tol=1e-8)
    assert_angles_equal(solution.azi2, azi2, abs_tol=1e-8)
    assert solution.arc == approx(a12, abs=1e-10)
    assert solution.reduced_length == approx(m12, abs=1e-6)
    assert solution.area == approx(area, abs=1.)


def test_sample_line():
    for lat1, lon1, azi1, lat2, lon2, azi2, s12, *_ in SAMPLE.tolist():
        line = WGS84.line(lat1, lon1, azi1)
        rows = line.waypoints([0., s12])
        assert tuple(rows[0]) == approx((lat1, lon1, azi1 % 360), abs=1e-12)
        assert rows[1, 0] == approx(lat2, abs=DELTA_POSITION)
        assert_angles_equal(rows[1, 1], lon2, abs_tol=DELTA_POSITION)


@pytest.mark.skipif(
    'GEODTEST_PATH' not in os.environ,
    reason='Set GEODTEST_PATH to a GeodTest data file to run the full verification'
)
def test_full_geodtest():
    data = load_geodtest(os.environ['GEODTEST_PATH'])
    lat1, lon1, azi1, lat2, lon2, azi2, s12 = data[:, :7].T

    direct = direct_batch(lat1, lon1, azi1, s12)
    position_errors = np.maximum(
        np.abs(direct[:, 0] - lat2),
        np.vectorize(angle_difference)(direct[:, 1], lon2),
    )
    direct_azimuth_errors = np.vectorize(angle_difference)(direct[:, 2], azi2)
    assert np.flatnonzero(position_errors >= DELTA_POSITION).tolist() == []
    assert np.flatnonzero(direct_azimuth_errors >= DELTA_AZIMUTH).tolist() == []

    inverse = inverse_batch(lat1, lon1, lat2, lon2)
    distance_errors = np.abs(inverse[:, 0] - s12)
    inverse_azimuth_errors = np.maximum(
        np.vectorize(angle_difference)(inverse[:, 1], azi1),
        np.vectorize(angle_difference)(inverse[:, 2], azi2),
    )
    assert np.flatnonzero(distance_errors >= DELTA_DISTANCE).tolist() == []
    assert np.flatnonzero(inverse_azimuth_errors >= DELTA_AZIMUTH).tolist() == []
