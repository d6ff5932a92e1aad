"""
A single geodesic, set up once and evaluated at many distances
"""

from __future__ import annotations

__all__ = ['GeodesicLine']

import math
from typing import Iterable, List, Optional, TYPE_CHECKING

import numpy as np

from geodesics._types import GeodesicSolution, Position
from geodesics.coordinates import Point
from geodesics.direct import line_coefficients, solve_position
from geodesics.utils.functions import normalize_azimuth
from geodesics.utils.mixins import ImmutableMixin

if TYPE_CHECKING:  # pragma: no cover
    from geodesics.ellipsoid import Ellipsoid


class GeodesicLine(ImmutableMixin):
    """
    A geodesic leaving a start point at a given azimuth. The series coefficients of the
    line are computed at construction, so evaluating positions along it is cheaper than
    repeated calls to Ellipsoid.direct().

    Usually created via Ellipsoid.line() or Ellipsoid.inverse_line().

    Args:
        ellipsoid:
            The ellipsoid on which the line lies

        lat1, lon1:
            The start point, in degrees

        azi1:
            The azimuth at the start point, in degrees clockwise from north

        salp1, calp1:
            (Optional) sine and cosine of azi1, when known more accurately than azi1

        distance:
            (Optional) The distance to a designated end point, in meters. Set for lines
            built from an inverse solution.
    """

    def __init__(
        self,
        ellipsoid: Ellipsoid,
        lat1: float,
        lon1: float,
        azi1: float,
        salp1: Optional[float] = None,
        calp1: Optional[float] = None,
        distance: float = math.nan,
    ):
        self.ellipsoid = ellipsoid
        self.coefficients = line_coefficients(ellipsoid, lat1, azi1, salp1, calp1)
        self.lat1 = self.coefficients.lat1
        self.lon1 = lon1
        self.azi1 = normalize_azimuth(self.coefficients.azi1)
        self.distance = distance
        self._freeze()

    def __repr__(self):
        return f'<GeodesicLine({self.lat1}, {self.lon1}, azimuth {self.azi1})>'

    def position(self, s12: float, unroll: bool = False) -> Position:
        """
        Finds the point a given distance along the line.

        Args:
            s12:
                The distance from the start point, in meters. May be negative.

            unroll: (bool)
                (Default False) Whether to return a continuous end longitude

        Returns:
            (lat2, lon2, azi2)
        """
        solution = self.solution(s12, unroll)
        return solution.lat2, solution.lon2, solution.azi2

    def solution(self, s12: float, unroll: bool = False) -> GeodesicSolution:
        """As position(), returning the complete GeodesicSolution"""
        return solve_position(
            self.ellipsoid, self.coefficients, self.lon1, s12, unroll=unroll
        )

    def arc_position(self, a12: float, unroll: bool = False) -> GeodesicSolution:
        """As solution(), with the distance given as an arc length in degrees"""
        return solve_position(
            self.ellipsoid, self.coefficients, self.lon1, a12, arcmode=True, unroll=unroll
        )

    def waypoints(self, distances: Iterable[float], unroll: bool = False) -> np.ndarray:
        """
        Evaluates the line at several distances.

        Args:
            distances:
                Distances from the start point, in meters

            unroll: (bool)
                (Default False) Whether to return continuous longitudes

        Returns:
            A numpy array of shape (N, 3), one (lat, lon, azi) row per distance
        """
        distances = np.asarray(list(distances), dtype=float).ravel()
        return np.array(
            [self.position(s12, unroll) for s12 in distances.tolist()],
            dtype=float
        ).reshape(-1, 3)

    def interpolate(self, count: int) -> List[Point]:
        """
        Splits the line between its start and end points into evenly spaced points.

        Only available for lines with a distance, i.e. those from Ellipsoid.inverse_line().

        Args:
            count: (int)
                The number of points to return, including both end points

        Returns:
            List of Points, from the start point to the end point
        """
        if math.isnan(self.distance):
            raise ValueError('Line has no end point; create it with inverse_line()')
        if count < 2:
            raise ValueError('Interpolation requires at least 2 points')

        rows = self.waypoints(np.linspace(0, self.distance, count))
        return [Point(lat, lon) for lat, lon, _ in rows.tolist()]
