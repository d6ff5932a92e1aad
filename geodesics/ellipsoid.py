"""
The ellipsoid of revolution on which geodesics are solved
"""

__all__ = ['Ellipsoid', 'EllipsoidConfigError', 'WGS84']

import math
from typing import Tuple

from pydantic import validate_call
from typing_extensions import Self

from geodesics import series
from geodesics._const import TOL2, WGS84_A, WGS84_F
from geodesics._types import GeodesicSolution, Position
from geodesics.coordinates import Point
from geodesics.direct import solve_direct
from geodesics.inverse import solve_inverse
from geodesics.line import GeodesicLine
from geodesics.utils.functions import sq
from geodesics.utils.mixins import ImmutableMixin


class EllipsoidConfigError(ValueError):
    """Raised when an ellipsoid is constructed from invalid shape parameters"""


class Ellipsoid(ImmutableMixin):
    """
    An ellipsoid of revolution, defined by its flattening and equatorial radius.

    All derived constants and the series coefficient tables are computed once, at
    construction; the instance is immutable afterwards and may be shared freely.

    Args:
        flattening: (float)
            The flattening f = (a - b) / a. Zero gives a sphere, negative values a
            prolate ellipsoid. Must lie in (-1, 1).

        equatorial_radius: (float)
            The equatorial radius a, in meters. Must be finite and positive.
    """

    @validate_call
    def __init__(self, flattening: float, equatorial_radius: float):
        if not (math.isfinite(equatorial_radius) and equatorial_radius > 0):
            raise EllipsoidConfigError(
                f'Equatorial radius must be finite and positive, got {equatorial_radius}'
            )
        if not (math.isfinite(flattening) and abs(flattening) < 1):
            raise EllipsoidConfigError(
                f'Flattening must be finite and within (-1, 1), got {flattening}'
            )

        self.a = equatorial_radius
        self.f = flattening
        self.f1 = 1 - self.f
        self.e2 = self.f * (2 - self.f)
        self.ep2 = self.e2 / sq(self.f1)  # Second eccentricity squared
        self.n = self.f / (2 - self.f)  # Third flattening
        self.b = self.a * self.f1

        # Authalic radius squared
        if self.e2 == 0:
            ratio = 1.0
        elif self.e2 > 0:
            ratio = math.atanh(math.sqrt(self.e2)) / math.sqrt(self.e2)
        else:
            ratio = math.atan(math.sqrt(-self.e2)) / math.sqrt(-self.e2)
        self.c2 = (sq(self.a) + sq(self.b) * ratio) / 2

        # Below this, the spherical start of the inverse solution is accurate enough to
        # be the solution
        self.etol2 = 0.1 * TOL2 / math.sqrt(
            max(0.001, abs(self.f)) * min(1.0, 1 - self.f / 2) / 2
        )

        self.a3x = tuple(series.a3_coefficients(self.n))
        self.c3x = tuple(series.c3_coefficients(self.n))
        self.c4x = tuple(series.c4_coefficients(self.n))
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, f={self.f})>'

    @classmethod
    def from_axes(cls, equatorial_radius: float, polar_radius: float) -> Self:
        """
        Creates an ellipsoid from its semi-axes.

        Args:
            equatorial_radius: (float)
                The equatorial radius a, in meters

            polar_radius: (float)
                The polar radius b, in meters

        Returns:
            Ellipsoid
        """
        if not (math.isfinite(equatorial_radius) and equatorial_radius > 0):
            raise EllipsoidConfigError(
                f'Equatorial radius must be finite and positive, got {equatorial_radius}'
            )

        return cls((equatorial_radius - polar_radius) / equatorial_radius, equatorial_radius)

    @property
    def area(self) -> float:
        """The total surface area of the ellipsoid, in square meters"""
        return 4 * math.pi * self.c2

    @property
    def quarter_meridian(self) -> float:
        """The distance from the equator to a pole along a meridian, in meters"""
        return self.b * (1 + series.a1m1(self.n)) * math.pi / 2

    def direct(
        self,
        lat1: float,
        lon1: float,
        azi1: float,
        s12: float,
        unroll: bool = False
    ) -> Position:
        """
        Finds the point reached by travelling a given distance along a geodesic.

        Args:
            lat1, lon1:
                The start point, in degrees

            azi1:
                The azimuth at the start point, in degrees clockwise from north

            s12:
                The distance to travel, in meters. May be negative.

            unroll: (bool)
                (Default False) If True, the returned longitude is lon1 plus the
                longitude traversed, rather than reduced to [-180, 180)

        Returns:
            (lat2, lon2, azi2), with azi2 the azimuth at the end point in [0, 360)
        """
        solution = solve_direct(self, lat1, lon1, azi1, s12, unroll=unroll)
        return solution.lat2, solution.lon2, solution.azi2

    def direct_solution(
        self,
        lat1: float,
        lon1: float,
        azi1: float,
        s12: float,
        unroll: bool = False
    ) -> GeodesicSolution:
        """As direct(), returning the complete GeodesicSolution"""
        return solve_direct(self, lat1, lon1, azi1, s12, unroll=unroll)

    def arc_direct(
        self,
        lat1: float,
        lon1: float,
        azi1: float,
        a12: float,
        unroll: bool = False
    ) -> GeodesicSolution:
        """
        Solves the direct problem with the length of the geodesic given as an arc length
        on the auxiliary sphere.

        Args:
            lat1, lon1:
                The start point, in degrees

            azi1:
                The azimuth at the start point, in degrees

            a12:
                The arc length, in degrees

            unroll: (bool)
                (Default False) Whether to return a continuous end longitude

        Returns:
            GeodesicSolution, whose distance field holds the corresponding length in meters
        """
        return solve_direct(self, lat1, lon1, azi1, a12, arcmode=True, unroll=unroll)

    def inverse(self, lat1: float, lon1: float, lat2: float, lon2: float) -> Tuple[float, float, float]:
        """
        Finds the shortest geodesic between two points.

        Args:
            lat1, lon1:
                The first point, in degrees

            lat2, lon2:
                The second point, in degrees

        Returns:
            (s12, azi1, azi2): the distance in meters and the azimuths of the geodesic at
            both points, in [0, 360)
        """
        solution, _, _ = solve_inverse(self, lat1, lon1, lat2, lon2)
        return solution.distance, solution.azi1, solution.azi2

    def inverse_solution(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float
    ) -> GeodesicSolution:
        """As inverse(), returning the complete GeodesicSolution"""
        solution, _, _ = solve_inverse(self, lat1, lon1, lat2, lon2)
        return solution

    def line(self, lat1: float, lon1: float, azi1: float) -> GeodesicLine:
        """
        Creates a GeodesicLine from a start point and azimuth, for evaluating many
        positions along the same geodesic.
        """
        return GeodesicLine(self, lat1, lon1, azi1)

    def inverse_line(self, lat1: float, lon1: float, lat2: float, lon2: float) -> GeodesicLine:
        """
        Creates a GeodesicLine along the shortest geodesic between two points. The line's
        distance is the distance between them, which enables GeodesicLine.interpolate().
        """
        solution, salp1, calp1 = solve_inverse(self, lat1, lon1, lat2, lon2)
        return GeodesicLine(
            self, solution.lat1, lon1, solution.azi1,
            salp1=salp1, calp1=calp1, distance=solution.distance
        )

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def destination(self, point: Point, azimuth: float, distance: float) -> Point:
        """
        Finds the point reached from a starting point, travelling a given distance along
        the geodesic with the given initial azimuth.

        Args:
            point:
                The starting Point

            azimuth:
                The initial azimuth, in degrees clockwise from north

            distance:
                The distance to travel, in meters

        Returns:
            Point
        """
        lat2, lon2, _ = self.direct(point.latitude, point.longitude, azimuth, distance)
        return Point(lat2, lon2)

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def measure(self, point1: Point, point2: Point) -> float:
        """
        The geodesic distance between two points, in meters.

        Args:
            point1:
                The first Point

            point2:
                The second Point

        Returns:
            float
        """
        s12, _, _ = self.inverse(
            point1.latitude, point1.longitude, point2.latitude, point2.longitude
        )
        return s12


WGS84 = Ellipsoid(WGS84_F, WGS84_A)
