"""Result records shared by the geodesic solvers"""

__all__ = ['GeodesicSolution', 'Position']

from typing import NamedTuple, Tuple


# (latitude, longitude, azimuth), all in degrees
Position = Tuple[float, float, float]


class GeodesicSolution(NamedTuple):
    """
    A complete solution of the direct or inverse problem between two points.

    Field layout follows the columns of the GeodTest verification data, extended with
    both geodesic scales.

    Attributes:
        lat1, lon1, azi1:
            The first point and the azimuth of the geodesic there (degrees)

        lat2, lon2, azi2:
            The second point and the azimuth of the geodesic there (degrees)

        distance:
            The length of the geodesic (meters)

        arc:
            The arc length on the auxiliary sphere (degrees)

        reduced_length:
            The reduced length m12 (meters)

        scale12, scale21:
            The geodesic scales M12 and M21 (dimensionless)

        area:
            The area between the geodesic, the equator and the meridians through both
            points (square meters)
    """
    lat1: float
    lon1: float
    azi1: float
    lat2: float
    lon2: float
    azi2: float
    distance: float
    arc: float
    reduced_length: float
    scale12: float
    scale21: float
    area: float
