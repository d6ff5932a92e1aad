"""
Representation of a specific point on earth
"""

__all__ = ['Point']

from typing import Tuple, Union

from geodesics.utils.functions import normalize_longitude, round_half_up
from geodesics.utils.logging import warn_once
from geodesics.utils.mixins import ImmutableMixin


class Point(ImmutableMixin):
    """
    Representation of a point on the globe (i.e., a lat/lon pair).

    The longitude is kept as given; points compare equal if their latitudes and
    normalized longitudes match. Latitudes outside [-90, 90] are accepted, but the
    geodesic solvers return nan for them.
    """

    def __init__(self, latitude: Union[float, int, str], longitude: Union[float, int, str]):
        lat, lon = float(latitude), float(longitude)
        if abs(lat) > 90:
            warn_once(
                'Latitudes outside [-90, 90] are not valid; geodesic results will be nan.'
            )

        self.latitude = lat
        self.longitude = lon
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False

        return (
            self.latitude == other.latitude and
            normalize_longitude(self.longitude) == normalize_longitude(other.longitude)
        )

    def __hash__(self):
        return hash((self.latitude, normalize_longitude(self.longitude)))

    def __repr__(self):
        return f'<Point({self.latitude}, {self.longitude})>'

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a Point from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            Point
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return Point(convert(lat), convert(lon))

    def normalized(self) -> 'Point':
        """Returns an equal Point with its longitude reduced to [-180, 180)"""
        return Point(self.latitude, normalize_longitude(self.longitude))

    def antipode(self) -> 'Point':
        """The point diametrically opposite this one"""
        return Point(-self.latitude, normalize_longitude(self.longitude + 180))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Converts the point to (latitude, longitude) tuples of degrees, minutes, seconds,
        hemisphere

        Returns:
            converted value as ((degrees, minutes, seconds, hemisphere), ...)
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        lon = normalize_longitude(self.longitude)
        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(lon), 'E' if lon >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude)

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple[float, float]
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude
