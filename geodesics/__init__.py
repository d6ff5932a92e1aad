from geodesics._version import __version__  # noqa: F401
from geodesics.utils.logging import LOGGER
from geodesics.utils.functions import invert_azimuth
from geodesics._types import GeodesicSolution
from geodesics.coordinates import Point
from geodesics.line import GeodesicLine
from geodesics.ellipsoid import WGS84, Ellipsoid, EllipsoidConfigError

__all__ = [
    'Ellipsoid',
    'EllipsoidConfigError',
    'GeodesicLine',
    'GeodesicSolution',
    'Point',
    'WGS84',
    'invert_azimuth',
    'LOGGER',
]
