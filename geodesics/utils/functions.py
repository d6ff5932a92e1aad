"""Module for angle arithmetic shared by the geodesic solvers"""

__all__ = [
    'ang_diff', 'ang_normalize', 'ang_round', 'atan2d', 'invert_azimuth',
    'lat_fix', 'norm', 'normalize_azimuth', 'normalize_longitude', 'round_half_up', 'sincosd',
    'sq', 'two_sum'
]

import math
from typing import Tuple


def sq(x: float) -> float:
    """Square a number"""
    return x * x


def norm(x: float, y: float) -> Tuple[float, float]:
    """
    Scales the vector (x, y) to unit length.

    A zero vector has no direction and yields (nan, nan).
    """
    r = math.hypot(x, y)
    if r == 0:
        return math.nan, math.nan

    return x / r, y / r


def two_sum(u: float, v: float) -> Tuple[float, float]:
    """
    Error-free addition of two floats.

    Args:
        u: (float)
            The first summand

        v: (float)
            The second summand

    Returns:
        (s, t) such that s = round(u + v) and s + t = u + v exactly
    """
    s = u + v
    up = s - v
    vpp = s - up
    up -= u
    vpp -= v
    t = s if s == 0 else 0.0 - (up + vpp)
    return s, t


def _remainder(x: float, y: float) -> float:
    """IEEE remainder, returning nan (instead of raising) for non-finite x"""
    return math.remainder(x, y) if math.isfinite(x) else math.nan


def ang_normalize(x: float) -> float:
    """Reduces an angle in degrees to the range (-180, 180]"""
    y = _remainder(x, 360)
    return 180.0 if y == -180 else y


def normalize_longitude(x: float) -> float:
    """Reduces a longitude in degrees to the range [-180, 180)"""
    y = ang_normalize(x)
    return -180.0 if y == 180 else y


def normalize_azimuth(x: float) -> float:
    """Reduces an azimuth in degrees to the range [0, 360)"""
    if not math.isfinite(x):
        return math.nan

    y = x % 360
    # Tiny negative angles round up to exactly 360
    return 0.0 if y >= 360 else y


def invert_azimuth(azimuth: float) -> float:
    """
    Returns the reverse bearing of an azimuth, i.e. the azimuth pointing back along the
    same line.

    Args:
        azimuth: (float)
            An azimuth, in degrees clockwise from north

    Returns:
        (float) the inverted azimuth, in the range [0, 360)
    """
    return normalize_azimuth(azimuth + 180)


def lat_fix(x: float) -> float:
    """Replaces latitudes outside [-90, 90] with nan"""
    return math.nan if abs(x) > 90 else x


def ang_diff(x: float, y: float) -> Tuple[float, float]:
    """
    Computes y - x for two angles in degrees, reduced to [-180, 180], along with the
    rounding error of that difference.

    Args:
        x: (float)
            The first angle, in degrees

        y: (float)
            The second angle, in degrees

    Returns:
        (d, t) where d is the reduced difference and t the error term
    """
    d, t = two_sum(_remainder(-x, 360), _remainder(y, 360))
    d, t = two_sum(_remainder(d, 360), t)
    if d == 0 or abs(d) == 180:
        d = math.copysign(d, y - x if t == 0 else -t)

    return d, t


def ang_round(x: float) -> float:
    """
    Rounds tiny angles so that sums with 90 or 180 are exact.

    Values smaller in magnitude than 1/16 are rounded to a multiple of 2^-57; zero
    keeps its sign.
    """
    z = 1 / 16.0
    y = abs(x)
    w = z - y
    y = z - w if w > 0 else y
    return math.copysign(y, x)


def sincosd(x: float) -> Tuple[float, float]:
    """
    Sine and cosine of an angle in degrees, with exact results at multiples of 90.

    Args:
        x: (float)
            The angle, in degrees

    Returns:
        (sin(x), cos(x))
    """
    r = math.fmod(x, 360) if math.isfinite(x) else math.nan
    q = 0 if math.isnan(r) else int(round(r / 90))
    r -= 90 * q
    r = math.radians(r)
    s, c = math.sin(r), math.cos(r)
    q = q % 4
    if q == 1:
        s, c = c, -s
    elif q == 2:
        s, c = -s, -c
    elif q == 3:
        s, c = -c, s

    c = c + 0.0  # -0 to 0
    if s == 0:
        s = math.copysign(s, x)

    return s, c


def atan2d(y: float, x: float) -> float:
    """
    The angle in degrees of the vector (x, y), in [-180, 180], reducing the arguments to
    the first octant before calling atan2 so that exact multiples of 45 come out exact.
    """
    if abs(y) > abs(x):
        q = 2
        x, y = y, x
    else:
        q = 0

    if x < 0:
        q += 1
        x = -x

    ang = math.degrees(math.atan2(y, x))
    if q == 1:
        ang = math.copysign(180, y) - ang
    elif q == 2:
        ang = 90 - ang
    elif q == 3:
        ang = -90 + ang

    return ang


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The number of decimal places to keep
    """
    return round(value + 10 ** -(precision + 12), precision)
