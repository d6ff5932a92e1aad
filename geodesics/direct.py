"""
The direct geodesic problem: given a start point, an azimuth and a distance (or an arc
length on the auxiliary sphere), find the end point and the azimuth there.

The work is split in two so that GeodesicLine can reuse it: line_coefficients() does
everything that depends only on the start point and azimuth, and evaluate() does the
rest for one distance.
"""

from __future__ import annotations

__all__ = [
    'LineCoefficients', 'evaluate', 'line_coefficients', 'solve_direct', 'solve_position'
]

import math
from typing import NamedTuple, Optional, Tuple, TYPE_CHECKING

from geodesics import series
from geodesics._const import TINY
from geodesics._types import GeodesicSolution
from geodesics.utils.functions import (
    ang_normalize, ang_round, atan2d, lat_fix, norm, normalize_azimuth,
    normalize_longitude, sincosd, sq
)

if TYPE_CHECKING:  # pragma: no cover
    from geodesics.ellipsoid import Ellipsoid


class LineCoefficients(NamedTuple):
    """
    Everything about a geodesic that does not depend on the distance along it.

    Angles prefixed with s/c are sines/cosines: alp is the azimuth, alp0 the azimuth at
    the node (equator crossing), sig1 the arc length from the node to the start point
    and omg1 the corresponding longitude on the auxiliary sphere. The B terms are the
    series evaluated at the start point.
    """
    lat1: float
    azi1: float
    salp1: float
    calp1: float
    dn1: float
    salp0: float
    calp0: float
    ssig1: float
    csig1: float
    somg1: float
    comg1: float
    k2: float
    a1m1: float
    c1: Tuple[float, ...]
    c1p: Tuple[float, ...]
    b11: float
    stau1: float
    ctau1: float
    a2m1: float
    c2: Tuple[float, ...]
    b21: float
    a3c: float
    c3: Tuple[float, ...]
    b31: float
    a4: float
    c4: Tuple[float, ...]
    b41: float


def line_coefficients(
    ellipsoid: Ellipsoid,
    lat1: float,
    azi1: float,
    salp1: Optional[float] = None,
    calp1: Optional[float] = None,
) -> LineCoefficients:
    """
    Reduces a start point and azimuth to the auxiliary sphere and evaluates the series
    coefficients of the geodesic through them.

    Args:
        ellipsoid:
            The ellipsoid on which the geodesic lies

        lat1:
            The latitude of the start point, in degrees

        azi1:
            The azimuth at the start point, in degrees

        salp1, calp1:
            (Optional) sine and cosine of azi1, when they are known more accurately than
            azi1 itself (e.g. from an inverse solution)

    Returns:
        LineCoefficients
    """
    lat1 = lat_fix(lat1)
    if salp1 is None or calp1 is None:
        salp1, calp1 = sincosd(ang_round(azi1))
        azi1 = ang_normalize(azi1)

    sbet1, cbet1 = series.reduced_latitude(ang_round(lat1), ellipsoid.f1)
    dn1 = math.sqrt(1 + ellipsoid.ep2 * sq(sbet1))

    # Azimuth of the geodesic where it crosses the equator
    salp0 = salp1 * cbet1
    calp0 = math.hypot(calp1, salp1 * sbet1)

    # sig1 is measured from the northward equator crossing; a geodesic starting at the
    # equator heading due east (sbet1 = calp1 = 0) starts at sig1 = 0
    ssig1 = sbet1
    somg1 = salp0 * sbet1
    csig1 = comg1 = cbet1 * calp1 if sbet1 != 0 or calp1 != 0 else 1.0
    ssig1, csig1 = norm(ssig1, csig1)

    k2 = sq(calp0) * ellipsoid.ep2
    eps = series.expansion_parameter(k2)

    a1m1 = series.a1m1(eps)
    c1 = series.c1(eps)
    b11 = series.sin_cos_series(True, ssig1, csig1, c1)
    s, c = math.sin(b11), math.cos(b11)

    a2m1 = series.a2m1(eps)
    c2 = series.c2(eps)

    c3 = series.c3(ellipsoid.c3x, eps)
    c4 = series.c4(ellipsoid.c4x, eps)

    return LineCoefficients(
        lat1=lat1,
        azi1=azi1,
        salp1=salp1,
        calp1=calp1,
        dn1=dn1,
        salp0=salp0,
        calp0=calp0,
        ssig1=ssig1,
        csig1=csig1,
        somg1=somg1,
        comg1=comg1,
        k2=k2,
        a1m1=a1m1,
        c1=tuple(c1),
        c1p=tuple(series.c1p(eps)),
        b11=b11,
        stau1=ssig1 * c + csig1 * s,  # tau1 = sig1 + B11
        ctau1=csig1 * c - ssig1 * s,
        a2m1=a2m1,
        c2=tuple(c2),
        b21=series.sin_cos_series(True, ssig1, csig1, c2),
        a3c=-ellipsoid.f * salp0 * series.a3(ellipsoid.a3x, eps),
        c3=tuple(c3),
        b31=series.sin_cos_series(True, ssig1, csig1, c3),
        a4=sq(ellipsoid.a) * calp0 * salp0 * ellipsoid.e2,
        c4=tuple(c4),
        b41=series.sin_cos_series(False, ssig1, csig1, c4),
    )


def evaluate(
    ellipsoid: Ellipsoid,
    coeffs: LineCoefficients,
    lon1: float,
    s12_a12: float,
    arcmode: bool = False,
    unroll: bool = False,
) -> GeodesicSolution:
    """
    Evaluates a geodesic at a given distance (or arc length) from its start point.

    Args:
        ellipsoid:
            The ellipsoid on which the geodesic lies

        coeffs:
            The coefficients of the geodesic, from line_coefficients()

        lon1:
            The longitude of the start point, in degrees

        s12_a12:
            The distance from the start point in meters, or the arc length in degrees if
            arcmode is set. May be negative.

        arcmode: (bool)
            (Default False) Whether s12_a12 is an arc length

        unroll: (bool)
            (Default False) If True, the end longitude is continuous (lon1 plus the
            longitude traversed); otherwise it is reduced to [-180, 180)

    Returns:
        GeodesicSolution
    """
    b = ellipsoid.b
    b12 = 0.0
    if arcmode:
        sig12 = math.radians(s12_a12)
        ssig12, csig12 = sincosd(s12_a12)
    else:
        # Revert the distance series to get sig12 from tau12
        tau12 = s12_a12 / (b * (1 + coeffs.a1m1))
        tau12 = tau12 if math.isfinite(tau12) else math.nan
        s, c = math.sin(tau12), math.cos(tau12)
        b12 = -series.sin_cos_series(
            True,
            coeffs.stau1 * c + coeffs.ctau1 * s,
            coeffs.ctau1 * c - coeffs.stau1 * s,
            coeffs.c1p
        )
        sig12 = tau12 - (b12 - coeffs.b11)
        ssig12, csig12 = math.sin(sig12), math.cos(sig12)
        if abs(ellipsoid.f) > 0.01:
            # The reverted series is not accurate enough for large flattening; polish
            # sig12 with one Newton step on s12(sig12)
            ssig2 = coeffs.ssig1 * csig12 + coeffs.csig1 * ssig12
            csig2 = coeffs.csig1 * csig12 - coeffs.ssig1 * ssig12
            b12 = series.sin_cos_series(True, ssig2, csig2, coeffs.c1)
            serr = (1 + coeffs.a1m1) * (sig12 + (b12 - coeffs.b11)) - s12_a12 / b
            sig12 = sig12 - serr / math.sqrt(1 + coeffs.k2 * sq(ssig2))
            ssig12, csig12 = math.sin(sig12), math.cos(sig12)

    # sig2 = sig1 + sig12
    ssig2 = coeffs.ssig1 * csig12 + coeffs.csig1 * ssig12
    csig2 = coeffs.csig1 * csig12 - coeffs.ssig1 * ssig12
    dn2 = math.sqrt(1 + coeffs.k2 * sq(ssig2))
    if arcmode or abs(ellipsoid.f) > 0.01:
        b12 = series.sin_cos_series(True, ssig2, csig2, coeffs.c1)
    ab1 = (1 + coeffs.a1m1) * (b12 - coeffs.b11)

    sbet2 = coeffs.calp0 * ssig2
    cbet2 = math.hypot(coeffs.salp0, coeffs.calp0 * csig2)
    if cbet2 == 0:
        # The line ends exactly at a pole
        cbet2 = csig2 = TINY

    # tan(alp0) = cos(sig2) * tan(alp2)
    salp2 = coeffs.salp0
    calp2 = coeffs.calp0 * csig2

    s12 = b * ((1 + coeffs.a1m1) * sig12 + ab1) if arcmode else s12_a12

    somg2 = coeffs.salp0 * ssig2
    comg2 = csig2
    if unroll:
        e = math.copysign(1, coeffs.salp0)
        omg12 = e * (
            sig12
            - (math.atan2(ssig2, csig2) - math.atan2(coeffs.ssig1, coeffs.csig1))
            + (math.atan2(e * somg2, comg2) - math.atan2(e * coeffs.somg1, coeffs.comg1))
        )
    else:
        omg12 = math.atan2(
            somg2 * coeffs.comg1 - comg2 * coeffs.somg1,
            comg2 * coeffs.comg1 + somg2 * coeffs.somg1
        )

    lam12 = omg12 + coeffs.a3c * (
        sig12 + (series.sin_cos_series(True, ssig2, csig2, coeffs.c3) - coeffs.b31)
    )
    lon12 = math.degrees(lam12)
    if unroll:
        lon2 = lon1 + lon12
    else:
        lon1 = normalize_longitude(lon1)
        lon2 = normalize_longitude(ang_normalize(lon1) + ang_normalize(lon12))

    lat2 = series.geographic_latitude(sbet2, cbet2, ellipsoid.f1)
    azi2 = atan2d(salp2, calp2)

    b22 = series.sin_cos_series(True, ssig2, csig2, coeffs.c2)
    ab2 = (1 + coeffs.a2m1) * (b22 - coeffs.b21)
    j12 = (coeffs.a1m1 - coeffs.a2m1) * sig12 + (ab1 - ab2)
    m12 = b * (
        (dn2 * (coeffs.csig1 * ssig2) - coeffs.dn1 * (coeffs.ssig1 * csig2))
        - coeffs.csig1 * csig2 * j12
    )
    t = coeffs.k2 * (ssig2 - coeffs.ssig1) * (ssig2 + coeffs.ssig1) / (coeffs.dn1 + dn2)
    scale12 = csig12 + (t * ssig2 - csig2 * j12) * coeffs.ssig1 / coeffs.dn1
    scale21 = csig12 - (t * coeffs.ssig1 - coeffs.csig1 * j12) * ssig2 / dn2

    b42 = series.sin_cos_series(False, ssig2, csig2, coeffs.c4)
    if coeffs.calp0 == 0 or coeffs.salp0 == 0:
        # alp12 = alp2 - alp1, used in atan2 so no need to normalize
        salp12 = salp2 * coeffs.calp1 - calp2 * coeffs.salp1
        calp12 = calp2 * coeffs.calp1 + salp2 * coeffs.salp1
    else:
        # Avoids the cancellation in alp2 - alp1 for short lines
        salp12 = coeffs.calp0 * coeffs.salp0 * (
            coeffs.csig1 * (1 - csig12) + ssig12 * coeffs.ssig1 if csig12 <= 0
            else ssig12 * (coeffs.csig1 * ssig12 / (1 + csig12) + coeffs.ssig1)
        )
        calp12 = sq(coeffs.salp0) + sq(coeffs.calp0) * coeffs.csig1 * csig2
    area = ellipsoid.c2 * math.atan2(salp12, calp12) + coeffs.a4 * (b42 - coeffs.b41)

    return GeodesicSolution(
        lat1=coeffs.lat1,
        lon1=lon1,
        azi1=normalize_azimuth(coeffs.azi1),
        lat2=lat2,
        lon2=lon2,
        azi2=normalize_azimuth(azi2),
        distance=s12,
        arc=s12_a12 if arcmode else math.degrees(sig12),
        reduced_length=m12,
        scale12=scale12,
        scale21=scale21,
        area=area,
    )


def solve_position(
    ellipsoid: Ellipsoid,
    coeffs: LineCoefficients,
    lon1: float,
    s12_a12: float,
    arcmode: bool = False,
    unroll: bool = False,
) -> GeodesicSolution:
    """
    Evaluates a geodesic at a given distance, returning the start point itself
    (unchanged, with the start azimuth and zero arc, reduced length and area) when the
    distance is zero.

    See evaluate() for arguments.
    """
    solution = evaluate(ellipsoid, coeffs, lon1, s12_a12, arcmode, unroll)
    if s12_a12 == 0:
        return solution._replace(
            lat2=solution.lat1,
            lon2=solution.lon1,
            azi2=solution.azi1,
            arc=0.0,
            reduced_length=0.0,
            scale12=1.0,
            scale21=1.0,
            area=0.0,
        )

    return solution


def solve_direct(
    ellipsoid: Ellipsoid,
    lat1: float,
    lon1: float,
    azi1: float,
    s12_a12: float,
    arcmode: bool = False,
    unroll: bool = False,
) -> GeodesicSolution:
    """
    Solves the direct geodesic problem.

    Args:
        ellipsoid:
            The ellipsoid on which to solve

        lat1, lon1:
            The start point, in degrees

        azi1:
            The azimuth at the start point, in degrees clockwise from north

        s12_a12:
            The distance to travel in meters (or arc length in degrees, if arcmode)

        arcmode: (bool)
            (Default False) Whether s12_a12 is an arc length

        unroll: (bool)
            (Default False) Whether to return a continuous (unreduced) end longitude

    Returns:
        GeodesicSolution
    """
    coeffs = line_coefficients(ellipsoid, lat1, azi1)
    return solve_position(ellipsoid, coeffs, lon1, s12_a12, arcmode, unroll)
