"""
The inverse geodesic problem: given two points, find the shortest geodesic between them.

Both points are mapped onto the auxiliary sphere. Meridional and equatorial geodesics
are solved directly; for everything else the departure azimuth alp1 is found as the root
of lambda12(alp1) - lon12, the difference between the longitude reached by the geodesic
and the longitude of the second point. The root finder is a small state machine:

    NEWTON     take a Newton step using d(lambda12)/d(alp1) (the reduced length)
    BISECT     halve the bracket [alp1a, alp1b] known to contain the root
    CONVERGED  the residual, or the bracket, is below tolerance
    EXHAUSTED  the hard iteration cap was reached; the bracketed estimate is used

Every residual evaluation narrows the bracket, so bisection always has a valid interval
to fall back on when the Newton step is unusable; this happens mostly for nearly
antipodal points, where d(lambda12)/d(alp1) vanishes.
"""

from __future__ import annotations

__all__ = ['solve_inverse']

from enum import Enum
import math
from typing import NamedTuple, Tuple, TYPE_CHECKING

from geodesics import series
from geodesics._const import (
    MAX_ITERATIONS, NEWTON_ITERATIONS, TINY, TOL0, TOL1, TOLB, XTHRESH
)
from geodesics._types import GeodesicSolution
from geodesics.utils.functions import (
    ang_diff, ang_round, atan2d, lat_fix, norm, normalize_azimuth,
    normalize_longitude, sincosd, sq
)
from geodesics.utils.logging import LOGGER

if TYPE_CHECKING:  # pragma: no cover
    from geodesics.ellipsoid import Ellipsoid


class _Phase(Enum):
    NEWTON = 'newton'
    BISECT = 'bisect'
    CONVERGED = 'converged'
    EXHAUSTED = 'exhausted'


class _Lengths(NamedTuple):
    """Distance, reduced length and geodesic scales, in units of b"""
    s12b: float
    m12b: float
    m0: float
    scale12: float
    scale21: float


class _Lambda(NamedTuple):
    """The state of the geodesic leaving the first point at a trial azimuth"""
    residual: float
    salp2: float
    calp2: float
    sig12: float
    ssig1: float
    csig1: float
    ssig2: float
    csig2: float
    eps: float
    domg12: float
    dlam12: float


class _Bracket:
    """
    An interval [alp1a, alp1b] of departure azimuths containing the solution, stored as
    sines and cosines. Initially [0, 180].
    """

    def __init__(self):
        self.salp1a, self.calp1a = TINY, 1.0
        self.salp1b, self.calp1b = TINY, -1.0

    def tighten(self, residual: float, salp1: float, calp1: float, force: bool) -> None:
        """Moves one end of the bracket to alp1, according to the sign of the residual"""
        if residual > 0 and (force or calp1 / salp1 > self.calp1b / self.salp1b):
            self.salp1b, self.calp1b = salp1, calp1
        elif residual < 0 and (force or calp1 / salp1 < self.calp1a / self.salp1a):
            self.salp1a, self.calp1a = salp1, calp1

    def midpoint(self) -> Tuple[float, float]:
        return norm((self.salp1a + self.salp1b) / 2, (self.calp1a + self.calp1b) / 2)

    def collapsed(self, salp1: float, calp1: float) -> bool:
        """Whether alp1 is indistinguishable from either end of the bracket"""
        return (
            abs(self.salp1a - salp1) + (self.calp1a - calp1) < TOLB or
            abs(salp1 - self.salp1b) + (calp1 - self.calp1b) < TOLB
        )


def _lengths(
    ellipsoid: Ellipsoid,
    eps: float,
    sig12: float,
    ssig1: float,
    csig1: float,
    dn1: float,
    ssig2: float,
    csig2: float,
    dn2: float,
    cbet1: float,
    cbet2: float,
) -> _Lengths:
    """Integrates the distance and reduced length series between sig1 and sig2"""
    a1 = series.a1m1(eps)
    c1a = series.c1(eps)
    a2 = series.a2m1(eps)
    c2a = series.c2(eps)
    m0x = a1 - a2
    a1 += 1
    a2 += 1

    b1 = (
        series.sin_cos_series(True, ssig2, csig2, c1a) -
        series.sin_cos_series(True, ssig1, csig1, c1a)
    )
    b2 = (
        series.sin_cos_series(True, ssig2, csig2, c2a) -
        series.sin_cos_series(True, ssig1, csig1, c2a)
    )
    s12b = a1 * (sig12 + b1)
    j12 = m0x * sig12 + (a1 * b1 - a2 * b2)

    # Missing a factor of b
    m12b = dn2 * (csig1 * ssig2) - dn1 * (ssig1 * csig2) - csig1 * csig2 * j12

    csig12 = csig1 * csig2 + ssig1 * ssig2
    t = ellipsoid.ep2 * (cbet1 - cbet2) * (cbet1 + cbet2) / (dn1 + dn2)
    scale12 = csig12 + (t * ssig2 - csig2 * j12) * ssig1 / dn1
    scale21 = csig12 - (t * ssig1 - csig1 * j12) * ssig2 / dn2
    return _Lengths(s12b, m12b, m0x, scale12, scale21)


def _astroid(x: float, y: float) -> float:
    """
    Solves the astroid equation k^4 + 2 k^3 - (x^2 + y^2 - 1) k^2 - 2 y^2 k - y^2 = 0
    for its positive root, which fixes the starting azimuth for nearly antipodal points.
    """
    p = sq(x)
    q = sq(y)
    r = (p + q - 1) / 6
    if q == 0 and r <= 0:
        # y = 0 with |x| <= 1; the solution is on the line joining the cusps
        return 0.0

    s = p * q / 4
    r2 = sq(r)
    r3 = r * r2
    # The discriminant of the quadratic for T^3 (T is the cube root)
    disc = s * (s + 2 * r3)
    u = r
    if disc >= 0:
        t3 = s + r3
        # Choose the sign of the root to avoid cancellation
        t3 += -math.sqrt(disc) if t3 < 0 else math.sqrt(disc)
        t = math.copysign(abs(t3) ** (1 / 3), t3)
        u += t + (r2 / t if t != 0 else 0)
    else:
        ang = math.atan2(math.sqrt(-disc), -(s + r3))
        u += 2 * r * math.cos(ang / 3)

    v = math.sqrt(sq(u) + q)
    uv = q / (v - u) if u < 0 else u + v
    w = (uv - q) / (2 * v)
    return uv / (math.sqrt(uv + sq(w)) + w)


def _inverse_start(
    ellipsoid: Ellipsoid,
    sbet1: float,
    cbet1: float,
    dn1: float,
    sbet2: float,
    cbet2: float,
    dn2: float,
    lam12: float,
    slam12: float,
    clam12: float,
) -> Tuple[float, float, float, float, float, float]:
    """
    Estimates the departure azimuth.

    For short lines the spherical solution (with an averaged radius) is accurate enough
    to be the answer; in that case sig12 >= 0 and salp2, calp2, dnm are set. Otherwise
    sig12 is -1 and only the starting azimuth (salp1, calp1) is meaningful.

    Returns:
        (sig12, salp1, calp1, salp2, calp2, dnm)
    """
    f, n = ellipsoid.f, ellipsoid.n
    sig12 = -1.0
    salp2 = calp2 = dnm = math.nan

    # bet12 = bet2 - bet1 in [0, pi); bet12a = bet2 + bet1 in (-pi, 0]
    sbet12 = sbet2 * cbet1 - cbet2 * sbet1
    cbet12 = cbet2 * cbet1 + sbet2 * sbet1
    sbet12a = sbet2 * cbet1 + cbet2 * sbet1

    shortline = cbet12 >= 0 and sbet12 < 0.5 and cbet2 * lam12 < 0.5
    if shortline:
        sbetm2 = sq(sbet1 + sbet2)
        # sin((bet1 + bet2) / 2)^2
        sbetm2 /= sbetm2 + sq(cbet1 + cbet2)
        dnm = math.sqrt(1 + ellipsoid.ep2 * sbetm2)
        omg12 = lam12 / (ellipsoid.f1 * dnm)
        somg12, comg12 = math.sin(omg12), math.cos(omg12)
    else:
        somg12, comg12 = slam12, clam12

    salp1 = cbet2 * somg12
    calp1 = (
        sbet12 + cbet2 * sbet1 * sq(somg12) / (1 + comg12) if comg12 >= 0
        else sbet12a - cbet2 * sbet1 * sq(somg12) / (1 - comg12)
    )

    ssig12 = math.hypot(salp1, calp1)
    csig12 = sbet1 * sbet2 + cbet1 * cbet2 * comg12

    if shortline and ssig12 < ellipsoid.etol2:
        # Really short lines
        salp2 = cbet1 * somg12
        calp2 = sbet12 - cbet1 * sbet2 * (
            sq(somg12) / (1 + comg12) if comg12 >= 0 else 1 - comg12
        )
        salp2, calp2 = norm(salp2, calp2)
        sig12 = math.atan2(ssig12, csig12)
    elif abs(n) >= 0.1 or csig12 >= 0 or ssig12 >= 6 * abs(n) * math.pi * sq(cbet1):
        # Not nearly antipodal; the spherical azimuth is a good enough start
        pass
    else:
        # Scale lam12 and bet2 to x, y coordinates where the antipodal point is at the
        # origin and the singular point is at y = 0, x = -1
        lam12x = math.atan2(-slam12, -clam12)  # lam12 - pi
        if f >= 0:
            # x = dlong, y = dlat
            k2 = sq(sbet1) * ellipsoid.ep2
            eps = series.expansion_parameter(k2)
            lamscale = f * cbet1 * series.a3(ellipsoid.a3x, eps) * math.pi
            betscale = lamscale * cbet1
            x = lam12x / lamscale
            y = sbet12a / betscale
        else:
            # x = dlat, y = dlong
            cbet12a = cbet2 * cbet1 - sbet2 * sbet1
            bet12a = math.atan2(sbet12a, cbet12a)
            lengths = _lengths(
                ellipsoid, n, math.pi + bet12a, sbet1, -cbet1, dn1,
                sbet2, cbet2, dn2, cbet1, cbet2
            )
            x = -1 + lengths.m12b / (cbet1 * cbet2 * lengths.m0 * math.pi)
            betscale = sbet12a / x if x < -0.01 else -f * sq(cbet1) * math.pi
            lamscale = betscale / cbet1
            y = lam12x / lamscale

        if y > -TOL1 and x > -1 - XTHRESH:
            if f >= 0:
                salp1 = min(1.0, -x)
                calp1 = -math.sqrt(1 - sq(salp1))
            else:
                calp1 = max(0.0 if x > -TOL1 else -1.0, x)
                salp1 = math.sqrt(1 - sq(calp1))
        else:
            k = _astroid(x, y)
            omg12a = lamscale * (-x * k / (1 + k) if f >= 0 else -y * (1 + k) / k)
            somg12, comg12 = math.sin(omg12a), -math.cos(omg12a)
            # Update spherical estimate of alp1 using omg12 instead of lam12
            salp1 = cbet2 * somg12
            calp1 = sbet12a - cbet2 * sbet1 * sq(somg12) / (1 - comg12)

    if not salp1 <= 0:
        salp1, calp1 = norm(salp1, calp1)
    else:
        salp1, calp1 = 1.0, 0.0

    return sig12, salp1, calp1, salp2, calp2, dnm


def _lambda12(
    ellipsoid: Ellipsoid,
    sbet1: float,
    cbet1: float,
    dn1: float,
    sbet2: float,
    cbet2: float,
    dn2: float,
    salp1: float,
    calp1: float,
    slam120: float,
    clam120: float,
    diffp: bool,
) -> _Lambda:
    """
    Follows the geodesic leaving the first point at azimuth alp1 to the latitude of the
    second point, returning the longitude residual lam12 - lam120 (and its derivative
    with respect to alp1, if diffp).
    """
    if sbet1 == 0 and calp1 == 0:
        # Break degeneracy of equatorial line
        calp1 = -TINY

    salp0 = salp1 * cbet1
    calp0 = math.hypot(calp1, salp1 * sbet1)

    ssig1 = sbet1
    somg1 = salp0 * sbet1
    csig1 = comg1 = calp1 * cbet1
    ssig1, csig1 = norm(ssig1, csig1)

    # Enforce symmetries in the case abs(bet2) = -bet1
    salp2 = salp0 / cbet2 if cbet2 != cbet1 else salp1
    if cbet2 != cbet1 or abs(sbet2) != -sbet1:
        calp2 = math.sqrt(
            sq(calp1 * cbet1) + (
                (cbet2 - cbet1) * (cbet1 + cbet2) if cbet1 < -sbet1
                else (sbet1 - sbet2) * (sbet1 + sbet2)
            )
        ) / cbet2
    else:
        calp2 = abs(calp1)

    ssig2 = sbet2
    somg2 = salp0 * sbet2
    csig2 = comg2 = calp2 * cbet2
    ssig2, csig2 = norm(ssig2, csig2)

    # sig12 = sig2 - sig1, limit to [0, pi]
    sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2), csig1 * csig2 + ssig1 * ssig2)
    # omg12 = omg2 - omg1, limit to [0, pi]
    somg12 = max(0.0, comg1 * somg2 - somg1 * comg2)
    comg12 = comg1 * comg2 + somg1 * somg2
    # eta = omg12 - lam120
    eta = math.atan2(somg12 * clam120 - comg12 * slam120, comg12 * clam120 + somg12 * slam120)

    k2 = sq(calp0) * ellipsoid.ep2
    eps = series.expansion_parameter(k2)
    c3a = series.c3(ellipsoid.c3x, eps)
    b312 = (
        series.sin_cos_series(True, ssig2, csig2, c3a) -
        series.sin_cos_series(True, ssig1, csig1, c3a)
    )
    domg12 = -ellipsoid.f * series.a3(ellipsoid.a3x, eps) * salp0 * (sig12 + b312)
    residual = eta + domg12

    if not diffp:
        dlam12 = math.nan
    elif calp2 == 0:
        dlam12 = -2 * ellipsoid.f1 * dn1 / sbet1
    else:
        lengths = _lengths(
            ellipsoid, eps, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2, cbet1, cbet2
        )
        dlam12 = lengths.m12b * ellipsoid.f1 / (calp2 * cbet2)

    return _Lambda(
        residual, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2, eps, domg12, dlam12
    )


def _find_azimuth(
    ellipsoid: Ellipsoid,
    sbet1: float,
    cbet1: float,
    dn1: float,
    sbet2: float,
    cbet2: float,
    dn2: float,
    salp1: float,
    calp1: float,
    slam12: float,
    clam12: float,
) -> Tuple[_Lambda, float, float]:
    """
    Solves lambda12(alp1) = lam12 for the departure azimuth, starting from (salp1, calp1).

    Returns:
        The geodesic state at the solution, and the sine and cosine of the solution
    """
    bracket = _Bracket()
    phase = _Phase.NEWTON
    # Set once a Newton step lands close enough that the residual is trusted at a looser
    # tolerance; prevents endless polishing at the rounding limit
    newton_close = False
    collapsed = False
    state = None

    for numit in range(MAX_ITERATIONS):
        state = _lambda12(
            ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2,
            salp1, calp1, slam12, clam12, numit < NEWTON_ITERATIONS
        )
        v = state.residual
        if collapsed or not abs(v) >= (8 if newton_close else 1) * TOL0:
            phase = _Phase.CONVERGED
            break

        bracket.tighten(v, salp1, calp1, force=numit > NEWTON_ITERATIONS)

        if numit < NEWTON_ITERATIONS and state.dlam12 > 0:
            dalp1 = -v / state.dlam12
            sdalp1, cdalp1 = math.sin(dalp1), math.cos(dalp1)
            nsalp1 = salp1 * cdalp1 + calp1 * sdalp1
            if nsalp1 > 0 and abs(dalp1) < math.pi:
                calp1 = calp1 * cdalp1 - salp1 * sdalp1
                salp1, calp1 = norm(nsalp1, calp1)
                newton_close = abs(v) <= 16 * TOL0
                phase = _Phase.NEWTON
                continue

        if phase is not _Phase.BISECT:
            LOGGER.debug(
                'Newton step unusable at iteration %d (residual %.3e); bisecting',
                numit, v
            )

        phase = _Phase.BISECT
        salp1, calp1 = bracket.midpoint()
        newton_close = False
        collapsed = bracket.collapsed(salp1, calp1)

    if phase is not _Phase.CONVERGED:
        phase = _Phase.EXHAUSTED
        LOGGER.debug(
            'Inverse solution did not converge within %d iterations; '
            'using the bracketed estimate', MAX_ITERATIONS
        )
        state = _lambda12(
            ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2,
            salp1, calp1, slam12, clam12, False
        )

    return state, salp1, calp1


def _coincident(lat: float, lon: float) -> GeodesicSolution:
    lon = normalize_longitude(lon)
    return GeodesicSolution(
        lat1=lat, lon1=lon, azi1=0.0,
        lat2=lat, lon2=lon, azi2=0.0,
        distance=0.0, arc=0.0, reduced_length=0.0,
        scale12=1.0, scale21=1.0, area=0.0,
    )


def _undefined(lat1: float, lon1: float, lat2: float, lon2: float) -> GeodesicSolution:
    nan = math.nan
    return GeodesicSolution(
        lat1=lat1, lon1=normalize_longitude(lon1), azi1=nan,
        lat2=lat2, lon2=normalize_longitude(lon2), azi2=nan,
        distance=nan, arc=nan, reduced_length=nan,
        scale12=nan, scale21=nan, area=nan,
    )


def solve_inverse(
    ellipsoid: Ellipsoid,
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> Tuple[GeodesicSolution, float, float]:
    """
    Solves the inverse geodesic problem.

    Args:
        ellipsoid:
            The ellipsoid on which to solve

        lat1, lon1:
            The first point, in degrees

        lat2, lon2:
            The second point, in degrees

    Returns:
        The GeodesicSolution, along with the sine and cosine of the departure azimuth
        (more accurate than the rounded azimuth for constructing a GeodesicLine)
    """
    lat1, lat2 = lat_fix(lat1), lat_fix(lat2)

    # Longitude difference with its rounding error, so that lon12 + lon12s is exact
    lon12, lon12s = ang_diff(lon1, lon2)
    if math.isnan(lat1 + lat2 + lon12):
        # Invalid latitude, or a non-finite longitude
        return _undefined(lat1, lon1, lat2, lon2), math.nan, math.nan
    if lat1 == lat2 and lon12 == 0 and lon12s == 0:
        return _coincident(lat1, lon1), 0.0, 1.0

    # Make longitude difference positive
    lonsign = math.copysign(1, lon12)
    lon12 = lonsign * ang_round(lon12)
    lon12s = ang_round((180 - lon12) - lonsign * lon12s)
    lam12 = math.radians(lon12)
    if lon12 > 90:
        slam12, clam12 = sincosd(lon12s)
        clam12 = -clam12
    else:
        slam12, clam12 = sincosd(lon12)

    lat1o, lat2o = lat1, lat2
    lat1, lat2 = ang_round(lat1), ang_round(lat2)

    # Swap points so that the first is further from the equator
    swapp = -1 if abs(lat1) < abs(lat2) else 1
    if swapp < 0:
        lonsign *= -1
        lat2, lat1 = lat1, lat2

    # Make lat1 <= -0
    latsign = 1 if lat1 < 0 else -1
    lat1 *= latsign
    lat2 *= latsign
    # Now 0 <= lon12 <= 180, -90 <= lat1 <= -0 and lat1 <= lat2 <= -lat1

    f1 = ellipsoid.f1
    sbet1, cbet1 = series.reduced_latitude(lat1, f1)
    sbet2, cbet2 = series.reduced_latitude(lat2, f1)

    # If cbet1 < -sbet1 then cbet2 - cbet1 is a sensitive measure of |bet1| - |bet2|;
    # make sure equal latitudes stay equal after the reduction
    if cbet1 < -sbet1:
        if cbet2 == cbet1:
            sbet2 = math.copysign(sbet1, sbet2)
    elif abs(sbet2) == -sbet1:
        cbet2 = cbet1

    dn1 = math.sqrt(1 + ellipsoid.ep2 * sq(sbet1))
    dn2 = math.sqrt(1 + ellipsoid.ep2 * sq(sbet2))

    a12 = s12x = m12x = math.nan
    scale12 = scale21 = math.nan
    # Sentinel: somg12 > 1 means omg12 is known but its sine and cosine are not
    somg12, comg12, omg12 = 2.0, 0.0, 0.0
    salp2 = calp2 = math.nan

    meridian = lat1 == -90 or slam12 == 0
    if meridian:
        # Endpoint is on a single full meridian; the geodesic is along it
        calp1, salp1 = clam12, slam12  # Head to the target longitude
        calp2, salp2 = 1.0, 0.0  # At the target we're heading north

        # tan(bet) = tan(sig) * cos(alp)
        ssig1, csig1 = sbet1, calp1 * cbet1
        ssig2, csig2 = sbet2, calp2 * cbet2

        # sig12 = sig2 - sig1
        sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2), csig1 * csig2 + ssig1 * ssig2)
        lengths = _lengths(
            ellipsoid, ellipsoid.n, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2, cbet1, cbet2
        )
        s12x, m12x = lengths.s12b, lengths.m12b
        scale12, scale21 = lengths.scale12, lengths.scale21

        # A meridian is the shortest path unless it runs past a conjugate point
        # (m12 < 0 for sig12 >= 1), which can happen for prolate ellipsoids
        if sig12 < 1 or m12x >= 0:
            if sig12 < 3 * TINY or (sig12 < TOL0 and (s12x < 0 or m12x < 0)):
                sig12 = m12x = s12x = 0.0

            m12x *= ellipsoid.b
            s12x *= ellipsoid.b
            a12 = math.degrees(sig12)
        else:
            meridian = False

    if not meridian and sbet1 == 0 and (ellipsoid.f <= 0 or lon12s >= ellipsoid.f * 180):
        # Geodesic runs along the equator
        calp1 = calp2 = 0.0
        salp1 = salp2 = 1.0
        s12x = ellipsoid.a * lam12
        sig12 = omg12 = lam12 / f1
        m12x = ellipsoid.b * math.sin(sig12)
        scale12 = scale21 = math.cos(sig12)
        a12 = lon12 / f1
    elif not meridian:
        sig12, salp1, calp1, salp2, calp2, dnm = _inverse_start(
            ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2, lam12, slam12, clam12
        )
        if sig12 >= 0:
            # Short lines; the starting estimate is the solution
            s12x = sig12 * ellipsoid.b * dnm
            m12x = sq(dnm) * ellipsoid.b * math.sin(sig12 / dnm)
            scale12 = scale21 = math.cos(sig12 / dnm)
            a12 = math.degrees(sig12)
            omg12 = lam12 / (f1 * dnm)
        else:
            state, salp1, calp1 = _find_azimuth(
                ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2,
                salp1, calp1, slam12, clam12
            )
            salp2, calp2, sig12 = state.salp2, state.calp2, state.sig12
            lengths = _lengths(
                ellipsoid, state.eps, sig12, state.ssig1, state.csig1, dn1,
                state.ssig2, state.csig2, dn2, cbet1, cbet2
            )
            s12x = lengths.s12b * ellipsoid.b
            m12x = lengths.m12b * ellipsoid.b
            scale12, scale21 = lengths.scale12, lengths.scale21
            a12 = math.degrees(sig12)

            # omg12 = lam12 - domg12
            sdomg12, cdomg12 = math.sin(state.domg12), math.cos(state.domg12)
            somg12 = slam12 * cdomg12 - clam12 * sdomg12
            comg12 = clam12 * cdomg12 + slam12 * sdomg12

    s12 = 0.0 + s12x  # -0 to 0
    m12 = 0.0 + m12x

    area = _area(
        ellipsoid, meridian, sbet1, cbet1, sbet2, cbet2,
        salp1, calp1, salp2, calp2, somg12, comg12, omg12
    )
    area *= swapp * lonsign * latsign
    area += 0.0

    # Convert (salp, calp) back to azimuths, undoing the symmetry transformations
    if swapp < 0:
        salp2, salp1 = salp1, salp2
        calp2, calp1 = calp1, calp2
        scale21, scale12 = scale12, scale21

    salp1 *= swapp * lonsign
    calp1 *= swapp * latsign
    salp2 *= swapp * lonsign
    calp2 *= swapp * latsign

    solution = GeodesicSolution(
        lat1=lat1o,
        lon1=normalize_longitude(lon1),
        azi1=normalize_azimuth(atan2d(salp1, calp1)),
        lat2=lat2o,
        lon2=normalize_longitude(lon2),
        azi2=normalize_azimuth(atan2d(salp2, calp2)),
        distance=s12,
        arc=a12,
        reduced_length=m12,
        scale12=scale12,
        scale21=scale21,
        area=area,
    )
    return solution, salp1, calp1


def _area(
    ellipsoid: Ellipsoid,
    meridian: bool,
    sbet1: float,
    cbet1: float,
    sbet2: float,
    cbet2: float,
    salp1: float,
    calp1: float,
    salp2: float,
    calp2: float,
    somg12: float,
    comg12: float,
    omg12: float,
) -> float:
    """
    The area between the geodesic, the equator and the meridians through both points,
    before undoing the symmetry transformations.
    """
    # From here on, alp0 is the azimuth at the equator crossing
    salp0 = salp1 * cbet1
    calp0 = math.hypot(calp1, salp1 * sbet1)
    if calp0 != 0 and salp0 != 0:
        # sig1 and sig2 measured from the equator crossing
        ssig1, csig1 = norm(sbet1, calp1 * cbet1)
        ssig2, csig2 = norm(sbet2, calp2 * cbet2)
        k2 = sq(calp0) * ellipsoid.ep2
        eps = series.expansion_parameter(k2)
        a4 = sq(ellipsoid.a) * calp0 * salp0 * ellipsoid.e2
        c4a = series.c4(ellipsoid.c4x, eps)
        b41 = series.sin_cos_series(False, ssig1, csig1, c4a)
        b42 = series.sin_cos_series(False, ssig2, csig2, c4a)
        area = a4 * (b42 - b41)
    else:
        # Avoid problems with indeterminate sig1, sig2 on the equator
        area = 0.0

    if not meridian and somg12 > 1:
        somg12, comg12 = math.sin(omg12), math.cos(omg12)

    if not meridian and comg12 > -0.7071 and sbet2 - sbet1 < 1.75:
        # Long difference not too big and lat difference not too big; use
        # tan(Gamma/2) = tan(omg12/2) * (tan(bet1/2) + tan(bet2/2)) /
        #   (1 + tan(bet1/2) * tan(bet2/2)) with tan(x/2) = sin(x) / (1 + cos(x))
        domg12 = 1 + comg12
        dbet1 = 1 + cbet1
        dbet2 = 1 + cbet2
        alp12 = 2 * math.atan2(
            somg12 * (sbet1 * dbet2 + sbet2 * dbet1),
            domg12 * (sbet1 * sbet2 + dbet1 * dbet2)
        )
    else:
        # alp12 = alp2 - alp1, used in atan2 so no need to normalize
        salp12 = salp2 * calp1 - calp2 * salp1
        calp12 = calp2 * calp1 + salp2 * salp1
        # alp12 must come out as -180 (not +180) when alp1 = +/-180 and alp2 = 0
        if salp12 == 0 and calp12 < 0:
            salp12 = TINY * calp1
            calp12 = -1.0
        alp12 = math.atan2(salp12, calp12)

    return area + ellipsoid.c2 * alp12
