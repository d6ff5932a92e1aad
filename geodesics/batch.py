"""
Direct and inverse solutions over arrays of inputs.

Inputs are broadcast against each other with numpy's usual rules, then each broadcast
element is solved in turn by the scalar solvers. A row containing nan (or an out of
range latitude) yields a row of nan without affecting the others.
"""

__all__ = ['direct_batch', 'inverse_batch']

import numpy as np
from numpy.typing import ArrayLike

from geodesics.ellipsoid import WGS84, Ellipsoid


def _broadcast(*arrays: ArrayLike):
    return np.broadcast_arrays(*(np.asarray(x, dtype=float) for x in arrays))


def direct_batch(
    lat1: ArrayLike,
    lon1: ArrayLike,
    azi1: ArrayLike,
    s12: ArrayLike,
    ellipsoid: Ellipsoid = WGS84,
    unroll: bool = False,
) -> np.ndarray:
    """
    Solves the direct problem for every (lat1, lon1, azi1, s12) combination.

    Args:
        lat1, lon1:
            Start points, in degrees

        azi1:
            Azimuths at the start points, in degrees

        s12:
            Distances to travel, in meters

        ellipsoid:
            (Default WGS84) The ellipsoid on which to solve

        unroll: (bool)
            (Default False) Whether to return continuous end longitudes

    Returns:
        An array of the broadcast input shape plus a trailing axis of length 3,
        holding (lat2, lon2, azi2)
    """
    lat1, lon1, azi1, s12 = _broadcast(lat1, lon1, azi1, s12)
    out = np.empty(lat1.shape + (3,), dtype=float)
    for idx in np.ndindex(*lat1.shape):
        out[idx] = ellipsoid.direct(
            float(lat1[idx]), float(lon1[idx]), float(azi1[idx]), float(s12[idx]),
            unroll=unroll
        )

    return out


def inverse_batch(
    lat1: ArrayLike,
    lon1: ArrayLike,
    lat2: ArrayLike,
    lon2: ArrayLike,
    ellipsoid: Ellipsoid = WGS84,
) -> np.ndarray:
    """
    Solves the inverse problem for every (lat1, lon1, lat2, lon2) combination.

    Args:
        lat1, lon1:
            First points, in degrees

        lat2, lon2:
            Second points, in degrees

        ellipsoid:
            (Default WGS84) The ellipsoid on which to solve

    Returns:
        An array of the broadcast input shape plus a trailing axis of length 3,
        holding (s12, azi1, azi2)
    """
    lat1, lon1, lat2, lon2 = _broadcast(lat1, lon1, lat2, lon2)
    out = np.empty(lat1.shape + (3,), dtype=float)
    for idx in np.ndindex(*lat1.shape):
        out[idx] = ellipsoid.inverse(
            float(lat1[idx]), float(lon1[idx]), float(lat2[idx]), float(lon2[idx])
        )

    return out
