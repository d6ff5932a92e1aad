"""
Constants declarations for geodesics
"""
import math
import sys

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Equatorial radius (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Order of the series expansions in the third flattening
SERIES_ORDER = 6

# Floating point characteristics
DIGITS = sys.float_info.mant_dig
EPSILON = sys.float_info.epsilon
TINY = math.sqrt(sys.float_info.min)

# Convergence tolerances for the inverse solution
TOL0 = EPSILON
TOL1 = 200 * TOL0
TOL2 = math.sqrt(TOL0)
TOLB = TOL0 * TOL2  # Bracket width below which bisection stops
XTHRESH = 1000 * TOL2

# Newton steps are only attempted for the first NEWTON_ITERATIONS iterations;
# the remainder of the budget is spent bisecting
NEWTON_ITERATIONS = 20
MAX_ITERATIONS = NEWTON_ITERATIONS + DIGITS + 10
