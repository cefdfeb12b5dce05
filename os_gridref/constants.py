# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.
import math

# Airy 1830 major and minor semi-axes, metres.
# Source: https://www.ordnancesurvey.co.uk/documents/resources/guide-coordinate-systems-great-britain.pdf
# table A.1
A = 6377563.396
B = 6356256.910

# National Grid scale factor on the central meridian:
F0 = 0.9996012717

# National Grid true origin is 49°N, 2°W:
LAT0 = math.radians(49)
LON0 = math.radians(-2)

# Northing and easting of the true origin, metres:
N0 = -100000
E0 = 400000

E2 = 1 - B ** 2 / A ** 2
"""Eccentricity squared"""

N = (A - B) / (A + B)

# Coefficients of the meridional arc series (OS guide, equation C3):
CA = 1 + N + (5 / 4) * N ** 2 + (5 / 4) * N ** 3
CB = 3 * N + 3 * N ** 2 + (21 / 8) * N ** 3
CC = (15 / 8) * N ** 2 + (15 / 8) * N ** 3
CD = (35 / 24) * N ** 3

C = B * F0

MAX_E100K = 6
"""
Highest 100km-square easting index covered by the grid letters (squares
SV..SZ, TV..TW run from index 0 to 6 along the bottom row).
"""

MAX_N100K = 12
"""
Highest 100km-square northing index covered by the grid letters (HP is the
most northerly square used).
"""

PRECISIONS = (0, 2, 4, 6, 8, 10)
"""
Numbers of digits allowed after the letter pair of a grid reference.
10 digits is a 1m square, 0 digits is the bare 100km square.
"""

DEFAULT_PRECISION = 10

CONVERGENCE_TOLERANCE_M = 0.00001
"""
The latitude iteration stops once the meridional arc is within this many
metres of the target northing (ie 0.01mm).
"""

MAX_LATITUDE_ITERATIONS = 100
"""
Hard cap on the latitude iteration. Any northing within the grid converges
in 3 or 4 iterations, so hitting this means the input was not a real position.
"""

SNAP_TOLERANCE_M = 0.02
"""
Eastings and northings are nudged up by this many metres before being truncated
into a grid reference. The projection series lose up to ~1cm on a
forward/inverse round trip at the west and north edges of the grid, which would
otherwise knock a coordinate sitting exactly on a 1m boundary into the square
below it.
"""
