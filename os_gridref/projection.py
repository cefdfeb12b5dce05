# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.
"""
Transverse Mercator projection between latitude/longitude on the Airy 1830
ellipsoid and National Grid eastings and northings.

Formulae are from appendix C of the Ordnance Survey's "A guide to coordinate
systems in Great Britain":
https://www.ordnancesurvey.co.uk/documents/resources/guide-coordinate-systems-great-britain.pdf

Everything here works elementwise on numpy arrays as well as on single floats.
Lat/longs must already be OSGB36 - there is no datum shift from WGS84.
"""
import logging
from typing import Tuple, Union

import numpy as np

from os_gridref.constants import A, F0, E2, LAT0, LON0, N0, E0, CA, CB, CC, CD, C, \
    CONVERGENCE_TOLERANCE_M, MAX_LATITUDE_ITERATIONS
from os_gridref.errors import ConvergenceFailure

Degrees = Union[float, np.ndarray]
Metres = Union[float, np.ndarray]


def meridional_arc(lat: Union[float, np.ndarray]) -> Metres:
    """
    Distance in metres along the central meridian from the latitude of the true
    origin to `lat` (radians).
    """
    l1 = lat - LAT0
    l2 = lat + LAT0

    ma = CA * l1
    mb = CB * np.sin(l1) * np.cos(l2)
    mc = CC * np.sin(2 * l1) * np.cos(2 * l2)
    md = CD * np.sin(3 * l1) * np.cos(3 * l2)
    return C * (ma - mb + mc - md)


def _radii_of_curvature(sin_lat):
    # transverse radius of curvature:
    nu = A * F0 / np.sqrt(1 - E2 * sin_lat ** 2)
    # meridional radius of curvature:
    rho = A * F0 * (1 - E2) / (1 - E2 * sin_lat ** 2) ** 1.5
    eta2 = nu / rho - 1
    return nu, rho, eta2


def geodetic_to_grid_metres(latitude: Degrees, longitude: Degrees) -> Tuple[Metres, Metres]:
    """
    Project a latitude and longitude (degrees) to an easting and northing
    (metres).

    Never fails, but positions far from Great Britain will not fall in any
    lettered 100km square.
    """
    lat = np.radians(latitude)
    lon = np.radians(longitude)

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    tan_lat = np.tan(lat)

    nu, rho, eta2 = _radii_of_curvature(sin_lat)
    m = meridional_arc(lat)

    i = m + N0
    ii = (nu / 2) * sin_lat * cos_lat
    iii = (nu / 24) * sin_lat * cos_lat ** 3 * (5 - tan_lat ** 2 + 9 * eta2)
    iiia = (nu / 720) * sin_lat * cos_lat ** 5 * (61 - 58 * tan_lat ** 2 + tan_lat ** 4)
    iv = nu * cos_lat
    v = (nu / 6) * cos_lat ** 3 * (nu / rho - tan_lat ** 2)
    vi = (nu / 120) * cos_lat ** 5 * (
            5 - 18 * tan_lat ** 2 + tan_lat ** 4 + 14 * eta2 - 58 * tan_lat ** 2 * eta2)

    d_lon = lon - LON0

    easting = E0 + iv * d_lon + v * d_lon ** 3 + vi * d_lon ** 5
    northing = i + ii * d_lon ** 2 + iii * d_lon ** 4 + iiia * d_lon ** 6
    return easting, northing


def _latitude_from_northing(northing: Metres):
    """
    Iteratively find the latitude (radians) on the central meridian whose
    meridional arc matches `northing`.
    """
    lat = LAT0
    m = 0.0
    for iteration in range(1, MAX_LATITUDE_ITERATIONS + 1):
        lat = (northing - N0 - m) / (A * F0) + lat
        m = meridional_arc(lat)
        if np.all(np.abs(northing - N0 - m) < CONVERGENCE_TOLERANCE_M):
            logging.debug(f"Latitude converged after {iteration} iterations")
            return lat

    raise ConvergenceFailure(
        f"Latitude for northing {northing} did not converge within "
        f"{MAX_LATITUDE_ITERATIONS} iterations")


def grid_metres_to_geodetic(easting: Metres, northing: Metres) -> Tuple[Degrees, Degrees]:
    """
    Convert an easting and northing (metres) to a latitude and longitude
    (degrees).

    Raises ConvergenceFailure if the northing isn't a real number.
    """
    lat = _latitude_from_northing(northing)

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    tan_lat = np.tan(lat)
    sec_lat = 1 / cos_lat

    nu, rho, eta2 = _radii_of_curvature(sin_lat)

    vii = tan_lat / (2 * rho * nu)
    viii = tan_lat / (24 * rho * nu ** 3) * (5 + 3 * tan_lat ** 2 + eta2 - 9 * tan_lat ** 2 * eta2)
    ix = tan_lat / (720 * rho * nu ** 5) * (61 + 90 * tan_lat ** 2 + 45 * tan_lat ** 4)
    x = sec_lat / nu
    xi = sec_lat / (6 * nu ** 3) * (nu / rho + 2 * tan_lat ** 2)
    xii = sec_lat / (120 * nu ** 5) * (5 + 28 * tan_lat ** 2 + 24 * tan_lat ** 4)
    xiia = sec_lat / (5040 * nu ** 7) * (
            61 + 662 * tan_lat ** 2 + 1320 * tan_lat ** 4 + 720 * tan_lat ** 6)

    d_e = easting - E0

    lat = lat - vii * d_e ** 2 + viii * d_e ** 4 - ix * d_e ** 6
    lon = LON0 + x * d_e - xi * d_e ** 3 + xii * d_e ** 5 - xiia * d_e ** 7
    return np.degrees(lat), np.degrees(lon)
