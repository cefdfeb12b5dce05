# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.
from typing import Tuple, List, Iterable

import numpy as np

from os_gridref.constants import DEFAULT_PRECISION
from os_gridref.grid_letters import metres_to_reference, reference_to_metres
from os_gridref.projection import geodetic_to_grid_metres, grid_metres_to_geodetic


def lat_lon_to_grid_ref(latitude: float,
                        longitude: float,
                        precision: int = DEFAULT_PRECISION) -> str:
    """
    Convert an OSGB36 latitude and longitude (degrees) to a grid ref like
    'TG 51409 13177'.

    :param precision: total number of digits in the grid ref (0-10). The default
    of 10 is a 1m square.
    """
    easting, northing = geodetic_to_grid_metres(latitude, longitude)
    return metres_to_reference(easting, northing, precision)


def grid_ref_to_lat_lon(reference: str) -> Tuple[float, float]:
    """
    Convert a grid ref to an OSGB36 latitude and longitude (degrees). Grid refs
    with fewer than 10 digits give the centre of the square they name.
    """
    easting, northing = reference_to_metres(reference)
    lat, lon = grid_metres_to_geodetic(easting, northing)
    return float(lat), float(lon)


def lat_lons_to_grid_refs(latitudes: Iterable[float],
                          longitudes: Iterable[float],
                          precision: int = DEFAULT_PRECISION) -> List[str]:
    """Batch version of `lat_lon_to_grid_ref`, projecting all points in one go."""
    latitudes = np.atleast_1d(np.asarray(latitudes, dtype=np.float64))
    longitudes = np.atleast_1d(np.asarray(longitudes, dtype=np.float64))
    if latitudes.shape != longitudes.shape:
        raise ValueError(f"Got {latitudes.shape} latitudes but {longitudes.shape} longitudes")

    eastings, northings = geodetic_to_grid_metres(latitudes, longitudes)
    return [metres_to_reference(e, n, precision) for e, n in zip(eastings.ravel(), northings.ravel())]


def grid_refs_to_lat_lons(references: Iterable[str]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Batch version of `grid_ref_to_lat_lon`.

    :return: arrays of latitudes and longitudes, in the same order as `references`
    """
    metres = [reference_to_metres(reference) for reference in references]
    eastings = np.array([e for e, _ in metres], dtype=np.float64)
    northings = np.array([n for _, n in metres], dtype=np.float64)
    return grid_metres_to_geodetic(eastings, northings)
