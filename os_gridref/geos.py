# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.
from shapely.geometry import Polygon

from os_gridref.grid_letters import grid_ref_to_cell


def rect(x: int, y: int, w: int, h: int) -> Polygon:
    return Polygon([(x, y),
                    (x, y + h),
                    (x + w, y + h),
                    (x + w, y),
                    (x, y)])


def square(x: int, y: int, edge: int) -> Polygon:
    return rect(x, y, edge, edge)


def grid_ref_to_polygon(reference: str) -> Polygon:
    """
    The square named by a grid ref, as a polygon in EPSG:27700 (easting/northing)
    coordinates. e.g. 'SK 34' gives the 10km square with SW corner (430000, 340000).
    """
    cell = grid_ref_to_cell(reference)
    return square(cell.easting, cell.northing, cell.size)


def grid_ref_to_wkt(reference: str) -> str:
    return grid_ref_to_polygon(reference).wkt
