# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.
import unittest

from shapely import wkt
from shapely.geometry import Point

from os_gridref.errors import InvalidGridReference
from os_gridref.geos import grid_ref_to_polygon, grid_ref_to_wkt, square
from os_gridref.grid_letters import reference_to_metres


class GeosTest(unittest.TestCase):

    def test_square(self):
        assert square(10, 20, 5).bounds == (10, 20, 15, 25)

    def test_grid_ref_to_polygon(self):
        poly = grid_ref_to_polygon('SK 34')
        assert poly.bounds == (430000, 340000, 440000, 350000)
        assert poly.area == 10000 ** 2

        poly = grid_ref_to_polygon('TG')
        assert poly.bounds == (600000, 300000, 700000, 400000)

        poly = grid_ref_to_polygon('TG 51409 13177')
        assert poly.bounds == (651409, 313177, 651410, 313178)

    def test_polygon_covers_decoded_position(self):
        for reference in ('TG', 'TG 5 1', 'TG 51 13', 'TG 514 131', 'TG 5140 1317', 'TG 51409 13177'):
            easting, northing = reference_to_metres(reference)
            assert grid_ref_to_polygon(reference).covers(Point(easting, northing)), reference

    def test_grid_ref_to_wkt(self):
        assert wkt.loads(grid_ref_to_wkt('NT 250 730')).equals(grid_ref_to_polygon('NT 250 730'))

    def test_invalid(self):
        with self.assertRaises(InvalidGridReference):
            grid_ref_to_polygon('ZZ')
