# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.
from unittest import mock

import numpy as np

from os_gridref.constants import LAT0
from os_gridref.errors import ConvergenceFailure
from os_gridref.projection import geodetic_to_grid_metres, grid_metres_to_geodetic, \
    meridional_arc
from os_gridref.test_utils.test_funcs import ParameterisedTestCase

# Worked example from the OS guide, appendix C: 52°39'27.2531"N, 1°43'4.5177"E
_OS_LAT = 52 + 39 / 60 + 27.2531 / 3600
_OS_LON = 1 + 43 / 60 + 4.5177 / 3600
_OS_EASTING = 651409.903
_OS_NORTHING = 313177.270


class ProjectionTest(ParameterisedTestCase):

    def test_geodetic_to_grid_metres(self):
        self.parameterised_approx_test([
            (_OS_LAT, _OS_LON, (_OS_EASTING, _OS_NORTHING)),
            # True origin:
            (49, -2, (400000, -100000)),
            # On the central meridian easting is always E0:
            (55, -2, (400000, 567277.6142)),
        ], geodetic_to_grid_metres, delta=0.001)

    def test_grid_metres_to_geodetic(self):
        self.parameterised_approx_test([
            (400000, -100000, (49, -2)),
            (651409, 313177, (52.657568298, 1.717908052)),
            (530000, 180000, (51.503480037, -0.126747680)),
            (650000, 350000, (52.988581350, 1.725304676)),
        ], grid_metres_to_geodetic, delta=1e-8)

        # The published lat/long are only given to 4 decimal places of a second:
        self.parameterised_approx_test([
            (_OS_EASTING, _OS_NORTHING, (_OS_LAT, _OS_LON)),
        ], grid_metres_to_geodetic, delta=1e-7)

    def test_round_trip(self):
        for easting in range(0, 700001, 100000):
            for northing in range(0, 1300001, 100000):
                lat, lon = grid_metres_to_geodetic(easting, northing)
                e, n = geodetic_to_grid_metres(lat, lon)
                assert abs(e - easting) < 0.02, (easting, northing, e, n)
                assert abs(n - northing) < 0.02, (easting, northing, e, n)

    def test_arrays(self):
        eastings = np.array([_OS_EASTING, 400000, 530000])
        northings = np.array([_OS_NORTHING, -100000, 180000])
        lats, lons = grid_metres_to_geodetic(eastings, northings)
        assert lats.shape == (3,)
        for i in range(3):
            lat, lon = grid_metres_to_geodetic(eastings[i], northings[i])
            self.assertAlmostEqual(lats[i], lat, places=9)
            self.assertAlmostEqual(lons[i], lon, places=9)

        es, ns = geodetic_to_grid_metres(lats, lons)
        np.testing.assert_allclose(es, eastings, atol=0.001)
        np.testing.assert_allclose(ns, northings, atol=0.001)

    def test_meridional_arc(self):
        assert meridional_arc(LAT0) == 0
        assert meridional_arc(LAT0 + 0.01) > 0
        assert meridional_arc(LAT0 - 0.01) < 0

    def test_convergence_failure(self):
        with self.assertRaises(ConvergenceFailure):
            grid_metres_to_geodetic(400000, float('nan'))

        with self.assertRaises(ConvergenceFailure):
            grid_metres_to_geodetic(np.array([400000, 400000]), np.array([0, np.nan]))

        with mock.patch('os_gridref.projection.MAX_LATITUDE_ITERATIONS', 1):
            with self.assertRaises(ConvergenceFailure):
                grid_metres_to_geodetic(_OS_EASTING, _OS_NORTHING)

    def test_logs_iterations(self):
        with self.assertLogs(level='DEBUG') as logs:
            grid_metres_to_geodetic(_OS_EASTING, _OS_NORTHING)
        assert any("converged after" in line for line in logs.output), logs.output
