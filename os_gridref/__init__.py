# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.
from os_gridref.convert import lat_lon_to_grid_ref, grid_ref_to_lat_lon, \
    lat_lons_to_grid_refs, grid_refs_to_lat_lons
from os_gridref.errors import GridRefError, InvalidGridReference, InvalidPosition, \
    ConvergenceFailure
