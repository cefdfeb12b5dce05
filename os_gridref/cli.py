# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.
import argparse
import logging
import sys
from typing import Optional, List

from os_gridref.constants import PRECISIONS, DEFAULT_PRECISION
from os_gridref.convert import lat_lon_to_grid_ref, grid_ref_to_lat_lon
from os_gridref.errors import GridRefError


def _parse_args(argv: Optional[List[str]]):
    parser = argparse.ArgumentParser(
        description="Convert between OS National Grid references and OSGB36 latitude/longitude")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    to_grid_ref = subparsers.add_parser("to-grid-ref", help="Convert a latitude and longitude to a grid ref")
    to_grid_ref.add_argument("latitude", type=float, help="OSGB36 latitude in degrees")
    to_grid_ref.add_argument("longitude", type=float, help="OSGB36 longitude in degrees")
    to_grid_ref.add_argument("--precision", default=DEFAULT_PRECISION, type=int, choices=PRECISIONS,
                             help="Number of digits in the grid ref (default %(default)s, ie 1m)")

    to_lat_lon = subparsers.add_parser("to-lat-lon", help="Convert grid refs to latitude and longitude")
    to_lat_lon.add_argument("references", metavar="REFERENCE", nargs="+",
                            help="Grid ref, e.g. 'TG 51409 13177'. Quote refs containing spaces")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(format='%(asctime)s: %(levelname)s: %(message)s',
                        level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "to-grid-ref":
            print(lat_lon_to_grid_ref(args.latitude, args.longitude, args.precision))
        else:
            for reference in args.references:
                lat, lon = grid_ref_to_lat_lon(reference)
                print(f"{lat:.6f},{lon:.6f}")
    except GridRefError as e:
        logging.error(e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
