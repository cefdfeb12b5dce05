# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.
import math
import re
from typing import Tuple, NamedTuple

from os_gridref.constants import MAX_E100K, MAX_N100K, PRECISIONS, \
    DEFAULT_PRECISION, SNAP_TOLERANCE_M
from os_gridref.errors import InvalidGridReference, InvalidPosition

Easting = int
Northing = int
SquareSize = int

_100KM = 100000

_PADDING = {
    0: "50000",
    2: "5000",
    4: "500",
    6: "50",
    8: "5",
    10: "",
}
"""
Digits appended to each half of a grid reference's numeric part to bring it to
1m resolution. These place the decoded position at the centre of the square
the reference names, rather than at its SW corner. 10-digit refs are already 1m.
"""

_GRID_REF = re.compile('^([A-Z]{2})([0-9]*)$')

_LETTERS = re.compile('^[A-HJ-Z]{2}$')


class GridCell(NamedTuple):
    """
    The square named by a grid reference: the easting and northing of its SW
    corner, and the length of its edge. All in metres.
    """
    easting: Easting
    northing: Northing
    size: SquareSize


def _letter_to_index(letter: str) -> int:
    idx = ord(letter) - ord('A')
    # Grid letters include all letters except I, to form a 5x5 grid:
    if idx > 7:
        idx -= 1
    return idx


def _index_to_letter(idx: int) -> str:
    if idx > 7:
        idx += 1
    return chr(ord('A') + idx)


def _square_in_range(e100k: int, n100k: int) -> bool:
    return 0 <= e100k <= MAX_E100K and 0 <= n100k <= MAX_N100K


def is_in_range(easting: float, northing: float) -> bool:
    """True if the easting/northing falls within a lettered 100km square."""
    if not (math.isfinite(easting) and math.isfinite(northing)):
        return False
    return _square_in_range(math.floor(easting / _100KM), math.floor(northing / _100KM))


def square_indices(letters: str) -> Tuple[int, int]:
    """
    Convert the 2 letters of a grid ref into the (easting, northing) indices of
    the 100km square they name, counting from the false origin (square SV).
    """
    letters = letters.upper()
    if not _LETTERS.match(letters):
        raise InvalidGridReference(f"Invalid grid letters: {letters}")

    l1 = _letter_to_index(letters[0])
    l2 = _letter_to_index(letters[1])

    # The 1st letter names a 500km square and the 2nd a 100km square within
    # it, each lettered A-Z (without I) from NW to SE:
    e100k = ((l1 - 2) % 5) * 5 + (l2 % 5)
    n100k = (19 - (l1 // 5) * 5) - (l2 // 5)

    if not _square_in_range(e100k, n100k):
        raise InvalidGridReference(f"Grid letters {letters} are outside the National Grid")
    return e100k, n100k


def square_letters(e100k: int, n100k: int) -> str:
    """
    Convert the indices of a 100km square into its 2 grid letters. The inverse
    of `square_indices`.
    """
    if not _square_in_range(e100k, n100k):
        raise InvalidPosition(f"100km square ({e100k}, {n100k}) is outside the National Grid")

    l1 = (19 - n100k) - (19 - n100k) % 5 + (e100k + 10) // 5
    l2 = (19 - n100k) * 5 % 25 + e100k % 5
    return _index_to_letter(l1) + _index_to_letter(l2)


def _parse(reference: str) -> Tuple[str, str]:
    standard = re.sub(r'\s+', '', reference).upper()
    parsed = _GRID_REF.match(standard)
    if parsed is None:
        raise InvalidGridReference(f"Could not parse grid ref {reference}")

    letters, digits = parsed.groups()
    if len(digits) not in PRECISIONS:
        raise InvalidGridReference(
            f"Grid ref {reference} should have 0 to 10 digits, split evenly between "
            f"easting and northing")
    return letters, digits


def reference_to_metres(reference: str) -> Tuple[Easting, Northing]:
    """
    Convert a grid ref like 'TG 51409 13177' (spaces optional, any case) to an
    easting and northing in metres.

    References with fewer than 10 digits name a larger square, and are
    converted to the centre of that square, e.g. 'TG' -> (650000, 350000).
    """
    letters, digits = _parse(reference)
    e100k, n100k = square_indices(letters)

    half = len(digits) // 2
    padding = _PADDING[len(digits)]
    easting = int(str(e100k) + digits[:half] + padding)
    northing = int(str(n100k) + digits[half:] + padding)
    return easting, northing


def grid_ref_to_cell(reference: str) -> GridCell:
    """
    The square a grid ref names, e.g. 'SK 34' -> GridCell(430000, 340000, 10000)
    """
    letters, digits = _parse(reference)
    e100k, n100k = square_indices(letters)

    half = len(digits) // 2
    size = 10 ** (5 - half)
    easting = e100k * _100KM + int(digits[:half] or 0) * size
    northing = n100k * _100KM + int(digits[half:] or 0) * size
    return GridCell(easting, northing, size)


def metres_to_reference(easting: float,
                        northing: float,
                        precision: int = DEFAULT_PRECISION) -> str:
    """
    Convert an easting and northing in metres to a grid ref like 'TG 51409 13177'.

    :param precision: total number of digits in the grid ref, one of 0, 2, 4, 6, 8
    or 10. Positions are truncated to the SW corner of the square of that size
    that contains them, after nudging them up by SNAP_TOLERANCE_M so projection
    error can't drop a position on a square's edge into the square below. A
    precision of 0 gives just the 100km square letters.
    """
    if precision not in PRECISIONS:
        raise ValueError(f"Unhandled precision: {precision}")
    snapped_easting = easting + SNAP_TOLERANCE_M
    snapped_northing = northing + SNAP_TOLERANCE_M
    if not is_in_range(snapped_easting, snapped_northing):
        raise InvalidPosition(f"easting and northing out of grid ref range: {easting}, {northing}")

    easting = snapped_easting
    northing = snapped_northing

    e100k = math.floor(easting / _100KM)
    n100k = math.floor(northing / _100KM)
    letters = square_letters(e100k, n100k)
    if precision == 0:
        return letters

    width = precision // 2
    # strip 100km-square indices from easting & northing, and reduce precision:
    e = int(easting % _100KM // 10 ** (5 - width))
    n = int(northing % _100KM // 10 ** (5 - width))
    return f"{letters} {e:0{width}d} {n:0{width}d}"
