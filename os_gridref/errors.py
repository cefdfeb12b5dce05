# This file is part of the os_gridref National Grid converter, copyright © Centre for Sustainable Energy, 2020-2023
# Licensed under the Reciprocal Public License v1.5.


class GridRefError(ValueError):
    """Base class for errors raised when converting to or from the National Grid."""
    pass


class InvalidGridReference(GridRefError):
    """
    A grid reference string could not be parsed: unknown or out of range
    100km-square letters, or a numeric part that isn't 0-10 digits split
    evenly between easting and northing.
    """
    pass


class InvalidPosition(GridRefError):
    """An easting/northing lies outside the 100km squares of the National Grid."""
    pass


class ConvergenceFailure(GridRefError):
    """The iterative solution for latitude from a northing did not converge."""
    pass
