"""Exception types raised by the search core."""

from __future__ import annotations


class GridstarError(Exception):
    """Base class for gridstar errors."""


class InvalidEndpoint(GridstarError, ValueError):
    """Start or goal is off the grid or blocked."""


class OutOfRange(GridstarError, IndexError):
    """A grid query was made for a position outside the grid."""


class InvariantViolation(GridstarError, AssertionError):
    """Internal search state was used out of order."""


class Unreachable(GridstarError, LookupError):
    """Path reconstruction was requested for a goal that was never closed."""
