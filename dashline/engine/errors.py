"""Error taxonomy for the dash engine. No engine imports."""

from __future__ import annotations


class DashError(Exception):
    """Base class for every failure raised by the dash engine."""


class InvalidPattern(DashError, ValueError):
    """Dash array is empty, or holds a non-positive or non-finite value."""


class UnsupportedSegmentKind(DashError, TypeError):
    """A curved segment reached the dasher. Curves must be flattened upstream."""


class CursorConsistencyError(DashError, RuntimeError):
    """Offset normalisation produced a position outside the cumulative array.

    Only reachable through floating-point rounding, e.g. a tiny negative
    offset whose floor-modulo rounds up to exactly the cycle length.
    """
