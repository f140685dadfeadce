"""Domain errors raised when building coordinates and configurations."""

from __future__ import annotations


class FourBishopsError(Exception):
    """Base class for all puzzle domain errors."""


class OutOfRangeError(FourBishopsError, ValueError):
    """A cell (or encoded cell field) lies outside the 5x4 grid."""


class InvariantViolationError(FourBishopsError, ValueError):
    """A configuration breaks the token-count or distinct-cell invariant."""
