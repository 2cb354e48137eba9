"""Day strip exception hierarchy."""

from __future__ import annotations


class StripError(Exception):
    """Base class for day strip failures."""


class InvalidRangeError(StripError, ValueError):
    """Raised when strip construction parameters are malformed."""


class IndexOutOfRangeError(StripError, IndexError):
    """Raised when a day index falls outside the strip's day range."""

    def __init__(self, index: object, size: int) -> None:
        super().__init__(f"day index {index!r} outside [0, {size})")
        self.index = index
        self.size = size


class NotReadyError(StripError, RuntimeError):
    """Raised when layout results are requested before all cells are measured."""


class InvalidMeasurementError(StripError, ValueError):
    """Raised for negative or non-finite pixel measurements."""
