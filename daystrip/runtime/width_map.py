"""Incrementally measured cell widths."""

from __future__ import annotations

import math
from numbers import Integral, Real

import numpy as np

from daystrip.runtime.errors import IndexOutOfRangeError, InvalidMeasurementError, NotReadyError


class WidthMap:
    """Per-index cell widths reported by the host, in any order.

    Entries are never removed; recording an index again replaces its width.
    """

    def __init__(self, size: int) -> None:
        self._size = size
        self._widths: dict[int, float] = {}

    def size(self) -> int:
        """Number of distinct indices measured so far."""
        return len(self._widths)

    def is_complete(self) -> bool:
        return len(self._widths) == self._size

    def record(self, index: int, width: float) -> bool:
        """Store one width and return whether this call completed the map."""
        if isinstance(index, bool) or not isinstance(index, Integral) or not 0 <= index < self._size:
            raise IndexOutOfRangeError(index, self._size)
        if isinstance(width, bool) or not isinstance(width, Real):
            raise InvalidMeasurementError(f"cell width must be a number, got {width!r}")
        value = float(width)
        if not math.isfinite(value) or value < 0:
            raise InvalidMeasurementError(f"cell width must be finite and >= 0, got {width!r}")
        was_complete = self.is_complete()
        self._widths[int(index)] = value
        return not was_complete and self.is_complete()

    def widths(self) -> np.ndarray:
        """Return widths ordered by index as a float64 array."""
        if not self.is_complete():
            raise NotReadyError(f"{self.size()} of {self._size} cell widths measured")
        return np.fromiter((self._widths[i] for i in range(self._size)), dtype=np.float64, count=self._size)

    def as_dict(self) -> dict[int, float]:
        return dict(self._widths)
