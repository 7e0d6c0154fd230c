"""
Equal-width partitions of a sample range.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from simrng.errors import DegenerateRangeError, EmptySampleError, InvalidIntervalCountError
from simrng.types import Interval1D

if TYPE_CHECKING:
    from simrng.types import FloatArray, NumericArray

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Partition:
    """
    ``intervals`` equal-width half-open bins covering ``[lower, upper)``.

    Parameters
    ----------
    lower : float
        Left edge of the first bin.
    upper : float
        Right edge of the last bin.
    intervals : int
        Number of bins.
    widened : bool, default=False
        Set when the sample range had no width and was widened to one unit;
        the sample itself then spans only ``lower``.

    Raises
    ------
    InvalidIntervalCountError
        If ``intervals < 1``.
    DegenerateRangeError
        If ``upper <= lower``.
    """

    lower: float
    upper: float
    intervals: int
    widened: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if self.intervals < 1:
            raise InvalidIntervalCountError(self.intervals)
        if not self.upper > self.lower:
            raise DegenerateRangeError(self.lower, self.upper)

    @classmethod
    def from_sample(cls, values: NumericArray, intervals: int) -> Partition:
        """
        Partition ``[floor(min), ceil(max))`` of a sample into ``intervals`` bins.

        When every value equals the same integer the range has no width; it is
        widened to the single bin ``[value, value + 1)``.

        Raises
        ------
        EmptySampleError
            If ``values`` is empty.
        InvalidIntervalCountError
            If ``intervals`` is below 1 or above the sample size.
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.size == 0:
            raise EmptySampleError()
        if intervals < 1 or intervals > arr.size:
            raise InvalidIntervalCountError(intervals, int(arr.size))

        lower = float(math.floor(arr.min()))
        upper = float(math.ceil(arr.max()))
        if upper == lower:
            log.warning(
                "All %d samples equal %s; using a single bin [%s, %s)",
                arr.size,
                lower,
                lower,
                lower + 1,
            )
            return cls(lower, lower + 1.0, 1, widened=True)
        return cls(lower, upper, intervals)

    @classmethod
    def unit_bins(cls, lower: float, upper: float) -> Partition:
        """One unit-width bin per integer in ``[floor(lower), ceil(upper)]``."""
        first = math.floor(lower)
        last = math.ceil(upper)
        return cls(float(first), float(last + 1), last - first + 1)

    @property
    def size(self) -> float:
        """Bin width."""
        return (self.upper - self.lower) / self.intervals

    @property
    def edges(self) -> FloatArray:
        """The ``intervals + 1`` bin edges."""
        return self.lower + self.size * np.arange(self.intervals + 1, dtype=np.float64)

    @property
    def midpoints(self) -> FloatArray:
        """Class marks of the bins."""
        return self.lower + self.size * (np.arange(self.intervals, dtype=np.float64) + 0.5)

    @property
    def bins(self) -> list[Interval1D]:
        edges = self.edges.tolist()
        return [
            Interval1D(left, right, left_closed=True, right_closed=False)
            for left, right in zip(edges[:-1], edges[1:], strict=True)
        ]

    def bin_index(self, values: NumericArray) -> NumericArray:
        """
        Bin index of every value.

        Values equal to ``upper`` land in the last bin; indices are clamped to
        ``[0, intervals - 1]``.
        """
        raw = np.floor((np.asarray(values, dtype=np.float64) - self.lower) / self.size)
        return np.clip(raw, 0, self.intervals - 1).astype(np.int64)


__all__ = ["Partition"]
