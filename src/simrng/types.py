"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout simrng.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Base class for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for float64 arrays (samples, probabilities, expected frequencies)."""

CountArray = NDArray[np.int64]
"""Type alias for observed frequency vectors."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Histogram bins are half-open intervals ``[left, right)``; supports use
    closed or infinite endpoints.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def width(self) -> float:
        """Length of the interval (``inf`` for unbounded intervals)."""
        return max(self.right - self.left, 0.0)

    @property
    def midpoint(self) -> float:
        """Class mark of the interval."""
        return (self.left + self.right) / 2

    def overlap(self, other: "Interval1D") -> float:
        """Length of the intersection with ``other`` (closure is irrelevant for lengths)."""
        return max(min(self.right, other.right) - max(self.left, other.left), 0.0)


type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

type ParametrizationName = str
"""Type alias for parametrization names."""

class CharacteristicName(StrEnum):
    """
    Names of the characteristics a distribution family may provide.

    Besides the classical functions and moments, every built-in family
    provides the three hooks used by the goodness-of-fit engine:
    ``BIN_PROBABILITIES`` (theoretical mass per bin of a partition),
    ``PARTITION`` (family-specific adjustment of the requested partition)
    and ``DEGREES`` (degrees of freedom for a given number of bins).
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    BIN_PROBABILITIES = "bin_probabilities"
    PARTITION = "partition"
    DEGREES = "degrees_of_freedom"


class FamilyName(StrEnum):
    """The closed set of supported distribution families."""

    UNIFORM = "Uniform"
    NORMAL = "Normal"
    EXPONENTIAL = "Exponential"
    POISSON = "Poisson"


class NormalAlgorithm(StrEnum):
    """Algorithm turning uniform draws into normal draws."""

    BOX_MULLER = "box_muller"
    CONVOLUTION = "convolution"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "Interval1D",
    "BoolArray",
    "CountArray",
    "FloatArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
    "NormalAlgorithm",
]
