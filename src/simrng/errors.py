"""
Error taxonomy of the goodness-of-fit engine.

Every error derives from :class:`SimrngError` and from the builtin exception
that best describes it, so callers may catch either.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class SimrngError(Exception):
    """Base class for all simrng errors."""


class EmptySampleError(SimrngError, ValueError):
    """Histogram or statistics requested against an empty sample."""

    def __init__(self, message: str = "Sample is empty; generate data first") -> None:
        super().__init__(message)


class InvalidIntervalCountError(SimrngError, ValueError):
    """Interval count is not positive or exceeds the number of samples."""

    def __init__(self, intervals: int, sample_size: int | None = None) -> None:
        self.intervals = intervals
        self.sample_size = sample_size
        if sample_size is None:
            message = f"Interval count must be >= 1, got {intervals}"
        else:
            message = (
                f"Interval count must be between 1 and the sample size ({sample_size}), "
                f"got {intervals}"
            )
        super().__init__(message)


class DegenerateRangeError(SimrngError, ValueError):
    """A partition was requested over a range of zero width."""

    def __init__(self, lower: float, upper: float) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(f"Partition range [{lower}, {upper}) has no width")


class NonConvergentInversionError(SimrngError, RuntimeError):
    """Newton-Raphson inversion of the incomplete gamma function did not converge."""

    def __init__(self, z: float, a: float, iterations: int, last: float) -> None:
        self.z = z
        self.a = a
        self.iterations = iterations
        self.last = last
        super().__init__(
            f"Incomplete gamma inversion for z={z}, a={a} did not converge "
            f"after {iterations} iterations (last iterate {last})"
        )


__all__ = [
    "SimrngError",
    "EmptySampleError",
    "InvalidIntervalCountError",
    "DegenerateRangeError",
    "NonConvergentInversionError",
]
