"""
Chi-Squared Evaluator
=====================

Pearson's chi-squared goodness-of-fit test of a histogram against a
distribution:

1. expected frequencies from the distribution,
2. merging of bins below the validity threshold,
3. the statistic ``sum((fo - fe)^2 / fe)``,
4. degrees of freedom from the merged bin count,
5. the critical value at the requested significance level.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from simrng.stats.critical import critical_value
from simrng.stats.expected import expected_frequencies
from simrng.stats.merging import MINIMUM_EXPECTED, frequency_table, merge_intervals

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from simrng.config import CriticalValueMethod
    from simrng.distributions.distribution import Distribution
    from simrng.stats.histogram import Histogram
    from simrng.stats.merging import FrequencyInterval

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChiSquaredTest:
    """
    Outcome of a chi-squared goodness-of-fit test.

    Attributes
    ----------
    calculated : float
        The test statistic.
    critical : float
        Critical value at ``significance_level``.
    degrees_of_freedom : int
        Degrees of freedom used for the critical value.
    significance_level : float
        Alpha of the test.
    intervals : tuple of FrequencyInterval
        The merged intervals the statistic was computed on.
    """

    calculated: float
    critical: float
    degrees_of_freedom: int
    significance_level: float
    intervals: tuple[FrequencyInterval, ...] = ()

    @property
    def rejected(self) -> bool:
        """Whether the null hypothesis is rejected (``calculated > critical``)."""
        return self.calculated > self.critical

    def as_dict(self, include_intervals: bool = True) -> dict[str, Any]:
        result: dict[str, Any] = {
            "calculated": self.calculated,
            "critical": self.critical,
            "degrees_of_freedom": self.degrees_of_freedom,
            "significance_level": self.significance_level,
            "rejected": self.rejected,
        }
        if include_intervals:
            result["merged_intervals"] = [interval.as_dict() for interval in self.intervals]
        return result


def chi_squared_statistic(intervals: Iterable[FrequencyInterval]) -> float:
    """
    Pearson's statistic over intervals with a positive expected count.

    Intervals with ``expected == 0`` contribute nothing.
    """
    total = 0.0
    for interval in intervals:
        if interval.expected > 0:
            total += (interval.observed - interval.expected) ** 2 / interval.expected
    return total


def degrees_of_freedom(distribution: Distribution, merged_count: int) -> int:
    """Distribution-specific degrees of freedom, never below 1."""
    return max(int(distribution.degrees_of_freedom(merged_count)), 1)


def evaluate_intervals(
    intervals: Sequence[FrequencyInterval],
    distribution: Distribution,
    significance_level: float = 0.05,
    method: CriticalValueMethod = "newton",
) -> ChiSquaredTest:
    """Test already merged intervals against ``distribution``."""
    calculated = chi_squared_statistic(intervals)
    df = degrees_of_freedom(distribution, len(intervals))
    critical = critical_value(df, significance_level, method=method)
    log.debug(
        "chi2=%.6g critical=%.6g df=%d over %d intervals", calculated, critical, df, len(intervals)
    )
    return ChiSquaredTest(
        calculated=calculated,
        critical=critical,
        degrees_of_freedom=df,
        significance_level=significance_level,
        intervals=tuple(intervals),
    )


def evaluate(
    histogram: Histogram,
    distribution: Distribution,
    significance_level: float = 0.05,
    minimum_expected: float = MINIMUM_EXPECTED,
    method: CriticalValueMethod = "newton",
) -> ChiSquaredTest:
    """
    Run the goodness-of-fit test of ``histogram`` against ``distribution``.

    The histogram must have been built over the distribution's own partition
    (see :func:`~simrng.stats.histogram.build_histogram`).
    """
    partition = histogram.partition
    expected = expected_frequencies(distribution, partition, histogram.total)
    table = frequency_table(partition, histogram.observed, expected)
    merged = merge_intervals(table, minimum_expected=minimum_expected)
    return evaluate_intervals(merged, distribution, significance_level, method=method)


__all__ = [
    "ChiSquaredTest",
    "chi_squared_statistic",
    "degrees_of_freedom",
    "evaluate",
    "evaluate_intervals",
]
