"""
Interval Merger
===============

Combines adjacent bins until every bin's expected count reaches the validity
threshold of the chi-squared approximation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from simrng.stats.partition import Partition
    from simrng.types import CountArray, FloatArray

log = logging.getLogger(__name__)

MINIMUM_EXPECTED = 5.0


@dataclass(frozen=True, slots=True)
class FrequencyInterval:
    """
    A bin, or a run of adjacent bins, with its observed and expected counts.

    Parameters
    ----------
    lower, upper : float
        Bounds of the union of the absorbed bins.
    observed : int
        Observed count (fo).
    expected : float
        Expected count (fe).
    """

    lower: float
    upper: float
    observed: int
    expected: float

    def absorb(self, other: FrequencyInterval) -> FrequencyInterval:
        """Union with an adjacent interval; counts are summed."""
        return FrequencyInterval(
            lower=min(self.lower, other.lower),
            upper=max(self.upper, other.upper),
            observed=self.observed + other.observed,
            expected=self.expected + other.expected,
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "lower": self.lower,
            "upper": self.upper,
            "observed": self.observed,
            "expected": self.expected,
        }


def frequency_table(
    partition: Partition, observed: CountArray, expected: FloatArray
) -> list[FrequencyInterval]:
    """Pair every bin of ``partition`` with its observed and expected counts."""
    if not (len(observed) == len(expected) == partition.intervals):
        raise ValueError("Observed and expected vectors must match the partition")
    edges = partition.edges.tolist()
    return [
        FrequencyInterval(edges[i], edges[i + 1], int(observed[i]), float(expected[i]))
        for i in range(partition.intervals)
    ]


def merge_intervals(
    intervals: Iterable[FrequencyInterval], minimum_expected: float = MINIMUM_EXPECTED
) -> list[FrequencyInterval]:
    """
    Merge adjacent intervals so that each has ``expected >= minimum_expected``.

    A left-to-right sweep keeps a pending run of bins below the threshold and
    folds it into the next bin. A run still pending at the end is folded into
    the last emitted interval; if nothing was emitted it is returned as the
    only, under-threshold, interval.

    Total observed and expected counts are preserved.
    """
    merged: list[FrequencyInterval] = []
    pending: FrequencyInterval | None = None
    count = 0

    for interval in intervals:
        count += 1
        current = interval if pending is None else pending.absorb(interval)
        if current.expected >= minimum_expected:
            merged.append(current)
            pending = None
        else:
            pending = current

    if pending is not None:
        if merged:
            merged[-1] = merged[-1].absorb(pending)
        else:
            log.debug("No interval reaches %s expected; keeping one merged interval", minimum_expected)
            merged.append(pending)

    log.debug("Merged %d intervals into %d", count, len(merged))
    return merged


__all__ = ["FrequencyInterval", "frequency_table", "merge_intervals", "MINIMUM_EXPECTED"]
