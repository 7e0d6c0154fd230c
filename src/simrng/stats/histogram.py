"""
Histogram Binner
================

Counts a sample into the bins of a :class:`~simrng.stats.partition.Partition`.

Counting is a map-reduce: the sample is split into contiguous chunks, each
chunk is counted into a private vector of length ``intervals`` and the vectors
are summed element-wise on the calling thread. With one worker the whole
sample is a single chunk.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from simrng.errors import EmptySampleError
from simrng.stats.partition import Partition

if TYPE_CHECKING:
    from simrng.distributions.distribution import Distribution
    from simrng.types import CountArray, FloatArray, NumericArray

log = logging.getLogger(__name__)


def effective_workers(requested: int) -> int:
    """Requested worker count, at least 1 and capped by the available parallelism."""
    available = os.cpu_count() or 1
    return max(1, min(requested, available))


def _count_chunk(chunk: NumericArray, partition: Partition) -> CountArray:
    return np.bincount(partition.bin_index(chunk), minlength=partition.intervals).astype(np.int64)


def count_observed(values: NumericArray, partition: Partition, workers: int = 1) -> CountArray:
    """
    Observed frequency of every bin of ``partition``.

    Parameters
    ----------
    values : NumericArray
        Sample values.
    partition : Partition
        Bins to count into.
    workers : int, default=1
        Number of contiguous chunks counted concurrently. Capped by
        :func:`effective_workers` and by the sample size.

    Returns
    -------
    CountArray
        ``int64`` vector of length ``partition.intervals`` summing to ``len(values)``.
    """
    arr = np.asarray(values, dtype=np.float64)
    workers = min(effective_workers(workers), max(arr.size, 1))
    if workers == 1:
        return _count_chunk(arr, partition)

    chunks = np.array_split(arr, workers)
    log.debug("Counting %d samples in %d chunks", arr.size, len(chunks))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="simrng-bin") as executor:
        futures = [executor.submit(_count_chunk, chunk, partition) for chunk in chunks]
        observed = np.zeros(partition.intervals, dtype=np.int64)
        for future in futures:
            observed += future.result()
    return observed


@dataclass(frozen=True, slots=True)
class Histogram:
    """
    Observed frequencies of a sample over a partition.

    Parameters
    ----------
    partition : Partition
        The bins.
    observed : CountArray
        Count per bin.
    """

    partition: Partition
    observed: CountArray

    def __post_init__(self) -> None:
        if self.observed.shape != (self.partition.intervals,):
            raise ValueError(
                f"Expected {self.partition.intervals} counts, got shape {self.observed.shape}"
            )

    @property
    def lower(self) -> float:
        return self.partition.lower

    @property
    def upper(self) -> float:
        return self.partition.upper

    @property
    def bin_width(self) -> float:
        return self.partition.size

    @property
    def midpoints(self) -> FloatArray:
        return self.partition.midpoints

    @property
    def total(self) -> int:
        return int(self.observed.sum())

    def as_dict(self) -> dict[str, Any]:
        return {
            "bin_midpoints": self.midpoints.tolist(),
            "bin_counts": self.observed.tolist(),
            "lower": self.lower,
            "upper": self.upper,
            "bin_width": self.bin_width,
        }


def build_histogram(
    values: NumericArray,
    intervals: int,
    distribution: Distribution | None = None,
    workers: int = 1,
) -> Histogram:
    """
    Bin a sample into ``intervals`` equal-width bins.

    When ``distribution`` is given, its partition hook may replace the
    requested partition (the Poisson family uses one bin per integer).

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
    partition = Partition.from_sample(arr, intervals)
    if distribution is not None:
        partition = distribution.partition_for(partition)
    return Histogram(partition, count_observed(arr, partition, workers=workers))


__all__ = ["Histogram", "build_histogram", "count_observed", "effective_workers"]
