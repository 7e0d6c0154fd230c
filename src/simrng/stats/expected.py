"""
Expected-Frequency Calculator
=============================

Scales the per-bin probability mass of a distribution by the sample size.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from simrng.distributions.distribution import Distribution
    from simrng.stats.partition import Partition
    from simrng.types import FloatArray


def expected_probabilities(distribution: Distribution, partition: Partition) -> FloatArray:
    """
    Probability mass of every bin of ``partition`` under ``distribution``.

    The partition must already be the one returned by
    ``distribution.partition_for``. The masses sum to at most about 1; the
    tails outside the partition are not redistributed.

    Raises
    ------
    ValueError
        If the distribution returns a vector of the wrong length or with
        negative entries.
    """
    probabilities = np.asarray(distribution.bin_probabilities(partition), dtype=np.float64)
    if probabilities.shape != (partition.intervals,):
        raise ValueError(
            f"Distribution returned {probabilities.shape} probabilities "
            f"for {partition.intervals} bins"
        )
    if (probabilities < 0).any():
        raise ValueError("Bin probabilities must be non-negative")
    return probabilities


def expected_frequencies(
    distribution: Distribution, partition: Partition, sample_size: int
) -> FloatArray:
    """Expected count of every bin for a sample of ``sample_size`` values."""
    return expected_probabilities(distribution, partition) * sample_size


__all__ = ["expected_probabilities", "expected_frequencies"]
