"""
Simulation Context
==================

Entry point of simrng. A :class:`SimulationContext` retains the last
generated sample together with the distribution it was drawn from and
answers histogram, chi-squared and pagination requests against it.

Generation replaces the retained data wholesale under the exclusive side of
a reader-writer lock. Evaluations take the current data under the shared side
and then work on that immutable snapshot, so they always observe a complete
sample.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from simrng.concurrency import ReadWriteLock
from simrng.config import SimrngConfig
from simrng.errors import EmptySampleError
from simrng.families.configuration import configure_families_register, make_distribution
from simrng.rng import make_source
from simrng.stats.chi_squared import evaluate
from simrng.stats.histogram import build_histogram, effective_workers

if TYPE_CHECKING:
    from collections.abc import Mapping

    from simrng.distributions.sampling import ArraySample
    from simrng.families.distribution import ParametricFamilyDistribution
    from simrng.rng import RandomSource
    from simrng.stats.chi_squared import ChiSquaredTest
    from simrng.stats.histogram import Histogram

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GeneratedData:
    """
    A generated sample and the distribution it was drawn from.

    Attributes
    ----------
    sample : ArraySample
        The generated values.
    distribution : ParametricFamilyDistribution
        Distribution descriptor used for sampling and, later, for testing.
    seed : int or None
        LCG seed, or None when the system generator was used.
    """

    sample: ArraySample
    distribution: ParametricFamilyDistribution
    seed: int | None = None

    def __len__(self) -> int:
        return len(self.sample)


@dataclass(frozen=True, slots=True)
class StatisticsReport:
    """Histogram of the retained sample and its chi-squared test."""

    histogram: Histogram
    test: ChiSquaredTest

    def as_dict(self) -> dict[str, Any]:
        return {"histogram": self.histogram.as_dict(), "test": self.test.as_dict()}


class SimulationContext:
    """
    Holder of the retained sample and the operations on it.

    Parameters
    ----------
    config : SimrngConfig, optional
        Engine settings; defaults are used when omitted.
    """

    def __init__(self, config: SimrngConfig | None = None) -> None:
        self.config = SimrngConfig() if config is None else config
        self._lock = ReadWriteLock()
        self._data: GeneratedData | None = None
        configure_families_register()

    @property
    def data(self) -> GeneratedData | None:
        """The retained data, or None before the first generation."""
        with self._lock.read():
            return self._data

    def generate(
        self,
        seed: int | None,
        count: int,
        family: str,
        parameters: Mapping[str, Any],
        parametrization_name: str | None = None,
        source: RandomSource | None = None,
    ) -> GeneratedData:
        """
        Draw ``count`` values and retain them, replacing any previous sample.

        Parameters
        ----------
        seed : int or None
            Seed of the linear congruential generator; None selects the
            system generator.
        count : int
            Number of values to draw.
        family : str
            Family name, see :class:`~simrng.types.FamilyName`.
        parameters : Mapping[str, Any]
            Parameter values of the chosen parametrization.
        parametrization_name : str, optional
            Parametrization of ``parameters``; the family's base one by default.
        source : RandomSource, optional
            Explicit uniform source; overrides ``seed``.

        Raises
        ------
        ValueError
            If ``count`` is negative, the family or parametrization is unknown,
            parameter names do not match the parametrization or the values
            violate a constraint.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        distribution = make_distribution(family, parameters, parametrization_name)
        rng = make_source(seed) if source is None else source
        sample = distribution.sample(count, source=rng)
        data = GeneratedData(sample=sample, distribution=distribution, seed=seed)

        with self._lock.write():
            self._data = data
        log.info(
            "Generated %d %s values (seed=%s, parameters=%s)",
            count,
            family,
            seed,
            distribution.parameters.parameters,
        )
        return data

    def histogram(self, interval_count: int) -> Histogram:
        """
        Histogram of the retained sample with ``interval_count`` requested bins.

        The distribution's partition hook may re-derive the bins (one per
        integer for Poisson).

        Raises
        ------
        EmptySampleError
            If nothing was generated yet or the sample is empty.
        InvalidIntervalCountError
            If ``interval_count`` is below 1 or above the sample size.
        """
        return self._build_histogram(self._snapshot(), interval_count)

    def statistics(
        self, interval_count: int, significance_level: float | None = None
    ) -> StatisticsReport:
        """
        Histogram and chi-squared goodness-of-fit test of the retained sample
        against the distribution it was drawn from.

        Raises
        ------
        EmptySampleError
            If nothing was generated yet or the sample is empty.
        InvalidIntervalCountError
            If ``interval_count`` is below 1 or above the sample size.
        """
        alpha = self.config.significance_level if significance_level is None else significance_level
        data = self._snapshot()
        histogram = self._build_histogram(data, interval_count)
        test = evaluate(
            histogram,
            data.distribution,
            significance_level=alpha,
            minimum_expected=self.config.minimum_expected,
            method=self.config.critical_method,
        )
        log.debug(
            "chi-squared test on %d values: calculated=%.6g critical=%.6g rejected=%s",
            histogram.total,
            test.calculated,
            test.critical,
            test.rejected,
        )
        return StatisticsReport(histogram=histogram, test=test)

    def page(self, page_number: int) -> list[float]:
        """
        Values of the 1-based ``page_number``-th page of the retained sample.

        Pages outside the sample, and every page before the first
        generation, are empty.
        """
        data = self.data
        if data is None:
            return []
        return data.sample.page(page_number, self.config.page_size)

    def _snapshot(self) -> GeneratedData:
        """The retained data; evaluations work on it outside the lock."""
        data = self.data
        if data is None or data.sample.is_empty:
            raise EmptySampleError()
        return data

    def _workers_for(self, sample_size: int) -> int:
        if sample_size < self.config.parallel_threshold:
            return 1
        return effective_workers(self.config.workers)

    def _build_histogram(self, data: GeneratedData, interval_count: int) -> Histogram:
        return build_histogram(
            data.sample.array,
            interval_count,
            distribution=data.distribution,
            workers=self._workers_for(len(data)),
        )


__all__ = ["GeneratedData", "StatisticsReport", "SimulationContext"]
