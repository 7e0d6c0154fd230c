"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by the
sampling strategies and by the goodness-of-fit engine.

Notes
-----
- Characteristics are resolved through the distribution's computation
  strategy, which only serves analytical implementations.
- The three goodness-of-fit hooks (:meth:`Distribution.partition_for`,
  :meth:`Distribution.bin_probabilities`, :meth:`Distribution.degrees_of_freedom`)
  are thin wrappers over the matching characteristics.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from simrng.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from simrng.distributions.computation import AnalyticalComputation
    from simrng.distributions.sampling import ArraySample
    from simrng.distributions.strategies import ComputationStrategy, SamplingStrategy
    from simrng.distributions.support import Support
    from simrng.stats.partition import Partition
    from simrng.types import DistributionType, FloatArray, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and the evaluation engine."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, **options: Any) -> ArraySample:
        return self.sampling_strategy.sample(n, distr=self, **options)

    def partition_for(self, partition: Partition) -> Partition:
        """Adjust a requested equal-width partition to this distribution."""
        return self.calculate_characteristic(CharacteristicName.PARTITION, partition)

    def bin_probabilities(self, partition: Partition) -> FloatArray:
        """Theoretical probability mass of every bin of ``partition``."""
        return self.calculate_characteristic(CharacteristicName.BIN_PROBABILITIES, partition)

    def degrees_of_freedom(self, intervals: int) -> int:
        """Raw degrees of freedom for ``intervals`` bins (may be non-positive)."""
        return self.calculate_characteristic(CharacteristicName.DEGREES, intervals)
