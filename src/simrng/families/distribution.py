"""
Concrete distribution instances with specific parameter values.

A :class:`ParametricFamilyDistribution` is the distribution descriptor held
alongside a generated sample.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from simrng.distributions.distribution import Distribution
from simrng.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from simrng.distributions.computation import AnalyticalComputation
    from simrng.distributions.strategies import ComputationStrategy, SamplingStrategy
    from simrng.distributions.support import Support
    from simrng.families.parametric_family import ParametricFamily
    from simrng.families.parametrizations import Parametrization
    from simrng.types import DistributionType, GenericCharacteristicName


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _analytical_cache: tuple[int, Mapping[str, AnalyticalComputation[Any, Any]]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """The parametric family this distribution belongs to."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Analytical computations bound to this distribution's parameters.

        Built lazily and cached until :attr:`parameters` is replaced.
        """
        key = id(self.parameters)
        if self._analytical_cache is None or self._analytical_cache[0] != key:
            computations = self.family.build_analytical_computations(self.parameters)
            self._analytical_cache = (key, computations)
        return self._analytical_cache[1]

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    def describe(self) -> dict[str, Any]:
        """Family, parametrization and parameter values as plain data."""
        return {
            "family": self.family_name,
            "parametrization": self.parametrization_name,
            "parameters": dict(self.parameters.parameters),
        }
