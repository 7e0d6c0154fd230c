"""
Parametric family definitions.

A family bundles its parametrizations, the analytical characteristics
(written against the base parametrization), its sampling strategy and its
support.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from simrng.distributions.computation import AnalyticalComputation
from simrng.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from simrng.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from simrng.distributions.strategies import ComputationStrategy, SamplingStrategy
    from simrng.distributions.support import Support
    from simrng.families.parametrizations import Parametrization
    from simrng.types import DistributionType, GenericCharacteristicName, ParametrizationName

    type ParametrizedFunction = Callable[..., Any]
    type SupportResolver = Callable[[Parametrization], Support | None]


class ParametricFamily:
    """
    A family of distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType
        Type of every distribution of the family.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict[str, Callable]
        Characteristic name to ``func(base_parameters, value, **options)``.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling; inverse transform by default.
    computation_strategy : ComputationStrategy, optional
        Strategy resolving characteristics.
    support_by_parametrization : Callable, optional
        Returns the support for given (base) parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[GenericCharacteristicName, ParametrizedFunction],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError("A family needs at least one parametrization name")

        self._name = name
        self.distr_type = distr_type
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = distr_parametrizations[0]
        self.distr_characteristics = dict(distr_characteristics)
        self.sampling_strategy = (
            DefaultSamplingUnivariateStrategy() if sampling_strategy is None else sampling_strategy
        )
        self.computation_strategy = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )
        self._support_resolver: SupportResolver = (
            support_by_parametrization or (lambda _params: None)
        )
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        The base parametrization class.

        Raises
        ------
        ValueError
            If the base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If the name is unknown to the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Family {self.name} does not declare parametrization '{name}'.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every characteristic to the base form of ``parameters``."""
        base_parameters = self.to_base(parameters)
        return {
            characteristic: AnalyticalComputation(
                target=characteristic, func=partial(func, base_parameters)
            )
            for characteristic, func in self.distr_characteristics.items()
        }

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Raises
        ------
        KeyError
            If the parametrization name is not registered.
        TypeError
            If parameters are missing or unknown.
        ValueError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        base_parameters.validate()
        return ParametricFamilyDistribution(
            self.name, self.distr_type, parameters, self._support_resolver(base_parameters)
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Class decorator registering a parametrization with this family."""
        from simrng.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
