"""
Uniform distribution family implementation.

Contains the Uniform family with the standard and mean-width parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from simrng.distributions.strategies import DefaultSamplingUnivariateStrategy
from simrng.distributions.support import ContinuousSupport
from simrng.families.parametric_family import ParametricFamily
from simrng.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from simrng.families.registry import ParametricFamilyRegister
from simrng.types import (
    CharacteristicName,
    FamilyName,
    Interval1D,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from simrng.stats.partition import Partition
    from simrng.types import FloatArray


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    All intervals of the same length inside [lower, upper] are equally
    probable.

    Probability density function:
        f(x) = 1/(upper - lower) for x in [lower, upper], 0 otherwise

    One fitted parameter set is accounted for in the chi-squared test:
    df = k - 1.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for uniform distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower: float (lower bound)
            - upper: float (upper bound)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_Standard, parameters)
        lower, upper = parameters.lower, parameters.upper
        x = np.asarray(x, dtype=np.float64)
        return np.where((x >= lower) & (x <= upper), 1.0 / (upper - lower), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function, clipped to [0, 1] outside the bounds."""
        parameters = cast(_Standard, parameters)
        lower, upper = parameters.lower, parameters.upper
        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, np.clip((x - lower) / (upper - lower), 0.0, 1.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF): lower + p * (upper - lower).

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_Standard, parameters)
        return cast(NumericArray, parameters.lower + p * (parameters.upper - parameters.lower))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.lower + parameters.upper) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.upper - parameters.lower) ** 2 / 12

    def bin_probabilities(parameters: Parametrization, partition: Partition) -> FloatArray:
        """
        Fractional overlap of every bin with [lower, upper], over (upper - lower).

        Bins entirely outside the support get zero mass.
        """
        parameters = cast(_Standard, parameters)
        support = Interval1D(parameters.lower, parameters.upper)
        width = parameters.upper - parameters.lower
        return np.array([support.overlap(bin_) / width for bin_ in partition.bins])

    def partition(_: Parametrization, requested: Partition) -> Partition:
        """The requested equal-width partition is used as is."""
        return requested

    def degrees(_: Parametrization, intervals: int) -> int:
        """Degrees of freedom: k - 1."""
        return intervals - 1

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of uniform distribution"""
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(left=parameters.lower, right=parameters.upper)

    Uniform = ParametricFamily(
        name=FamilyName.UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.BIN_PROBABILITIES: bin_probabilities,
            CharacteristicName.PARTITION: partition,
            CharacteristicName.DEGREES: degrees,
        },
        sampling_strategy=DefaultSamplingUnivariateStrategy(),
        support_by_parametrization=_support,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        lower : float
            Lower bound of the distribution
        upper : float
            Upper bound of the distribution
        """

        lower: float
        upper: float

        @constraint(description="lower < upper")
        def check_lower_less_than_upper(self) -> bool:
            """Check that lower bound is less than upper bound."""
            return self.lower < self.upper

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Center of the distribution
        width : float
            upper - lower
        """

        mean: float
        width: float

        @constraint(description="width > 0")
        def check_width_positive(self) -> bool:
            """Check that width is positive."""
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            half_width = self.width / 2
            return _Standard(lower=self.mean - half_width, upper=self.mean + half_width)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Uniform)
