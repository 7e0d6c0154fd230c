"""
Poisson distribution family implementation.

Contains the Poisson family with the rate parametrization. Samples are drawn
with the product-of-uniforms method and binned one integer per bin.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln

from simrng.distributions.strategies import PoissonProductSamplingStrategy
from simrng.distributions.support import IntegerSupport
from simrng.families.parametric_family import ParametricFamily
from simrng.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from simrng.families.registry import ParametricFamilyRegister
from simrng.stats.partition import Partition
from simrng.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from simrng.types import FloatArray

# exp(-lambda) must stay a normal float for the product sampler to terminate
MAX_LAMBDA = 700.0

SUPPORT = IntegerSupport(min_k=0)


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval when events occur independently at a
    constant rate λ.

    Probability mass function:
        P(X = n) = exp(-λ) * λ^n / n!  for n = 0, 1, 2, ...

    Histograms of Poisson samples use one unit-width bin per integer value.
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for Poisson distribution.

        Computed in log space, ``n log λ - λ - log Γ(n + 1)``, so large counts
        do not overflow. Points outside the non-negative integers have zero mass.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass values at points x
        """
        parameters = cast(_Rate, parameters)
        lambda_ = parameters.lambda_

        n = np.asarray(x, dtype=np.float64)
        mask = SUPPORT.contains(n)
        safe = np.where(mask, n, 0.0)
        log_mass = safe * math.log(lambda_) - lambda_ - gammaln(safe + 1.0)
        return np.where(mask, np.exp(log_mass), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function, ``P(X <= floor(x))``."""
        x = np.asarray(x, dtype=np.float64)
        upper = np.floor(np.max(x, initial=0.0))
        cumulative = np.cumsum(pmf(parameters, np.arange(upper + 1.0)))
        index = np.floor(x).astype(np.int64)
        return np.where(index >= 0, cumulative[np.clip(index, 0, None)], 0.0)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Poisson distribution (λ)."""
        return cast(_Rate, parameters).lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Poisson distribution (λ)."""
        return cast(_Rate, parameters).lambda_

    def bin_probabilities(parameters: Parametrization, partition: Partition) -> FloatArray:
        """Mass of the integer at the left edge of every unit bin."""
        left_edges = partition.edges[:-1]
        return np.asarray(pmf(parameters, left_edges), dtype=np.float64)

    def partition(_: Parametrization, requested: Partition) -> Partition:
        """One unit-width bin per integer the sample spans."""
        upper = requested.lower if requested.widened else requested.upper
        return Partition.unit_bins(requested.lower, upper)

    def degrees(_: Parametrization, intervals: int) -> int:
        """Degrees of freedom: k - 2."""
        return intervals - 2

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.BIN_PROBABILITIES: bin_probabilities,
            CharacteristicName.PARTITION: partition,
            CharacteristicName.DEGREES: degrees,
        },
        sampling_strategy=PoissonProductSamplingStrategy(),
        support_by_parametrization=lambda _: SUPPORT,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of Poisson distribution.

        Parameters
        ----------
        lambda_ : float
            Expected number of events (λ)
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.lambda_ > 0

        @constraint(description=f"lambda_ <= {MAX_LAMBDA:g}")
        def check_lambda_bounded(self) -> bool:
            return self.lambda_ <= MAX_LAMBDA

    ParametricFamilyRegister.register(Poisson)
