"""
Normal distribution family implementation.

Contains the Normal family with mean-standard deviation and mean-precision
parametrizations. Sampling uses the Box-Muller transform or the 12-uniform
convolution approximation, selected by the ``algorithm`` parameter.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf, erfinv

from simrng.distributions.strategies import NormalSamplingStrategy
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
    NormalAlgorithm,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from simrng.stats.partition import Partition
    from simrng.types import FloatArray

# Estimated parameters (mean, sd) plus the sum constraint
FITTED_PARAMETERS = 3


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1/(sd*sqrt(2*pi)) * exp(-(x - mean)^2 / (2*sd^2))

    The expected mass of a bin is approximated by the density at its class
    mark times the bin width.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mean: float (mean)
            - sd: float (standard deviation)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_MeanStd, parameters)
        sd = parameters.sd
        mean = parameters.mean

        coefficient = 1.0 / (sd * np.sqrt(2 * np.pi))
        exponent = -((np.asarray(x, dtype=np.float64) - mean) ** 2) / (2 * sd**2)
        return cast(NumericArray, coefficient * np.exp(exponent))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for normal distribution.

        Uses the error function: 0.5 * (1 + erf((x - mean) / (sd*sqrt(2)))).
        """
        parameters = cast(_MeanStd, parameters)
        z = (np.asarray(x, dtype=np.float64) - parameters.mean) / (parameters.sd * np.sqrt(2))
        return cast(NumericArray, 0.5 * (1 + erf(z)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for normal distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_MeanStd, parameters)
        return cast(
            NumericArray, parameters.mean + parameters.sd * np.sqrt(2) * erfinv(2 * p - 1)
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of normal distribution."""
        return cast(_MeanStd, parameters).mean

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of normal distribution."""
        return cast(_MeanStd, parameters).sd ** 2

    def bin_probabilities(parameters: Parametrization, partition: Partition) -> FloatArray:
        """Midpoint rule: ``pdf(class mark) * bin width`` for every bin."""
        density = pdf(parameters, partition.midpoints)
        return np.asarray(density, dtype=np.float64) * partition.size

    def partition(_: Parametrization, requested: Partition) -> Partition:
        return requested

    def degrees(_: Parametrization, intervals: int) -> int:
        """Degrees of freedom: k - 3."""
        return intervals - FITTED_PARAMETERS

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
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
        sampling_strategy=NormalSamplingStrategy(),
        support_by_parametrization=lambda _: ContinuousSupport(),
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mean : float
            Mean of the distribution
        sd : float
            Standard deviation of the distribution
        algorithm : NormalAlgorithm
            Algorithm used to draw samples
        """

        mean: float
        sd: float
        algorithm: NormalAlgorithm = NormalAlgorithm.BOX_MULLER

        @constraint(description="sd > 0")
        def check_sd_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return self.sd > 0

        @constraint(description="algorithm is a known normal algorithm")
        def check_algorithm(self) -> bool:
            return self.algorithm in set(NormalAlgorithm)

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        algorithm : NormalAlgorithm
            Algorithm used to draw samples
        """

        mu: float
        tau: float
        algorithm: NormalAlgorithm = NormalAlgorithm.BOX_MULLER

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive."""
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            sd = math.sqrt(1 / self.tau)
            return _MeanStd(mean=self.mu, sd=sd, algorithm=self.algorithm)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Normal)
