"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — serves the analytical characteristics
  of a distribution.
- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy` — inverse transform sampling
  through ``ppf`` (uniform, exponential).
- :class:`NormalSamplingStrategy` — Box-Muller or 12-uniform convolution.
- :class:`PoissonProductSamplingStrategy` — multiplication of uniforms
  until the product falls below ``exp(-lambda)``.

Notes
-----
- Every strategy draws from a :class:`~simrng.rng.RandomSource` passed as the
  ``source`` option; the system generator is used when none is given.
- Box-Muller pair caching is an explicit :class:`BoxMullerState` threaded
  through :func:`box_muller_step`, never hidden generator state.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from simrng.rng import SystemRandomSource, draw
from simrng.types import CharacteristicName, NormalAlgorithm

from .sampling import ArraySample

if TYPE_CHECKING:
    from simrng.rng import RandomSource
    from simrng.types import GenericCharacteristicName

    from .computation import AnalyticalComputation
    from .distribution import Distribution

CONVOLUTION_TERMS = 12


class ComputationStrategy(Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: Distribution
    ) -> AnalyticalComputation[Any, Any]: ...


class DefaultComputationStrategy:
    """
    Default characteristic resolver.

    Returns the analytical implementation registered by the distribution.

    Raises
    ------
    RuntimeError
        If the distribution provides no implementation of the characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: Distribution
    ) -> AnalyticalComputation[Any, Any]:
        try:
            return distr.analytical_computations[state]
        except KeyError:
            raise RuntimeError(
                f"Distribution provides no analytical computation for '{state}'."
            ) from None


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return an :class:`ArraySample`)."""

    def sample(
        self, n: int, distr: Distribution, *, source: RandomSource | None = None, **options: Any
    ) -> ArraySample: ...


def _resolve_source(source: RandomSource | None) -> RandomSource:
    return SystemRandomSource() if source is None else source


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}")


class DefaultSamplingUnivariateStrategy:
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)``: ``a + U (b - a)`` for the uniform family and
    ``-ln(1 - U) / lambda`` for the exponential one.
    """

    def sample(
        self, n: int, distr: Distribution, *, source: RandomSource | None = None, **options: Any
    ) -> ArraySample:
        _check_size(n)
        ppf = distr.query_method(CharacteristicName.PPF)
        u = draw(_resolve_source(source), n)
        return ArraySample(np.asarray(ppf(u), dtype=np.float64))


@dataclass(frozen=True, slots=True)
class BoxMullerState:
    """
    State of a Box-Muller normal generator.

    Attributes
    ----------
    pending : float or None
        Second value of the last generated pair, not yet emitted.
    """

    pending: float | None = None


def box_muller_pair(source: RandomSource, mean: float, sd: float) -> tuple[float, float]:
    """Transform two uniforms into two independent ``N(mean, sd)`` values."""
    u1 = source.next()
    u2 = source.next()
    radius = math.sqrt(-2.0 * math.log(1.0 - u1))
    z1 = radius * math.cos(2.0 * math.pi * u2)
    z2 = radius * math.sin(2.0 * math.pi * u2)
    return z1 * sd + mean, z2 * sd + mean


def box_muller_step(
    state: BoxMullerState, source: RandomSource, mean: float, sd: float
) -> tuple[BoxMullerState, float]:
    """
    Advance a Box-Muller generator by one value.

    A pending pair value is emitted without consuming the source; otherwise a
    new pair is generated, its first value emitted and its second stored.
    """
    if state.pending is not None:
        return BoxMullerState(), state.pending
    first, second = box_muller_pair(source, mean, sd)
    return BoxMullerState(pending=second), first


def convolution_draw(source: RandomSource, mean: float, sd: float) -> float:
    """Approximate ``N(mean, sd)`` value from the sum of 12 uniforms minus 6."""
    total = sum(source.next() for _ in range(CONVOLUTION_TERMS)) - CONVOLUTION_TERMS / 2
    return mean + sd * total


class NormalSamplingStrategy:
    """
    Normal sampler supporting the Box-Muller and convolution algorithms.

    The algorithm is taken from the ``algorithm`` option, then from the
    distribution's parameters, defaulting to Box-Muller.
    """

    def sample(
        self, n: int, distr: Distribution, *, source: RandomSource | None = None, **options: Any
    ) -> ArraySample:
        _check_size(n)
        rng = _resolve_source(source)
        mean = float(distr.calculate_characteristic(CharacteristicName.MEAN, None))
        sd = math.sqrt(distr.calculate_characteristic(CharacteristicName.VAR, None))

        algorithm = options.get("algorithm")
        if algorithm is None:
            parameters = getattr(distr, "parameters", None)
            algorithm = getattr(parameters, "algorithm", NormalAlgorithm.BOX_MULLER)
        algorithm = NormalAlgorithm(algorithm)

        values = np.empty(n, dtype=np.float64)
        if algorithm is NormalAlgorithm.CONVOLUTION:
            for i in range(n):
                values[i] = convolution_draw(rng, mean, sd)
        else:
            state = BoxMullerState()
            for i in range(n):
                state, values[i] = box_muller_step(state, rng, mean, sd)
        return ArraySample(values)


def poisson_draw(source: RandomSource, lambda_: float) -> int:
    """Count uniforms multiplied until the product drops below ``exp(-lambda)``."""
    threshold = math.exp(-lambda_)
    product = 1.0
    count = -1
    while True:
        product *= source.next()
        count += 1
        if product < threshold:
            return count


class PoissonProductSamplingStrategy:
    """Poisson sampler using the product-of-uniforms method."""

    def sample(
        self, n: int, distr: Distribution, *, source: RandomSource | None = None, **options: Any
    ) -> ArraySample:
        _check_size(n)
        rng = _resolve_source(source)
        lambda_ = float(distr.calculate_characteristic(CharacteristicName.MEAN, None))
        return ArraySample([float(poisson_draw(rng, lambda_)) for _ in range(n)])


__all__ = [
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "NormalSamplingStrategy",
    "PoissonProductSamplingStrategy",
    "BoxMullerState",
    "box_muller_pair",
    "box_muller_step",
    "convolution_draw",
    "poisson_draw",
]
