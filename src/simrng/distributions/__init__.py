"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
simrng:

- distribution protocol (:mod:`.distribution`);
- analytical computations (:mod:`.computation`);
- supports (:mod:`.support`);
- array-backed samples (:mod:`.sampling`);
- computation and sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import DEFAULT_PAGE_SIZE, ArraySample
from .strategies import (
    BoxMullerState,
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    NormalSamplingStrategy,
    PoissonProductSamplingStrategy,
    SamplingStrategy,
    box_muller_step,
)
from .support import ContinuousSupport, IntegerSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # sampling
    "ArraySample",
    "DEFAULT_PAGE_SIZE",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "NormalSamplingStrategy",
    "PoissonProductSamplingStrategy",
    "BoxMullerState",
    "box_muller_step",
    # supports
    "Support",
    "ContinuousSupport",
    "IntegerSupport",
]
