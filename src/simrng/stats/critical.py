"""
Critical Value Resolver
=======================

Critical values of the chi-squared distribution, ``x`` such that
``P(X > x) = alpha`` for ``X ~ ChiSquared(df)``.

Two resolution methods are provided:

- ``"newton"`` — ``x = 2 * gamma_inverse(1 - alpha, df / 2)``, where
  :func:`gamma_inverse` solves ``P(a, x) = z`` for the regularized lower
  incomplete gamma function ``P`` by Newton-Raphson.
- ``"table"`` — a table of critical values for ``df = 1..100`` built once per
  significance level; larger ``df`` are clamped to 100.

Notes
-----
``P(a, x)`` is evaluated with the series
``sum_k x^(a+k) e^(-x) / Gamma(a+k+1)``, accumulated in log space so that
neither the leading term nor the partial sum underflows for large ``x``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import warnings
from functools import lru_cache
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import gammaln
from scipy.stats import chi2

from simrng.errors import NonConvergentInversionError

if TYPE_CHECKING:
    from simrng.config import CriticalValueMethod

log = logging.getLogger(__name__)

SERIES_TOLERANCE = 1e-8
NEWTON_TOLERANCE = 1e-8
NEWTON_MAX_ITERATIONS = 100
TABLE_MAX_DEGREES = 100


def _log_add(a: float, b: float) -> float:
    hi, lo = (a, b) if a >= b else (b, a)
    if hi == -math.inf:
        return -math.inf
    return hi + math.log1p(math.exp(lo - hi))


def regularized_lower_gamma(a: float, x: float) -> float:
    """
    Regularized lower incomplete gamma function ``P(a, x)``.

    Parameters
    ----------
    a : float
        Shape, ``a > 0``.
    x : float
        Upper integration limit, ``x >= 0``.

    Returns
    -------
    float
        ``P(a, x)`` in ``[0, 1]``.
    """
    if a <= 0:
        raise ValueError(f"Shape must be positive, got {a}")
    if x < 0:
        raise ValueError(f"x must be non-negative, got {x}")
    if x == 0:
        return 0.0

    log_x = math.log(x)
    log_term = a * log_x - x - float(gammaln(a + 1))
    log_sum = log_term
    log_tolerance = math.log(SERIES_TOLERANCE)
    k = 0
    # terms grow while a + k < x and shrink geometrically afterwards
    while True:
        k += 1
        log_term += log_x - math.log(a + k)
        log_sum = _log_add(log_sum, log_term)
        if a + k > x and log_term - log_sum < log_tolerance:
            break
    return min(math.exp(log_sum), 1.0)


def gamma_density(a: float, x: float) -> float:
    """Density of the ``Gamma(a, 1)`` distribution at ``x``."""
    if x <= 0:
        return 0.0
    return math.exp((a - 1) * math.log(x) - x - float(gammaln(a)))


def gamma_inverse(
    z: float,
    a: float,
    tolerance: float = NEWTON_TOLERANCE,
    max_iterations: int = NEWTON_MAX_ITERATIONS,
) -> float:
    """
    Solve ``P(a, x) = z`` for ``x`` by Newton-Raphson.

    The iteration starts at ``x0 = a + 1`` and stops once the step is below
    ``tolerance``. An iterate that would leave ``(0, inf)`` is replaced by half
    the previous one.

    Raises
    ------
    ValueError
        If ``z`` is not in ``(0, 1)`` or ``a`` is not positive.
    NonConvergentInversionError
        If no convergence within ``max_iterations`` steps.
    """
    if not 0.0 < z < 1.0:
        raise ValueError(f"Probability must be in (0, 1), got {z}")
    if a <= 0:
        raise ValueError(f"Shape must be positive, got {a}")

    x = a + 1.0
    for iteration in range(1, max_iterations + 1):
        density = gamma_density(a, x)
        if density == 0.0 or not math.isfinite(density):
            raise NonConvergentInversionError(z, a, iteration, x)
        step = (regularized_lower_gamma(a, x) - z) / density
        candidate = x - step
        if candidate <= 0:
            candidate = x / 2
        if abs(candidate - x) < tolerance:
            log.debug("Gamma inversion z=%s a=%s converged in %d steps", z, a, iteration)
            return candidate
        x = candidate
    raise NonConvergentInversionError(z, a, max_iterations, x)


def _validate(df: float, alpha: float) -> None:
    if df <= 0:
        raise ValueError(f"Degrees of freedom must be positive, got {df}")
    if not 0.0 < alpha < 1.0:
        raise ValueError(f"Significance level must be in (0, 1), got {alpha}")


def chi_squared_critical_value(df: float, alpha: float = 0.05) -> float:
    """Critical value by numerical inversion of the incomplete gamma function."""
    _validate(df, alpha)
    return 2.0 * gamma_inverse(1.0 - alpha, df / 2.0)


@lru_cache(maxsize=16)
def _critical_table(alpha: float) -> tuple[float, ...]:
    degrees = np.arange(1, TABLE_MAX_DEGREES + 1)
    return tuple(float(value) for value in chi2.isf(alpha, degrees))


def table_critical_value(df: float, alpha: float = 0.05) -> float:
    """
    Critical value looked up in the table for ``alpha``.

    ``df`` above 100 is clamped to 100 with a warning; the result is then an
    underestimate.
    """
    _validate(df, alpha)
    index = int(df)
    if index != df:
        raise ValueError(f"Table lookup needs integer degrees of freedom, got {df}")
    if index > TABLE_MAX_DEGREES:
        warnings.warn(
            f"{index} degrees of freedom exceed the table; using {TABLE_MAX_DEGREES}",
            stacklevel=2,
        )
        index = TABLE_MAX_DEGREES
    return _critical_table(alpha)[index - 1]


def critical_value(df: float, alpha: float = 0.05, method: CriticalValueMethod = "newton") -> float:
    """Resolve a critical value with the given method."""
    if method == "newton":
        return chi_squared_critical_value(df, alpha)
    if method == "table":
        return table_critical_value(df, alpha)
    raise ValueError(f"Unknown critical value method: {method!r}")


__all__ = [
    "regularized_lower_gamma",
    "gamma_density",
    "gamma_inverse",
    "chi_squared_critical_value",
    "table_critical_value",
    "critical_value",
]
