"""
Distribution Families Configuration
====================================

This module configures the closed set of parametric families simrng can
simulate and test against:

- :class:`Uniform Family` — ``standard`` and ``meanWidth`` parametrizations.
- :class:`Normal Family` — ``meanStd`` and ``meanPrec`` parametrizations.
- :class:`Exponential Family` — ``rate`` and ``scale`` parametrizations.
- :class:`Poisson Family` — ``rate`` parametrization.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Every family provides the ``bin_probabilities``, ``partition`` and
  ``degrees_of_freedom`` characteristics used by the chi-squared test.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from functools import lru_cache
from typing import TYPE_CHECKING

from simrng.families.builtins import (
    configure_exponential_family,
    configure_normal_family,
    configure_poisson_family,
    configure_uniform_family,
)
from simrng.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from simrng.families.distribution import ParametricFamilyDistribution


# Serializes first-time registration across threads
_CONFIGURE_LOCK = threading.Lock()


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    with _CONFIGURE_LOCK:
        configure_uniform_family()
        configure_normal_family()
        configure_exponential_family()
        configure_poisson_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    with _CONFIGURE_LOCK:
        configure_families_register.cache_clear()
        ParametricFamilyRegister._reset()


def make_distribution(
    family: str,
    parameters: Mapping[str, Any],
    parametrization_name: str | None = None,
) -> ParametricFamilyDistribution:
    """
    Build a distribution of a registered family.

    Raises
    ------
    ValueError
        If the family or parametrization is unknown, parameters are missing
        or unexpected, or they violate a constraint.
    """
    configure_families_register()
    parametric_family = ParametricFamilyRegister.get(family)
    if (
        parametrization_name is not None
        and parametrization_name not in parametric_family.parametrizations
    ):
        known = ", ".join(parametric_family.parametrization_names)
        raise ValueError(
            f"Family {family} has no parametrization '{parametrization_name}' (known: {known})"
        )
    try:
        return parametric_family.distribution(parametrization_name, **parameters)
    except TypeError as exc:
        raise ValueError(f"Invalid parameters for {family}: {exc}") from exc
