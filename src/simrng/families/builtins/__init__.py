"""
Built-in distribution families for simrng.

This package contains the closed set of families a simulation can draw from:
uniform, normal, exponential and Poisson.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from simrng.families.builtins.continuous import (
    configure_exponential_family,
    configure_normal_family,
    configure_uniform_family,
)
from simrng.families.builtins.discrete import configure_poisson_family

__all__ = [
    "configure_normal_family",
    "configure_uniform_family",
    "configure_exponential_family",
    "configure_poisson_family",
]
