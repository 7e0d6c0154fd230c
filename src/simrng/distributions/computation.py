"""
Computation Primitives
======================

Analytical characteristic callables bound to concrete distribution
parameters (:class:`AnalyticalComputation`), provided by a distribution
family directly.

Notes
-----
Characteristics are vectorized over numpy arrays where that makes sense
(``pdf``, ``cdf``, ``ppf``); the goodness-of-fit hooks take a partition or a
bin count instead.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from simrng.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = ["AnalyticalComputation"]
