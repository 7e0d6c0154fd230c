from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Protocol, cast, overload, runtime_checkable

import numpy as np

from simrng.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@dataclass(frozen=True, slots=True)
class IntegerSupport(Support):
    """
    Consecutive integers ``min_k, min_k + 1, ...`` (optionally up to ``max_k``).

    The Poisson support is ``IntegerSupport(0)``.
    """

    min_k: int = 0
    max_k: int | None = None

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        mask = (xf == np.floor(xf)) & (xf >= self.min_k)
        if self.max_k is not None:
            mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


__all__ = [
    "Support",
    "ContinuousSupport",
    "IntegerSupport",
]
