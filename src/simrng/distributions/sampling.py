"""
Sample Containers
=================

This module defines the immutable sample container produced by the sampling
strategies and consumed by the evaluation engine.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from simrng.types import FloatArray

DEFAULT_PAGE_SIZE = 30


class ArraySample:
    """
    Array-backed, read-only univariate sample.

    Parameters
    ----------
    data : iterable of float
        Sample values; converted to a 1D float64 array.

    Raises
    ------
    ValueError
        If data is not one-dimensional or contains non-finite values.
    """

    __slots__ = ("_data",)

    def __init__(self, data: FloatArray | Iterable[float]) -> None:
        arr = np.array(data, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError("ArraySample expects a 1D array of shape (n,).")
        if not np.isfinite(arr).all():
            raise ValueError("ArraySample values must be finite.")
        arr.setflags(write=False)
        self._data = arr

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self._data.shape[0])

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __repr__(self) -> str:
        return f"ArraySample(n={len(self)})"

    @property
    def array(self) -> FloatArray:
        """Return the backing (read-only) array."""
        return self._data

    @property
    def is_empty(self) -> bool:
        return self._data.size == 0

    def page(self, page_number: int, page_size: int = DEFAULT_PAGE_SIZE) -> list[float]:
        """
        Return the 1-based ``page_number``-th slice of ``page_size`` values.

        Pages outside the sample (including numbers below 1) are empty.
        """
        if page_number < 1:
            return []
        start = page_size * (page_number - 1)
        return self._data[start : start + page_size].tolist()


__all__ = ["ArraySample", "DEFAULT_PAGE_SIZE"]
