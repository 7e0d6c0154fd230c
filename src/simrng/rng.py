"""
Random Sources
==============

Uniform ``[0, 1)`` sources consumed by the sampling strategies:

- :class:`RandomSource` protocol — anything with ``next() -> float``.
- :class:`LinearCongruentialGenerator` — deterministic, seedable generator.
- :class:`SystemRandomSource` — backed by :func:`numpy.random.default_rng`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from simrng.types import FloatArray

LCG_MODULUS = 4294967296
LCG_MULTIPLIER = 2849201
LCG_INCREMENT = 1013904223


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniform variates in ``[0, 1)``."""

    def next(self) -> float: ...


class LinearCongruentialGenerator:
    """
    Linear congruential generator ``x <- (a * x + c) mod m``.

    Each draw advances the state and returns ``x / m``.

    Parameters
    ----------
    x0 : int
        Seed (initial state).
    m : int, default=4294967296
        Modulus.
    a : int, default=2849201
        Multiplier.
    c : int, default=1013904223
        Increment.
    """

    __slots__ = ("state", "m", "a", "c")

    def __init__(
        self,
        x0: int,
        m: int = LCG_MODULUS,
        a: int = LCG_MULTIPLIER,
        c: int = LCG_INCREMENT,
    ) -> None:
        if m <= 0:
            raise ValueError("Modulus must be positive")
        if x0 < 0:
            raise ValueError("Seed must be non-negative")
        self.state = x0
        self.m = m
        self.a = a
        self.c = c

    def next(self) -> float:
        self.state = (self.a * self.state + self.c) % self.m
        return self.state / self.m

    def __repr__(self) -> str:
        return f"LinearCongruentialGenerator(state={self.state}, m={self.m}, a={self.a}, c={self.c})"


class SystemRandomSource:
    """Uniform source backed by a NumPy generator."""

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def next(self) -> float:
        return float(self._rng.random())

    def random(self, n: int) -> FloatArray:
        return self._rng.random(n)


def draw(source: RandomSource, n: int) -> FloatArray:
    """
    Draw ``n`` uniform variates from ``source`` as a float64 array.

    Sources that expose a vectorized ``random(n)`` are used directly.
    """
    vectorized = getattr(source, "random", None)
    if callable(vectorized):
        return np.asarray(vectorized(n), dtype=np.float64)
    return np.fromiter((source.next() for _ in range(n)), dtype=np.float64, count=n)


def make_source(seed: int | None) -> RandomSource:
    """LCG for an explicit seed, the system generator otherwise."""
    if seed is None:
        return SystemRandomSource()
    return LinearCongruentialGenerator(seed)


__all__ = [
    "RandomSource",
    "LinearCongruentialGenerator",
    "SystemRandomSource",
    "draw",
    "make_source",
    "LCG_MODULUS",
    "LCG_MULTIPLIER",
    "LCG_INCREMENT",
]
