"""
Runtime configuration of the goodness-of-fit engine.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

type CriticalValueMethod = Literal["newton", "table"]


@dataclass(frozen=True, slots=True)
class SimrngConfig:
    """
    Settings shared by the evaluation operations.

    Parameters
    ----------
    significance_level : float, default=0.05
        Default alpha of the chi-squared test.
    minimum_expected : float, default=5.0
        Validity threshold on expected counts used when merging bins.
    page_size : int, default=30
        Number of values returned by one page of the retained sample.
    workers : int, default=1
        Requested number of histogram counting workers. The effective count
        is at least 1 and never exceeds the available parallelism.
    parallel_threshold : int, default=100_000
        Samples smaller than this are always counted on the calling thread.
    critical_method : {"newton", "table"}, default="newton"
        How critical values are resolved.
    """

    significance_level: float = 0.05
    minimum_expected: float = 5.0
    page_size: int = 30
    workers: int = 1
    parallel_threshold: int = 100_000
    critical_method: CriticalValueMethod = "newton"

    def __post_init__(self) -> None:
        if not 0.0 < self.significance_level < 1.0:
            raise ValueError("significance_level must be in (0, 1)")
        if self.minimum_expected <= 0:
            raise ValueError("minimum_expected must be positive")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
        if self.parallel_threshold < 0:
            raise ValueError("parallel_threshold must be non-negative")
        if self.critical_method not in ("newton", "table"):
            raise ValueError(f"Unknown critical value method: {self.critical_method!r}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> SimrngConfig:
        """Build a config from a mapping, ignoring keys that are not settings."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in mapping.items() if key in known})


__all__ = ["SimrngConfig", "CriticalValueMethod"]
